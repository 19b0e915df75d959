"""
Expression System for WHILE Loop Conditions

A loop condition compares two named variables:

    WHILE(xo != x1) DO ... OD
          ^^^^^^^^
    Comparison(operator=NOT_EQUALS, left="xo", right="x1")

ARCHITECTURAL RULE:
    A Comparison holds operand NAMES only.
    Binding names to values happens in the executor, once at loop entry
    and once after every completed iteration.
"""

import operator
from dataclasses import dataclass
from enum import Enum

from whilelang.errors import UnrecognizedOperator


class ComparisonOperator(Enum):
    """
    Comparison operators supported in loop conditions.

    IMPORTANT:
        Definition order is the search order used by parse_expression.
        '<' and '>' are searched before '==' and '!='. Do not reorder.
    """

    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUALS = "=="
    NOT_EQUALS = "!="


_COMPARATORS = {
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.EQUALS: operator.eq,
    ComparisonOperator.NOT_EQUALS: operator.ne,
}


@dataclass(frozen=True)
class Comparison:
    """
    A parsed loop condition.

    Example:
        "xo < x1"

    Becomes:
        Comparison(
            operator=ComparisonOperator.LESS_THAN,
            left="xo",
            right="x1",
        )

    Properties:
        operator: ComparisonOperator enum
        left: Name of the left operand
        right: Name of the right operand

    IMPORTANT:
        This object is immutable (frozen=True).
        It does NOT validate that the names exist.
    """

    operator: ComparisonOperator
    left: str
    right: str

    def __str__(self) -> str:
        return f"{self.left} {self.operator.value} {self.right}"


def parse_expression(text: str) -> Comparison:
    """
    Parse a loop condition such as ``"xo != x1"``.

    Each operator is searched for in turn ('<', '>', '==', '!='). The first
    operator that occurs anywhere in the text decides the split point, and
    the operands are the stripped text on either side of it.

    Args:
        text: Condition text (the part between the WHILE parentheses)

    Returns:
        Comparison with unresolved operand names

    Raises:
        UnrecognizedOperator: If none of the four operators occur
    """
    for op in ComparisonOperator:
        pos = text.find(op.value)
        if pos != -1:
            return Comparison(
                operator=op,
                left=text[:pos].strip(),
                right=text[pos + len(op.value):].strip(),
            )
    raise UnrecognizedOperator(text)


def evaluate_comparison(comparison: Comparison, left_value: int, right_value: int) -> bool:
    """Apply the comparison's operator to two integer values."""
    return _COMPARATORS[comparison.operator](left_value, right_value)


__all__ = [
    "ComparisonOperator",
    "Comparison",
    "parse_expression",
    "evaluate_comparison",
]
