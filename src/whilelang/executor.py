"""
Statement Executor: the interpreter's state machine.

A Program is a sequence of Statements paired with an Environment. Running
it classifies each statement and mutates the Environment in source order:

    LOOP         -> run the loop protocol on a sub-program
    DECLARATION  -> Environment.declare
    ASSIGNMENT   -> Environment.assign
    EMPTY        -> nothing
    UNKNOWN      -> warning (or UnrecognizedStatement in strict mode)

LOOP PROTOCOL:
    1. Parse the condition and bind both operands to the current values.
    2. Split the body into a sub-program with a COPY of the Environment.
    3. While the condition holds: run the sub-program once, then re-read
       both operands from the sub-program's Environment.
    4. Replace the enclosing Environment with the sub-program's one.

Operand values are refreshed only after a completed iteration. The whole
Environment is replaced on exit, so every variable the body changed is
visible afterwards, not just the condition operands.
"""

import warnings
from dataclasses import dataclass
from typing import List, Optional, Tuple

from whilelang.config import DEFAULT_CONFIG, InterpreterConfig
from whilelang.errors import (
    AssignToUndeclared,
    DuplicateDeclaration,
    UnrecognizedStatement,
)
from whilelang.expressions import Comparison, evaluate_comparison, parse_expression
from whilelang.functions import evaluate_value
from whilelang.model import Environment, Statement, Variable
from whilelang.parser import (
    ASSIGN_OPERATOR,
    DECLARE_OPERATOR,
    StatementKind,
    classify_statement,
    get_body,
    get_condition,
    split_binding,
    split_statements,
)


@dataclass
class LoopCondition:
    """
    A Comparison bound to operand values.

    The values are snapshots: they only change when refresh() is called.
    """

    comparison: Comparison
    left: Variable
    right: Variable

    @classmethod
    def bind(cls, comparison: Comparison, env: Environment) -> "LoopCondition":
        return cls(
            comparison=comparison,
            left=env.get(comparison.left),
            right=env.get(comparison.right),
        )

    def refresh(self, env: Environment) -> None:
        self.left = env.get(self.comparison.left)
        self.right = env.get(self.comparison.right)

    def holds(self) -> bool:
        return evaluate_comparison(self.comparison, self.left.value, self.right.value)


def parse_loop(text: str, env: Environment) -> Tuple[LoopCondition, str]:
    """
    Parse a WHILE statement against ``env``.

    Returns:
        (condition bound to the current values, body text)

    Raises:
        MalformedProgram: If WHILE, DO, OD or the parentheses are missing
        UnrecognizedOperator: If the condition has no comparison operator
        UndefinedVariable: If an operand is not declared in ``env``
    """
    comparison = parse_expression(get_condition(text))
    body = get_body(text)
    return LoopCondition.bind(comparison, env), body


class Program:
    """
    A statement sequence and the Environment it runs against.

    Sub-programs (loop bodies) are Programs too; they receive a copy of
    the enclosing Environment and hand it back when the loop ends.
    """

    def __init__(
        self,
        statements: Optional[List[Statement]] = None,
        environment: Optional[Environment] = None,
        config: Optional[InterpreterConfig] = None,
    ):
        self.statements: List[Statement] = list(statements or [])
        self.environment = environment if environment is not None else Environment()
        self.config = config or DEFAULT_CONFIG

    @classmethod
    def from_source(
        cls,
        source: str,
        environment: Optional[Environment] = None,
        config: Optional[InterpreterConfig] = None,
    ) -> "Program":
        return cls(split_statements(source), environment=environment, config=config)

    def run(self) -> Environment:
        """
        Execute every statement in order and return the final Environment.

        The first error aborts the run. Effects of statements that already
        ran are kept in ``self.environment``.
        """
        for statement in self.statements:
            self.execute_statement(statement)
        return self.environment

    def execute_statement(self, statement: Statement) -> None:
        text = statement.content
        kind = classify_statement(text)

        if kind is StatementKind.LOOP:
            self._execute_loop(text)
        elif kind is StatementKind.DECLARATION:
            name, value = split_binding(text, DECLARE_OPERATOR)
            if name in self.environment:
                raise DuplicateDeclaration(name)
            self.environment.declare(name, self._evaluate(value))
        elif kind is StatementKind.ASSIGNMENT:
            name, value = split_binding(text, ASSIGN_OPERATOR)
            if name not in self.environment:
                raise AssignToUndeclared(name)
            self.environment.assign(name, self._evaluate(value))
        elif kind is StatementKind.UNKNOWN:
            if self.config.strict:
                raise UnrecognizedStatement(text)
            warnings.warn(f"Skipping unrecognized statement: '{text}'", UserWarning)

    def _evaluate(self, text: str) -> int:
        return evaluate_value(text, self.environment, saturating_dec=self.config.saturating_dec)

    def _execute_loop(self, text: str) -> None:
        condition, body = parse_loop(text, self.environment)

        subprogram = Program(
            split_statements(body),
            environment=self.environment.copy(),
            config=self.config,
        )
        try:
            while condition.holds():
                subprogram.run()
                condition.refresh(subprogram.environment)
        finally:
            self.environment = subprogram.environment


__all__ = [
    "LoopCondition",
    "Program",
    "parse_loop",
]
