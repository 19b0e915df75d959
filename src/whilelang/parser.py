"""
Source Parser for WHILE Programs (Layer 1: Raw Source -> Statements).

Program syntax:
    program     := statement (";" statement)*
    statement   := declaration | assignment | loop
    declaration := IDENT ":=" value
    assignment  := IDENT "=" value
    loop        := "WHILE" "(" expr ")" "DO" statement "OD"

Syntax Notes:
    - ';' separates statements; a trailing ';' yields an empty statement
    - WHILE, DO and OD are matched as whole words
    - A loop body is a single statement
"""

import re
from enum import Enum
from typing import List, Tuple

from whilelang.errors import MalformedProgram
from whilelang.model import Statement


STATEMENT_DELIMITER = ";"
DECLARE_OPERATOR = ":="
ASSIGN_OPERATOR = "="

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_WHILE_RE = re.compile(r"\bWHILE\b")
_DO_RE = re.compile(r"\bDO\b")
_OD_RE = re.compile(r"\bOD\b")


class StatementKind(Enum):
    """Classification of a statement, in the order the checks are made."""

    LOOP = "loop"
    DECLARATION = "declaration"
    ASSIGNMENT = "assignment"
    EMPTY = "empty"
    UNKNOWN = "unknown"


def split_statements(source: str) -> List[Statement]:
    """
    Split source text into trimmed statements on every ';'.

    Empty pieces are kept so that positions match the source.

    Raises:
        MalformedProgram: If the source is empty or only whitespace
    """
    if not source or not source.strip():
        raise MalformedProgram("code doesn't have any statement")

    return [
        Statement(content=piece.strip(), index=i)
        for i, piece in enumerate(source.split(STATEMENT_DELIMITER))
    ]


def classify_statement(text: str) -> StatementKind:
    """Decide whether ``text`` is a loop, declaration, assignment, empty or unknown."""
    if not text.strip():
        return StatementKind.EMPTY
    if _WHILE_RE.search(text):
        return StatementKind.LOOP
    if DECLARE_OPERATOR in text:
        return StatementKind.DECLARATION
    if ASSIGN_OPERATOR in text:
        return StatementKind.ASSIGNMENT
    return StatementKind.UNKNOWN


def split_binding(text: str, operator: str) -> Tuple[str, str]:
    """
    Split ``name <operator> value`` at the first occurrence of ``operator``.

    Returns:
        (trimmed name, trimmed right-hand side)

    Raises:
        MalformedProgram: If the name is not an identifier
    """
    name, _, value = text.partition(operator)
    name = name.strip()
    if not _IDENTIFIER_RE.match(name):
        raise MalformedProgram(f"invalid variable name '{name}' in '{text}'")
    return name, value.strip()


def _loop_bounds(text: str) -> Tuple[int, int, int, int]:
    """Return (end of WHILE, start of DO, end of DO, start of OD) offsets."""
    while_match = _WHILE_RE.search(text)
    if while_match is None:
        raise MalformedProgram(f"missing WHILE in loop '{text}'")

    do_match = _DO_RE.search(text, while_match.end())
    if do_match is None:
        raise MalformedProgram(f"missing DO in loop '{text}'")

    od_match = _OD_RE.search(text, do_match.end())
    if od_match is None:
        raise MalformedProgram(f"missing OD in loop '{text}'")

    return while_match.end(), do_match.start(), do_match.end(), od_match.start()


def get_condition(text: str) -> str:
    """
    Return the condition of a loop statement.

    The condition is the text between the first '(' after WHILE and the
    first ')' after it, before DO:

        get_condition("WHILE(xo != x1) DO xo = x1 OD")  # "xo != x1"
    """
    while_end, do_start, _, _ = _loop_bounds(text)
    header = text[while_end:do_start]

    open_pos = header.find("(")
    close_pos = header.find(")", open_pos + 1)
    if open_pos == -1 or close_pos == -1:
        raise MalformedProgram(f"missing parenthesis around condition in loop '{text}'")

    return header[open_pos + 1:close_pos]


def get_body(text: str) -> str:
    """
    Return the trimmed body of a loop statement (the text between DO and OD).

        get_body("WHILE(xo != x1) DO xo = x1 OD")  # "xo = x1"
    """
    _, _, do_end, od_start = _loop_bounds(text)
    return text[do_end:od_start].strip()


__all__ = [
    "StatementKind",
    "split_statements",
    "classify_statement",
    "split_binding",
    "get_condition",
    "get_body",
]
