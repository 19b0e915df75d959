"""
Built-in Function Evaluator

The WHILE language has no arithmetic operators. Values come from integer
literals or from one of four built-in functions:

    zero()    -> 0
    val(a)    -> a
    inc(a)    -> a + 1
    dec(a)    -> a - 1

where ``a`` is an integer literal or the name of a declared variable.

Calls are tokenized with an anchored pattern: the function name must be the
whole identifier in front of '(' so that a variable such as ``incx`` is
never mistaken for a call to ``inc``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from whilelang.errors import MalformedProgram, UnrecognizedFunction
from whilelang.model import Environment


class BuiltinFunction(Enum):
    """Built-in functions, in the order they are matched."""

    ZERO = "zero"
    VAL = "val"
    INC = "inc"
    DEC = "dec"

    @property
    def takes_argument(self) -> bool:
        return self is not BuiltinFunction.ZERO


_CALL_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*\(\s*([^()]*?)\s*\)\s*$")
_LITERAL_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class FunctionCall:
    """
    A parsed built-in call.

    Properties:
        function: BuiltinFunction enum
        argument: Raw argument text (literal or variable name), None for zero()
    """

    function: BuiltinFunction
    argument: Optional[str] = None


def parse_literal(text: str) -> Optional[int]:
    """
    Return ``text`` as an int if it is a decimal literal, else None.

    Raises:
        MalformedProgram: If the literal cannot be converted (too many digits)
    """
    text = text.strip()
    if not _LITERAL_RE.match(text):
        return None
    try:
        return int(text)
    except ValueError as e:
        shown = text if len(text) <= 20 else f"{text[:20]}..."
        raise MalformedProgram(f"integer literal '{shown}' ({len(text)} characters) cannot be read: {e}") from e


def parse_call(text: str) -> FunctionCall:
    """
    Parse call text like ``"inc(x1)"`` or ``"zero()"``.

    Raises:
        UnrecognizedFunction: If the text is not a call to a built-in, or the
            argument count does not fit the function
    """
    match = _CALL_RE.match(text)
    if not match:
        raise UnrecognizedFunction(text.strip())

    name, argument = match.group(1), match.group(2)
    for function in BuiltinFunction:
        if function.value != name:
            continue
        if function.takes_argument and not argument:
            raise UnrecognizedFunction(text.strip(), f"{name}() expects one argument")
        if not function.takes_argument and argument:
            raise UnrecognizedFunction(text.strip(), f"{name}() takes no argument")
        return FunctionCall(function=function, argument=argument or None)

    raise UnrecognizedFunction(text.strip())


def apply_builtin(function: BuiltinFunction, value: int = 0, saturating_dec: bool = False) -> int:
    """
    Apply a built-in to an already-resolved integer.

    zero ignores ``value``. With ``saturating_dec`` dec never goes below 0.
    """
    if function is BuiltinFunction.ZERO:
        return 0
    if function is BuiltinFunction.VAL:
        return value
    if function is BuiltinFunction.INC:
        return value + 1
    if saturating_dec and value <= 0:
        return 0
    return value - 1


def resolve_argument(argument: str, env: Environment) -> int:
    """
    Resolve a call argument: integer literal first, then variable lookup.

    Raises:
        UndefinedVariable: If the argument is not a literal and not declared
    """
    literal = parse_literal(argument)
    if literal is not None:
        return literal
    return env.lookup(argument.strip())


def evaluate_call(text: str, env: Environment, saturating_dec: bool = False) -> int:
    """Parse and evaluate a built-in call against ``env``."""
    call = parse_call(text)
    value = 0
    if call.argument is not None:
        value = resolve_argument(call.argument, env)
    return apply_builtin(call.function, value, saturating_dec=saturating_dec)


def evaluate_value(text: str, env: Environment, saturating_dec: bool = False) -> int:
    """
    Evaluate the right-hand side of a declaration or assignment.

    The text is tried as an integer literal, then as a built-in call.
    """
    literal = parse_literal(text)
    if literal is not None:
        return literal
    return evaluate_call(text, env, saturating_dec=saturating_dec)


__all__ = [
    "BuiltinFunction",
    "FunctionCall",
    "parse_literal",
    "parse_call",
    "apply_builtin",
    "resolve_argument",
    "evaluate_call",
    "evaluate_value",
]
