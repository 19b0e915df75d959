"""
WHILE Language Interpreter Package

Interprets programs written in a minimal WHILE language over natural-number
variables:

    xo := 2; x1 := inc(3); WHILE(xo != x1) DO xo = inc(xo) OD;

LAYERS:
-------
    - parser / expressions / functions: turn source text into statements,
      loop conditions and built-in calls
    - model: the variable Environment
    - executor: the statement state machine and loop protocol
    - interpreter: the program driver and command-line caller

The engine does no I/O. Everything it needs arrives as a source string
and everything it produces is an Environment or an InterpreterError.
"""

from whilelang.errors import (
    InterpreterError,
    MalformedProgram,
    UnrecognizedOperator,
    UndefinedVariable,
    DuplicateDeclaration,
    AssignToUndeclared,
    UnrecognizedFunction,
    UnrecognizedStatement,
)
from whilelang.config import InterpreterConfig
from whilelang.model import Environment, Variable, Statement
from whilelang.interpreter import interpret, execute, InterpretResult

__version__ = "0.1.0"

__all__ = [
    "interpret",
    "execute",
    "InterpretResult",
    "InterpreterConfig",
    "Environment",
    "Variable",
    "Statement",
    "InterpreterError",
    "MalformedProgram",
    "UnrecognizedOperator",
    "UndefinedVariable",
    "DuplicateDeclaration",
    "AssignToUndeclared",
    "UnrecognizedFunction",
    "UnrecognizedStatement",
]
