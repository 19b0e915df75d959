"""
Error types raised by the WHILE interpreter.

Every error aborts the enclosing program run. There is no recovery path:
the first error raised by any statement is the error of the whole program.
"""

from typing import Optional


class InterpreterError(Exception):
    """Base class for every error the interpreter raises."""
    pass


class MalformedProgram(InterpreterError):
    """Raised when source text has no statements or a loop is missing parts."""
    pass


class UnrecognizedOperator(InterpreterError):
    """Raised when a loop condition contains none of <, >, ==, !=."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"operation not defined '{text}'")


class _NamedVariableError(InterpreterError):
    """Error about one specific variable name."""

    template = "variable '{name}'"

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or self.template.format(name=name))


class UndefinedVariable(_NamedVariableError):
    """Raised when a name is looked up but was never declared."""

    template = "variable '{name}' not defined"


class DuplicateDeclaration(_NamedVariableError):
    """Raised when ':=' is used on a name that already exists."""

    template = "error using operator ':='. variable '{name}' already present"


class AssignToUndeclared(_NamedVariableError):
    """Raised when '=' is used on a name that does not exist."""

    template = "error using operator '='. variable '{name}' is not present"


class UnrecognizedFunction(InterpreterError):
    """Raised when a right-hand side is neither a literal nor a built-in call."""

    def __init__(self, text: str, reason: str = "function not detected"):
        self.text = text
        super().__init__(f"{reason}: '{text}'")


class UnrecognizedStatement(InterpreterError):
    """Raised in strict mode for a statement that is not a loop, declaration or assignment."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"statement not recognized: '{text}'")


__all__ = [
    "InterpreterError",
    "MalformedProgram",
    "UnrecognizedOperator",
    "UndefinedVariable",
    "DuplicateDeclaration",
    "AssignToUndeclared",
    "UnrecognizedFunction",
    "UnrecognizedStatement",
]
