"""
Interpreter configuration.

A single immutable options object passed down from the program driver to
every sub-program. Defaults reproduce the classic interpreter behaviour.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InterpreterConfig:
    """
    Options that change how statements are executed.

    Properties:
        strict:
            If True, a non-empty statement that is neither a loop, a
            declaration nor an assignment raises UnrecognizedStatement.
            If False (default), it is skipped with a UserWarning.

        saturating_dec:
            If True, dec(0) yields 0 (natural-number semantics).
            If False (default), dec(0) yields -1 (host integer semantics).
    """

    strict: bool = False
    saturating_dec: bool = False


DEFAULT_CONFIG = InterpreterConfig()
