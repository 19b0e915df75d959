"""
Core Interpreter Model Objects

Defines the data structures the interpreter works on:
    - Variables (a named integer)
    - Statements (one ';'-delimited piece of source text)
    - Environments (the ordered set of variables of one program scope)

ARCHITECTURAL RULE:
    These objects know nothing about source syntax.
    Parsing belongs in parser / expressions / functions.
    Execution belongs in executor.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from whilelang.errors import (
    AssignToUndeclared,
    DuplicateDeclaration,
    UndefinedVariable,
)


@dataclass(frozen=True)
class Variable:
    """
    A named integer value.

    Variables handed out by an Environment are snapshots: changing the
    Environment afterwards does not change a Variable already returned.

    Properties:
        name: Variable identifier (e.g., "xo")
        value: Current integer value
    """

    name: str
    value: int = 0


@dataclass(frozen=True)
class Statement:
    """
    One trimmed, ';'-delimited piece of source text.

    A Statement has no structure until the executor classifies it.
    An empty Statement (for example after a trailing ';') is a no-op.

    Properties:
        content: The trimmed source text
        index: Position in the program it was split from
    """

    content: str
    index: int = 0


class Environment:
    """
    Ordered mapping from variable name to integer value.

    INVARIANTS:
        - Names are unique (enforced by declare)
        - Insertion order is preserved and is the reporting order
        - Variables are never removed

    Example:
        env = Environment()
        env.declare("xo", 2)
        env.assign("xo", 3)
        env.lookup("xo")  # 3
    """

    def __init__(self, values: Optional[Dict[str, int]] = None):
        self._values: Dict[str, int] = {}
        for name, value in (values or {}).items():
            self.declare(name, value)

    def declare(self, name: str, value: int) -> None:
        """
        Add a new variable.

        Raises:
            DuplicateDeclaration: If the name is already present
        """
        if name in self._values:
            raise DuplicateDeclaration(name)
        self._values[name] = value

    def assign(self, name: str, value: int) -> None:
        """
        Overwrite the value of an existing variable.

        Raises:
            AssignToUndeclared: If the name is not present
        """
        if name not in self._values:
            raise AssignToUndeclared(name)
        self._values[name] = value

    def lookup(self, name: str) -> int:
        """
        Return the value of a variable.

        Raises:
            UndefinedVariable: If the name is not present
        """
        try:
            return self._values[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def get(self, name: str) -> Variable:
        """Return a Variable snapshot for ``name``."""
        return Variable(name=name, value=self.lookup(name))

    def names(self) -> List[str]:
        return list(self._values)

    @property
    def variables(self) -> List[Variable]:
        return [Variable(name=name, value=value) for name, value in self._values.items()]

    def as_dict(self) -> Dict[str, int]:
        return dict(self._values)

    def copy(self) -> "Environment":
        """Return an independent Environment with the same bindings in the same order."""
        clone = Environment()
        clone._values = dict(self._values)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.variables)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())

    def __repr__(self) -> str:
        bindings = ", ".join(f"{name}={value}" for name, value in self._values.items())
        return f"Environment({bindings})"
