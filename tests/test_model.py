"""
Tests for Interpreter Model Objects

These tests verify:
    - Variable and Statement records
    - Environment declare / assign / lookup contracts
    - Insertion order and independence of copies
"""

import pytest
from whilelang.model import Environment, Statement, Variable
from whilelang.errors import (
    AssignToUndeclared,
    DuplicateDeclaration,
    UndefinedVariable,
)


class TestVariable:
    """Test Variable records."""

    def test_create_variable(self):
        """Should store name and value."""
        var = Variable(name="xo", value=2)
        assert var.name == "xo"
        assert var.value == 2

    def test_variable_default_value(self):
        """Value defaults to zero."""
        assert Variable(name="xo").value == 0

    def test_variable_immutable(self):
        """Variables are snapshots and cannot be changed."""
        var = Variable(name="xo", value=2)
        with pytest.raises(AttributeError):
            var.value = 3


class TestStatement:
    """Test Statement records."""

    def test_statement_content(self):
        stmt = Statement(content="xo := 2", index=0)
        assert stmt.content == "xo := 2"
        assert stmt.index == 0

    def test_statement_immutable(self):
        stmt = Statement(content="xo := 2")
        with pytest.raises(AttributeError):
            stmt.content = "xo := 3"


class TestEnvironment:
    """Test the Environment contract."""

    def test_new_environment_is_empty(self):
        env = Environment()
        assert len(env) == 0
        assert "xo" not in env

    def test_declare_then_lookup(self):
        """A declared value can be looked up."""
        env = Environment()
        env.declare("xo", 2)
        assert env.lookup("xo") == 2
        assert "xo" in env

    def test_redeclare_fails(self):
        """Declaring the same name twice is an error."""
        env = Environment()
        env.declare("xo", 2)
        with pytest.raises(DuplicateDeclaration) as exc_info:
            env.declare("xo", 5)
        assert exc_info.value.name == "xo"
        assert env.lookup("xo") == 2

    def test_assign_existing(self):
        env = Environment()
        env.declare("xo", 2)
        env.assign("xo", 3)
        assert env.lookup("xo") == 3

    def test_assign_undeclared_fails(self):
        """Assigning a name that was never declared is an error."""
        env = Environment({"x1": 4})
        with pytest.raises(AssignToUndeclared):
            env.assign("xo", 3)
        assert env.as_dict() == {"x1": 4}

    def test_lookup_missing_fails(self):
        with pytest.raises(UndefinedVariable) as exc_info:
            Environment().lookup("xo")
        assert exc_info.value.name == "xo"

    def test_get_returns_snapshot(self):
        """get() returns a Variable that does not follow later changes."""
        env = Environment({"xo": 2})
        var = env.get("xo")
        env.assign("xo", 9)
        assert var == Variable(name="xo", value=2)

    def test_insertion_order_preserved(self):
        env = Environment()
        for name in ["b", "a", "c"]:
            env.declare(name, 1)
        assert env.names() == ["b", "a", "c"]
        assert [v.name for v in env] == ["b", "a", "c"]

    def test_assign_keeps_position(self):
        env = Environment({"a": 1, "b": 2})
        env.assign("a", 10)
        assert env.variables == [Variable("a", 10), Variable("b", 2)]

    def test_copy_is_independent(self):
        """Changes to a copy do not reach the original."""
        env = Environment({"xo": 2})
        clone = env.copy()
        clone.assign("xo", 5)
        clone.declare("x1", 1)
        assert env.as_dict() == {"xo": 2}
        assert clone.as_dict() == {"xo": 5, "x1": 1}

    def test_initial_values_declared_in_order(self):
        env = Environment({"xo": 1, "x1": 2})
        assert env.names() == ["xo", "x1"]
        assert env.lookup("x1") == 2

    def test_equality_compares_bindings(self):
        assert Environment({"a": 1, "b": 2}) == Environment({"a": 1, "b": 2})
        assert Environment({"a": 1}) != Environment({"a": 2})
