"""
Tests for serialization of interpreter objects.

These tests ensure JSON/YAML conversion keeps bindings and their order,
and that results carry their error as a plain dict.
"""

import json

import pytest
import yaml
from whilelang import interpret
from whilelang.model import Environment
from whilelang.serialization import (
    environment_from_dict,
    environment_from_json,
    environment_from_yaml,
    environment_to_dict,
    environment_to_json,
    environment_to_yaml,
    error_to_dict,
    result_to_dict,
    result_to_json,
    result_to_yaml,
)


def build_sample_environment() -> Environment:
    return Environment({"xo": 4, "x1": 4, "x2": 1})


def test_json_roundtrip():
    env = build_sample_environment()
    restored = environment_from_json(environment_to_json(env))
    assert restored == env


def test_yaml_keeps_order():
    env = Environment({"z": 1, "a": 2})
    text = environment_to_yaml(env)
    assert text.index("z:") < text.index("a:")
    assert environment_from_yaml(text).names() == ["z", "a"]


def test_from_dict_none():
    assert len(environment_from_dict(None)) == 0


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        environment_from_dict([1, 2])


def test_from_yaml_reads_integers():
    env = environment_from_yaml("n: 3\nbig: 123456789012345678901234567890\n")
    assert env.as_dict() == {"n": 3, "big": 123456789012345678901234567890}


@pytest.mark.parametrize("text", [
    "n: 2.7\n",
    "flag: true\n",
    "n: abc\n",
    "n: '3'\n",
    "n: null\n",
])
def test_from_yaml_rejects_non_integer_bindings(text):
    with pytest.raises(TypeError, match="must be an integer"):
        environment_from_yaml(text)


def test_from_json_rejects_float_binding():
    with pytest.raises(TypeError):
        environment_from_json('{"n": 2.5}')


def test_environment_to_dict():
    assert environment_to_dict(build_sample_environment()) == {"xo": 4, "x1": 4, "x2": 1}


def test_error_to_dict():
    assert error_to_dict(None) is None
    result = interpret("a = 1")
    assert error_to_dict(result.error)["type"] == "AssignToUndeclared"


def test_result_to_dict_success():
    result = interpret("a := 1; b := inc(a);")
    assert result_to_dict(result) == {
        "ok": True,
        "error": None,
        "variables": {"a": 1, "b": 2},
        "statements": ["a := 1", "b := inc(a)", ""],
    }


def test_result_to_dict_failure():
    data = result_to_dict(interpret("a := 1; a := 2"))
    assert data["ok"] is False
    assert data["error"]["type"] == "DuplicateDeclaration"
    assert data["variables"] == {"a": 1}


def test_result_json_and_yaml_agree():
    result = interpret("x := 5; y := 2; WHILE(x > y) DO y = inc(y) OD;")
    assert json.loads(result_to_json(result)) == yaml.safe_load(result_to_yaml(result))
