"""
Serialization helpers for interpreter objects (Environment, InterpretResult).

Provides JSON/YAML conversion via an intermediate dict representation.
Variable order is the Environment's insertion order in every format.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from whilelang.model import Environment


def environment_to_dict(env: Environment) -> Dict[str, int]:
    return env.as_dict()


def environment_from_dict(d: Dict[str, Any] | None) -> Environment:
    if d is None:
        return Environment()
    if not isinstance(d, dict):
        raise TypeError(f"Expected a mapping of variable bindings, got {type(d).__name__}")
    for name, value in d.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"Binding '{name}' must be an integer, got {type(value).__name__} {value!r}"
            )
    return Environment({str(name): value for name, value in d.items()})


def environment_to_json(env: Environment) -> str:
    return json.dumps(environment_to_dict(env))


def environment_from_json(s: str) -> Environment:
    return environment_from_dict(json.loads(s))


def environment_to_yaml(env: Environment) -> str:
    return yaml.safe_dump(environment_to_dict(env), sort_keys=False)


def environment_from_yaml(s: str) -> Environment:
    return environment_from_dict(yaml.safe_load(s))


def error_to_dict(error: Exception | None) -> Dict[str, str] | None:
    if error is None:
        return None
    return {"type": type(error).__name__, "message": str(error)}


def result_to_dict(result) -> Dict[str, Any]:
    return {
        "ok": result.error is None,
        "error": error_to_dict(result.error),
        "variables": environment_to_dict(result.environment),
        "statements": [s.content for s in result.statements],
    }


def result_to_json(result) -> str:
    return json.dumps(result_to_dict(result))


def result_to_yaml(result) -> str:
    return yaml.safe_dump(result_to_dict(result), sort_keys=False)
