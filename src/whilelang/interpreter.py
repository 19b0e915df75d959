"""
Program Driver: source text in, final Environment (or error) out.

    result = interpret("xo := 2; x1 := inc(3); WHILE(xo != x1) DO xo = inc(xo) OD;")
    result.ok                          # True
    result.environment.lookup("xo")    # 4

``interpret`` never raises InterpreterError; it returns it in the result.
``execute`` is the raising variant for callers that prefer exceptions.

Running this module starts a small command-line caller.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from whilelang.config import InterpreterConfig
from whilelang.errors import InterpreterError
from whilelang.executor import Program
from whilelang.model import Environment, Statement
from whilelang.parser import split_statements


@dataclass
class InterpretResult:
    """
    Outcome of one interpret() call.

    Properties:
        environment: Final Environment (partial if an error occurred)
        error: The first InterpreterError raised, or None
        statements: Top-level statements the source was split into
        trace: Human-readable lines, filled only when verbose
    """

    environment: Environment
    error: Optional[InterpreterError] = None
    statements: List[Statement] = field(default_factory=list)
    trace: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def format_statements(statements: List[Statement]) -> List[str]:
    return [f" - {s.index} block: {s.content}" for s in statements]


def format_environment(env: Environment) -> List[str]:
    return [f"{v.name} => {v.value}" for v in env]


def interpret(
    source: str,
    verbose: bool = False,
    environment: Optional[Environment] = None,
    config: Optional[InterpreterConfig] = None,
) -> InterpretResult:
    """
    Interpret a WHILE program.

    Args:
        source: Program text
        verbose: If True, record the input, the statement list and the final
            bindings in ``result.trace``
        environment: Initial bindings (copied, never mutated)
        config: Interpreter options

    Returns:
        InterpretResult with the final Environment and the first error, if any
    """
    env = environment.copy() if environment is not None else Environment()
    result = InterpretResult(environment=env)

    if verbose:
        result.trace.append(f"Input program: {source}")

    try:
        result.statements = split_statements(source)
    except InterpreterError as e:
        result.error = e
        if verbose:
            result.trace.append(f"Error: {e}")
        return result

    if verbose:
        result.trace.append("Code blocks: ")
        result.trace.extend(format_statements(result.statements))
        result.trace.append("Loading...")

    program = Program(result.statements, environment=env, config=config)
    try:
        program.run()
    except InterpreterError as e:
        result.error = e
    finally:
        result.environment = program.environment

    if verbose:
        if result.error is not None:
            result.trace.append(f"Error: {result.error}")
        else:
            result.trace.append("Output: ")
            result.trace.extend(format_environment(result.environment))

    return result


def execute(
    source: str,
    environment: Optional[Environment] = None,
    config: Optional[InterpreterConfig] = None,
) -> Environment:
    """
    Interpret a WHILE program and return its final Environment.

    Raises:
        InterpreterError: The first error raised by any statement
    """
    env = environment.copy() if environment is not None else Environment()
    return Program.from_source(source, environment=env, config=config).run()


def _load_environment(path: str) -> Environment:
    from whilelang.serialization import environment_from_json, environment_from_yaml

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    if path.endswith(".json"):
        return environment_from_json(content)
    return environment_from_yaml(content)


def main(argv: Optional[List[str]] = None) -> int:
    from whilelang.serialization import result_to_json, result_to_yaml

    parser = argparse.ArgumentParser(description="Interpret a WHILE program")
    parser.add_argument("source", nargs="?", help="Program text")
    parser.add_argument("-f", "--file", help="Read the program from a file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print input, code blocks and output")
    parser.add_argument("--format", choices=["text", "json", "yaml"], default="text")
    parser.add_argument("--env", help="YAML or JSON file with initial variable bindings")
    parser.add_argument("--strict", action="store_true", help="Reject unrecognized statements")
    parser.add_argument("--saturating-dec", action="store_true", help="Clamp dec() at 0")
    args = parser.parse_args(argv)

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            source = f.read()
    elif args.source is not None:
        source = args.source
    else:
        parser.error("either SOURCE or --file is required")

    config = InterpreterConfig(strict=args.strict, saturating_dec=args.saturating_dec)
    environment = None
    if args.env:
        try:
            environment = _load_environment(args.env)
        except (OSError, ValueError, TypeError, yaml.YAMLError, InterpreterError) as e:
            print(f"Cannot load environment from {args.env}: {e}", file=sys.stderr)
            return 1

    result = interpret(source, verbose=args.verbose, environment=environment, config=config)

    if args.format == "json":
        print(result_to_json(result))
    elif args.format == "yaml":
        print(result_to_yaml(result), end="")
    elif args.verbose:
        print("\n".join(result.trace))
    elif result.ok:
        for line in format_environment(result.environment):
            print(line)

    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
