#!/usr/bin/env python3
"""
Demo: Interpret the example programs and print their traces.
"""

from whilelang.examples import run_examples
from whilelang.serialization import environment_to_yaml


def print_result(name, result):
    """Pretty-print one InterpretResult."""
    print()
    print("=" * 70)
    print(f"PROGRAM: {name}")
    print("=" * 70)
    for line in result.trace:
        print(f"  {line}")
    print()
    if result.ok:
        print("  Final bindings (YAML):")
        for line in environment_to_yaml(result.environment).splitlines():
            print(f"    {line}")
    else:
        print(f"  ERROR: {result.error}")


def main():
    for name, result in run_examples(verbose=True).items():
        print_result(name, result)
    print()


if __name__ == "__main__":
    main()
