"""
Example WHILE programs.

Canonical programs used by the demo and the tests. Each one terminates.
"""
from typing import Dict

from whilelang.interpreter import InterpretResult, interpret


def build_example_programs() -> Dict[str, str]:
    return {
        # Count xo up to x1
        "count_up": "xo := 2; x1 := inc(3); x2 := dec(2); WHILE(xo != x1) DO xo = inc(xo) OD;",
        # Count x2 down until it meets x1
        "count_down": "xo := zero(); x1 := 2; x2 := inc(x1); WHILE(x1 < x2) DO x2 = dec(x2) OD;",
        "greater_than": "x := 5; y := 2; WHILE(x > y) DO y = inc(y) OD;",
        "zero_iterations": "x := 3; y := 3; WHILE(x != y) DO x = inc(x) OD;",
        "copy_value": "a := 7; b := zero(); b = val(a);",
    }


def run_examples(verbose: bool = False) -> Dict[str, InterpretResult]:
    return {
        name: interpret(source, verbose=verbose)
        for name, source in build_example_programs().items()
    }
