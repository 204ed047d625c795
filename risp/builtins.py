"""Built-in native functions for the risp runtime environment.

Native functions receive evaluated argument values and return a list of
values (empty for "no result").
"""
from __future__ import annotations

import sys

from risp.errors import RispValueError
from risp.types.environment import Environment
from risp.types.values import NativeFunction, Str, Value


# -------------------------------
# Console I/O
# -------------------------------
def print_builtin(args: list[Value]) -> list[Value]:
    """Write the display form of each argument, space separated, without a newline."""
    sys.stdout.write(" ".join(arg.display() for arg in args))
    sys.stdout.flush()
    return []


def println_builtin(args: list[Value]) -> list[Value]:
    """Like print, followed by a newline."""
    print_builtin(args)
    sys.stdout.write("\n")
    sys.stdout.flush()
    return []


def input_builtin(args: list[Value]) -> list[Value]:
    """Print the arguments as a prompt, then read one line from stdin."""
    print_builtin(args)
    try:
        line = sys.stdin.readline()
    except OSError as ex:
        raise RispValueError(f"input failed: {ex}") from ex
    if not line:
        raise RispValueError("input reached end of stream")
    return [Str(line.rstrip("\r\n"))]


BUILTINS = {
    "print": print_builtin,
    "println": println_builtin,
    "input": input_builtin,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({name: NativeFunction(name, fn) for name, fn in BUILTINS.items()})
