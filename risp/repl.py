"""Interactive REPL and file runner for risp.

Both talk to the core only through ``parse``, ``Interpreter.eval`` and the
two error families. The REPL reports an error and keeps going; the file runner
stops at the first failing form.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from risp import __version__
from risp.config import color_enabled, get_log_level, get_prompt
from risp.errors import RispRuntimeError, RispSyntaxError
from risp.interpreter import Interpreter
from risp.reader.parser import parse
from risp.types.null import NullType
from risp.types.values import Value

logger = logging.getLogger(__name__)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_RESULT = "\033[32m"
COLOR_ERROR = "\033[33m"

BANNER = (
    f"risp v{__version__}\n"
    "Type 'bugs' or 'copyright' for more information.\n"
    "Type 'q' or 'quit' to quit\n"
)

META_COMMANDS = {
    "bugs": "Report bugs at https://github.com/shivrm/risp/issues",
    "copyright": "Copyright (c) 2022 shivrm",
}


def colorize(text: str, color: str, stream: TextIO) -> str:
    if not color_enabled(stream):
        return text
    return f"{color}{text}{RESET}"


def show_result(value: Value, out: TextIO) -> None:
    if isinstance(value, NullType):
        return
    out.write(colorize(value.repr(), COLOR_RESULT, out) + "\n")


def show_error(err: Exception, err_out: TextIO) -> None:
    err_out.write(colorize(str(err), COLOR_ERROR, err_out) + "\n")


def eval_line(interpreter: Interpreter, line: str, out: TextIO, err_out: TextIO) -> bool:
    """Evaluate every form on one line, printing results. Returns False on error."""
    try:
        for expr in parse(line):
            show_result(interpreter.eval(expr), out)
    except (RispSyntaxError, RispRuntimeError) as err:
        show_error(err, err_out)
        return False
    return True


def repl(
    interpreter: Optional[Interpreter] = None,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    err_out: Optional[TextIO] = None,
) -> None:
    interpreter = interpreter or Interpreter()
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err_out = err_out or sys.stderr
    prompt = get_prompt()
    out.write(BANNER)

    while True:
        out.write(prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            break

        command = line.strip()
        if command in ("q", "quit"):
            out.write("Quitting\n")
            break
        if command in META_COMMANDS:
            out.write(META_COMMANDS[command] + "\n")
            continue
        eval_line(interpreter, line, out, err_out)


def run_file(path: str, err_out: Optional[TextIO] = None) -> int:
    """Run a source file fail-fast; returns the process exit status."""
    err_out = err_out or sys.stderr
    p = Path(path)
    try:
        source = p.read_text(encoding="utf-8")
    except OSError as ex:
        err_out.write(f"Error: cannot read {path}: {ex.strerror}\n")
        return 1

    interpreter = Interpreter()
    try:
        exprs = parse(source)
        logger.info("running %s (%d forms)", p, len(exprs))
        for expr in exprs:
            interpreter.eval(expr)
    except (RispSyntaxError, RispRuntimeError) as err:
        show_error(err, err_out)
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run a script file when one is given, otherwise start the interactive REPL."""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    if argv:
        return run_file(argv[0])
    try:
        repl()
    except KeyboardInterrupt:
        sys.stdout.write("\nQuitting\n")
    return 0
