import pytest

from risp.interpreter import Interpreter
from risp.reader.parser import parse


# Most tests evaluate a snippet against a fresh interpreter. The `run` fixture
# evaluates every top-level form of a source string in order and returns the
# value of the last one.


@pytest.fixture
def interp():
    """Fresh interpreter with builtins and special forms loaded."""
    return Interpreter()


@pytest.fixture
def run(interp):
    def _run(source):
        result = None
        for expr in parse(source):
            result = interp.eval(expr)
        return result

    return _run
