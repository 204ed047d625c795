# risp: a small interpreter for an S-expression language.
#
#   source text -> Lexer -> Parser -> AST nodes -> Interpreter -> Value
#
# Collaborators (REPL, file runner, language server) use only:
#   parse(source)            -> list of top-level AST nodes
#   Interpreter().eval(node) -> Value
#   value.display() / value.repr()
# and the two error families RispSyntaxError / RispRuntimeError.

import logging

from risp.errors import (
    ErrorKind,
    RispSyntaxError,
    RispRuntimeError,
    RispNameError,
    RispTypeError,
    RispValueError,
)
from risp.reader.parser import parse
from risp.interpreter import Interpreter

# Library code never configures handlers; applications do
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"

__all__ = [
    "parse",
    "Interpreter",
    "ErrorKind",
    "RispSyntaxError",
    "RispRuntimeError",
    "RispNameError",
    "RispTypeError",
    "RispValueError",
]
