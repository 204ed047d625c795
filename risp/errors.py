"""Error families for risp.

Syntax errors are raised while lexing/parsing, runtime errors while
evaluating. The two families share no base class besides ``Exception``.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from risp.reader.token import Span


class RispSyntaxError(Exception):
    """ Raised when source text cannot be tokenized or parsed"""

    def __init__(self, message: str, span: Optional[Span] = None):
        super().__init__(message)
        self.message = message
        self.span = span

    def __str__(self):
        if self.span is None:
            return f"SyntaxError: {self.message}"
        return f"SyntaxError: {self.message} (at {self.span.start}..{self.span.end})"


class ErrorKind(Enum):
    NAME_ERROR = "NameError"
    TYPE_ERROR = "TypeError"
    VALUE_ERROR = "ValueError"


class RispRuntimeError(Exception):
    """ Base class for all errors raised during evaluation"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.kind.value}: {self.message}"


class RispNameError(RispRuntimeError):
    """ Raised when a name is used before it is bound"""
    kind = ErrorKind.NAME_ERROR


class RispTypeError(RispRuntimeError):
    """ Raised when a value of the wrong type is called or operated on"""
    kind = ErrorKind.TYPE_ERROR


class RispValueError(RispRuntimeError):
    """ Raised on wrong arity, empty expressions and bad argument values"""
    kind = ErrorKind.VALUE_ERROR
