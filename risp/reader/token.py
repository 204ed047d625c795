from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` of offsets into the source string."""

    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"invalid span {self.start}..{self.end}")

    def slice(self, source: str) -> str:
        return source[self.start:self.end]

    def widen(self, start: int) -> Span:
        return Span(start, self.end)

    def __len__(self) -> int:
        return self.end - self.start


class TokenKind(Enum):
    NAME = "Name"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    QUOTE = "Quote"
    OPERATOR = "Operator"
    EOF = "EOF"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A token only records where its content lives; the text is re-sliced on demand."""

    kind: TokenKind
    span: Span

    def text(self, source: str) -> str:
        return self.span.slice(source)
