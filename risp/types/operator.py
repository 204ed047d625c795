from __future__ import annotations

from enum import Enum


class Op(Enum):
    """The closed set of operators understood by the reader and the evaluator."""

    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    EQUAL = "="
    GREATER = ">"
    LESS = "<"

    @property
    def display(self) -> str:
        return self.value

    @property
    def is_arithmetic(self) -> bool:
        return self in ARITHMETIC_OPS

    @classmethod
    def from_text(cls, text: str) -> Op:
        return cls(text)

    def __str__(self):
        return self.value


ARITHMETIC_OPS = frozenset({Op.PLUS, Op.MINUS, Op.STAR, Op.SLASH})
