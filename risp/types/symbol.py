from __future__ import annotations
import sys


class Symbol:
    """An unevaluated name, produced by quoting: ``'x``."""

    __slots__ = ("name",)
    type_name = "symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def display(self) -> str:
        return self.name

    def repr(self) -> str:
        return f"'{self.name}"
