from __future__ import annotations


class NullType:
    """The absence of a value. There is exactly one instance: ``Null``."""

    __slots__ = ()
    type_name = "null"

    def __repr__(self): return "Null"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)

    def display(self) -> str:
        return "null"

    def repr(self) -> str:
        return "null"


Null = NullType()
