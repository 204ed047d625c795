"""Runtime values.

The value set is closed: every evaluated expression produces one of the
classes below (or ``Symbol`` / ``Null``). Values are immutable, so copying a
value is just sharing a reference.

Each value provides

- ``type_name``  -- short name used in error messages
- ``display()``  -- human readable rendering (``print``)
- ``repr()``     -- debug/quoted rendering (REPL results)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, ClassVar, Sequence, Union

from risp.types.null import Null, NullType
from risp.types.operator import Op
from risp.types.symbol import Symbol

if TYPE_CHECKING:
    from risp.interpreter import Interpreter
    from risp.reader.nodes import Node


@dataclass(frozen=True, slots=True)
class Int:
    value: int
    type_name: ClassVar[str] = "int"

    def display(self) -> str:
        return str(self.value)

    def repr(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Float:
    value: float
    type_name: ClassVar[str] = "float"

    def display(self) -> str:
        return repr(self.value)

    def repr(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool
    type_name: ClassVar[str] = "bool"

    def display(self) -> str:
        return "true" if self.value else "false"

    def repr(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Str:
    value: str
    type_name: ClassVar[str] = "str"

    def display(self) -> str:
        return self.value

    def repr(self) -> str:
        return json.dumps(self.value, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class List:
    items: tuple[Value, ...] = ()
    type_name: ClassVar[str] = "list"

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def display(self) -> str:
        return "[" + ", ".join(item.display() for item in self.items) + "]"

    def repr(self) -> str:
        return "[" + ", ".join(item.repr() for item in self.items) + "]"


NativeFn = Callable[[list["Value"]], list["Value"]]
SpecialFormFn = Callable[["Interpreter", Sequence["Node"]], "Value"]


@dataclass(frozen=True, slots=True)
class NativeFunction:
    """A Python function called with already-evaluated arguments.

    It returns a list of values; the evaluator collapses that list into a
    single value (see ``risp.evaluation.apply.call_native``).
    """

    name: str
    fn: NativeFn = field(compare=False)
    type_name: ClassVar[str] = "function"

    def display(self) -> str:
        return f"<function {self.name}>"

    def repr(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class SpecialForm:
    """A Python function called with the interpreter and the raw argument nodes."""

    name: str
    fn: SpecialFormFn = field(compare=False)
    type_name: ClassVar[str] = "special form"

    def display(self) -> str:
        return f"<special form {self.name}>"

    def repr(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Operator:
    op: Op
    type_name: ClassVar[str] = "operator"

    def display(self) -> str:
        return self.op.display

    def repr(self) -> str:
        return self.op.display


Value = Union[Int, Float, Bool, Str, List, NativeFunction, SpecialForm, Operator, Symbol, NullType]

__all__ = [
    "Value",
    "Int",
    "Float",
    "Bool",
    "Str",
    "List",
    "NativeFunction",
    "SpecialForm",
    "Operator",
    "Symbol",
    "Null",
    "NullType",
]
