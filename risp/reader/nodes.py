"""AST nodes produced by the parser.

Nodes are immutable and compare structurally, so a special form can evaluate
the same node any number of times (``while``, ``block``) without copying it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from risp.types.operator import Op


@dataclass(frozen=True, slots=True)
class IntNode:
    value: int


@dataclass(frozen=True, slots=True)
class FloatNode:
    value: float


@dataclass(frozen=True, slots=True)
class NameNode:
    name: str


@dataclass(frozen=True, slots=True)
class StrNode:
    value: str


@dataclass(frozen=True, slots=True)
class SymbolNode:
    """A quoted name: ``'x``."""
    name: str


@dataclass(frozen=True, slots=True)
class OperatorNode:
    op: Op


@dataclass(frozen=True, slots=True)
class ExprNode:
    """A parenthesised expression: ``(head arg ...)``."""
    items: tuple[Node, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class ListNode:
    """A quoted list literal: ``'(a b c)``."""
    items: tuple[Node, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


Node = Union[IntNode, FloatNode, NameNode, StrNode, SymbolNode, OperatorNode, ExprNode, ListNode]


def to_source(node: Node) -> str:
    """Serialize a node back to normalized S-expression text.

    Re-parsing the result yields a structurally equal node.
    """
    match node:
        case IntNode(value):
            return str(value)
        case FloatNode(value):
            # positional notation only; the reader has no exponent syntax
            text = format(Decimal(repr(value)), "f")
            return text if "." in text else f"{text}.0"
        case NameNode(name):
            return name
        case StrNode(value):
            return f'"{value}"'
        case SymbolNode(name):
            return f"'{name}"
        case OperatorNode(op):
            return op.display
        case ExprNode(items):
            return "(" + " ".join(to_source(item) for item in items) + ")"
        case ListNode(items):
            return "'(" + " ".join(to_source(item) for item in items) + ")"
    raise TypeError(f"not an AST node: {node!r}")
