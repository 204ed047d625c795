"""Core evaluator for the risp interpreter.

Walks AST nodes directly. Special forms are dispatched before argument
evaluation and receive the raw tail nodes; everything else is applied to
evaluated arguments through ``risp.evaluation.apply``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from risp.errors import RispTypeError, RispValueError
from risp.evaluation.apply import call_native, call_operator
from risp.reader.nodes import (
    Node,
    IntNode,
    FloatNode,
    NameNode,
    StrNode,
    SymbolNode,
    OperatorNode,
    ExprNode,
    ListNode,
)
from risp.types.symbol import Symbol
from risp.types.values import (
    Float,
    Int,
    List,
    NativeFunction,
    Operator,
    SpecialForm,
    Str,
    Value,
)

if TYPE_CHECKING:
    from risp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def evaluate(node: Node, interpreter: Interpreter) -> Value:
    """Evaluate one AST node against the interpreter's environment."""
    match node:
        case NameNode(name):
            return interpreter.env.lookup(name)
        case IntNode(value):
            return Int(value)
        case FloatNode(value):
            return Float(value)
        case StrNode(value):
            return Str(value)
        case OperatorNode(op):
            return Operator(op)
        case SymbolNode() | ListNode():
            return quoted(node)
        case ExprNode(items):
            return evaluate_expr(items, interpreter)
    raise TypeError(f"not an AST node: {node!r}")


def evaluate_expr(items: tuple[Node, ...], interpreter: Interpreter) -> Value:
    if not items:
        raise RispValueError("expression is empty")

    head = evaluate(items[0], interpreter)
    tail = items[1:]

    # Special forms control their own evaluation order
    if isinstance(head, SpecialForm):
        logger.debug("special form %s with %d argument(s)", head.name, len(tail))
        return head.fn(interpreter, tail)

    args = [evaluate(arg, interpreter) for arg in tail]

    if isinstance(head, NativeFunction):
        return call_native(head, args)
    if isinstance(head, Operator):
        return call_operator(head.op, args)
    raise RispTypeError(f"{head.type_name} is not callable")


def quoted(node: Node) -> Value:
    """Turn quoted syntax into data without evaluating anything.

    Names become Symbols and parenthesised expressions become Lists.
    """
    match node:
        case NameNode(name) | SymbolNode(name):
            return Symbol(name)
        case ExprNode(items) | ListNode(items):
            return List(quoted(item) for item in items)
        case IntNode(value):
            return Int(value)
        case FloatNode(value):
            return Float(value)
        case StrNode(value):
            return Str(value)
        case OperatorNode(op):
            return Operator(op)
    raise TypeError(f"not an AST node: {node!r}")
