from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from risp.errors import RispValueError
from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import NameNode, Node
from risp.types.values import Value

if TYPE_CHECKING:
    from risp.interpreter import Interpreter


def set_form(interpreter: Interpreter, tail: Sequence[Node]) -> Value:
    if len(tail) != 2:
        raise RispValueError(f"set expects 2 arguments, found {len(tail)}")
    target, val_expr = tail
    if not isinstance(target, NameNode):
        raise RispValueError(f"set first argument must be a name, got {type(target).__name__}")
    value = evaluate(val_expr, interpreter)
    interpreter.env.define(target.name, value)
    return value
