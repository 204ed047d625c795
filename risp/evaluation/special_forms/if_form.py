from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from risp.errors import RispTypeError, RispValueError
from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import Node
from risp.types.null import Null
from risp.types.values import Bool, Value

if TYPE_CHECKING:
    from risp.interpreter import Interpreter


def evaluate_condition(interpreter: Interpreter, node: Node, form: str) -> bool:
    """Evaluate a condition node; only Bool values are accepted."""
    cond = evaluate(node, interpreter)
    if not isinstance(cond, Bool):
        raise RispTypeError(f"{form} condition must be a bool, got {cond.type_name}")
    return cond.value


def if_form(interpreter: Interpreter, tail: Sequence[Node]) -> Value:
    if len(tail) not in (2, 3):
        raise RispValueError(f"if expects 2 or 3 arguments, found {len(tail)}")

    if evaluate_condition(interpreter, tail[0], "if"):
        return evaluate(tail[1], interpreter)
    elif len(tail) == 3:
        return evaluate(tail[2], interpreter)
    else:
        return Null
