from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import Node
from risp.types.null import Null
from risp.types.values import Value

if TYPE_CHECKING:
    from risp.interpreter import Interpreter


def block_form(interpreter: Interpreter, tail: Sequence[Node]) -> Value:
    result: Value = Null
    for node in tail:
        result = evaluate(node, interpreter)
    return result
