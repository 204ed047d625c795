from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import Node
from risp.types.values import List

if TYPE_CHECKING:
    from risp.interpreter import Interpreter


def list_form(interpreter: Interpreter, tail: Sequence[Node]) -> List:
    return List(evaluate(node, interpreter) for node in tail)
