from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from risp.errors import RispValueError
from risp.evaluation.special_forms.block_form import block_form
from risp.evaluation.special_forms.if_form import evaluate_condition
from risp.reader.nodes import Node
from risp.types.null import Null
from risp.types.values import Value

if TYPE_CHECKING:
    from risp.interpreter import Interpreter


def while_form(interpreter: Interpreter, tail: Sequence[Node]) -> Value:
    """(while cond body...) -- the whole node list, condition included, runs as a block."""
    if not tail:
        raise RispValueError("while expects at least 1 argument")

    result: Value = Null
    while evaluate_condition(interpreter, tail[0], "while"):
        result = block_form(interpreter, tail)
    return result
