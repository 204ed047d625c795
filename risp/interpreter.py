from __future__ import annotations

import logging

from risp import builtins
from risp.errors import RispValueError
from risp.evaluation import special_forms
from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import Node
from risp.reader.parser import parse
from risp.types.environment import Environment
from risp.types.null import Null
from risp.types.values import Bool, List, Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates risp AST nodes against one persistent Environment.
    Bindings made with `set` survive across calls; separate instances share nothing.
    """

    def __init__(self):
        self.env: Environment = Environment()
        builtins.register(self.env)
        special_forms.register(self.env)
        self.env.define("true", Bool(True))
        self.env.define("false", Bool(False))

    def get_name(self, name: str) -> Value:
        return self.env.lookup(name)

    def set_name(self, name: str, value: Value) -> None:
        self.env.define(name, value)

    def eval(self, node: Node) -> Value:
        """Evaluate exactly one top-level form."""
        try:
            return evaluate(node, self)
        except RecursionError as ex:
            raise RispValueError("expression nested too deeply") from ex

    def eval_source(self, code: str) -> Value:
        """Parse `code` and evaluate each top-level form in order.

        Returns Null for no forms, the single result for one form, and a List
        of results otherwise.
        """
        results = [self.eval(expr) for expr in parse(code)]
        logger.debug("evaluated %d form(s)", len(results))
        if not results:
            return Null
        if len(results) == 1:
            return results[0]
        return List(results)
