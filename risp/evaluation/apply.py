"""Application engine for risp.

This module centralizes how evaluated arguments are applied to a callable head:

- Native functions: called with the argument values; their list result is
  collapsed into a single value.
- Arithmetic operators (+ - * /): a left fold, ``(+ a b c)`` is ``((a + b) + c)``.
- Relational operators (= > <): pairwise over neighbouring arguments, joined
  with AND, so ``(< a b c)`` is ``a < b and b < c``. All pairs are compared.

Every pairwise step uses two-sided dispatch: the primary operation on the
left operand first, then the reflected operation on the right operand.
"""

from __future__ import annotations

from typing import Callable, Sequence

from risp.errors import RispTypeError
from risp.types import operations
from risp.types.null import Null
from risp.types.operator import Op
from risp.types.values import Bool, List, NativeFunction, Value

BinaryFn = Callable[[Value, Value], object]

# op -> (primary, reflected); the reflected form is called as reflected(right, left)
ARITHMETIC: dict[Op, tuple[BinaryFn, BinaryFn]] = {
    Op.PLUS: (operations.add, operations.radd),
    Op.MINUS: (operations.sub, operations.rsub),
    Op.STAR: (operations.mul, operations.rmul),
    Op.SLASH: (operations.div, operations.rdiv),
}

# op -> (primary, alternate); `a > b` falls back to `b < a` and vice versa
COMPARISON: dict[Op, tuple[BinaryFn, BinaryFn]] = {
    Op.EQUAL: (operations.eq, operations.eq),
    Op.GREATER: (operations.gt, operations.lt),
    Op.LESS: (operations.lt, operations.gt),
}


def call_native(fn: NativeFunction, args: list[Value]) -> Value:
    """Call a native function; empty result -> Null, one value -> it, more -> List."""
    result = fn.fn(args)
    if not result:
        return Null
    if len(result) == 1:
        return result[0]
    return List(result)


def _dispatch(op: Op, table: dict[Op, tuple[BinaryFn, BinaryFn]], left: Value, right: Value):
    primary, alternate = table[op]
    result = primary(left, right)
    if result is NotImplemented:
        result = alternate(right, left)
    if result is NotImplemented:
        raise RispTypeError(
            f"invalid operand types for {op.display}: {left.type_name} and {right.type_name}"
        )
    return result


def apply_binary(op: Op, left: Value, right: Value) -> Value:
    """Apply one arithmetic step with primary-then-reflected dispatch."""
    return _dispatch(op, ARITHMETIC, left, right)


def compare(op: Op, left: Value, right: Value) -> bool:
    """Apply one relational step with primary-then-alternate dispatch."""
    return _dispatch(op, COMPARISON, left, right)


def call_operator(op: Op, operands: Sequence[Value]) -> Value:
    """Apply an operator to evaluated operands."""
    if not op.is_arithmetic:
        return call_comparison(op, operands)

    if not operands:
        raise RispTypeError("expected at least 1 argument")
    result = operands[0]
    for right in operands[1:]:
        result = apply_binary(op, result, right)
    return result


def call_comparison(op: Op, operands: Sequence[Value]) -> Bool:
    # compare every pair before combining
    results = [compare(op, left, right) for left, right in zip(operands, operands[1:])]
    return Bool(all(results))
