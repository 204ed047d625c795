"""Per-type operator implementations.

Every binary operation comes as a pair, mirroring Python's own data model:

- the primary form ``add(left, right)`` computes ``left + right``
- the reflected form ``radd(self, other)`` computes ``other + self``

Each returns ``NotImplemented`` when it does not own the type pairing. A type
only implements the combinations it naturally owns: ``Float`` knows how to add
an ``Int`` from either side, so ``Int`` never needs to know about ``Float``.
The evaluator tries the primary form first and the reflected one second
(see ``risp.evaluation.apply``).

    Int   o Int               -> Int   (``/`` truncates toward zero)
    Float o Int | Float       -> Float
    Bool  o Bool | Int        -> Int   (Bool counts as 0/1)
    Bool  o Float             -> Float
    Str   + Str               -> Str
    Str   * Int, Int * Str    -> Str   (repetition)
    List  + List              -> List
    List  * Int, Int * List   -> List  (repetition)
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from risp.errors import RispValueError
from risp.types.values import Bool, Float, Int, List, Str, Value

NumberFn = Callable[[Any, Any], Any]


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise RispValueError("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _true_div(a: float, b: float) -> float:
    if b == 0:
        raise RispValueError("division by zero")
    return a / b


def _float_result(float_fn: NumberFn, a, b) -> Float:
    # ints are unbounded; promoting a huge one to float overflows
    try:
        return Float(float_fn(a, b))
    except OverflowError as ex:
        raise RispValueError(f"number too large for float arithmetic: {ex}") from ex


def _numeric(left: Value, right: Value, int_fn: NumberFn, float_fn: NumberFn):
    match left, right:
        case Int(a), Int(b):
            return Int(int_fn(a, b))
        case Float(a), Int(b) | Float(b):
            return _float_result(float_fn, a, b)
        case Bool(a), Bool(b) | Int(b):
            return Int(int_fn(int(a), int(b)))
        case Bool(a), Float(b):
            return _float_result(float_fn, int(a), b)
    return NotImplemented


def _reflected_numeric(self: Value, other: Value, int_fn: NumberFn, float_fn: NumberFn):
    # computes `other o self`
    match self, other:
        case Float(a), Int(b):
            return _float_result(float_fn, b, a)
        case Bool(a), Int(b):
            return Int(int_fn(b, int(a)))
        case Bool(a), Float(b):
            return _float_result(float_fn, b, int(a))
    return NotImplemented


def _repeat(self: Value, count: Value):
    try:
        match self, count:
            case Str(s), Int(n):
                return Str(s * n)
            case List(items), Int(n):
                return List(items * n)
    except (OverflowError, MemoryError) as ex:
        raise RispValueError(f"repeat count too large: {count.display()}") from ex
    return NotImplemented


# -------------------------------
# Arithmetic
# -------------------------------
def add(left: Value, right: Value):
    match left, right:
        case Str(a), Str(b):
            return Str(a + b)
        case List(a), List(b):
            return List(a + b)
    return _numeric(left, right, operator.add, operator.add)


def radd(self: Value, other: Value):
    return _reflected_numeric(self, other, operator.add, operator.add)


def sub(left: Value, right: Value):
    return _numeric(left, right, operator.sub, operator.sub)


def rsub(self: Value, other: Value):
    return _reflected_numeric(self, other, operator.sub, operator.sub)


def mul(left: Value, right: Value):
    result = _repeat(left, right)
    if result is not NotImplemented:
        return result
    return _numeric(left, right, operator.mul, operator.mul)


def rmul(self: Value, other: Value):
    result = _repeat(self, other)
    if result is not NotImplemented:
        return result
    return _reflected_numeric(self, other, operator.mul, operator.mul)


def div(left: Value, right: Value):
    return _numeric(left, right, _trunc_div, _true_div)


def rdiv(self: Value, other: Value):
    return _reflected_numeric(self, other, _trunc_div, _true_div)


# -------------------------------
# Comparison
# -------------------------------
def _compare(left: Value, right: Value, fn: Callable[[Any, Any], bool]):
    match left, right:
        case Int(a), Int(b):
            return fn(a, b)
        case Float(a), Int(b) | Float(b):
            return fn(a, b)
        case Bool(a), Bool(b) | Int(b) | Float(b):
            return fn(int(a), b)
    return NotImplemented


def eq(left: Value, right: Value):
    match left, right:
        case Str(a), Str(b):
            return a == b
        case List(a), List(b):
            return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return _compare(left, right, operator.eq)


def gt(left: Value, right: Value):
    return _compare(left, right, operator.gt)


def lt(left: Value, right: Value):
    return _compare(left, right, operator.lt)


def values_equal(a: Value, b: Value) -> bool:
    """Two-sided equality; pairings no type owns compare unequal."""
    result = eq(a, b)
    if result is NotImplemented:
        result = eq(b, a)
    return False if result is NotImplemented else result
