"""Runtime types: the value union, operators and the environment."""

from risp.types.null import Null, NullType
from risp.types.operator import Op
from risp.types.symbol import Symbol
from risp.types.values import (
    Value,
    Int,
    Float,
    Bool,
    Str,
    List,
    NativeFunction,
    SpecialForm,
    Operator,
)
from risp.types.environment import Environment

__all__ = [
    "Value",
    "Int",
    "Float",
    "Bool",
    "Str",
    "List",
    "NativeFunction",
    "SpecialForm",
    "Operator",
    "Symbol",
    "Null",
    "NullType",
    "Op",
    "Environment",
]
