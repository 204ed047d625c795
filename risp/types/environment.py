"""Runtime environment for risp.

A single flat mapping from names to values. There are no nested scopes: every
lookup consults this one table. The interpreter seeds it with the standard
library and the special forms, and ``set`` mutates it in place.
"""

from __future__ import annotations

from typing import Iterator, Mapping

from risp.errors import RispNameError
from risp.types.values import Value


class Environment:
    """Mapping from names to runtime values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[str, Value] | None = None):
        self.vars: dict[str, Value] = dict(bindings or {})

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, replacing any existing binding."""
        self.vars[name] = value

    def update(self, bindings: Mapping[str, Value]) -> None:
        self.vars.update(bindings)

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`.

        Raises RispNameError if the name is not bound.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise RispNameError(f"{name} is not defined") from None

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self):
        return f"Environment({len(self.vars)} bindings)"
