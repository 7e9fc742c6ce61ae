"""
The Const applicative.

``Const[A, B]`` carries an ``A`` and only pretends to carry a ``B``: ``map``
ignores its function, and applicative combination appends the carried values
with a monoid. Traversing a structure with Const collects a monoidal summary
without building a new structure.

Examples:
    >>> from funspine.typeclasses.monoid import STRING
    >>> Const(3).map(lambda b: b * 100)
    Const(3)
    >>> Const.pure(STRING)
    Const('')
    >>> Const("ab").ap(Const("cd"), STRING)
    Const('abcd')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from funspine.typeclasses.monoid import Monoid


A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class Const(Generic[A, B]):
    value: A

    def map(self, f: Callable[[B], C]) -> Const[A, C]:
        """Same carried value; ``f`` is never called."""
        return Const(self.value)

    def ap(self, other: Const[A, Any], monoid: Monoid[A]) -> Const[A, Any]:
        """Append the carried values, this one first."""
        return Const(monoid.append(self.value, other.value))

    @classmethod
    def pure(cls, monoid: Monoid[A], value: Any = None) -> Const[A, Any]:
        """Const holding ``monoid.identity``; ``value`` is discarded."""
        return cls(monoid.identity)

    @staticmethod
    def monoid(monoid: Monoid[A]) -> Monoid[Const[A, Any]]:
        """Lift a monoid on ``A`` to one on ``Const[A, B]``."""
        return Monoid(
            Const(monoid.identity),
            lambda x, y: Const(monoid.append(x.value, y.value)),
        )

    def __repr__(self) -> str:
        return f"Const({self.value!r})"


__all__ = ["Const"]
