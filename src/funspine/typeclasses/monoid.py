"""
Monoids as explicit values.

A monoid is an identity element plus an associative ``append``. Instances are
plain values passed as arguments; there is no global registry and no lookup
by type.

Laws (caller responsibility for custom instances):
    - ``append(identity, x) == x == append(x, identity)``
    - ``append(append(a, b), c) == append(a, append(b, c))``

Examples:
    >>> mconcat(["a", "b", "c"], STRING)
    'abc'
    >>> mconcat([3, 4], sum_of(INT_NUM))
    7
    >>> from funspine.maybe import some
    >>> mconcat([some(1), none(), some(3)], maybe_last())
    Some(3)
    >>> STRING.dual().concat(["a", "b", "c"])
    'cba'

Tags:
    monoid, typeclass, algebra, funspine
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from itertools import chain
from typing import Any, Callable, Generic, Iterable, TypeVar

from funspine.functions import compose, const, identity
from funspine.maybe import Maybe, none
from funspine.ordering import Ordering
from funspine.typeclasses.num import INT_NUM, Num


T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, slots=True)
class Monoid(Generic[T]):
    """An identity element and an associative binary operation."""

    identity: T
    append: Callable[[T, T], T]

    def dual(self) -> Monoid[T]:
        """The same monoid with its arguments flipped."""
        append = self.append
        return Monoid(self.identity, lambda a, b: append(b, a))

    def concat(self, items: Iterable[T]) -> T:
        """Fold ``items`` left to right starting from ``identity``."""
        return reduce(self.append, items, self.identity)


def mconcat(items: Iterable[T], monoid: Monoid[T]) -> T:
    return monoid.concat(items)


# =============================================================================
# INSTANCES
# =============================================================================

UNIT: Monoid[None] = Monoid(None, lambda a, b: None)
ALL: Monoid[bool] = Monoid(True, lambda a, b: a and b)
ANY: Monoid[bool] = Monoid(False, lambda a, b: a or b)
STRING: Monoid[str] = Monoid("", lambda a, b: a + b)

# Lexicographic combination; EQ defers to the next comparison
ORDERING: Monoid[Ordering] = Monoid(Ordering.EQ, lambda x, y: x.then(y))


def tuple2(first: Monoid[A], second: Monoid[B]) -> Monoid[tuple[A, B]]:
    """Pairs combined component-wise."""
    return Monoid(
        (first.identity, second.identity),
        lambda x, y: (first.append(x[0], y[0]), second.append(x[1], y[1])),
    )


def func(result: Monoid[T]) -> Monoid[Callable[[Any], T]]:
    """Functions combined pointwise: ``append(f, g)(x) == result.append(f(x), g(x))``."""
    return Monoid(
        const(result.identity),
        lambda f, g: lambda x: result.append(f(x), g(x)),
    )


def sum_of(num: Num[T] = INT_NUM) -> Monoid[T]:
    return Monoid(num.zero, num.plus)


def product_of(num: Num[T] = INT_NUM) -> Monoid[T]:
    return Monoid(num.one, num.mult)


def sequence_concat() -> Monoid[tuple[Any, ...]]:
    """Tuples joined end to end; any iterable may be appended."""
    return Monoid((), lambda a, b: tuple(chain(a, b)))


def maybe_first() -> Monoid[Maybe[Any]]:
    """Keep the leftmost populated Maybe."""
    return Monoid(none(), lambda a, b: a if a.has_value else b)


def maybe_last() -> Monoid[Maybe[Any]]:
    """Keep the rightmost populated Maybe."""
    return Monoid(none(), lambda a, b: b if b.has_value else a)


def endo() -> Monoid[Callable[[Any], Any]]:
    """Functions from a type to itself under composition."""
    return Monoid(identity, lambda f, g: compose(f, g))


__all__ = [
    "Monoid",
    "mconcat",
    # Instances
    "UNIT",
    "ALL",
    "ANY",
    "STRING",
    "ORDERING",
    # Factories
    "tuple2",
    "func",
    "sum_of",
    "product_of",
    "sequence_concat",
    "maybe_first",
    "maybe_last",
    "endo",
]
