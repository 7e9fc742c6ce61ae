"""
Small function combinators.

Examples:
    >>> inc = lambda x: x + 1
    >>> double = lambda x: x * 2
    >>> compose(inc, double)(5)
    11
    >>> pipe(inc, double)(5)
    12
    >>> curry(lambda a, b: a - b)(10)(3)
    7
    >>> map_both((1, "a"), inc, str.upper)
    (2, 'A')

Tags:
    functions, composition, currying, funspine
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, TypeVar

from funspine.errors import require


T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
F = TypeVar("F")
S = TypeVar("S")


def identity(x: T) -> T:
    return x


def const(value: T) -> Callable[[Any], T]:
    """A function that ignores its argument and returns ``value``."""
    return lambda _: value


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose(f, g, h)(x) == f(g(h(x))); compose() is identity."""
    return reduce(lambda f, g: lambda x: f(g(x)), funcs, identity)


def pipe(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """pipe(f, g, h)(x) == h(g(f(x))); pipe() is identity."""
    return reduce(lambda f, g: lambda x: g(f(x)), funcs, identity)


def curry(f: Callable[[T, U], V]) -> Callable[[T], Callable[[U], V]]:
    require(f, "f")
    return lambda x: lambda y: f(x, y)


def uncurry(f: Callable[[T], Callable[[U], V]]) -> Callable[[T, U], V]:
    require(f, "f")
    return lambda x, y: f(x)(y)


# =============================================================================
# PAIRS
# =============================================================================


def map_first(pair: tuple[F, S], f: Callable[[F], T]) -> tuple[T, S]:
    first, second = pair
    return f(first), second


def map_second(pair: tuple[F, S], f: Callable[[S], T]) -> tuple[F, T]:
    first, second = pair
    return first, f(second)


def map_both(pair: tuple[F, S], map_first: Callable[[F], T], map_second: Callable[[S], U]) -> tuple[T, U]:
    first, second = pair
    return map_first(first), map_second(second)


__all__ = [
    "identity",
    "const",
    "compose",
    "pipe",
    "curry",
    "uncurry",
    "map_first",
    "map_second",
    "map_both",
]
