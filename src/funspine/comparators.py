"""
Comparator combinators.

A comparator is any ``Callable[[T, T], Ordering]``. The combinators here
build comparators from key projections, chain them into tie-break cascades,
reverse them, and adapt them to and from the ``cmp``-style integer functions
that ``functools.cmp_to_key`` and ``sorted`` understand.

Manifesto:
    - **Plain functions:** Comparators are callables, not class hierarchies
    - **Never mutate inputs:** Every combinator returns a new comparator
    - **Lossless adapters:** Ordering → int → Ordering round-trips exactly
    - **Fail fast on misuse:** A ``None`` comparator raises immediately

Architecture:
    ::

        by(key, cmp?) ────────┐
        natural_order ────────┼──> Comparator[T] ──> then(c1, c2, ...)
        from_cmp(int_fn) ─────┘          │           reverse(c)
                                         ▼
                              to_cmp(c) / to_key(c) ──> sorted(key=...)

Examples:
    Ordering ``(value, id)`` records with a tie-break on id:

    >>> rows = [(2.0, 5), (1.0, 3), (2.0, 1)]
    >>> cmp = then(by(lambda r: r[0]), by(lambda r: r[1]))
    >>> cmp((2.0, 5), (2.0, 1))
    <Ordering.GT: 1>
    >>> sorted(rows, key=to_key(cmp))
    [(1.0, 3), (2.0, 1), (2.0, 5)]

    Descending by length:

    >>> sorted(["bb", "a", "ccc"], key=to_key(reverse(by(len))))
    ['ccc', 'bb', 'a']

Guardrails:
    ❌ DON'T: Return ints from a comparator
    ✅ DO: Wrap int-returning functions with from_cmp()

Tags:
    comparator, ordering, sorting, combinators, funspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, TypeVar

from funspine.errors import require
from funspine.ordering import Ordering


T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], Ordering]


def natural_order(x: Any, y: Any) -> Ordering:
    """Compare two values with their own ``<`` and ``>`` operators."""
    if x < y:
        return Ordering.LT
    if y < x:
        return Ordering.GT
    return Ordering.EQ


def by(key: Callable[[T], K], comparator: Comparator[K] | None = None) -> Comparator[T]:
    """Compare items by ``key(item)``, using ``comparator`` or natural order."""
    require(key, "key")
    key_comparator = comparator or natural_order

    def compare(x: T, y: T) -> Ordering:
        return key_comparator(key(x), key(y))

    return compare


def then(primary: Comparator[T], secondary: Comparator[T], *more: Comparator[T]) -> Comparator[T]:
    """
    Chain comparators into a tie-break cascade.

    The result of ``primary`` is returned unless it is EQ, in which case the
    next comparator decides, left to right.
    """
    require(primary, "primary")
    require(secondary, "secondary")
    comparators = (primary, secondary, *(require(c, "more") for c in more))

    def compare(x: T, y: T) -> Ordering:
        result = Ordering.EQ
        for comparator in comparators:
            result = comparator(x, y)
            if result != Ordering.EQ:
                return result
        return result

    return compare


def reverse(comparator: Comparator[T]) -> Comparator[T]:
    """Swap the arguments before delegating to ``comparator``."""
    require(comparator, "comparator")

    def compare(x: T, y: T) -> Ordering:
        return comparator(y, x)

    return compare


# =============================================================================
# ADAPTERS
# =============================================================================


def from_cmp(cmp: Callable[[T, T], int]) -> Comparator[T]:
    """Adapt an int-returning ``cmp(x, y)`` function into a comparator."""
    require(cmp, "cmp")

    def compare(x: T, y: T) -> Ordering:
        return Ordering.from_comparison_result(cmp(x, y))

    return compare


def to_cmp(comparator: Comparator[T]) -> Callable[[T, T], int]:
    """Adapt a comparator into an int-returning ``cmp(x, y)`` function."""
    require(comparator, "comparator")

    def cmp(x: T, y: T) -> int:
        return comparator(x, y).to_comparison_result()

    return cmp


def to_key(comparator: Comparator[T]) -> Callable[[T], Any]:
    """Key function for ``sorted``/``min``/``max`` built from a comparator."""
    return cmp_to_key(to_cmp(comparator))


# =============================================================================
# COMPARISON HELPERS
# =============================================================================


def less_than(x: T, y: T, comparator: Comparator[T] | None = None) -> bool:
    return (comparator or natural_order)(x, y) == Ordering.LT


def less_than_or_equal(x: T, y: T, comparator: Comparator[T] | None = None) -> bool:
    return (comparator or natural_order)(x, y) != Ordering.GT


def greater_than(x: T, y: T, comparator: Comparator[T] | None = None) -> bool:
    return (comparator or natural_order)(x, y) == Ordering.GT


def greater_than_or_equal(x: T, y: T, comparator: Comparator[T] | None = None) -> bool:
    return (comparator or natural_order)(x, y) != Ordering.LT


def equivalent(x: T, y: T, comparator: Comparator[T] | None = None) -> bool:
    """True when neither value orders before the other."""
    return (comparator or natural_order)(x, y) == Ordering.EQ


def min_of(a: T, b: T, comparator: Comparator[T] | None = None) -> T:
    """The smaller of two items; ``b`` wins ties."""
    return a if less_than(a, b, comparator) else b


def max_of(a: T, b: T, comparator: Comparator[T] | None = None) -> T:
    """The larger of two items; ``a`` wins ties."""
    return a if greater_than_or_equal(a, b, comparator) else b


__all__ = [
    "Comparator",
    "natural_order",
    "by",
    "then",
    "reverse",
    # Adapters
    "from_cmp",
    "to_cmp",
    "to_key",
    # Helpers
    "less_than",
    "less_than_or_equal",
    "greater_than",
    "greater_than_or_equal",
    "equivalent",
    "min_of",
    "max_of",
]
