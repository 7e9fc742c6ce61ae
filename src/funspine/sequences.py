"""
Maybe-returning sequence helpers.

Safe counterparts of indexing, ``next(iter(...))`` and ``max``/``min`` that
return Nothing instead of raising on empty or out-of-range input. Every helper
accepts any iterable; ``collections.abc.Sequence`` inputs take an O(1) path
(``len`` + indexing) and other ``Sized`` inputs skip work that ``len`` rules
out.

Manifesto:
    - **Any iterable:** Lists, tuples, ranges, generators, dict views
    - **Read as little as needed:** Single-pass, stop as soon as the answer
      is known
    - **Stable ties:** max keeps the last of equal maxima, min keeps the first
      of equal minima

Examples:
    >>> maybe_element_at([10, 20, 30], 1)
    Some(20)
    >>> maybe_element_at(iter([10, 20]), 5)
    Nothing()
    >>> maybe_single([1, 2, 3], lambda x: x > 1)
    Nothing()
    >>> from funspine.comparators import by
    >>> maybe_max(["bb", "a", "cc"], by(len))
    Some('cc')
    >>> list(unfold(lambda n: some((n, n * 2)) if n < 20 else none(), 1))
    [1, 2, 4, 8, 16]

Tags:
    sequences, iterables, maybe, funspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Sequence, Sized
from dataclasses import dataclass, field
from itertools import chain
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from funspine.comparators import Comparator, max_of, min_of
from funspine.maybe import Maybe, Some, none, some


T = TypeVar("T")
S = TypeVar("S")


# =============================================================================
# ELEMENT ACCESS
# =============================================================================


def maybe_element_at(seq: Iterable[T], index: int) -> Maybe[T]:
    """
    The element at ``index``, or Nothing when out of range.

    Negative indexes are always out of range; there is no from-the-end
    indexing.
    """
    if index < 0:
        return none()
    if isinstance(seq, Sized) and index >= len(seq):
        return none()
    if isinstance(seq, Sequence):
        return Some(seq[index])

    for position, item in enumerate(seq):
        if position == index:
            return Some(item)
    return none()


def maybe_first(seq: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Maybe[T]:
    """The first element (matching ``predicate``, when given)."""
    for item in seq:
        if predicate is None or predicate(item):
            return Some(item)
    return none()


def maybe_last(seq: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Maybe[T]:
    """The last element (matching ``predicate``, when given)."""
    if predicate is None and isinstance(seq, Sequence):
        return Some(seq[len(seq) - 1]) if len(seq) > 0 else none()

    found = False
    last: Any = None
    for item in seq:
        if predicate is None or predicate(item):
            found = True
            last = item
    return Some(last) if found else none()


def maybe_single(seq: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Maybe[T]:
    """
    The only element (matching ``predicate``, when given).

    Zero or several matches give Nothing. Without a predicate at most two
    elements are read; with one, scanning stops at the second match.
    """
    found = False
    match: Any = None
    for item in seq:
        if predicate is None or predicate(item):
            if found:
                return none()
            found = True
            match = item
    return Some(match) if found else none()


# =============================================================================
# EXTREMA
# =============================================================================


def maybe_max(seq: Iterable[T], comparator: Comparator[T] | None = None) -> Maybe[T]:
    """The greatest element; the last one wins among equals."""
    return _maybe_extreme(seq, lambda item, current: max_of(item, current, comparator))


def maybe_min(seq: Iterable[T], comparator: Comparator[T] | None = None) -> Maybe[T]:
    """The least element; the first one wins among equals."""
    return _maybe_extreme(seq, lambda item, current: min_of(item, current, comparator))


def _maybe_extreme(seq: Iterable[T], pick: Callable[[T, T], T]) -> Maybe[T]:
    iterator = iter(seq)
    try:
        current = next(iterator)
    except StopIteration:
        return none()
    for item in iterator:
        current = pick(item, current)
    return Some(current)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def unfold(step: Callable[[S], Maybe[tuple[T, S]]], seed: S) -> Iterator[T]:
    """
    Lazily generate values from a seed.

    ``step(state)`` returns ``Some((value, next_state))`` to emit ``value`` and
    continue, or Nothing to stop. The sequence may be infinite.
    """
    state = seed
    while True:
        result = step(state)
        if not result.has_value:
            return
        value, state = result.value
        yield value


def singleton(value: T) -> tuple[T]:
    return (value,)


def partition(seq: Iterable[T], predicate: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Split into ``(matching, non_matching)`` in a single pass."""
    matching: list[T] = []
    rest: list[T] = []
    for item in seq:
        (matching if predicate(item) else rest).append(item)
    return matching, rest


@dataclass(frozen=True, slots=True)
class NonEmpty(Generic[T]):
    """
    A sequence with at least one element.

    ``first`` is always present, so ``NonEmpty`` can feed operations such as
    ``max`` or ``functools.reduce`` without an initial value.

    Examples:
        >>> ne = NonEmpty.of(3, 1, 2)
        >>> ne.first, list(ne)
        (3, [3, 1, 2])
        >>> NonEmpty.from_iterable([])
        Nothing()
    """

    first: T
    rest: tuple[T, ...] = field(default=())

    @classmethod
    def of(cls, first: T, *rest: T) -> NonEmpty[T]:
        return cls(first, tuple(rest))

    @classmethod
    def from_iterable(cls, seq: Iterable[T]) -> Maybe[NonEmpty[T]]:
        """Some(NonEmpty) when ``seq`` has an element, otherwise Nothing."""
        iterator = iter(seq)
        try:
            first = next(iterator)
        except StopIteration:
            return none()
        return some(cls(first, tuple(iterator)))

    def __iter__(self) -> Iterator[T]:
        return chain((self.first,), self.rest)

    def __len__(self) -> int:
        return 1 + len(self.rest)


__all__ = [
    # Element access
    "maybe_element_at",
    "maybe_first",
    "maybe_last",
    "maybe_single",
    # Extrema
    "maybe_max",
    "maybe_min",
    # Construction
    "unfold",
    "singleton",
    "partition",
    "NonEmpty",
]
