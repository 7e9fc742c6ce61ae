"""
Three-valued comparison results.

``Ordering`` is the result type of every comparator in funspine. It converts
losslessly to and from the integer convention used by ``functools.cmp_to_key``
(negative, zero, positive).

Examples:
    >>> Ordering.from_comparison_result(-3)
    <Ordering.LT: -1>
    >>> Ordering.GT.reverse()
    <Ordering.LT: -1>
    >>> Ordering.EQ.then(Ordering.GT)
    <Ordering.GT: 1>

Tags:
    ordering, comparison, funspine
"""

from __future__ import annotations

from enum import IntEnum


class Ordering(IntEnum):
    """Result of comparing two values."""

    LT = -1   # First element is less than the second
    EQ = 0    # Elements are equal
    GT = 1    # First element is greater than the second

    @classmethod
    def from_comparison_result(cls, n: int) -> Ordering:
        """Map a negative/zero/positive integer to LT/EQ/GT."""
        if n < 0:
            return cls.LT
        if n > 0:
            return cls.GT
        return cls.EQ

    def to_comparison_result(self) -> int:
        """Sign-compatible integer for host sort routines."""
        return int(self.value)

    def reverse(self) -> Ordering:
        """Swap LT and GT; EQ is fixed."""
        return Ordering(-self.value)

    def then(self, other: Ordering) -> Ordering:
        """This ordering unless it is EQ, otherwise ``other``."""
        return other if self is Ordering.EQ else self


def from_comparison_result(n: int) -> Ordering:
    """Module-level alias of :meth:`Ordering.from_comparison_result`."""
    return Ordering.from_comparison_result(n)


def to_comparison_result(ordering: Ordering) -> int:
    """Module-level alias of :meth:`Ordering.to_comparison_result`."""
    return ordering.to_comparison_result()


def reverse_ordering(ordering: Ordering) -> Ordering:
    """Module-level alias of :meth:`Ordering.reverse`."""
    return ordering.reverse()


__all__ = [
    "Ordering",
    "from_comparison_result",
    "to_comparison_result",
    "reverse_ordering",
]
