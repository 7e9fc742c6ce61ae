"""
Disjoint unions.

Either[L, R] holds exactly one of two payloads. By convention Right is the
"main" side: ``map`` and ``bind`` are right-biased and pass a Left through
untouched. Projecting the absent side raises InvalidStateError.

Manifesto:
    - **Exactly one payload:** Left or Right, never both, never neither
    - **Right-biased:** map/bind act on Right, map_left acts on Left
    - **Not a fault barrier:** Exceptions from caller functions propagate

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                    Either[L, R]                              │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │    Left[L, R]   │   Right[L, R]   │    Sequence helpers      │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • left: L       │ • right: R      │ • lefts() / rights()    │
        │ • .right raises │ • .left raises  │ • partition_eithers()   │
        │ • map() → self  │ • map()         │                         │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> def parse(text: str) -> Either[str, int]:
    ...     return right(int(text)) if text.isdigit() else left(text)
    >>> [parse(t).fold(len, lambda n: n * 10) for t in ["4", "abc"]]
    [40, 3]
    >>> partition_eithers([left("a"), right(1), left("b")])
    (['a', 'b'], [1])

Guardrails:
    ❌ DON'T: Read ``.right`` without checking ``is_right``
    ✅ DO: Use fold(), maybe_right() or pattern matching

Tags:
    either, disjoint-union, functional-programming, funspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, TypeVar

from funspine.errors import InvalidStateError
from funspine.maybe import Maybe, Some, none

if TYPE_CHECKING:
    from funspine.tries import Try


L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Left(Generic[L, R]):
    """The left-hand payload of an Either."""

    left: L

    @property
    def is_left(self) -> bool:
        return True

    @property
    def is_right(self) -> bool:
        return False

    @property
    def right(self) -> R:
        raise InvalidStateError("No Right value in Left").with_context(
            operation="Either.right", type_name="Left"
        )

    def fold(self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        """Apply ``left_fn`` to the payload."""
        return left_fn(self.left)

    def bimap(self, left_map: Callable[[L], L2], right_map: Callable[[R], R2]) -> Either[L2, R2]:
        return Left(left_map(self.left))

    def map(self, f: Callable[[R], R2]) -> Either[L, R2]:
        return self  # type: ignore[return-value]

    def bind(self, f: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[L], L2]) -> Either[L2, R]:
        return Left(f(self.left))

    def swap(self) -> Either[R, L]:
        return Right(self.left)

    def maybe_left(self) -> Maybe[L]:
        return Some(self.left)

    def maybe_right(self) -> Maybe[R]:
        return none()

    def to_try(self) -> Try[R]:
        """
        Failure holding the left payload.

        The payload must be an exception; anything else is wrapped in an
        InvalidStateError naming it.
        """
        from funspine.tries import Failure

        error = self.left
        if not isinstance(error, Exception):
            error = InvalidStateError(f"Left value is not an exception: {error!r}").with_context(
                operation="Either.to_try", type_name="Left"
            )
        return Failure(error)

    def __repr__(self) -> str:
        return f"Left({self.left!r})"


@dataclass(frozen=True, slots=True)
class Right(Generic[L, R]):
    """The right-hand payload of an Either."""

    right: R

    @property
    def is_left(self) -> bool:
        return False

    @property
    def is_right(self) -> bool:
        return True

    @property
    def left(self) -> L:
        raise InvalidStateError("No Left value in Right").with_context(
            operation="Either.left", type_name="Right"
        )

    def fold(self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        """Apply ``right_fn`` to the payload."""
        return right_fn(self.right)

    def bimap(self, left_map: Callable[[L], L2], right_map: Callable[[R], R2]) -> Either[L2, R2]:
        return Right(right_map(self.right))

    def map(self, f: Callable[[R], R2]) -> Either[L, R2]:
        return Right(f(self.right))

    def bind(self, f: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        return f(self.right)

    def map_left(self, f: Callable[[L], L2]) -> Either[L2, R]:
        return self  # type: ignore[return-value]

    def swap(self) -> Either[R, L]:
        return Left(self.right)

    def maybe_left(self) -> Maybe[L]:
        return none()

    def maybe_right(self) -> Maybe[R]:
        return Some(self.right)

    def to_try(self) -> Try[R]:
        from funspine.tries import Success

        return Success(self.right)

    def __repr__(self) -> str:
        return f"Right({self.right!r})"


# Type alias for Either
Either = Left[L, R] | Right[L, R]


# =============================================================================
# CONSTRUCTORS AND UTILITIES
# =============================================================================


def left(value: L) -> Either[L, Any]:
    return Left(value)


def right(value: R) -> Either[Any, R]:
    return Right(value)


def lefts(eithers: Iterable[Either[L, R]]) -> Iterator[L]:
    """Lazily yield the Left payloads, preserving order."""
    for either in eithers:
        if either.is_left:
            yield either.left


def rights(eithers: Iterable[Either[L, R]]) -> Iterator[R]:
    """Lazily yield the Right payloads, preserving order."""
    for either in eithers:
        if either.is_right:
            yield either.right


def partition_eithers(eithers: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """
    Split into ``(lefts, rights)`` in a single pass.

    Works on one-shot iterators; each list preserves input order.

    Examples:
        >>> partition_eithers(iter([right(1), left("x"), right(2)]))
        (['x'], [1, 2])
    """
    lefts_: list[L] = []
    rights_: list[R] = []
    for either in eithers:
        match either:
            case Left(value):
                lefts_.append(value)
            case Right(value):
                rights_.append(value)
    return lefts_, rights_


__all__ = [
    # Types
    "Either",
    "Left",
    "Right",
    # Constructors
    "left",
    "right",
    # Sequences
    "lefts",
    "rights",
    "partition_eithers",
]
