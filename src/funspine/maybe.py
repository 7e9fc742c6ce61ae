"""
Optional values.

Provides a typed Maybe[T] sum type that makes presence or absence of a value
explicit, unlike ``Optional[T]`` where ``None`` is ambiguous: ``some(None)``
is a present value, ``none()`` is absence.

Maybe is not a fault barrier. Exceptions raised by the functions passed to
``map``, ``bind``, ``filter`` or ``fold`` propagate to the caller unchanged;
use ``funspine.tries.Try`` when failures must be captured as data.

Manifesto:
    - **Explicit absence:** Nothing is a value, not a sentinel
    - **Falsy values are values:** some(0), some(""), some(None) all have values
    - **Loud misuse:** Reading ``.value`` from Nothing raises InvalidStateError
    - **Pattern matching:** ``case Some(v)`` / ``case Nothing()``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Maybe[T]                                 │
        │                    (Type Alias)                              │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │     Some[T]     │    Nothing      │     Utilities           │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • value raises  │ • some() / none()       │
        │ • map()         │ • map() → self  │ • from_optional()       │
        │ • bind()        │ • get_or()      │ • somes()               │
        │ • filter()      │ • or_else()     │                         │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> some(3).map(lambda x: x * 2)
    Some(6)
    >>> none().map(lambda x: x * 2).get_or(0)
    0
    >>> match some("hello"):
    ...     case Some(text):
    ...         print(text.upper())
    ...     case Nothing():
    ...         print("missing")
    HELLO

Performance:
    - **O(1)** for all operations except somes(), which is lazy O(n)
    - **Memory:** Frozen dataclasses with __slots__

Guardrails:
    ❌ DON'T: Read ``.value`` without checking ``has_value``
    ✅ DO: Use get_or(), fold() or pattern matching

    ❌ DON'T: Use ``bool(maybe)`` to test presence
    ✅ DO: Use ``has_value``; ``some(0)`` has a value

Tags:
    maybe, option, optional, functional-programming, monadic, funspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, TypeVar

from funspine.errors import InvalidStateError, NoSuchElementError

if TYPE_CHECKING:
    from funspine.tries import Try


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """
    A present value.

    Examples:
        >>> Some(0).has_value
        True
        >>> Some(4).filter(lambda x: x > 10)
        Nothing()
    """

    value: T

    @property
    def has_value(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Apply ``f`` to the value."""
        return Some(f(self.value))

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Chain to another Maybe-returning function."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Self if ``predicate`` holds, otherwise Nothing."""
        return self if predicate(self.value) else _NOTHING

    def fold(self, on_nothing: Callable[[], U], on_some: Callable[[T], U]) -> U:
        return on_some(self.value)

    def get_or(self, default: T) -> T:
        return self.value

    def get_or_else(self, default_fn: Callable[[], T]) -> T:
        return self.value

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        return self

    def or_else_get(self, alternative_fn: Callable[[], Maybe[T]]) -> Maybe[T]:
        return self

    def to_optional(self) -> T | None:
        return self.value

    def to_try(self, error_fn: Callable[[], Exception] | None = None) -> Try[T]:
        """Success containing the value."""
        from funspine.tries import Success

        return Success(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing(Generic[T]):
    """
    Absence of a value.

    All Nothing instances are equal. Transformations return Nothing without
    invoking their function argument.
    """

    @property
    def has_value(self) -> bool:
        return False

    @property
    def value(self) -> T:
        """Raise InvalidStateError; there is no value."""
        raise InvalidStateError("No value present in Nothing").with_context(
            operation="Maybe.value", type_name="Nothing"
        )

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return _NOTHING

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return _NOTHING

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self

    def fold(self, on_nothing: Callable[[], U], on_some: Callable[[T], U]) -> U:
        return on_nothing()

    def get_or(self, default: T) -> T:
        return default

    def get_or_else(self, default_fn: Callable[[], T]) -> T:
        """Evaluate ``default_fn``; only called for Nothing."""
        return default_fn()

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        return alternative

    def or_else_get(self, alternative_fn: Callable[[], Maybe[T]]) -> Maybe[T]:
        return alternative_fn()

    def to_optional(self) -> T | None:
        return None

    def to_try(self, error_fn: Callable[[], Exception] | None = None) -> Try[T]:
        """Failure with ``error_fn()`` or a NoSuchElementError."""
        from funspine.tries import Failure

        error = error_fn() if error_fn is not None else NoSuchElementError("Nothing has no value")
        return Failure(error)

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing()"


# Type alias for Maybe
Maybe = Some[T] | Nothing[T]

_NOTHING: Nothing[Any] = Nothing()


# =============================================================================
# CONSTRUCTORS AND UTILITIES
# =============================================================================


def some(value: T) -> Maybe[T]:
    """A populated Maybe. Accepts any value, including ``None``."""
    return Some(value)


def none() -> Maybe[Any]:
    """The empty Maybe."""
    return _NOTHING


def from_optional(value: T | None) -> Maybe[T]:
    """
    Bridge ``Optional[T]`` to Maybe.

    ``None`` becomes Nothing; anything else (including ``0`` and ``""``)
    becomes Some.

    Examples:
        >>> from_optional({"a": 1}.get("b"))
        Nothing()
    """
    if value is None:
        return _NOTHING
    return Some(value)


def somes(maybes: Iterable[Maybe[T]]) -> Iterator[T]:
    """Lazily yield the values of the populated elements, in order."""
    for maybe in maybes:
        if maybe.has_value:
            yield maybe.value


__all__ = [
    # Types
    "Maybe",
    "Some",
    "Nothing",
    # Constructors
    "some",
    "none",
    "from_optional",
    # Sequences
    "somes",
]
