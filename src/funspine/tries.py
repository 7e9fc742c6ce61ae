"""
Fallible computations as values.

Provides a typed Try[T] sum type: Success[T] holds a computed value, Failure[T]
holds the exception that prevented it. Unlike Maybe and Either, Try is a fault
barrier: every combinator that runs caller code (map, bind, filter, recover,
recover_with, transform, or_else_get) catches ``Exception`` raised by that code
and returns it as a Failure instead of letting it propagate.

Manifesto:
    - **Failure is a value:** Errors flow through chains instead of unwinding
    - **Fail-fast discovery:** Reading ``.value`` on Failure re-raises loudly
    - **Only Exception is captured:** KeyboardInterrupt, SystemExit and
      asyncio.CancelledError always propagate
    - **Batch-friendly:** Collect many Trys and handle errors at the end with
      collect_tries() or partition_tries()

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                        Try[T]                                │
        │                     (Type Alias)                             │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │   Success[T]    │   Failure[T]    │     Utilities           │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • error: Exc    │ • try_from()            │
        │ • map()         │ • recover()     │ • try_create()          │
        │ • bind()        │ • recover_with()│ • collect_tries()       │
        │ • filter()      │ • or_else()     │ • partition_tries()     │
        └─────────────────┴─────────────────┴─────────────────────────┘

        caller function raises ──> Failure(exc)   (debug-logged when
        caller function returns ─> Success(value)  log_captured_failures)

Features:
    - **Pattern matching:** ``case Success(v)`` / ``case Failure(e)``
    - **Functional combinators:** map, bind, filter, transform
    - **Recovery:** recover, recover_with, or_else, or_else_get
    - **Conversions:** to_maybe, to_either
    - **Batch collection:** collect_tries, partition_tries

Examples:
    >>> import json
    >>> try_from(lambda: json.loads('{"a": 1}')).map(lambda d: d["a"])
    Success(1)
    >>> try_from(lambda: json.loads("oops")).is_failure
    True
    >>> success(4).filter(lambda x: x > 10).failed_value
    NoSuchElementError('Predicate does not hold for 4', category=LOOKUP)
    >>> failed(ValueError("x")).recover(lambda e: 0)
    Success(0)

Performance:
    - **O(1)** for all operations except collect_*/partition_* which are O(n)
    - **Memory:** Success/Failure are frozen dataclasses with __slots__
    - **No overhead for failure path:** map/bind on Failure return self

Guardrails:
    ❌ DON'T: Read ``.value`` without checking is_success
    ✅ DO: Use get_or(), pattern matching or recover()

    ❌ DON'T: Catch BaseException in functions passed to Try
    ✅ DO: Let cancellation and interrupts propagate

Tags:
    try, error-handling, functional-programming, monadic, fault-barrier,
    batch-processing, funspine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from funspine.either import Either, Left, Right
from funspine.errors import InvalidStateError, MissingArgumentError, NoSuchElementError
from funspine.logging import get_logger
from funspine.maybe import Maybe, Some, none
from funspine.settings import captured_failure_logging_enabled


logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def _capture(error: Exception, operation: str) -> Failure[Any]:
    """Wrap a caught exception, logging it when configured to."""
    if captured_failure_logging_enabled():
        logger.debug(
            "try_failure_captured",
            operation=operation,
            error_type=type(error).__name__,
            error=str(error),
        )
    return Failure(error)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """
    A computation that produced a value.

    Success[T] is immutable (frozen dataclass) and hashable when its value is.
    Operations that run caller code on the value return a Failure if that
    code raises.

    Examples:
        >>> Success(10).map(lambda x: x * 2)
        Success(20)
        >>> Success(10).map(lambda x: x / 0).is_failure
        True
        >>> Success(1).failed_value
        InvalidStateError('No exception for Success', category=STATE)

    Guardrails:
        ❌ DON'T: Expect ``failed_value`` to raise on Success
        ✅ DO: Treat it as returning a fresh InvalidStateError
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def failed_value(self) -> Exception:
        """A fresh InvalidStateError; a Success has no exception."""
        return InvalidStateError("No exception for Success").with_context(
            operation="Try.failed_value", type_name="Success"
        )

    @property
    def failed(self) -> Try[Exception]:
        """Success holding ``failed_value``."""
        return Success(self.failed_value)

    def recover(self, f: Callable[[Exception], T]) -> Try[T]:
        return self

    def recover_with(self, f: Callable[[Exception], Try[T]]) -> Try[T]:
        return self

    def transform(
        self,
        on_success: Callable[[T], Try[U]],
        on_failure: Callable[[Exception], Try[U]],
    ) -> Try[U]:
        """Build a new Try from the value; ``on_failure`` is never called."""
        return try_create(lambda: on_success(self.value))

    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Transform the value, capturing anything ``f`` raises."""
        return try_from(lambda: f(self.value))

    def bind(self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Chain to another Try-returning function."""
        if f is None:
            return Failure(MissingArgumentError("f"))
        return try_create(lambda: f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        """
        Keep this Success only if ``predicate`` holds.

        A false predicate gives a Failure holding a NoSuchElementError that
        names the value.
        """
        if predicate is None:
            return Failure(MissingArgumentError("predicate"))
        try:
            if predicate(self.value):
                return self
        except Exception as e:
            return _capture(e, "Try.filter")
        return Failure(
            NoSuchElementError(f"Predicate does not hold for {self.value}").with_context(
                operation="Try.filter"
            )
        )

    def get_or(self, default: T) -> T:
        return self.value

    def get_or_else(self, default_fn: Callable[[], T]) -> T:
        return self.value

    def or_else(self, alternative: Try[T]) -> Try[T]:
        return self

    def or_else_get(self, alternative_fn: Callable[[], Try[T]]) -> Try[T]:
        return self

    def to_maybe(self) -> Maybe[T]:
        return Some(self.value)

    def to_either(self) -> Either[Exception, T]:
        return Right(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Generic[T]):
    """
    A computation that raised.

    Failure[T] short-circuits map, bind and filter, returning itself so the
    identical error object flows to the end of a chain. ``Failure(None)``
    stores a MissingArgumentError instead of ``None``.

    Examples:
        >>> err = Failure(ValueError("bad"))
        >>> err.map(lambda x: x * 2) is err
        True
        >>> err.get_or(0)
        0
        >>> Failure(None).error
        MissingArgumentError('Argument must not be None: error', category=ARGUMENT)
    """

    error: Exception
    _traceback: TracebackType | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.error is None:
            object.__setattr__(self, "error", MissingArgumentError("error"))
        object.__setattr__(self, "_traceback", self.error.__traceback__)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> T:
        """Re-raise the captured error.

        The traceback is reset to the one captured at construction so repeated
        reads do not grow it.
        """
        raise self.error.with_traceback(self._traceback)

    @property
    def failed_value(self) -> Exception:
        return self.error

    @property
    def failed(self) -> Try[Exception]:
        """Success holding the captured error."""
        return Success(self.error)

    def recover(self, f: Callable[[Exception], T]) -> Try[T]:
        """Success with ``f(error)``, or Failure with whatever ``f`` raises."""
        return try_from(lambda: f(self.error))

    def recover_with(self, f: Callable[[Exception], Try[T]]) -> Try[T]:
        """The Try returned by ``f(error)``; a raised error is not chained to this one."""
        return try_create(lambda: f(self.error))

    def transform(
        self,
        on_success: Callable[[T], Try[U]],
        on_failure: Callable[[Exception], Try[U]],
    ) -> Try[U]:
        return try_create(lambda: on_failure(self.error))

    def map(self, f: Callable[[T], U]) -> Try[U]:
        return self  # type: ignore[return-value]

    def bind(self, f: Callable[[T], Try[U]]) -> Try[U]:
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        return self

    def get_or(self, default: T) -> T:
        return default

    def get_or_else(self, default_fn: Callable[[], T]) -> T:
        return default_fn()

    def or_else(self, alternative: Try[T]) -> Try[T]:
        return alternative

    def or_else_get(self, alternative_fn: Callable[[], Try[T]]) -> Try[T]:
        """The Try from ``alternative_fn``, capturing anything it raises."""
        return try_create(alternative_fn)

    def to_maybe(self) -> Maybe[T]:
        return none()

    def to_either(self) -> Either[Exception, T]:
        return Left(self.error)

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for Try
Try = Success[T] | Failure[T]


# =============================================================================
# TRY CONSTRUCTORS AND UTILITIES
# =============================================================================


def success(value: T) -> Try[T]:
    return Success(value)


def failed(error: Exception) -> Try[Any]:
    return Failure(error)


def try_from(f: Callable[[], T]) -> Try[T]:
    """
    Run a zero-argument function and wrap its result.

    This is the bridge between exception-raising code and Try. A return value
    becomes Success, an ``Exception`` becomes Failure. A ``None`` function is
    reported as a Failure holding MissingArgumentError.

    Architecture:
        ::

            ┌─────────────┐         ┌─────────────────┐
            │ f() raises  │ ──────> │  Failure(exc)   │
            └─────────────┘         └─────────────────┘
            ┌─────────────┐         ┌─────────────────┐
            │ f() returns │ ──────> │  Success(value) │
            └─────────────┘         └─────────────────┘

    Examples:
        >>> try_from(lambda: int("42"))
        Success(42)
        >>> try_from(lambda: int("x")).failed_value
        ValueError("invalid literal for int() with base 10: 'x'")

    Guardrails:
        ❌ DON'T: Pass functions with arguments directly
        ✅ DO: Wrap in lambda: try_from(lambda: parse(row))
    """
    if f is None:
        return Failure(MissingArgumentError("f"))
    try:
        return Success(f())
    except Exception as e:
        return _capture(e, "try_from")


def try_create(f: Callable[[], Try[T]]) -> Try[T]:
    """
    Run a zero-argument function that itself returns a Try.

    The returned Try is passed through unchanged. A raised ``Exception``, a
    ``None`` function or a ``None`` result each become a Failure.
    """
    if f is None:
        return Failure(MissingArgumentError("f"))
    try:
        result = f()
    except Exception as e:
        return _capture(e, "try_create")
    if result is None:
        return Failure(MissingArgumentError("result", "Function returned None instead of a Try"))
    return result


def collect_tries(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """
    Collect Trys into a Try of list (fail-fast).

    Returns the first Failure encountered, without reading further, or a
    Success of every value in input order.

    Examples:
        >>> collect_tries([success(1), success(2)])
        Success([1, 2])
        >>> collect_tries([success(1), failed(ValueError("a")), failed(ValueError("b"))])
        Failure(ValueError('a'))
    """
    values: list[T] = []
    for attempt in tries:
        match attempt:
            case Success(value):
                values.append(value)
            case Failure():
                return attempt  # type: ignore[return-value]
    return Success(values)


def partition_tries(tries: Iterable[Try[T]]) -> tuple[list[T], list[Exception]]:
    """Split into ``(values, errors)`` in one pass, preserving order."""
    values: list[T] = []
    errors: list[Exception] = []
    for attempt in tries:
        match attempt:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors.append(error)
    return values, errors


__all__ = [
    # Types
    "Try",
    "Success",
    "Failure",
    # Constructors
    "success",
    "failed",
    "try_from",
    "try_create",
    # Batch utilities
    "collect_tries",
    "partition_tries",
]
