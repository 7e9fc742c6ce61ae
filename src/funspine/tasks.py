"""
asyncio combinators.

Coroutine functions that transform the eventual result of an awaitable
without blocking: mapping, chaining, filtering, capturing failure as a Try
and recovering from errors. They add no scheduling of their own; every
combinator simply awaits its operand, so cancelling the caller cancels the
operand and there are no timeouts.

Architecture:
    ::

        awaitable ──> map_task(f) ──> bind_task(g) ──> filter_task(p)
                                                           │
                                    try_result ◄───────────┘
                                        │
                              Success(v) / Failure(exc)

Examples:
    >>> import asyncio
    >>> async def fetch() -> int:
    ...     return 21
    >>> asyncio.run(map_task(fetch(), lambda x: x * 2))
    42
    >>> async def broken() -> int:
    ...     raise ValueError("down")
    >>> asyncio.run(try_result(broken()))
    Failure(ValueError('down'))

Guardrails:
    ❌ DON'T: Catch CancelledError around these combinators to swallow it
    ✅ DO: Use try_result() when a cancelled operand should become data

Tags:
    asyncio, tasks, async, funspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

from funspine.errors import NoSuchElementError
from funspine.logging import get_logger
from funspine.maybe import Maybe
from funspine.settings import captured_failure_logging_enabled
from funspine.tries import Failure, Success, Try


logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


async def map_task(awaitable: Awaitable[T], f: Callable[[T], U]) -> U:
    """Await, then apply ``f`` to the result."""
    return f(await awaitable)


async def bind_task(
    awaitable: Awaitable[T],
    f: Callable[[T], Awaitable[U]],
    selector: Callable[[T, U], R] | None = None,
) -> U | R:
    """
    Await, feed the result to ``f`` and await its awaitable.

    With ``selector`` the two results are combined as ``selector(first,
    second)``; otherwise the second result is returned.
    """
    first = await awaitable
    second = await f(first)
    if selector is None:
        return second
    return selector(first, second)


async def filter_task(awaitable: Awaitable[T], predicate: Callable[[T], bool]) -> T:
    """Await and return the result if it satisfies ``predicate``."""
    result = await awaitable
    if predicate(result):
        return result
    raise NoSuchElementError(f"Predicate does not hold for {result}").with_context(
        operation="filter_task"
    )


async def try_result(awaitable: Awaitable[T]) -> Try[T]:
    """
    Await and capture the outcome as a Try.

    An exception raised by the operand becomes a Failure. Cancellation of the
    operand itself becomes ``Failure(CancelledError)``; cancellation of the
    task running ``try_result`` is re-raised.
    """
    try:
        return Success(await awaitable)
    except asyncio.CancelledError as e:
        current = asyncio.current_task()
        if current is not None and current.cancelling():
            raise
        _log_captured("try_result", e)
        return Failure(e)  # type: ignore[arg-type]
    except Exception as e:
        _log_captured("try_result", e)
        return Failure(e)


async def recover_task(awaitable: Awaitable[T], f: Callable[[Exception], Maybe[T]]) -> T:
    """
    Await, replacing a raised exception with the value ``f`` supplies.

    When ``f(error)`` is Nothing the original exception is re-raised.
    """
    try:
        return await awaitable
    except Exception as e:
        recovered = f(e)
        if not recovered.has_value:
            raise
        if captured_failure_logging_enabled():
            logger.debug("task_recovered", error_type=type(e).__name__, error=str(e))
        return recovered.value


async def lift(awaitable: Awaitable[Any]) -> None:
    """Await and discard the result."""
    await awaitable


def failed_task(error: BaseException) -> asyncio.Future[Any]:
    """A future on the running loop that has already failed with ``error``."""
    future = asyncio.get_running_loop().create_future()
    future.set_exception(error)
    return future


def canceled_task() -> asyncio.Future[Any]:
    """A future on the running loop that is already cancelled."""
    future = asyncio.get_running_loop().create_future()
    future.cancel()
    return future


def _log_captured(operation: str, error: BaseException) -> None:
    if captured_failure_logging_enabled():
        logger.debug("task_failure_captured", operation=operation, error_type=type(error).__name__)


__all__ = [
    "map_task",
    "bind_task",
    "filter_task",
    "try_result",
    "recover_task",
    "lift",
    "failed_task",
    "canceled_task",
]
