"""
Structured error types for funspine.

Provides a small hierarchy of typed errors with category metadata so that the
few places where funspine raises (invalid state access, unmatched filters,
missing callables) are loud, local and easy to classify.

funspine models absence and failure as data (``Nothing``, ``Failure``,
``Left``). Exceptions are reserved for misuse: reading ``.value`` from an empty
``Maybe``, projecting the wrong side of an ``Either``, or handing ``None`` to
an operation that needs a function. Every such error extends FunSpineError and
carries:
- **Category:** What kind of misuse (state, lookup, argument, ...)
- **Context:** Structured metadata (operation, type name, custom fields)
- **Cause:** Chained underlying exception for root cause analysis

Manifesto:
    - **Absence is data, misuse is an error:** Only wrong-state access raises
    - **Builtin-compatible:** Each error also subclasses the closest builtin
      (RuntimeError, LookupError, TypeError) so plain ``except`` clauses work
    - **Rich Context:** Errors carry metadata for logging
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                       FunSpineError                          │
        │              (category, context, cause)                      │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  InvalidStateError   NoSuchElementError  MissingArgumentError│
        │  (STATE)             (LOOKUP)            (ARGUMENT)          │
        │  + RuntimeError      + LookupError       + TypeError         │
        │                                                              │
        │  OutOfRangeError (VALIDATION) + ValueError                   │
        └─────────────────────────────────────────────────────────────┘

Examples:
    Wrong-state access:

    >>> from funspine.maybe import none
    >>> none().value
    Traceback (most recent call last):
    ...
    funspine.errors.InvalidStateError: No value present in Nothing

    Adding context to an error:

    >>> error = NoSuchElementError("Predicate does not hold for 4")
    >>> error.with_context(operation="Try.filter")
    NoSuchElementError('Predicate does not hold for 4', category=LOOKUP)
    >>> error.context.operation
    'Try.filter'

Guardrails:
    ❌ DON'T: Catch InvalidStateError to detect absence
    ✅ DO: Check ``has_value`` / ``is_success`` / ``is_left`` first

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, funspine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    Examples:
        >>> error = FunSpineError("bad", category=ErrorCategory.STATE)
        >>> error.category == ErrorCategory.STATE
        True

    Attributes:
        STATE: Value accessed in the wrong variant (Nothing, Failure, Left/Right)
        LOOKUP: No element matched a predicate or index
        ARGUMENT: Required callable or argument missing
        VALIDATION: Caller supplied a value outside the accepted range
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    STATE = "STATE"               # Wrong-variant access
    LOOKUP = "LOOKUP"             # No matching element
    ARGUMENT = "ARGUMENT"         # Missing callable/argument
    VALIDATION = "VALIDATION"     # Out-of-range values
    INTERNAL = "INTERNAL"         # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"           # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields cover the metadata funspine itself knows about (which
    operation failed, which type was involved); anything else goes in
    ``metadata``. ``to_dict()`` serializes all non-None fields for logging.

    Examples:
        >>> ctx = ErrorContext(operation="Either.left", type_name="Right")
        >>> ctx.to_dict()
        {'operation': 'Either.left', 'type_name': 'Right'}

    Attributes:
        operation: Name of the operation that raised (e.g. "Maybe.value")
        type_name: Variant or type involved (e.g. "Nothing")
        argument: Name of the offending argument, if any
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    type_name: str | None = None
    argument: str | None = None

    # Additional metadata
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "type_name", "argument"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class FunSpineError(Exception):
    """
    Base exception for all funspine errors.

    Subclasses set ``default_category`` to classify themselves; callers may
    override it per instance.

    Examples:
        >>> err = FunSpineError("boom", cause=ValueError("root"))
        >>> err.to_dict()["cause"]
        'root'

    Guardrails:
        ❌ DON'T: Forget to chain the original exception
        ✅ DO: Always pass cause= when wrapping exceptions
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> FunSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise InvalidStateError("No value").with_context(
                operation="Maybe.value",
                type_name="Nothing",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# MISUSE ERRORS
# =============================================================================


class InvalidStateError(FunSpineError, RuntimeError):
    """
    A value was read from a variant that does not hold one.

    Raised by ``Nothing.value``, ``Left.right``, ``Right.left`` and returned
    (not raised) by ``Success.failed_value``.
    """

    default_category = ErrorCategory.STATE


class NoSuchElementError(FunSpineError, LookupError):
    """No element satisfied a predicate or lookup."""

    default_category = ErrorCategory.LOOKUP


class MissingArgumentError(FunSpineError, TypeError):
    """A required argument, usually a callable, was ``None``."""

    default_category = ErrorCategory.ARGUMENT

    def __init__(self, argument: str, message: str | None = None):
        super().__init__(
            message or f"Argument must not be None: {argument}",
            context=ErrorContext(argument=argument),
        )
        self.argument = argument


class OutOfRangeError(FunSpineError, ValueError):
    """A value has no position, successor or predecessor in its enumeration."""

    default_category = ErrorCategory.VALIDATION


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def require(value: Any, argument: str) -> Any:
    """Return ``value`` or raise MissingArgumentError when it is None."""
    if value is None:
        raise MissingArgumentError(argument)
    return value


def categorize_error(error: BaseException) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, FunSpineError):
        return error.category
    if isinstance(error, LookupError):
        return ErrorCategory.LOOKUP
    if isinstance(error, TypeError):
        return ErrorCategory.ARGUMENT
    if isinstance(error, ValueError):
        return ErrorCategory.VALIDATION
    return ErrorCategory.UNKNOWN


__all__ = [
    # Category enum
    "ErrorCategory",
    # Context
    "ErrorContext",
    # Base
    "FunSpineError",
    # Misuse
    "InvalidStateError",
    "NoSuchElementError",
    "MissingArgumentError",
    "OutOfRangeError",
    # Utilities
    "require",
    "categorize_error",
]
