"""funspine -- Functional-programming primitives for Python.

Manifesto:
    Absence, failure and alternatives are ordinary outcomes. Encoding them
    as ``None`` checks, scattered ``try``/``except`` blocks or ad-hoc tuples
    hides them from readers and type checkers alike. funspine gives each
    outcome a small immutable value type with a uniform vocabulary
    (``map``, ``bind``, ``filter``, ``fold``, ``get_or``) so they compose.

    - **Values, not sentinels:** Nothing, Failure and Left are real values
    - **Pattern matching:** Every sum type works with ``match``/``case``
    - **Explicit instances:** Typeclasses are arguments, not a registry
    - **Library-quiet:** Logging is never configured on import

Architecture::

    Layer 1 -- Errors & Ordering
        errors.py          Structured error hierarchy (FunSpineError + misuse errors)
        ordering.py        Ordering (LT / EQ / GT) and int conversions
        comparators.py     Comparator combinators (by, then, reverse, to_key)

    Layer 2 -- Algebraic Data Types
        maybe.py           Maybe[T] (Some / Nothing)
        either.py          Either[L, R] (Left / Right)
        tries.py           Try[T] (Success / Failure), the fault barrier
        state.py           State[S, A] computations

    Layer 3 -- Helpers
        sequences.py       Maybe-returning sequence access, unfold, NonEmpty
        functions.py       identity, const, compose, pipe, curry, pair maps
        typeclasses/       Monoid, Num, Bounded, Enum, Const
        tasks.py           asyncio combinators (map_task, try_result, ...)

    Layer 4 -- Cross-Cutting Concerns
        logging.py         Structured logging (structlog)
        settings.py        FunSpineSettings (pydantic-settings)

Examples:
    >>> from funspine import some, try_from, partition_eithers, left, right
    >>> some(2).map(lambda x: x + 1).get_or(0)
    3
    >>> try_from(lambda: 1 / 0).recover(lambda e: float("inf"))
    Success(inf)

Tags:
    funspine, functional-programming, maybe, either, try, state, monoid

Doc-Types:
    package-overview, architecture-map, module-index
"""

from funspine.comparators import (
    Comparator,
    by,
    from_cmp,
    max_of,
    min_of,
    natural_order,
    reverse,
    then,
    to_cmp,
    to_key,
)
from funspine.either import Either, Left, Right, left, lefts, partition_eithers, right, rights
from funspine.errors import (
    ErrorCategory,
    ErrorContext,
    FunSpineError,
    InvalidStateError,
    MissingArgumentError,
    NoSuchElementError,
    OutOfRangeError,
    categorize_error,
)
from funspine.maybe import Maybe, Nothing, Some, from_optional, none, some, somes
from funspine.ordering import Ordering
from funspine.sequences import (
    NonEmpty,
    maybe_element_at,
    maybe_first,
    maybe_last,
    maybe_max,
    maybe_min,
    maybe_single,
    unfold,
)
from funspine.state import State, StateResult
from funspine.tries import (
    Failure,
    Success,
    Try,
    collect_tries,
    failed,
    partition_tries,
    success,
    try_create,
    try_from,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "FunSpineError",
    "InvalidStateError",
    "MissingArgumentError",
    "NoSuchElementError",
    "OutOfRangeError",
    "categorize_error",
    # Ordering
    "Ordering",
    "Comparator",
    "natural_order",
    "by",
    "then",
    "reverse",
    "from_cmp",
    "to_cmp",
    "to_key",
    "min_of",
    "max_of",
    # Maybe
    "Maybe",
    "Some",
    "Nothing",
    "some",
    "none",
    "from_optional",
    "somes",
    # Either
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "lefts",
    "rights",
    "partition_eithers",
    # Try
    "Try",
    "Success",
    "Failure",
    "success",
    "failed",
    "try_from",
    "try_create",
    "collect_tries",
    "partition_tries",
    # Sequences
    "maybe_element_at",
    "maybe_first",
    "maybe_last",
    "maybe_single",
    "maybe_max",
    "maybe_min",
    "unfold",
    "NonEmpty",
    # State
    "State",
    "StateResult",
]
