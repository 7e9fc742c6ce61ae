"""Types with a least and a greatest value."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Generic, TypeVar

from funspine.errors import OutOfRangeError
from funspine.ordering import Ordering


T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)


@dataclass(frozen=True, slots=True)
class Bounded(Generic[T]):
    min_bound: T
    max_bound: T


BOOL_BOUNDED: Bounded[bool] = Bounded(False, True)
ORDERING_BOUNDED: Bounded[Ordering] = Bounded(Ordering.LT, Ordering.GT)
FLOAT_BOUNDED: Bounded[float] = Bounded(-sys.float_info.max, sys.float_info.max)
UNIT_BOUNDED: Bounded[None] = Bounded(None, None)


def bounded_enum(enum_type: type[E]) -> Bounded[E]:
    """First and last members of ``enum_type`` in definition order."""
    members = list(enum_type)
    if not members:
        raise OutOfRangeError(f"Enum has no members: {enum_type.__name__}")
    return Bounded(members[0], members[-1])


__all__ = [
    "Bounded",
    "BOOL_BOUNDED",
    "ORDERING_BOUNDED",
    "FLOAT_BOUNDED",
    "UNIT_BOUNDED",
    "bounded_enum",
]
