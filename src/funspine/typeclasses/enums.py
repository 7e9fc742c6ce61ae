"""
Enumerable types.

An enumeration maps values to consecutive integer positions and back, which
gives successor/predecessor and range generation for free. Concrete instances
only implement the two partial lookups ``maybe_from_enum`` and
``maybe_from_int``; ``DefaultEnum`` derives everything else.

Range semantics:
    - ``enum_from_to(a, b)`` is inclusive and raises when ``a`` sorts after ``b``
    - ``enum_from_then_to(a, b, c)`` steps by ``pos(b) - pos(a)`` up to ``c``;
      a negative step yields nothing, a zero step yields ``a`` once
    - Any value or position outside the enumeration raises OutOfRangeError

Examples:
    >>> BOOL_ENUM.succ(False)
    True
    >>> list(INT_ENUM.enum_from_then_to(1, 3, 9))
    [1, 3, 5, 7, 9]
    >>> import enum
    >>> class Color(enum.Enum):
    ...     RED = "r"
    ...     GREEN = "g"
    ...     BLUE = "b"
    >>> list(enum_of(Color).enum_from(Color.GREEN))
    [<Color.GREEN: 'g'>, <Color.BLUE: 'b'>]

Tags:
    enum, typeclass, ranges, funspine
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from funspine.errors import OutOfRangeError
from funspine.maybe import Maybe, none, some


T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)


class DefaultEnum(ABC, Generic[T]):
    """Enumeration derived from two partial position lookups."""

    @abstractmethod
    def maybe_from_enum(self, value: T) -> Maybe[int]:
        """Position of ``value``, or Nothing if it is not enumerated."""

    @abstractmethod
    def maybe_from_int(self, index: int) -> Maybe[T]:
        """Value at position ``index``, or Nothing if out of range."""

    def succ(self, value: T) -> T:
        return self.to_enum(self.from_enum(value) + 1)

    def pred(self, value: T) -> T:
        return self.to_enum(self.from_enum(value) - 1)

    def to_enum(self, index: int) -> T:
        return _get_or_out_of_range(self.maybe_from_int(index), f"No value at position {index}")

    def from_enum(self, value: T) -> int:
        return _get_or_out_of_range(self.maybe_from_enum(value), f"Value not enumerated: {value!r}")

    def enum_from(self, value: T) -> Iterator[T]:
        """``value`` and every value after it; empty if ``value`` is not enumerated."""
        position = self.maybe_from_enum(value)
        if not position.has_value:
            return
        yield value
        index = position.value + 1
        while True:
            following = self.maybe_from_int(index)
            if not following.has_value:
                return
            yield following.value
            index += 1

    def enum_from_to(self, first: T, last: T) -> Iterator[T]:
        return self._range(self.from_enum(first), self.from_enum(last), 1)

    def enum_from_then_to(self, first: T, second: T, last: T) -> Iterator[T]:
        first_index = self.from_enum(first)
        step = self.from_enum(second) - first_index
        return self._range(first_index, self.from_enum(last), step)

    def _range(self, start: int, stop: int, step: int) -> Iterator[T]:
        if start > stop:
            raise OutOfRangeError(f"Range [{start}, {stop}] must be non-empty")
        if step < 0:
            return iter(())
        if step == 0:
            return iter((self.to_enum(start),))
        return (self.to_enum(index) for index in range(start, stop + 1, step))


def _get_or_out_of_range(maybe: Maybe[T], message: str) -> T:
    if not maybe.has_value:
        raise OutOfRangeError(message)
    return maybe.value


# =============================================================================
# INSTANCES
# =============================================================================


class BoolEnum(DefaultEnum[bool]):
    def maybe_from_enum(self, value: bool) -> Maybe[int]:
        return some(1 if value else 0)

    def maybe_from_int(self, index: int) -> Maybe[bool]:
        if index == 0:
            return some(False)
        if index == 1:
            return some(True)
        return none()


class IntEnumeration(DefaultEnum[int]):
    """Every int is its own position; ranges are unbounded."""

    def maybe_from_enum(self, value: int) -> Maybe[int]:
        return some(value)

    def maybe_from_int(self, index: int) -> Maybe[int]:
        return some(index)


class EnumMembers(DefaultEnum[E]):
    """Members of an ``enum.Enum`` subclass in definition order."""

    def __init__(self, enum_type: type[E]):
        self._members = tuple(enum_type)
        self._positions = {member: index for index, member in enumerate(self._members)}

    def maybe_from_enum(self, value: E) -> Maybe[int]:
        if value in self._positions:
            return some(self._positions[value])
        return none()

    def maybe_from_int(self, index: int) -> Maybe[E]:
        if 0 <= index < len(self._members):
            return some(self._members[index])
        return none()


BOOL_ENUM: DefaultEnum[bool] = BoolEnum()
INT_ENUM: DefaultEnum[int] = IntEnumeration()


def enum_of(enum_type: type[E]) -> DefaultEnum[E]:
    """Enumeration over the members of ``enum_type``."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise OutOfRangeError(f"Cannot create an enumeration for non-enum type: {enum_type!r}")
    return EnumMembers(enum_type)


__all__ = [
    "DefaultEnum",
    "BoolEnum",
    "IntEnumeration",
    "EnumMembers",
    "BOOL_ENUM",
    "INT_ENUM",
    "enum_of",
]
