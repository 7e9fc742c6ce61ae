"""Numeric typeclass: the arithmetic that Monoid sums and products rely on."""

from __future__ import annotations

from typing import Protocol, TypeVar


T = TypeVar("T")


class Num(Protocol[T]):
    """Ring-like arithmetic over ``T``."""

    @property
    def zero(self) -> T: ...

    @property
    def one(self) -> T: ...

    def plus(self, a: T, b: T) -> T: ...

    def mult(self, a: T, b: T) -> T: ...

    def negate(self, n: T) -> T: ...

    def abs(self, n: T) -> T: ...

    def signum(self, n: T) -> int: ...


class IntNum:
    """Num instance for ``int``."""

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def plus(self, a: int, b: int) -> int:
        return a + b

    def mult(self, a: int, b: int) -> int:
        return a * b

    def negate(self, n: int) -> int:
        return -n

    def abs(self, n: int) -> int:
        return abs(n)

    def signum(self, n: int) -> int:
        if n < 0:
            return -1
        if n > 0:
            return 1
        return 0


INT_NUM: Num[int] = IntNum()


__all__ = ["Num", "IntNum", "INT_NUM"]
