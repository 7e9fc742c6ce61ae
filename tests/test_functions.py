"""Tests for funspine.functions module."""

import pytest

from funspine.errors import MissingArgumentError
from funspine.functions import (
    compose,
    const,
    curry,
    identity,
    map_both,
    map_first,
    map_second,
    pipe,
    uncurry,
)


def inc(x):
    return x + 1


def double(x):
    return x * 2


class TestBasics:
    def test_identity(self):
        sentinel = object()
        assert identity(sentinel) is sentinel

    def test_const(self):
        assert const(7)("ignored") == 7


class TestComposition:
    def test_compose_applies_right_to_left(self):
        assert compose(inc, double)(5) == 11

    def test_pipe_applies_left_to_right(self):
        assert pipe(inc, double)(5) == 12

    def test_empty_is_identity(self):
        assert compose()(3) == 3
        assert pipe()(3) == 3

    def test_three_functions(self):
        assert compose(str, inc, double)(4) == "9"


class TestCurrying:
    def test_curry(self):
        assert curry(lambda a, b: a - b)(10)(3) == 7

    def test_uncurry(self):
        assert uncurry(lambda a: lambda b: a - b)(10, 3) == 7

    def test_round_trip(self):
        def subtract(a, b):
            return a - b

        assert uncurry(curry(subtract))(9, 4) == subtract(9, 4)

    def test_none_rejected(self):
        with pytest.raises(MissingArgumentError):
            curry(None)


class TestPairs:
    def test_map_first(self):
        assert map_first((1, "a"), inc) == (2, "a")

    def test_map_second(self):
        assert map_second((1, "a"), str.upper) == (1, "A")

    def test_map_both(self):
        assert map_both((1, "a"), inc, str.upper) == (2, "A")
