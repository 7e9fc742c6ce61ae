"""Tests for funspine.state module."""

import pytest

from funspine.errors import MissingArgumentError
from funspine.state import (
    State,
    StateResult,
    ap,
    from_result,
    get,
    join,
    modify,
    put,
    sequence,
)


def counter() -> State[int, int]:
    """Return the current count and increment it."""
    return State(lambda n: StateResult(n + 1, n))


class TestRunning:
    def test_run(self):
        assert counter().run(5) == StateResult(6, 5)

    def test_run_result_and_state(self):
        assert counter().run_result(5) == 5
        assert counter().run_state(5) == 6

    def test_deterministic(self):
        computation = counter().bind(lambda a: counter().map(lambda b: a + b))
        assert computation.run(1) == computation.run(1)

    def test_none_function_rejected(self):
        with pytest.raises(MissingArgumentError):
            State(None)


class TestConstructors:
    def test_from_result(self):
        assert from_result("x").run(3) == StateResult(3, "x")

    def test_get(self):
        assert get().run(3) == StateResult(3, 3)

    def test_put(self):
        assert put(10).run(3) == StateResult(10, None)

    def test_modify(self):
        assert modify(lambda s: s * 2).run(4) == StateResult(8, None)


class TestComposition:
    def test_map_passes_output_state(self):
        assert counter().map(str).run(0) == StateResult(1, "0")

    def test_map_both(self):
        swapped = counter().map_both(lambda r: StateResult(r.result, r.state))
        assert swapped.run(0) == StateResult(0, 1)

    def test_bind_threads_state(self):
        twice = counter().bind(lambda first: counter())
        assert twice.run(0) == StateResult(2, 1)

    def test_bind_with_selector(self):
        pair = counter().bind_with(lambda _: counter(), lambda a, b: (a, b))
        assert pair.run(10) == StateResult(12, (10, 11))

    def test_ap(self):
        fn_state = get().map(lambda s: lambda v: v + s)
        assert ap(fn_state, counter()).run(5) == StateResult(6, 10)

    def test_join(self):
        nested = from_result(counter())
        assert join(nested).run(0) == StateResult(1, 0)

    def test_sequence(self):
        assert sequence([counter(), counter(), counter()]).run(0) == StateResult(3, [0, 1, 2])

    def test_sequence_empty(self):
        assert sequence([]).run("s") == StateResult("s", [])

    def test_labelling(self):
        def label(name: str) -> State[int, str]:
            return get().bind(lambda n: put(n + 1).map(lambda _: f"{n}:{name}"))

        assert sequence([label("a"), label("b")]).run(0) == StateResult(2, ["0:a", "1:b"])
