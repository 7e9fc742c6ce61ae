"""
Stateful computations.

A ``State[S, A]`` wraps a pure function ``S -> StateResult(state, result)``.
Composing states with ``map`` and ``bind`` threads the state value strictly
left to right without any mutable variable: the output state of one step is
the input state of the next.

Manifesto:
    - **Pure:** Running a computation twice on the same state gives equal output
    - **Explicit threading:** No hidden globals, the state is an argument
    - **Lazy:** Nothing runs until ``run`` is called

Architecture:
    ::

        s0 ──> first.run ──> (s1, a) ──> f(a).run ──> (s2, b) ──> ...
                               │                         │
                             map(g) sees a          bind_with(f, sel)
                                                    returns sel(a, b)

Examples:
    A counter that labels items:

    >>> def label(name: str) -> State[int, str]:
    ...     return get().bind(lambda n: put(n + 1).map(lambda _: f"{n}:{name}"))
    >>> sequence([label("a"), label("b")]).run(0)
    StateResult(state=2, result=['0:a', '1:b'])

Tags:
    state-monad, functional-programming, funspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, NamedTuple, TypeVar

from funspine.errors import require


S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class StateResult(NamedTuple, Generic[S, A]):
    """Output of running a state computation."""

    state: S
    result: A


class State(Generic[S, A]):
    """A computation that reads and produces a state value."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[S], StateResult[S, A]]):
        self._fn = require(fn, "fn")

    def run(self, state: S) -> StateResult[S, A]:
        return self._fn(state)

    def run_result(self, state: S) -> A:
        return self._fn(state).result

    def run_state(self, state: S) -> S:
        return self._fn(state).state

    def map(self, f: Callable[[A], B]) -> State[S, B]:
        """Transform the result; the output state passes through."""
        require(f, "f")

        def run(state: S) -> StateResult[S, B]:
            out = self._fn(state)
            return StateResult(out.state, f(out.result))

        return State(run)

    def map_both(self, f: Callable[[StateResult[S, A]], StateResult[S, B]]) -> State[S, B]:
        """Transform the whole (state, result) pair."""
        require(f, "f")
        return State(lambda state: f(self._fn(state)))

    def bind(self, f: Callable[[A], State[S, B]]) -> State[S, B]:
        """Feed the result into ``f`` and run its computation on the output state."""
        return self.bind_with(f, lambda _, b: b)

    def bind_with(self, f: Callable[[A], State[S, B]], selector: Callable[[A, B], C]) -> State[S, C]:
        """
        Like ``bind``, combining both results with ``selector``.

        The final state is the state produced by the second computation.
        """
        require(f, "f")
        require(selector, "selector")

        def run(state: S) -> StateResult[S, C]:
            first = self._fn(state)
            second = f(first.result).run(first.state)
            return StateResult(second.state, selector(first.result, second.result))

        return State(run)

    def __repr__(self) -> str:
        return f"State({self._fn!r})"


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def from_result(value: A) -> State[Any, A]:
    """Leave the state untouched and return ``value``."""
    return State(lambda state: StateResult(state, value))


def get() -> State[S, S]:
    """Return the current state as the result."""
    return State(lambda state: StateResult(state, state))


def put(new_state: S) -> State[S, None]:
    """Replace the state; the result is ``None``."""
    return State(lambda _: StateResult(new_state, None))


def modify(f: Callable[[S], S]) -> State[S, None]:
    require(f, "f")
    return get().bind(lambda state: put(f(state)))


# =============================================================================
# COMBINATORS
# =============================================================================


def ap(state_of_fn: State[S, Callable[[A], B]], state_of_value: State[S, A]) -> State[S, B]:
    """Run the function computation, then the value computation, and apply."""
    return state_of_fn.bind(lambda fn: state_of_value.map(fn))


def join(nested: State[S, State[S, A]]) -> State[S, A]:
    """Flatten a computation whose result is itself a computation."""
    return nested.bind(lambda inner: inner)


def sequence(states: Iterable[State[S, A]]) -> State[S, list[A]]:
    """Run computations in order, collecting their results."""
    computations = list(states)

    def run(state: S) -> StateResult[S, list[A]]:
        results: list[A] = []
        for computation in computations:
            state, result = computation.run(state)
            results.append(result)
        return StateResult(state, results)

    return State(run)


__all__ = [
    "State",
    "StateResult",
    "from_result",
    "get",
    "put",
    "modify",
    "ap",
    "join",
    "sequence",
]
