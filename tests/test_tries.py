"""Tests for funspine.tries module."""

import traceback

import pytest
from structlog.testing import capture_logs

from funspine.either import Left, Right
from funspine.errors import InvalidStateError, MissingArgumentError, NoSuchElementError
from funspine.maybe import Nothing, Some
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


class TestSuccess:
    """Test Success class."""

    def test_create(self):
        result = success(42)
        assert result.is_success is True
        assert result.is_failure is False
        assert result.value == 42

    def test_failed_value_is_fresh_error(self):
        result = success(1)
        first = result.failed_value
        assert isinstance(first, InvalidStateError)
        assert str(first) == "No exception for Success"
        assert result.failed_value is not first

    def test_failed(self):
        assert isinstance(success(1).failed.value, InvalidStateError)

    def test_map(self):
        assert success(5).map(lambda x: x * 2) == Success(10)

    def test_map_captures_errors(self):
        result = success(1).map(lambda x: x / 0)
        assert isinstance(result.error, ZeroDivisionError)

    def test_bind(self):
        assert success(4).bind(lambda x: success(x + 1)) == Success(5)

    def test_bind_captures_errors(self):
        def boom(x):
            raise KeyError(x)

        assert isinstance(success(1).bind(boom).error, KeyError)

    def test_bind_none_function(self):
        result = success(1).bind(None)
        assert isinstance(result.error, MissingArgumentError)

    def test_bind_none_result(self):
        result = success(1).bind(lambda x: None)
        assert isinstance(result.error, MissingArgumentError)

    def test_filter_pass(self):
        result = success(4)
        assert result.filter(lambda x: x > 2) is result

    def test_filter_fail(self):
        result = success(4).filter(lambda x: x > 10)
        assert isinstance(result.error, NoSuchElementError)
        assert str(result.error) == "Predicate does not hold for 4"

    def test_filter_predicate_raises(self):
        result = success("x").filter(lambda x: int(x) > 0)
        assert isinstance(result.error, ValueError)

    def test_filter_none_predicate(self):
        assert isinstance(success(1).filter(None).error, MissingArgumentError)

    def test_recover_is_noop(self):
        result = success(1)
        assert result.recover(lambda e: 0) is result
        assert result.recover_with(lambda e: success(0)) is result

    def test_transform_calls_success_branch(self):
        calls = []
        result = success(2).transform(
            lambda v: success(v * 10),
            lambda e: calls.append(e) or success(0),
        )
        assert result == Success(20)
        assert calls == []

    def test_transform_captures_errors(self):
        result = success(2).transform(lambda v: 1 / 0, lambda e: success(0))
        assert isinstance(result.error, ZeroDivisionError)

    def test_extraction(self):
        assert success(1).get_or(9) == 1
        assert success(1).get_or_else(lambda: 9) == 1
        assert success(1).or_else(success(2)) == Success(1)
        assert success(1).or_else_get(lambda: success(2)) == Success(1)

    def test_conversions(self):
        assert success(1).to_maybe() == Some(1)
        assert success(1).to_either() == Right(1)

    def test_iteration(self):
        assert list(success(3)) == [3]


class TestFailure:
    """Test Failure class."""

    def test_create(self):
        error = ValueError("bad")
        result = failed(error)
        assert result.is_failure is True
        assert result.error is error
        assert result.failed_value is error

    def test_value_reraises(self):
        with pytest.raises(ValueError, match="bad"):
            failed(ValueError("bad")).value

    def test_value_does_not_grow_traceback(self):
        result = try_from(lambda: 1 / 0)
        depths = []
        for _ in range(3):
            with pytest.raises(ZeroDivisionError):
                result.value
            depths.append(len(traceback.extract_tb(result.error.__traceback__)))
        assert depths[0] == depths[1] == depths[2]

    def test_value_keeps_original_traceback(self):
        result = try_from(lambda: 1 / 0)
        with pytest.raises(ZeroDivisionError) as info:
            result.value
        assert traceback.extract_tb(info.value.__traceback__)[-1].name == "<lambda>"

    def test_none_error(self):
        result = Failure(None)
        assert isinstance(result.error, MissingArgumentError)
        assert result.error.argument == "error"

    def test_failed(self):
        error = ValueError("bad")
        assert failed(error).failed == Success(error)

    def test_map_bind_filter_pass_through(self):
        error = ValueError("bad")
        result = failed(error)
        assert result.map(lambda x: x * 2) is result
        assert result.bind(lambda x: success(x)) is result
        assert result.filter(lambda x: True) is result
        assert result.map(lambda x: x).error is error

    def test_recover(self):
        assert failed(ValueError("x")).recover(lambda e: str(e)) == Success("x")

    def test_recover_raises(self):
        def reraise(e):
            raise RuntimeError("still broken")

        result = failed(ValueError("x")).recover(reraise)
        assert isinstance(result.error, RuntimeError)

    def test_recover_with(self):
        assert failed(ValueError("x")).recover_with(lambda e: success(1)) == Success(1)

    def test_recover_with_does_not_chain(self):
        def reraise(e):
            raise RuntimeError("other")

        result = failed(ValueError("x")).recover_with(reraise)
        assert isinstance(result.error, RuntimeError)
        assert result.error.__cause__ is None

    def test_transform_calls_failure_branch(self):
        result = failed(ValueError("x")).transform(
            lambda v: success("ok"),
            lambda e: success(f"recovered {e}"),
        )
        assert result == Success("recovered x")

    def test_extraction(self):
        result = failed(ValueError("x"))
        assert result.get_or(9) == 9
        assert result.get_or_else(lambda: 10) == 10
        assert result.or_else(success(2)) == Success(2)
        assert result.or_else_get(lambda: success(3)) == Success(3)

    def test_or_else_get_captures_errors(self):
        result = failed(ValueError("x")).or_else_get(lambda: 1 / 0)
        assert isinstance(result.error, ZeroDivisionError)

    def test_conversions(self):
        error = ValueError("x")
        assert failed(error).to_maybe() == Nothing()
        assert failed(error).to_either() == Left(error)

    def test_iteration(self):
        assert list(failed(ValueError("x"))) == []

    def test_pattern_matching(self):
        def describe(attempt: Try[int]) -> str:
            match attempt:
                case Success(value):
                    return f"ok {value}"
                case Failure(error):
                    return f"failed {error}"

        assert describe(success(1)) == "ok 1"
        assert describe(failed(ValueError("x"))) == "failed x"


class TestConstructors:
    """Test try_from and try_create."""

    def test_try_from_success(self):
        assert try_from(lambda: int("42")) == Success(42)

    def test_try_from_failure(self):
        assert isinstance(try_from(lambda: int("x")).error, ValueError)

    def test_try_from_none(self):
        assert isinstance(try_from(None).error, MissingArgumentError)

    def test_try_create_passes_try_through(self):
        inner = failed(KeyError("k"))
        assert try_create(lambda: inner) is inner

    def test_try_create_none(self):
        assert isinstance(try_create(None).error, MissingArgumentError)

    def test_base_exceptions_propagate(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            try_from(interrupt)


class TestBatchUtilities:
    def test_collect_all_success(self):
        assert collect_tries([success(1), success(2)]) == Success([1, 2])

    def test_collect_first_failure_wins(self):
        first = ValueError("a")
        result = collect_tries([success(1), failed(first), failed(ValueError("b"))])
        assert result.error is first

    def test_collect_stops_reading(self):
        def source():
            yield failed(ValueError("a"))
            raise AssertionError("read too far")

        assert collect_tries(source()).is_failure

    def test_collect_empty(self):
        assert collect_tries([]) == Success([])

    def test_partition(self):
        error = ValueError("x")
        assert partition_tries([success(1), failed(error), success(2)]) == ([1, 2], [error])


class TestCapturedFailureLogging:
    """Captured exceptions are logged only when enabled."""

    def test_silent_by_default(self):
        with capture_logs() as logs:
            try_from(lambda: 1 / 0)
        assert logs == []

    def test_logged_when_enabled(self, capture_failures):
        with capture_logs() as logs:
            try_from(lambda: 1 / 0)
        assert logs[0]["event"] == "try_failure_captured"
        assert logs[0]["error_type"] == "ZeroDivisionError"
        assert logs[0]["log_level"] == "debug"

    @pytest.mark.parametrize(
        "name, value",
        [("FUNSPINE_LOG_LEVEL", "verbose"), ("FUNSPINE_LOG_JSON", "maybe")],
    )
    def test_invalid_settings_do_not_escape(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        assert try_from(lambda: 1 / 0).is_failure
        assert success(1).map(lambda x: x / 0).is_failure
        assert failed(ValueError("x")).recover(lambda e: 0) == Success(0)
