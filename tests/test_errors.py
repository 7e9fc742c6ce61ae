"""Tests for funspine.errors module."""

import pytest

from funspine.errors import (
    ErrorCategory,
    ErrorContext,
    FunSpineError,
    InvalidStateError,
    MissingArgumentError,
    NoSuchElementError,
    OutOfRangeError,
    categorize_error,
    require,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_to_dict_excludes_none(self):
        ctx = ErrorContext(operation="Maybe.value")
        assert ctx.to_dict() == {"operation": "Maybe.value"}

    def test_metadata_is_flattened(self):
        ctx = ErrorContext(type_name="Nothing", metadata={"attempt": 2})
        assert ctx.to_dict() == {"type_name": "Nothing", "attempt": 2}


class TestFunSpineError:
    """Test base error behaviour."""

    def test_default_category_is_internal(self):
        err = FunSpineError("boom")
        assert err.category == ErrorCategory.INTERNAL
        assert str(err) == "boom"

    def test_category_override(self):
        err = FunSpineError("boom", category=ErrorCategory.VALIDATION)
        assert err.category == ErrorCategory.VALIDATION

    def test_cause_is_chained(self):
        root = ValueError("root")
        err = FunSpineError("wrapped", cause=root)
        assert err.__cause__ is root
        assert err.to_dict()["cause"] == "root"

    def test_with_context_sets_fields_and_metadata(self):
        err = InvalidStateError("no value").with_context(
            operation="Maybe.value", type_name="Nothing", hint="check has_value"
        )
        assert err.context.operation == "Maybe.value"
        assert err.context.type_name == "Nothing"
        assert err.context.metadata == {"hint": "check has_value"}

    def test_with_context_returns_same_instance(self):
        err = NoSuchElementError("missing")
        assert err.with_context(operation="x") is err

    def test_to_dict(self):
        err = NoSuchElementError("missing").with_context(operation="Try.filter")
        assert err.to_dict() == {
            "error_type": "NoSuchElementError",
            "message": "missing",
            "category": "LOOKUP",
            "context": {"operation": "Try.filter"},
        }

    def test_repr(self):
        assert repr(InvalidStateError("x")) == "InvalidStateError('x', category=STATE)"


class TestMisuseErrors:
    """Each misuse error belongs to a builtin family."""

    def test_invalid_state_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            raise InvalidStateError("bad")

    def test_no_such_element_is_lookup_error(self):
        with pytest.raises(LookupError):
            raise NoSuchElementError("bad")

    def test_missing_argument_is_type_error(self):
        err = MissingArgumentError("predicate")
        assert isinstance(err, TypeError)
        assert err.argument == "predicate"
        assert err.context.argument == "predicate"
        assert str(err) == "Argument must not be None: predicate"
        assert err.category == ErrorCategory.ARGUMENT

    def test_missing_argument_custom_message(self):
        assert str(MissingArgumentError("f", "f is required")) == "f is required"

    def test_out_of_range_is_value_error(self):
        err = OutOfRangeError("no position 7")
        assert isinstance(err, ValueError)
        assert err.category == ErrorCategory.VALIDATION


class TestRequire:
    def test_returns_value(self):
        f = len
        assert require(f, "f") is f

    def test_falsy_values_pass(self):
        assert require(0, "n") == 0

    def test_none_raises(self):
        with pytest.raises(MissingArgumentError, match="comparator"):
            require(None, "comparator")


class TestCategorizeError:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (InvalidStateError("x"), ErrorCategory.STATE),
            (KeyError("x"), ErrorCategory.LOOKUP),
            (TypeError("x"), ErrorCategory.ARGUMENT),
            (ValueError("x"), ErrorCategory.VALIDATION),
            (ZeroDivisionError("x"), ErrorCategory.UNKNOWN),
        ],
    )
    def test_categories(self, error, expected):
        assert categorize_error(error) == expected
