"""Error class hierarchy tests."""

import pytest

from pyduration._errors import (
    DeserializationError,
    DurationError,
    InvalidMagnitudeError,
    MaxInputLengthExceededError,
    ScanError,
    TrailingMagnitudeError,
    UnexpectedInputError,
    UnsupportedSourceTypeError,
)


class TestDurationErrorBase:
    def test_str_returns_user_message(self):
        err = DurationError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = DurationError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = DurationError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = DurationError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_value_error(self):
        assert isinstance(DurationError("test"), ValueError)


class TestErrorHierarchy:
    """Test that all subclasses are subclasses of DurationError."""

    ALL_ERROR_CLASSES = [
        UnexpectedInputError,
        InvalidMagnitudeError,
        TrailingMagnitudeError,
        MaxInputLengthExceededError,
        UnsupportedSourceTypeError,
        ScanError,
        DeserializationError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES, ids=lambda c: c.__name__)
    def test_is_subclass(self, cls):
        assert issubclass(cls, DurationError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES, ids=lambda c: c.__name__)
    def test_can_catch_as_base(self, cls):
        with pytest.raises(DurationError):
            raise cls("test message")

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES, ids=lambda c: c.__name__)
    def test_dual_messaging(self, cls):
        err = cls("user", "internal")
        assert str(err) == "user"
        assert err.internal() == "internal"


class TestPublicExports:
    def test_errors_exported(self):
        import pyduration

        assert pyduration.DurationError is DurationError
        assert pyduration.UnexpectedInputError is UnexpectedInputError
        assert pyduration.ScanError is ScanError

    def test_version(self):
        import pyduration

        assert isinstance(pyduration.__version__, str)
        assert pyduration.__version__
