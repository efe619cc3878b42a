"""Error class hierarchy tests."""

import pytest

from pynptrange._errors import (
    InvalidFieldError,
    InvalidStartFieldError,
    InvalidStopFieldError,
    InvalidTotalFieldError,
    MalformedTimeTokenError,
    MissingAssignmentError,
    MissingNptTokenError,
    NptParseError,
)


class TestNptParseErrorBase:
    def test_str_returns_user_message(self):
        err = NptParseError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = NptParseError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = NptParseError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = MalformedTimeTokenError("bad time")
        err = InvalidStartFieldError("user msg", wrapped=cause)
        assert err.wrapped is cause


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        MissingNptTokenError,
        MissingAssignmentError,
        InvalidFieldError,
        InvalidStartFieldError,
        InvalidStopFieldError,
        InvalidTotalFieldError,
        MalformedTimeTokenError,
    ]

    FIELD_ERROR_CLASSES = [
        InvalidStartFieldError,
        InvalidStopFieldError,
        InvalidTotalFieldError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_npt_parse_error(self, cls):
        assert issubclass(cls, NptParseError)

    @pytest.mark.parametrize("cls", FIELD_ERROR_CLASSES)
    def test_field_errors(self, cls):
        assert issubclass(cls, InvalidFieldError)

    def test_malformed_time_is_not_a_field_error(self):
        assert not issubclass(MalformedTimeTokenError, InvalidFieldError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"
