"""Tests for the exception hierarchy."""

import pytest

from pathbind.exceptions import (
    BindingError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidParameterError,
    MissingParameterError,
    NoSuchParameterError,
    NoSuchTypeError,
    NotFoundError,
    OperationError,
    PathbindError,
    ValidationError,
)


class TestPathbindError:
    """Test the base PathbindError class."""

    def test_basic_exception(self):
        """Test basic exception without context."""
        error = PathbindError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        """Test exception with context dictionary."""
        error = PathbindError("Failed", context={"path": "/file"})
        assert error.context == {"path": "/file"}
        assert error.details is error.context

    def test_details_takes_precedence(self):
        """Test that details parameter takes precedence over context."""
        error = PathbindError("Error", context={"key": "context"}, details={"key": "details"})
        assert error.context == {"key": "details"}


class TestSpecificErrors:
    """Test the errors raised by binder operations."""

    def test_invalid_argument_names_type(self):
        """Test that the offending Python type appears in the message."""
        error = InvalidArgumentError(object())
        assert "object" in str(error)
        assert error.context["argument_type"] == "object"

    def test_invalid_argument_is_type_error(self):
        """Test that InvalidArgumentError can be caught as TypeError."""
        with pytest.raises(TypeError):
            raise InvalidArgumentError(42)

    def test_missing_parameter(self):
        """Test MissingParameterError message and context."""
        error = MissingParameterError("locale", "translations")
        assert "locale" in str(error)
        assert "translations" in str(error)
        assert error.parameter == "locale"
        assert error.context == {"parameter": "locale", "type": "translations"}

    def test_no_such_parameter(self):
        """Test NoSuchParameterError message and context."""
        error = NoSuchParameterError("foo")
        assert str(error) == "No such parameter 'foo'"
        assert error.context["type"] is None

    def test_no_such_type(self):
        """Test NoSuchTypeError lists the defined types."""
        error = NoSuchTypeError("foo", ["type1", "type2"])
        assert "foo" in str(error)
        assert error.type_name == "foo"
        assert error.context["defined_types"] == ["type1", "type2"]

    def test_binding_error(self):
        """Test BindingError names the path."""
        error = BindingError("/foo", "type")
        assert "/foo" in str(error)
        assert error.path == "/foo"
        assert error.context == {"path": "/foo", "type": "type"}

    def test_binding_error_with_reason(self):
        """Test BindingError with a custom reason."""
        error = BindingError("/foo", reason="repository offline")
        assert str(error) == "Cannot bind '/foo': repository offline"

    @pytest.mark.parametrize(
        "error,base",
        [
            (InvalidArgumentError(1), ValidationError),
            (InvalidParameterError("bad"), ValidationError),
            (MissingParameterError("p"), ValidationError),
            (NoSuchParameterError("p"), NotFoundError),
            (NoSuchTypeError("t"), NotFoundError),
            (BindingError("/p"), OperationError),
            (ConfigurationError("bad"), PathbindError),
        ],
    )
    def test_hierarchy(self, error, base):
        """Test that every error derives from its category and the root."""
        assert isinstance(error, base)
        assert isinstance(error, PathbindError)
