"""Tests for the exception hierarchy."""

import pytest

from typeschema.core.exceptions import (
    ConfigurationError,
    MalformedConstraintError,
    MalformedExampleError,
    TypeSchemaError,
    UnsupportedTypeError,
)


class TestExceptionHierarchy:
    """Test that every error belongs to the TypeSchemaError family."""

    @pytest.mark.parametrize(
        "error",
        [
            UnsupportedTypeError("callable", "Callable[[], None]"),
            MalformedConstraintError("User", "age", "minimum", "abc"),
            MalformedExampleError("User", "tags", "[1,"),
            ConfigurationError("schema", "bad"),
        ],
    )
    def test_base_class(self, error):
        """Test each error can be caught as TypeSchemaError."""
        with pytest.raises(TypeSchemaError):
            raise error


class TestMessages:
    """Test error messages and attributes."""

    def test_unsupported_type(self):
        """Test the unsupported type message names kind and origin."""
        error = UnsupportedTypeError("union", "int | str")
        assert str(error) == "unsupported type union from int | str"
        assert (error.kind, error.type_name) == ("union", "int | str")

    def test_malformed_constraint(self):
        """Test the malformed bound message names the field and bound."""
        error = MalformedConstraintError("User", "age", "maximum", "1e3")
        assert str(error) == "Malformed maximum on field 'User.age': '1e3' is not an integer"
        assert error.bound == "maximum"

    def test_malformed_example_with_reason(self):
        """Test the parser reason is appended when given."""
        error = MalformedExampleError("User", "tags", "[1,", "unexpected end")
        assert str(error) == "Malformed example on field 'User.tags': '[1,' (unexpected end)"

    def test_malformed_example_without_reason(self):
        """Test the message without a reason."""
        assert str(MalformedExampleError("User", "n", "x")).endswith("'x'")

    def test_configuration_error(self):
        """Test configuration errors name the section."""
        error = ConfigurationError("schema", "enum_separator must not be empty")
        assert "'schema'" in str(error)
        assert error.reason == "enum_separator must not be empty"
