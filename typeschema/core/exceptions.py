"""Core exception hierarchy for typeschema.

Every error raised while describing a type or building its schema inherits
from TypeSchemaError, so callers can catch the whole family at once. A build
raises exactly one of these and never returns a partial schema.
"""

from __future__ import annotations

# ============================================================================
# Base Exception
# ============================================================================


class TypeSchemaError(Exception):
    """Base exception for all typeschema errors.

    Catch this to handle every structural failure of a schema build.
    """

    pass


# ============================================================================
# Schema Build Errors
# ============================================================================


class UnsupportedTypeError(TypeSchemaError):
    """Raised when a walked type has no schema mapping rule.

    Examples
    --------
    Example usage::

        raise UnsupportedTypeError("callable", "Callable[[int], str]")
    """

    def __init__(self, kind: str, type_name: str) -> None:
        """Initialize unsupported type error.

        Args
        ----
            kind: Kind category of the offending type (e.g. "callable", "union")
            type_name: Name of the type the kind originates from
        """
        super().__init__(f"unsupported type {kind} from {type_name}")
        self.kind = kind
        self.type_name = type_name


class MalformedConstraintError(TypeSchemaError):
    """Raised when a numeric bound on a field is not an integer.

    Examples
    --------
    Example usage::

        raise MalformedConstraintError("User", "age", "minimum", "abc")
    """

    def __init__(self, record: str, field: str, bound: str, text: str) -> None:
        """Initialize malformed constraint error.

        Args
        ----
            record: Name of the record type declaring the field
            field: Declared identifier of the field
            bound: Which bound failed ("minimum" or "maximum")
            text: The offending bound text
        """
        super().__init__(
            f"Malformed {bound} on field '{record}.{field}': {text!r} is not an integer"
        )
        self.record = record
        self.field = field
        self.bound = bound
        self.text = text


class MalformedExampleError(TypeSchemaError):
    """Raised when an example on a non-string field is not a JSON literal.

    Examples
    --------
    Example usage::

        raise MalformedExampleError("User", "tags", "[1, 2", "unexpected end of data")
    """

    def __init__(self, record: str, field: str, text: str, reason: str = "") -> None:
        """Initialize malformed example error.

        Args
        ----
            record: Name of the record type declaring the field
            field: Declared identifier of the field
            text: The offending example text
            reason: Parser message describing the failure (optional)
        """
        msg = f"Malformed example on field '{record}.{field}': {text!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.record = record
        self.field = field
        self.text = text
        self.reason = reason


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(TypeSchemaError):
    """Raised when configuration is invalid.

    Examples
    --------
    Example usage::

        raise ConfigurationError("schema", "enum_separator must not be empty")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the configuration section that is invalid
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


__all__ = [
    "TypeSchemaError",
    "UnsupportedTypeError",
    "MalformedConstraintError",
    "MalformedExampleError",
    "ConfigurationError",
]
