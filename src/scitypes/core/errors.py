"""Exceptions raised by the scitype engine.

`Unknown` is a normal classification result, not an error. Exceptions are
reserved for caller misuse and for extension points with no implementation.
"""


class ScitypeError(Exception):
    """Base class for all scitype errors."""


class ConfigurationError(ScitypeError, ValueError):
    """Raised when a scitype, table constructor or convention is misconfigured.

    Detected eagerly, before any data is inspected.
    """


class UsageError(ScitypeError, TypeError):
    """Raised when an operation is called on a value it does not support."""


class UnimplementedError(ScitypeError, NotImplementedError):
    """Raised when an extension point is invoked without an implementation."""
