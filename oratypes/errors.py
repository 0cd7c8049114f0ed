"""Exceptions raised when converting, parsing or handling Oracle values."""


class OracleTypeError(Exception):
    """Base class for every error raised by this package."""


class ParseOracleTypeError(OracleTypeError, ValueError):
    """Raised when text cannot be parsed as the requested Oracle type."""

    def __init__(self, typename):
        super().__init__(f"{typename} parse error")
        self.typename = typename


class OutOfRangeError(OracleTypeError, ValueError):
    """Raised when a value does not fit in the target type."""


class NoDataFoundError(OracleTypeError, LookupError):
    """Raised when a requested element or row does not exist."""


class InvalidOperationError(OracleTypeError):
    """Raised when an operation is not allowed on a value."""


class InternalError(OracleTypeError, RuntimeError):
    """Raised for unexpected internal conditions such as unknown type codes."""