"""Custom exceptions for Radiacode integration."""


class RadiacodeException(Exception):
    """Base exception for Radiacode integration."""

    pass


class UninitializedException(RadiacodeException):
    """Raised when a fetch is attempted without a configured server address."""

    pass


class ApiException(RadiacodeException):
    """Exception for API-related errors."""

    pass


class ParseException(ApiException):
    """Exception for response body parsing errors."""

    pass
