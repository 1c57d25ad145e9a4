"""Errors raised by application services."""


class ServiceError(Exception):
    """Base class for errors reported to API clients."""


class ValidationError(ServiceError):
    """Raised when a request field fails validation."""


class AuthError(ServiceError):
    """Raised when a write request carries no valid token."""


class NotFoundError(ServiceError):
    """Raised when a session id does not match any row."""
