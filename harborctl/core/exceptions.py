"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Both are local precondition failures, raised before any request is sent.
Transport failures surface as httpx.HTTPError.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when a configuration file is invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class SessionError(ApplicationError):
    """Raised when the persisted session token cannot be loaded."""

    def __init__(self, message: str = "Session not available") -> None:
        super().__init__(message, code="AUTH_SESSION_UNAVAILABLE")
