"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure a command can hit is an ApplicationError; the top-level
dispatcher prints its message and exits non-zero.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class UsageError(ApplicationError):
    """Raised when the invocation is missing something only the user can supply."""

    def __init__(self, message: str = "Invalid usage") -> None:
        super().__init__(message, code="CLI_USAGE_ERROR")


class SpecReadError(ApplicationError):
    """Raised when a run spec cannot be read from a file or standard input."""

    def __init__(self, message: str = "Failed to read run spec") -> None:
        super().__init__(message, code="IO_READ_ERROR")


class FormEncodingError(ApplicationError):
    """Raised when building the multipart upload fails."""

    def __init__(self, message: str = "Failed to build multipart form") -> None:
        super().__init__(message, code="ENC_FORM_ERROR")


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")


class ConfigurationError(ApplicationError):
    """Raised when configuration files are missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")
