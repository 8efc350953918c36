"""
Custom exceptions for permission resolution.

The HTTP client and configuration layer raise these exceptions; the
permission store absorbs them and degrades to the read-only fallback matrix.
"""


class PermissionsError(Exception):
    """Base exception for all permission errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PermissionFetchError(PermissionsError):
    """Raised when the permissions endpoint cannot be reached or answers non-2xx."""

    def __init__(self, url: str, status: int | None = None, cause: Exception | None = None):
        details: dict = {"url": url}
        if status is not None:
            details["status"] = status
        if cause:
            details["cause"] = str(cause)

        if status is not None:
            message = f"HTTP error! status: {status}"
        elif cause:
            message = f"Failed to fetch permissions: {cause}"
        else:
            message = "Failed to fetch permissions"
        super().__init__(message, details)
        self.url = url
        self.status = status
        self.cause = cause


class MalformedPermissionsError(PermissionsError):
    """Raised when a permissions payload does not match the matrix schema."""

    def __init__(self, message: str, field: str | None = None):
        details = {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class ConfigurationError(PermissionsError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, field: str | None = None):
        details = {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field
