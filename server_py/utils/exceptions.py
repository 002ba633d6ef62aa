"""Custom exceptions for the application."""
from typing import Any, Optional


class RequirementsGenException(Exception):
    """Base exception for the requirements generator."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class ConfigurationError(RequirementsGenException):
    """Required configuration is missing or invalid."""
    pass


class UpstreamServiceError(RequirementsGenException):
    """The completion service answered with a non-success status.

    ``body`` keeps the raw upstream response text so it can be relayed to the
    caller verbatim.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Completion service returned {status_code}",
            details=body,
        )
