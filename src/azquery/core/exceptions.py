"""Custom exception hierarchy for azquery."""

from typing import Any


class AzqueryError(Exception):
    """Base exception for all azquery errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AzqueryError):
    """A query was constructed with invalid arguments."""

    pass


class SearchError(AzqueryError):
    """Search operation failed."""

    pass


class SearchServiceError(SearchError):
    """The search service answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class SearchServiceUnavailableError(SearchError):
    """The search service could not be reached."""

    pass
