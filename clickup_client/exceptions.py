"""Custom exceptions for the ClickUp API client."""

from __future__ import annotations

from typing import Any


class ClickUpError(Exception):
    """Base exception for all ClickUp client errors."""


class ClickUpTransportError(ClickUpError):
    """Raised when a request fails at the network or HTTP layer.

    Transport errors are never retried or suppressed by the client; they
    reach the caller unchanged.
    """


class ClickUpNetworkError(ClickUpTransportError):
    """Raised when the API could not be reached (timeout, connection failure)."""

    def __init__(self, message: str, *, is_timeout: bool = False) -> None:
        """Initialise ClickUpNetworkError.

        :param message: Error message.
        :param is_timeout: Whether the failure was a request timeout.
        """
        super().__init__(message)
        self.is_timeout = is_timeout


class ClickUpApiError(ClickUpTransportError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: str | None = None,
        response_body: str | None = None,
    ) -> None:
        """Initialise ClickUpApiError.

        :param message: Error message.
        :param status_code: HTTP status code returned by the API.
        :param error_code: ClickUp ``ECODE`` value, if present in the body.
        :param response_body: Raw response body.
        """
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.response_body = response_body


class ClickUpAuthenticationError(ClickUpApiError):
    """Raised for 401 and 403 responses."""


class ClickUpNotFoundError(ClickUpApiError):
    """Raised for 404 responses."""


class ClickUpRateLimitError(ClickUpApiError):
    """Raised for 429 responses."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: str | None = None,
        response_body: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        """Initialise ClickUpRateLimitError.

        :param message: Error message.
        :param status_code: HTTP status code returned by the API.
        :param error_code: ClickUp ``ECODE`` value, if present in the body.
        :param response_body: Raw response body.
        :param retry_after: Seconds to wait, from the ``Retry-After`` header.
        """
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            response_body=response_body,
        )
        self.retry_after = retry_after


class ClickUpApiValidationError(ClickUpApiError):
    """Raised for 400/422 responses that carry per-field error details."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        field_errors: dict[str, list[str]],
        error_code: str | None = None,
        response_body: str | None = None,
    ) -> None:
        """Initialise ClickUpApiValidationError.

        :param message: Error message.
        :param status_code: HTTP status code returned by the API.
        :param field_errors: Mapping of field name to error messages.
        :param error_code: ClickUp ``ECODE`` value, if present in the body.
        :param response_body: Raw response body.
        """
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            response_body=response_body,
        )
        self.field_errors = field_errors


class ClickUpServerError(ClickUpApiError):
    """Raised for 5xx responses."""


class OperationCancelledError(ClickUpError):
    """Raised when a cancellation token fires before a request or page fetch.

    Distinct from normal stream termination, which raises nothing.
    """


class InvalidResponseError(ClickUpError):
    """Raised when the API succeeded but returned no payload where one is required."""


class RequestValidationError(ClickUpError, ValueError):
    """Raised when request parameters are missing, malformed or conflicting.

    Always raised before any network I/O takes place.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        """Initialise RequestValidationError.

        :param message: Error message.
        :param errors: Structured error details, one entry per failed constraint.
        """
        super().__init__(message)
        self.errors = errors or []


class BuilderAlreadyExecutedError(ClickUpError):
    """Raised when a fluent builder is used again after its terminal call."""

    def __init__(self, builder_name: str) -> None:
        """Initialise BuilderAlreadyExecutedError.

        :param builder_name: Class name of the reused builder.
        """
        self.builder_name = builder_name
        super().__init__(f"{builder_name} has already been executed and cannot be reused")
