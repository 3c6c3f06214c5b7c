"""Async client for the ClickUp v2 API.

Provides resource services, lazily paginated streams and fluent request
builders on top of a single authenticated connection.
"""

from clickup_client.cancellation import CancellationToken, cancellation_scope
from clickup_client.config import ClickUpSettings, get_clickup_settings
from clickup_client.connection import ApiConnection
from clickup_client.exceptions import (
    BuilderAlreadyExecutedError,
    ClickUpApiError,
    ClickUpApiValidationError,
    ClickUpAuthenticationError,
    ClickUpError,
    ClickUpNetworkError,
    ClickUpNotFoundError,
    ClickUpRateLimitError,
    ClickUpServerError,
    ClickUpTransportError,
    InvalidResponseError,
    OperationCancelledError,
    RequestValidationError,
)
from clickup_client.fluent.client import ClickUpClient
from clickup_client.pagination import Page, stream_pages

__all__ = [
    "ApiConnection",
    "BuilderAlreadyExecutedError",
    "CancellationToken",
    "ClickUpApiError",
    "ClickUpApiValidationError",
    "ClickUpAuthenticationError",
    "ClickUpClient",
    "ClickUpError",
    "ClickUpNetworkError",
    "ClickUpNotFoundError",
    "ClickUpRateLimitError",
    "ClickUpServerError",
    "ClickUpSettings",
    "ClickUpTransportError",
    "InvalidResponseError",
    "OperationCancelledError",
    "Page",
    "RequestValidationError",
    "cancellation_scope",
    "get_clickup_settings",
    "stream_pages",
]
