"""Shared behaviour for resource services."""

from __future__ import annotations

import logging
from typing import TypeVar

from clickup_client.connection import ApiConnection
from clickup_client.exceptions import InvalidResponseError, RequestValidationError
from clickup_client.query import QueryParams

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseService:
    """Base class for services that talk to one ClickUp resource family.

    Response policy shared by every service:

    - a missing payload for a single entity raises InvalidResponseError
    - a missing collection for a list operation is an empty list
    - transport errors and cancellation propagate unchanged
    """

    def __init__(self, connection: ApiConnection) -> None:
        """Initialise the service.

        :param connection: Connection used for every request.
        """
        self._connection = connection

    @staticmethod
    def _require_id(value: str | None, name: str) -> str:
        """Reject a blank resource identifier before any I/O.

        :param value: Identifier supplied by the caller.
        :param name: Parameter name, used in the error.
        :returns: The identifier, stripped of surrounding whitespace.
        :raises RequestValidationError: If the identifier is None or blank.
        """
        if value is None or not str(value).strip():
            raise RequestValidationError(
                f"{name} must not be empty",
                [{"loc": (name,), "msg": "must not be empty", "type": "missing"}],
            )
        return str(value).strip()

    @staticmethod
    def _require_page(page: int) -> int:
        """Reject a negative page index.

        :param page: Zero-based page index.
        :returns: The page index.
        :raises RequestValidationError: If the index is negative.
        """
        if page < 0:
            raise RequestValidationError(
                f"page must be zero or greater, got {page}",
                [{"loc": ("page",), "msg": "must be zero or greater", "type": "greater_than_equal"}],
            )
        return page

    @staticmethod
    def _require_payload(payload: T | None, operation: str) -> T:
        """Unwrap a payload that the operation must return.

        :param payload: Parsed response, possibly None.
        :param operation: Operation name, used in the error.
        :returns: The payload.
        :raises InvalidResponseError: If the payload is None.
        """
        if payload is None:
            logger.error(f"ClickUp API returned no payload for {operation}")
            raise InvalidResponseError(f"ClickUp API returned no payload for {operation}")
        return payload

    @staticmethod
    def _items_or_empty(items: list[T] | None) -> list[T]:
        """Treat a missing collection as empty.

        :param items: Parsed collection, possibly None.
        :returns: The collection, or an empty list.
        """
        return list(items) if items is not None else []

    @staticmethod
    def _with_page(params: QueryParams | None, page: int) -> QueryParams:
        """Append the page index after a request's own options.

        :param params: Request options, if any.
        :param page: Zero-based page index.
        :returns: New query parameters including ``page``.
        """
        combined = QueryParams()
        if params is not None:
            combined.extend(params)
        return combined.add("page", page)
