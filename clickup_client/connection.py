"""HTTP connection to the ClickUp API.

The blocking ``requests`` call runs in a worker thread so the public methods
are coroutines that never block the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from clickup_client.cancellation import CancellationToken, resolve_token
from clickup_client.config import DEFAULT_BASE_URL, ClickUpSettings, get_clickup_settings
from clickup_client.exceptions import (
    ClickUpApiError,
    ClickUpApiValidationError,
    ClickUpAuthenticationError,
    ClickUpNetworkError,
    ClickUpNotFoundError,
    ClickUpRateLimitError,
    ClickUpServerError,
    ClickUpTransportError,
    InvalidResponseError,
)

logger = logging.getLogger(__name__)

# Default timeout for API requests in seconds
DEFAULT_TIMEOUT = 30

# HTTP status code threshold for errors
HTTP_ERROR_THRESHOLD = 400

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_error_body(response: requests.Response) -> tuple[str | None, str | None, dict[str, list[str]]]:
    """Extract ClickUp's error explanation, error code and field errors.

    :param response: Failed HTTP response.
    :returns: Tuple of (explanation, ECODE, field errors).
    """
    try:
        data = response.json()
    except ValueError:
        return None, None, {}

    if not isinstance(data, dict):
        return None, None, {}

    field_errors: dict[str, list[str]] = {}
    raw_errors = data.get("errors")
    if isinstance(raw_errors, dict):
        for field_name, messages in raw_errors.items():
            if isinstance(messages, list):
                field_errors[field_name] = [str(m) for m in messages]

    explanation = data.get("err")
    error_code = data.get("ECODE")
    return (
        str(explanation) if explanation else None,
        str(error_code) if error_code else None,
        field_errors,
    )


def _parse_retry_after(response: requests.Response) -> int | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def build_api_error(response: requests.Response) -> ClickUpApiError:
    """Create the exception matching a failed response's status code.

    :param response: HTTP response with a status code of 400 or above.
    :returns: The exception to raise.
    """
    status_code = response.status_code
    body = response.text
    explanation, error_code, field_errors = _parse_error_body(response)

    message = f"ClickUp API request failed with status code {status_code}"
    if explanation:
        message = f"{message}: {explanation}"
    if error_code:
        message = f"{message} (ECODE: {error_code})"

    common: dict[str, Any] = {
        "status_code": status_code,
        "error_code": error_code,
        "response_body": body,
    }

    if status_code in (HTTPStatus.BAD_REQUEST, HTTPStatus.UNPROCESSABLE_ENTITY) and field_errors:
        return ClickUpApiValidationError(message, field_errors=field_errors, **common)
    if status_code in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
        return ClickUpAuthenticationError(message, **common)
    if status_code == HTTPStatus.NOT_FOUND:
        return ClickUpNotFoundError(message, **common)
    if status_code == HTTPStatus.TOO_MANY_REQUESTS:
        return ClickUpRateLimitError(message, retry_after=_parse_retry_after(response), **common)
    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return ClickUpServerError(message, **common)
    return ClickUpApiError(message, **common)


class ApiConnection:
    """Authenticated connection to the ClickUp v2 API.

    Resource services are the only callers. Every method honours a
    cancellation token (explicit, or the ambient one from
    ``cancellation_scope``) by checking it before the request is dispatched.
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        settings: ClickUpSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialise the connection.

        :param api_token: ClickUp API token. If not provided, read from settings
            (CLICKUP_API_TOKEN environment variable).
        :param base_url: API base URL. Defaults to the settings value.
        :param timeout: Request timeout in seconds. Defaults to the settings value.
        :param settings: Explicit settings, used instead of the cached environment settings.
        :param session: Pre-built requests session, mainly for tests.
        :raises ValueError: If no API token is provided or configured.
        """
        if api_token is None and settings is None:
            try:
                settings = get_clickup_settings()
            except ValidationError as e:
                raise ValueError(
                    "ClickUp API token not provided. Set CLICKUP_API_TOKEN "
                    "environment variable or pass api_token parameter."
                ) from e

        self._api_token = api_token or (settings.api_token if settings else None)
        if not self._api_token:
            raise ValueError("ClickUp API token must not be empty.")

        default_base_url = settings.base_url if settings else DEFAULT_BASE_URL
        default_timeout = settings.request_timeout if settings else DEFAULT_TIMEOUT
        self.base_url = (base_url or default_base_url).rstrip("/")
        self.timeout = timeout or default_timeout

        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": self._api_token,
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

        logger.debug(f"ApiConnection initialised: base_url={self.base_url}")

    async def get(
        self,
        path: str,
        response_model: type[ModelT],
        *,
        cancellation: CancellationToken | None = None,
    ) -> ModelT | None:
        """Send a GET request and parse the response.

        :param path: Endpoint path relative to the base URL, including any query string.
        :param response_model: Model the JSON body is validated into.
        :param cancellation: Cancellation token checked before dispatch.
        :returns: Parsed response, or None for an empty body.
        :raises ClickUpTransportError: If the request fails.
        :raises OperationCancelledError: If the token is already cancelled.
        """
        data = await self._execute("GET", path, None, cancellation)
        return self._to_model(data, response_model, path)

    async def post(
        self,
        path: str,
        body: BaseModel | None,
        response_model: type[ModelT],
        *,
        cancellation: CancellationToken | None = None,
    ) -> ModelT | None:
        """Send a POST request with a JSON body and parse the response.

        :param path: Endpoint path relative to the base URL.
        :param body: Request model serialised as JSON; unset fields are omitted.
        :param response_model: Model the JSON body is validated into.
        :param cancellation: Cancellation token checked before dispatch.
        :returns: Parsed response, or None for an empty body.
        :raises ClickUpTransportError: If the request fails.
        """
        data = await self._execute("POST", path, self._dump(body), cancellation)
        return self._to_model(data, response_model, path)

    async def post_no_content(
        self,
        path: str,
        body: BaseModel | None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Send a POST request, ignoring any response body.

        :param path: Endpoint path relative to the base URL.
        :param body: Request model serialised as JSON; unset fields are omitted.
        :param cancellation: Cancellation token checked before dispatch.
        :raises ClickUpTransportError: If the request fails.
        """
        await self._execute("POST", path, self._dump(body), cancellation)

    async def put(
        self,
        path: str,
        body: BaseModel | None,
        response_model: type[ModelT],
        *,
        cancellation: CancellationToken | None = None,
    ) -> ModelT | None:
        """Send a PUT request with a JSON body and parse the response.

        :param path: Endpoint path relative to the base URL.
        :param body: Request model serialised as JSON; unset fields are omitted.
        :param response_model: Model the JSON body is validated into.
        :param cancellation: Cancellation token checked before dispatch.
        :returns: Parsed response, or None for an empty body.
        :raises ClickUpTransportError: If the request fails.
        """
        data = await self._execute("PUT", path, self._dump(body), cancellation)
        return self._to_model(data, response_model, path)

    async def put_no_content(
        self,
        path: str,
        body: BaseModel | None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Send a PUT request, ignoring any response body.

        :param path: Endpoint path relative to the base URL.
        :param body: Request model serialised as JSON; unset fields are omitted.
        :param cancellation: Cancellation token checked before dispatch.
        :raises ClickUpTransportError: If the request fails.
        """
        await self._execute("PUT", path, self._dump(body), cancellation)

    async def delete(
        self,
        path: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Send a DELETE request.

        :param path: Endpoint path relative to the base URL, including any query string.
        :param cancellation: Cancellation token checked before dispatch.
        :raises ClickUpTransportError: If the request fails.
        """
        await self._execute("DELETE", path, None, cancellation)

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    async def _execute(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None,
        cancellation: CancellationToken | None,
    ) -> Any:
        token = resolve_token(cancellation)
        if token is not None:
            token.raise_if_cancelled()
        return await asyncio.to_thread(self._send, method, path, json)

    def _send(self, method: str, path: str, json: dict[str, Any] | None) -> Any:
        """Make an HTTP request to the API.

        :param method: HTTP method.
        :param path: Endpoint path relative to the base URL.
        :param json: JSON request body.
        :returns: Decoded JSON body, or None when the response has no content.
        :raises ClickUpTransportError: If the request fails.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"ClickUp API request: {method} {path}")

        try:
            response = self._session.request(method, url, json=json, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ClickUpNetworkError(
                f"ClickUp API request timed out after {self.timeout}s", is_timeout=True
            ) from e
        except requests.exceptions.RequestException as e:
            raise ClickUpNetworkError(f"ClickUp API request failed: {e}") from e

        if response.status_code >= HTTP_ERROR_THRESHOLD:
            error = build_api_error(response)
            logger.warning(f"ClickUp API request failed: {method} {path} -> {response.status_code}")
            raise error

        if response.status_code == HTTPStatus.NO_CONTENT or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ClickUpTransportError(
                f"ClickUp API returned a non-JSON body for {method} {path}"
            ) from e

    @staticmethod
    def _dump(body: BaseModel | None) -> dict[str, Any] | None:
        if body is None:
            return None
        return body.model_dump(mode="json", by_alias=True, exclude_unset=True)

    @staticmethod
    def _to_model(data: Any, response_model: type[ModelT], path: str) -> ModelT | None:
        if data is None:
            return None
        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Response from {path} does not match {response_model.__name__}: {e}"
            ) from e
