"""Time tracking endpoints."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import TimeEntry
from clickup_client.models.requests import CreateTimeEntryRequest, GetTimeEntriesRequest, TaskIdOptions
from clickup_client.models.responses import GetTimeEntriesResponse, TimeEntryEnvelope
from clickup_client.pagination import Page, stream_pages
from clickup_client.query import QueryParams, build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)

# The time entry listing returns at most this many entries per page
TIME_ENTRY_PAGE_SIZE = 100


class TimeTrackingService(BaseService):
    """Read and write time entries.

    The time entry listing has no last-page flag. A page shorter than
    TIME_ENTRY_PAGE_SIZE is treated as the last one, which also ends the
    stream when the server ignores the page index and repeats its data.
    """

    async def get_time_entries(
        self,
        workspace_id: str,
        request: GetTimeEntriesRequest | None = None,
        options: TaskIdOptions | None = None,
        *,
        page: int = 0,
        cancellation: CancellationToken | None = None,
    ) -> list[TimeEntry]:
        """Get one page of time entries in a workspace.

        :param workspace_id: Workspace (team) ID.
        :param request: Filters; all options are omitted when None.
        :param options: Custom task ID options, for filtering by a custom task ID.
        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The time entries; empty if the API returned none.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        page = self._require_page(page)
        result = await self._fetch_page(workspace_id, request, options, page, cancellation)
        return self._items_or_empty(result.items if result else None)

    def stream_time_entries(
        self,
        workspace_id: str,
        request: GetTimeEntriesRequest | None = None,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[TimeEntry]:
        """Stream every time entry in a workspace across all pages.

        :param workspace_id: Workspace (team) ID.
        :param request: Filters applied to every page.
        :param options: Custom task ID options applied to every page.
        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the time entries.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        logger.info(f"Streaming time entries for workspace {workspace_id}")

        async def fetch(page: int, token: CancellationToken | None) -> Page[TimeEntry] | None:
            return await self._fetch_page(workspace_id, request, options, page, token)

        return stream_pages(
            fetch, cancellation=cancellation, description=f"time entries in workspace {workspace_id}"
        )

    async def get_time_entry(
        self,
        workspace_id: str,
        timer_id: str,
        *,
        include_task_tags: bool | None = None,
        include_location_names: bool | None = None,
        cancellation: CancellationToken | None = None,
    ) -> TimeEntry:
        """Get a single time entry.

        :param workspace_id: Workspace (team) ID.
        :param timer_id: Time entry ID.
        :param include_task_tags: Include the tags of the tracked task.
        :param include_location_names: Include list, folder and space names.
        :param cancellation: Cancellation token.
        :returns: The time entry.
        :raises InvalidResponseError: If the API returned no entry.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        timer_id = self._require_id(timer_id, "timer_id")
        params = (
            QueryParams()
            .add_bool("include_task_tags", include_task_tags)
            .add_bool("include_location_names", include_location_names)
        )
        response = await self._connection.get(
            build_path(f"team/{workspace_id}/time_entries/{timer_id}", params),
            TimeEntryEnvelope,
            cancellation=cancellation,
        )
        operation = f"get_time_entry({timer_id})"
        envelope = self._require_payload(response, operation)
        return self._require_payload(envelope.data, operation)

    async def create_time_entry(
        self,
        workspace_id: str,
        request: CreateTimeEntryRequest,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> TimeEntry:
        """Create a time entry.

        :param workspace_id: Workspace (team) ID.
        :param request: Time entry to create.
        :param options: Custom task ID options, for when the entry's task is a custom ID.
        :param cancellation: Cancellation token.
        :returns: The created time entry.
        :raises InvalidResponseError: If the API returned no entry.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        logger.info(f"Creating time entry in workspace {workspace_id}")
        params = options.to_query_params() if options is not None else None
        response = await self._connection.post(
            build_path(f"team/{workspace_id}/time_entries", params),
            request,
            TimeEntryEnvelope,
            cancellation=cancellation,
        )
        operation = f"create_time_entry({workspace_id})"
        envelope = self._require_payload(response, operation)
        return self._require_payload(envelope.data, operation)

    async def delete_time_entry(
        self,
        workspace_id: str,
        timer_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Delete a time entry.

        :param workspace_id: Workspace (team) ID.
        :param timer_id: Time entry ID.
        :param cancellation: Cancellation token.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        timer_id = self._require_id(timer_id, "timer_id")
        logger.info(f"Deleting time entry {timer_id} in workspace {workspace_id}")
        await self._connection.delete(
            f"team/{workspace_id}/time_entries/{timer_id}", cancellation=cancellation
        )

    async def _fetch_page(
        self,
        workspace_id: str,
        request: GetTimeEntriesRequest | None,
        options: TaskIdOptions | None,
        page: int,
        cancellation: CancellationToken | None,
    ) -> Page[TimeEntry] | None:
        params = request.to_query_params() if request is not None else QueryParams()
        if options is not None:
            params.extend(options.to_query_params())
        response = await self._connection.get(
            build_path(f"team/{workspace_id}/time_entries", self._with_page(params, page)),
            GetTimeEntriesResponse,
            cancellation=cancellation,
        )
        if response is None:
            return None
        if response.data is None:
            return Page(items=None)
        return Page(items=response.data, last_page=len(response.data) < TIME_ENTRY_PAGE_SIZE)
