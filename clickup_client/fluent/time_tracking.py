"""Fluent builders for time entries."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timedelta
from typing import Self

from clickup_client.cancellation import CancellationToken
from clickup_client.fluent.base import TaskScopedRequest
from clickup_client.models.entities import TimeEntry
from clickup_client.models.requests import CreateTimeEntryRequest, GetTimeEntriesRequest
from clickup_client.services.time_tracking import TimeTrackingService


class TimeEntryQueryBuilder(TaskScopedRequest[GetTimeEntriesRequest]):
    """Query the time entries of a workspace.

    Without a date range ClickUp returns the last 30 days for the
    authenticated user. Call with_custom_task_ids when with_task names a
    custom task ID.
    """

    request_model = GetTimeEntriesRequest

    def __init__(self, service: TimeTrackingService, workspace_id: str) -> None:
        """Initialise the builder.

        :param service: Service that executes the query.
        :param workspace_id: Workspace (team) whose entries are queried.
        """
        super().__init__()
        self._service = service
        self._workspace_id = workspace_id

    @property
    def workspace_id(self) -> str:
        """Workspace whose entries are queried."""
        return self._workspace_id

    def with_start_date(self, value: datetime) -> Self:
        """Only entries starting at or after this time."""
        return self._set("start_date", value)

    def with_end_date(self, value: datetime) -> Self:
        """Only entries starting at or before this time."""
        return self._set("end_date", value)

    def with_assignees(self, *user_ids: int) -> Self:
        """Only entries tracked by these users."""
        return self._set("assignees", user_ids)

    def with_task(self, task_id: str) -> Self:
        """Only entries tracked against this task."""
        return self._set("task_id", task_id)

    def with_list(self, list_id: str) -> Self:
        """Only entries for tasks in this list."""
        return self._set("list_id", list_id)

    def with_folder(self, folder_id: str) -> Self:
        """Only entries for tasks in this folder."""
        return self._set("folder_id", folder_id)

    def with_space(self, space_id: str) -> Self:
        """Only entries for tasks in this space."""
        return self._set("space_id", space_id)

    def with_task_tags(self, include: bool = True) -> Self:
        """Include the tags of each entry's task."""
        return self._set("include_task_tags", include)

    def with_location_names(self, include: bool = True) -> Self:
        """Include list, folder and space names."""
        return self._set("include_location_names", include)

    def with_billable(self, billable: bool = True) -> Self:
        """Only billable (or only non-billable) entries."""
        return self._set("is_billable", billable)

    async def get(
        self, page: int = 0, *, cancellation: CancellationToken | None = None
    ) -> list[TimeEntry]:
        """Fetch a single page.

        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The time entries on that page.
        """
        self._ensure_not_executed()
        options = self._build_options()
        request = self._build()
        return await self._service.get_time_entries(
            self._workspace_id, request, options, page=page, cancellation=cancellation
        )

    def stream(self, *, cancellation: CancellationToken | None = None) -> AsyncIterator[TimeEntry]:
        """Stream every matching entry across all pages.

        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the time entries.
        """
        self._ensure_not_executed()
        options = self._build_options()
        request = self._build()
        return self._service.stream_time_entries(
            self._workspace_id, request, options, cancellation=cancellation
        )


class TimeEntryCreateBuilder(TaskScopedRequest[CreateTimeEntryRequest]):
    """Record a time entry."""

    request_model = CreateTimeEntryRequest

    def __init__(self, service: TimeTrackingService, workspace_id: str) -> None:
        """Initialise the builder.

        :param service: Service that creates the entry.
        :param workspace_id: Workspace (team) the entry belongs to.
        """
        super().__init__()
        self._service = service
        self._workspace_id = workspace_id

    @property
    def workspace_id(self) -> str:
        """Workspace the entry belongs to."""
        return self._workspace_id

    def with_start(self, value: datetime) -> Self:
        """Set the start time (required)."""
        return self._set("start", value)

    def with_duration(self, duration: int | timedelta) -> Self:
        """Set the duration, in milliseconds or as a timedelta."""
        if isinstance(duration, timedelta):
            duration = int(duration.total_seconds() * 1000)
        return self._set("duration", duration)

    def with_stop(self, value: datetime) -> Self:
        """Set the stop time, as an alternative to a duration."""
        return self._set("stop", value)

    def with_description(self, description: str) -> Self:
        """Describe the work."""
        return self._set("description", description)

    def with_tags(self, *tags: str) -> Self:
        """Tag the entry."""
        return self._set("tags", tags)

    def with_billable(self, billable: bool = True) -> Self:
        """Mark the entry billable."""
        return self._set("billable", billable)

    def with_assignee(self, user_id: int) -> Self:
        """Record the entry for another user (workspace owners and admins only)."""
        return self._set("assignee", user_id)

    def with_task(self, task_id: str) -> Self:
        """Track the entry against a task."""
        return self._set("task_id", task_id)

    async def create(self, *, cancellation: CancellationToken | None = None) -> TimeEntry:
        """Create the entry.

        :param cancellation: Cancellation token.
        :returns: The created time entry.
        """
        self._ensure_not_executed()
        options = self._build_options()
        request = self._build()
        return await self._service.create_time_entry(
            self._workspace_id, request, options, cancellation=cancellation
        )
