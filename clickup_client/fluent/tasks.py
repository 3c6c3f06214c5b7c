"""Fluent builders for task queries and task writes."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from datetime import datetime, timedelta
from typing import Self, TypeVar

from clickup_client.cancellation import CancellationToken
from clickup_client.fluent.base import FluentRequest, TaskScopedRequest
from clickup_client.models.entities import Task
from clickup_client.models.enums import TaskOrderBy, TaskPriority
from clickup_client.models.requests import (
    CreateTaskRequest,
    GetFilteredTeamTasksRequest,
    GetTasksRequest,
    UpdateTaskRequest,
)
from clickup_client.pagination import Page
from clickup_client.services.tasks import TaskService

logger = logging.getLogger(__name__)

QueryT = TypeVar("QueryT", bound=GetTasksRequest)


def _milliseconds(value: int | timedelta) -> int:
    if isinstance(value, timedelta):
        return int(value.total_seconds() * 1000)
    return value


class _TaskFilters(FluentRequest[QueryT]):
    """Filters shared by the list and workspace task queries."""

    def with_archived(self, archived: bool = True) -> Self:
        """Include archived tasks."""
        return self._set("archived", archived)

    def with_markdown_description(self, enabled: bool = True) -> Self:
        """Return task descriptions as markdown."""
        return self._set("include_markdown_description", enabled)

    def with_order_by(self, order_by: TaskOrderBy | str) -> Self:
        """Sort by a field.

        :param order_by: One of ``id``, ``created``, ``updated``, ``due_date``.
        :returns: This builder.
        """
        return self._set("order_by", order_by)

    def with_reverse(self, reverse: bool = True) -> Self:
        """Reverse the sort order."""
        return self._set("reverse", reverse)

    def with_subtasks(self, include: bool = True) -> Self:
        """Include subtasks."""
        return self._set("subtasks", include)

    def with_statuses(self, *statuses: str) -> Self:
        """Only tasks in one of these statuses."""
        return self._set("statuses", statuses)

    def with_include_closed(self, include: bool = True) -> Self:
        """Include closed tasks."""
        return self._set("include_closed", include)

    def with_assignees(self, *user_ids: int) -> Self:
        """Only tasks assigned to one of these users."""
        return self._set("assignees", user_ids)

    def with_watchers(self, *user_ids: int) -> Self:
        """Only tasks watched by one of these users."""
        return self._set("watchers", user_ids)

    def with_tags(self, *tags: str) -> Self:
        """Only tasks with one of these tags."""
        return self._set("tags", tags)

    def with_due_date_after(self, value: datetime) -> Self:
        """Only tasks due after this time."""
        return self._set("due_date_gt", value)

    def with_due_date_before(self, value: datetime) -> Self:
        """Only tasks due before this time."""
        return self._set("due_date_lt", value)

    def with_created_after(self, value: datetime) -> Self:
        """Only tasks created after this time."""
        return self._set("date_created_gt", value)

    def with_created_before(self, value: datetime) -> Self:
        """Only tasks created before this time."""
        return self._set("date_created_lt", value)

    def with_updated_after(self, value: datetime) -> Self:
        """Only tasks updated after this time."""
        return self._set("date_updated_gt", value)

    def with_updated_before(self, value: datetime) -> Self:
        """Only tasks updated before this time."""
        return self._set("date_updated_lt", value)

    def with_done_after(self, value: datetime) -> Self:
        """Only tasks completed after this time."""
        return self._set("date_done_gt", value)

    def with_done_before(self, value: datetime) -> Self:
        """Only tasks completed before this time."""
        return self._set("date_done_lt", value)

    def with_custom_items(self, *item_types: int) -> Self:
        """Only tasks of these custom item types."""
        return self._set("custom_items", item_types)


class TaskQueryBuilder(_TaskFilters[GetTasksRequest]):
    """Query the tasks of one list.

    Example::

        async for task in client.task_query(list_id).with_statuses("open").stream():
            ...
    """

    request_model = GetTasksRequest

    def __init__(self, service: TaskService, list_id: str) -> None:
        """Initialise the builder.

        :param service: Service that executes the query.
        :param list_id: List whose tasks are queried.
        """
        super().__init__()
        self._service = service
        self._list_id = list_id

    @property
    def list_id(self) -> str:
        """List whose tasks are queried."""
        return self._list_id

    async def get(self, page: int = 0, *, cancellation: CancellationToken | None = None) -> Page[Task]:
        """Fetch a single page.

        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The page of tasks.
        """
        request = self._build()
        return await self._service.get_tasks(
            self._list_id, request, page=page, cancellation=cancellation
        )

    def stream(self, *, cancellation: CancellationToken | None = None) -> AsyncIterator[Task]:
        """Stream every matching task across all pages.

        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the tasks.
        """
        request = self._build()
        return self._service.stream_tasks(self._list_id, request, cancellation=cancellation)


class TeamTaskQueryBuilder(_TaskFilters[GetFilteredTeamTasksRequest]):
    """Query tasks across a whole workspace."""

    request_model = GetFilteredTeamTasksRequest

    def __init__(self, service: TaskService, workspace_id: str) -> None:
        """Initialise the builder.

        :param service: Service that executes the query.
        :param workspace_id: Workspace (team) whose tasks are queried.
        """
        super().__init__()
        self._service = service
        self._workspace_id = workspace_id

    @property
    def workspace_id(self) -> str:
        """Workspace whose tasks are queried."""
        return self._workspace_id

    def with_space_ids(self, *space_ids: str) -> Self:
        """Only tasks in these spaces."""
        return self._set("space_ids", space_ids)

    def with_folder_ids(self, *folder_ids: str) -> Self:
        """Only tasks in these folders."""
        return self._set("project_ids", folder_ids)

    def with_list_ids(self, *list_ids: str) -> Self:
        """Only tasks in these lists."""
        return self._set("list_ids", list_ids)

    def with_parent(self, task_id: str) -> Self:
        """Only subtasks of this task."""
        return self._set("parent", task_id)

    async def get(self, page: int = 0, *, cancellation: CancellationToken | None = None) -> Page[Task]:
        """Fetch a single page.

        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The page of tasks.
        """
        request = self._build()
        return await self._service.get_filtered_team_tasks(
            self._workspace_id, request, page=page, cancellation=cancellation
        )

    def stream(self, *, cancellation: CancellationToken | None = None) -> AsyncIterator[Task]:
        """Stream every matching task across all pages.

        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the tasks.
        """
        request = self._build()
        return self._service.stream_filtered_team_tasks(
            self._workspace_id, request, cancellation=cancellation
        )


class TaskCreateBuilder(FluentRequest[CreateTaskRequest]):
    """Create a task in a list."""

    request_model = CreateTaskRequest

    def __init__(self, service: TaskService, list_id: str) -> None:
        """Initialise the builder.

        :param service: Service that creates the task.
        :param list_id: List the task is created in.
        """
        super().__init__()
        self._service = service
        self._list_id = list_id

    @property
    def list_id(self) -> str:
        """List the task is created in."""
        return self._list_id

    def with_name(self, name: str) -> Self:
        """Set the task name (required)."""
        return self._set("name", name)

    def with_description(self, description: str) -> Self:
        """Set a plain text description."""
        return self._set("description", description)

    def with_markdown_description(self, description: str) -> Self:
        """Set a markdown description."""
        return self._set("markdown_description", description)

    def with_assignees(self, *user_ids: int) -> Self:
        """Assign users."""
        return self._set("assignees", user_ids)

    def with_tags(self, *tags: str) -> Self:
        """Tag the task."""
        return self._set("tags", tags)

    def with_status(self, status: str) -> Self:
        """Set the initial status."""
        return self._set("status", status)

    def with_priority(self, priority: TaskPriority | int) -> Self:
        """Set the priority, 1 (urgent) to 4 (low)."""
        return self._set("priority", priority)

    def with_due_date(self, value: datetime) -> Self:
        """Set the due date."""
        return self._set("due_date", value)

    def with_due_date_time(self, include_time: bool = True) -> Self:
        """Whether the due date carries a time of day."""
        return self._set("due_date_time", include_time)

    def with_start_date(self, value: datetime) -> Self:
        """Set the start date."""
        return self._set("start_date", value)

    def with_start_date_time(self, include_time: bool = True) -> Self:
        """Whether the start date carries a time of day."""
        return self._set("start_date_time", include_time)

    def with_time_estimate(self, estimate: int | timedelta) -> Self:
        """Set the time estimate, in milliseconds or as a timedelta."""
        return self._set("time_estimate", _milliseconds(estimate))

    def with_points(self, points: float) -> Self:
        """Set sprint points."""
        return self._set("points", points)

    def with_notify_all(self, notify: bool = True) -> Self:
        """Notify every assignee and watcher, including the creator."""
        return self._set("notify_all", notify)

    def with_parent(self, task_id: str) -> Self:
        """Create the task as a subtask."""
        return self._set("parent", task_id)

    def with_links_to(self, task_id: str) -> Self:
        """Link the new task to an existing one."""
        return self._set("links_to", task_id)

    async def create(self, *, cancellation: CancellationToken | None = None) -> Task:
        """Create the task.

        :param cancellation: Cancellation token.
        :returns: The created task.
        """
        request = self._build()
        return await self._service.create_task(self._list_id, request, cancellation=cancellation)


class TaskUpdateBuilder(TaskScopedRequest[UpdateTaskRequest]):
    """Update fields of an existing task. Only fields that were set are sent."""

    request_model = UpdateTaskRequest

    def __init__(self, service: TaskService, task_id: str) -> None:
        """Initialise the builder.

        :param service: Service that updates the task.
        :param task_id: Task to update.
        """
        super().__init__()
        self._service = service
        self._task_id = task_id

    @property
    def task_id(self) -> str:
        """Task to update."""
        return self._task_id

    def with_name(self, name: str) -> Self:
        """Rename the task."""
        return self._set("name", name)

    def with_description(self, description: str) -> Self:
        """Replace the plain text description."""
        return self._set("description", description)

    def with_markdown_description(self, description: str) -> Self:
        """Replace the description with markdown."""
        return self._set("markdown_description", description)

    def with_status(self, status: str) -> Self:
        """Move the task to a status."""
        return self._set("status", status)

    def with_priority(self, priority: TaskPriority | int) -> Self:
        """Change the priority."""
        return self._set("priority", priority)

    def with_due_date(self, value: datetime) -> Self:
        """Change the due date."""
        return self._set("due_date", value)

    def with_due_date_time(self, include_time: bool = True) -> Self:
        """Whether the due date carries a time of day."""
        return self._set("due_date_time", include_time)

    def with_start_date(self, value: datetime) -> Self:
        """Change the start date."""
        return self._set("start_date", value)

    def with_start_date_time(self, include_time: bool = True) -> Self:
        """Whether the start date carries a time of day."""
        return self._set("start_date_time", include_time)

    def with_time_estimate(self, estimate: int | timedelta) -> Self:
        """Change the time estimate, in milliseconds or as a timedelta."""
        return self._set("time_estimate", _milliseconds(estimate))

    def with_points(self, points: float) -> Self:
        """Change sprint points."""
        return self._set("points", points)

    def with_parent(self, task_id: str) -> Self:
        """Move the task under another parent."""
        return self._set("parent", task_id)

    def with_archived(self, archived: bool = True) -> Self:
        """Archive or unarchive the task."""
        return self._set("archived", archived)

    def with_assignee_changes(
        self,
        *,
        add: tuple[int, ...] = (),
        remove: tuple[int, ...] = (),
    ) -> Self:
        """Add and remove assignees.

        :param add: User IDs to assign.
        :param remove: User IDs to unassign.
        :returns: This builder.
        """
        return self._set("assignees", {"add": tuple(add), "rem": tuple(remove)})

    async def update(self, *, cancellation: CancellationToken | None = None) -> Task:
        """Apply the update.

        :param cancellation: Cancellation token.
        :returns: The updated task.
        """
        self._ensure_not_executed()
        options = self._build_options()
        request = self._build()
        return await self._service.update_task(
            self._task_id, request, options, cancellation=cancellation
        )
