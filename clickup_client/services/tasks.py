"""Task endpoints."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import Task
from clickup_client.models.requests import (
    CreateTaskRequest,
    GetFilteredTeamTasksRequest,
    GetTasksRequest,
    TaskIdOptions,
    UpdateTaskRequest,
)
from clickup_client.models.responses import GetTasksResponse
from clickup_client.pagination import Page, stream_pages
from clickup_client.query import QueryParams, build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


def _task_options(options: TaskIdOptions | None) -> QueryParams | None:
    return options.to_query_params() if options is not None else None


class TaskService(BaseService):
    """Read and write tasks.

    Both task listing endpoints report an explicit ``last_page`` flag, which
    the streaming methods use to stop.
    """

    async def get_task(
        self,
        task_id: str,
        options: TaskIdOptions | None = None,
        *,
        include_subtasks: bool | None = None,
        include_markdown_description: bool | None = None,
        cancellation: CancellationToken | None = None,
    ) -> Task:
        """Get a single task.

        :param task_id: Task ID, or custom task ID when options say so.
        :param options: Custom task ID options.
        :param include_subtasks: Include subtasks in the response.
        :param include_markdown_description: Return the description as markdown.
        :param cancellation: Cancellation token.
        :returns: The task.
        :raises InvalidResponseError: If the API returned no task.
        """
        task_id = self._require_id(task_id, "task_id")
        params = QueryParams()
        if options is not None:
            params.extend(options.to_query_params())
        params.add_bool("include_subtasks", include_subtasks)
        params.add_bool("include_markdown_description", include_markdown_description)

        response = await self._connection.get(
            build_path(f"task/{task_id}", params), Task, cancellation=cancellation
        )
        return self._require_payload(response, f"get_task({task_id})")

    async def get_tasks(
        self,
        list_id: str,
        request: GetTasksRequest | None = None,
        *,
        page: int = 0,
        cancellation: CancellationToken | None = None,
    ) -> Page[Task]:
        """Get one page of tasks in a list.

        :param list_id: List ID.
        :param request: Filters; all options are omitted when None.
        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The page; a missing collection is returned as empty.
        """
        list_id = self._require_id(list_id, "list_id")
        page = self._require_page(page)
        result = await self._fetch_list_page(list_id, request, page, cancellation)
        if result is None:
            return Page(items=[], last_page=None)
        return Page(items=self._items_or_empty(result.items), last_page=result.last_page)

    def stream_tasks(
        self,
        list_id: str,
        request: GetTasksRequest | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[Task]:
        """Stream every task in a list across all pages.

        Pages are fetched lazily, one at a time, as the iterator is consumed.

        :param list_id: List ID.
        :param request: Filters applied to every page.
        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the tasks.
        """
        list_id = self._require_id(list_id, "list_id")
        logger.info(f"Streaming tasks for list {list_id}")

        async def fetch(page: int, token: CancellationToken | None) -> Page[Task] | None:
            return await self._fetch_list_page(list_id, request, page, token)

        return stream_pages(fetch, cancellation=cancellation, description=f"tasks in list {list_id}")

    async def get_filtered_team_tasks(
        self,
        workspace_id: str,
        request: GetFilteredTeamTasksRequest | None = None,
        *,
        page: int = 0,
        cancellation: CancellationToken | None = None,
    ) -> Page[Task]:
        """Get one page of tasks matching filters across a workspace.

        :param workspace_id: Workspace (team) ID.
        :param request: Filters; all options are omitted when None.
        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The page; a missing collection is returned as empty.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        page = self._require_page(page)
        result = await self._fetch_team_page(workspace_id, request, page, cancellation)
        if result is None:
            return Page(items=[], last_page=None)
        return Page(items=self._items_or_empty(result.items), last_page=result.last_page)

    def stream_filtered_team_tasks(
        self,
        workspace_id: str,
        request: GetFilteredTeamTasksRequest | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[Task]:
        """Stream every task matching filters across a workspace.

        :param workspace_id: Workspace (team) ID.
        :param request: Filters applied to every page.
        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the tasks.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        logger.info(f"Streaming filtered tasks for workspace {workspace_id}")

        async def fetch(page: int, token: CancellationToken | None) -> Page[Task] | None:
            return await self._fetch_team_page(workspace_id, request, page, token)

        return stream_pages(
            fetch, cancellation=cancellation, description=f"tasks in workspace {workspace_id}"
        )

    async def create_task(
        self,
        list_id: str,
        request: CreateTaskRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Task:
        """Create a task in a list.

        :param list_id: List ID.
        :param request: Task to create.
        :param cancellation: Cancellation token.
        :returns: The created task.
        :raises InvalidResponseError: If the API returned no task.
        """
        list_id = self._require_id(list_id, "list_id")
        logger.info(f"Creating task in list {list_id}: {request.name}")
        response = await self._connection.post(
            f"list/{list_id}/task", request, Task, cancellation=cancellation
        )
        return self._require_payload(response, f"create_task({list_id})")

    async def update_task(
        self,
        task_id: str,
        request: UpdateTaskRequest,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Task:
        """Update a task. Only the fields set on the request are sent.

        :param task_id: Task ID.
        :param request: Changes to apply.
        :param options: Custom task ID options.
        :param cancellation: Cancellation token.
        :returns: The updated task.
        :raises InvalidResponseError: If the API returned no task.
        """
        task_id = self._require_id(task_id, "task_id")
        logger.info(f"Updating task {task_id}: fields={sorted(request.model_fields_set)}")
        response = await self._connection.put(
            build_path(f"task/{task_id}", _task_options(options)),
            request,
            Task,
            cancellation=cancellation,
        )
        return self._require_payload(response, f"update_task({task_id})")

    async def delete_task(
        self,
        task_id: str,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Delete a task.

        :param task_id: Task ID.
        :param options: Custom task ID options.
        :param cancellation: Cancellation token.
        """
        task_id = self._require_id(task_id, "task_id")
        logger.info(f"Deleting task {task_id}")
        await self._connection.delete(
            build_path(f"task/{task_id}", _task_options(options)), cancellation=cancellation
        )

    async def _fetch_list_page(
        self,
        list_id: str,
        request: GetTasksRequest | None,
        page: int,
        cancellation: CancellationToken | None,
    ) -> Page[Task] | None:
        params = request.to_query_params() if request is not None else None
        response = await self._connection.get(
            build_path(f"list/{list_id}/task", self._with_page(params, page)),
            GetTasksResponse,
            cancellation=cancellation,
        )
        if response is None:
            return None
        return Page(items=response.tasks, last_page=response.last_page)

    async def _fetch_team_page(
        self,
        workspace_id: str,
        request: GetFilteredTeamTasksRequest | None,
        page: int,
        cancellation: CancellationToken | None,
    ) -> Page[Task] | None:
        params = request.to_query_params() if request is not None else None
        response = await self._connection.get(
            build_path(f"team/{workspace_id}/task", self._with_page(params, page)),
            GetTasksResponse,
            cancellation=cancellation,
        )
        if response is None:
            return None
        return Page(items=response.tasks, last_page=response.last_page)
