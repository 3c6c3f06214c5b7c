"""Task dependency and link endpoints."""

from __future__ import annotations

import logging

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import Task
from clickup_client.models.requests import DependencyRequest, TaskIdOptions
from clickup_client.models.responses import TaskEnvelope
from clickup_client.query import QueryParams, build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


class TaskRelationshipService(BaseService):
    """Manage dependencies and links between tasks."""

    async def add_dependency(
        self,
        task_id: str,
        request: DependencyRequest,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Add a dependency to a task.

        :param task_id: Task the dependency is added to.
        :param request: The other task and the direction of the dependency.
        :param options: Custom task ID options.
        :param cancellation: Cancellation token.
        """
        task_id = self._require_id(task_id, "task_id")
        logger.info(f"Adding dependency to task {task_id}")
        params = options.to_query_params() if options is not None else None
        await self._connection.post_no_content(
            build_path(f"task/{task_id}/dependency", params), request, cancellation=cancellation
        )

    async def delete_dependency(
        self,
        task_id: str,
        request: DependencyRequest,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Remove a dependency from a task.

        The dependency is identified in the query string rather than a body.

        :param task_id: Task the dependency is removed from.
        :param request: The other task and the direction of the dependency.
        :param options: Custom task ID options.
        :param cancellation: Cancellation token.
        """
        task_id = self._require_id(task_id, "task_id")
        logger.info(f"Deleting dependency from task {task_id}")
        params = request.to_query_params()
        if options is not None:
            params.extend(options.to_query_params())
        await self._connection.delete(
            build_path(f"task/{task_id}/dependency", params), cancellation=cancellation
        )

    async def add_task_link(
        self,
        task_id: str,
        links_to: str,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Task:
        """Link two tasks.

        :param task_id: Task to link from.
        :param links_to: Task to link to.
        :param options: Custom task ID options.
        :param cancellation: Cancellation token.
        :returns: The source task, including its linked tasks.
        :raises InvalidResponseError: If the API returned no task.
        """
        task_id = self._require_id(task_id, "task_id")
        links_to = self._require_id(links_to, "links_to")
        logger.info(f"Linking task {task_id} to {links_to}")
        response = await self._connection.post(
            build_path(f"task/{task_id}/link/{links_to}", self._options(options)),
            None,
            TaskEnvelope,
            cancellation=cancellation,
        )
        operation = f"add_task_link({task_id}, {links_to})"
        envelope = self._require_payload(response, operation)
        return self._require_payload(envelope.task, operation)

    async def delete_task_link(
        self,
        task_id: str,
        links_to: str,
        options: TaskIdOptions | None = None,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Remove a link between two tasks.

        :param task_id: Task to unlink from.
        :param links_to: Linked task.
        :param options: Custom task ID options.
        :param cancellation: Cancellation token.
        """
        task_id = self._require_id(task_id, "task_id")
        links_to = self._require_id(links_to, "links_to")
        logger.info(f"Unlinking task {task_id} from {links_to}")
        await self._connection.delete(
            build_path(f"task/{task_id}/link/{links_to}", self._options(options)),
            cancellation=cancellation,
        )

    @staticmethod
    def _options(options: TaskIdOptions | None) -> QueryParams | None:
        return options.to_query_params() if options is not None else None
