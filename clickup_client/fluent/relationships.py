"""Fluent builder for task dependencies."""

from __future__ import annotations

from typing import Self

from clickup_client.cancellation import CancellationToken
from clickup_client.fluent.base import TaskScopedRequest
from clickup_client.models.requests import DependencyRequest
from clickup_client.services.relationships import TaskRelationshipService


class DependencyBuilder(TaskScopedRequest[DependencyRequest]):
    """Add or remove one dependency of a task.

    Exactly one of ``with_depends_on`` and ``with_dependency_of`` must be set
    before the terminal call.
    """

    request_model = DependencyRequest

    def __init__(self, service: TaskRelationshipService, task_id: str) -> None:
        """Initialise the builder.

        :param service: Service that executes the call.
        :param task_id: Task whose dependency is changed.
        """
        super().__init__()
        self._service = service
        self._task_id = task_id

    @property
    def task_id(self) -> str:
        """Task whose dependency is changed."""
        return self._task_id

    def with_depends_on(self, task_id: str) -> Self:
        """The task waits on ``task_id``."""
        return self._set("depends_on", task_id)

    def with_dependency_of(self, task_id: str) -> Self:
        """The task blocks ``task_id``."""
        return self._set("dependency_of", task_id)

    async def add(self, *, cancellation: CancellationToken | None = None) -> None:
        """Add the dependency.

        :param cancellation: Cancellation token.
        """
        self._ensure_not_executed()
        options = self._build_options()
        request = self._build()
        await self._service.add_dependency(self._task_id, request, options, cancellation=cancellation)

    async def delete(self, *, cancellation: CancellationToken | None = None) -> None:
        """Remove the dependency.

        :param cancellation: Cancellation token.
        """
        self._ensure_not_executed()
        options = self._build_options()
        request = self._build()
        await self._service.delete_dependency(
            self._task_id, request, options, cancellation=cancellation
        )
