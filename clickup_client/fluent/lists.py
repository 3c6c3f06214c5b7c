"""Fluent builder for creating lists."""

from __future__ import annotations

from datetime import datetime
from typing import Self

from clickup_client.cancellation import CancellationToken
from clickup_client.exceptions import RequestValidationError
from clickup_client.fluent.base import FluentRequest
from clickup_client.models.entities import TaskList
from clickup_client.models.enums import TaskPriority
from clickup_client.models.requests import CreateListRequest
from clickup_client.services.lists import ListService


class ListCreateBuilder(FluentRequest[CreateListRequest]):
    """Create a list in a folder, or directly in a space."""

    request_model = CreateListRequest

    def __init__(
        self,
        service: ListService,
        *,
        folder_id: str | None = None,
        space_id: str | None = None,
    ) -> None:
        """Initialise the builder.

        :param service: Service that creates the list.
        :param folder_id: Folder to create the list in.
        :param space_id: Space to create a folderless list in.
        :raises RequestValidationError: Unless exactly one container is given.
        """
        if (folder_id is None) == (space_id is None):
            raise RequestValidationError("Exactly one of folder_id or space_id must be provided")
        super().__init__()
        self._service = service
        self._folder_id = folder_id
        self._space_id = space_id
        self._container_id: str = folder_id if folder_id is not None else str(space_id)

    @property
    def folder_id(self) -> str | None:
        """Folder the list is created in, if any."""
        return self._folder_id

    @property
    def space_id(self) -> str | None:
        """Space a folderless list is created in, if any."""
        return self._space_id

    def with_name(self, name: str) -> Self:
        """Set the list name (required)."""
        return self._set("name", name)

    def with_content(self, content: str) -> Self:
        """Set a plain text description."""
        return self._set("content", content)

    def with_markdown_content(self, content: str) -> Self:
        """Set a markdown description."""
        return self._set("markdown_content", content)

    def with_due_date(self, value: datetime) -> Self:
        """Set the due date."""
        return self._set("due_date", value)

    def with_due_date_time(self, include_time: bool = True) -> Self:
        """Whether the due date carries a time of day."""
        return self._set("due_date_time", include_time)

    def with_priority(self, priority: TaskPriority | int) -> Self:
        """Set the priority."""
        return self._set("priority", priority)

    def with_assignee(self, user_id: int) -> Self:
        """Set the list owner."""
        return self._set("assignee", user_id)

    def with_status(self, status: str) -> Self:
        """Set the list colour status."""
        return self._set("status", status)

    async def create(self, *, cancellation: CancellationToken | None = None) -> TaskList:
        """Create the list.

        :param cancellation: Cancellation token.
        :returns: The created list.
        """
        request = self._build()
        if self._folder_id is not None:
            return await self._service.create_list(
                self._container_id, request, cancellation=cancellation
            )
        return await self._service.create_folderless_list(
            self._container_id, request, cancellation=cancellation
        )
