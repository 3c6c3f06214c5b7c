"""Entry point that wires the connection, services and fluent builders."""

from __future__ import annotations

import logging

from clickup_client.config import ClickUpSettings
from clickup_client.connection import ApiConnection
from clickup_client.fluent.lists import ListCreateBuilder
from clickup_client.fluent.relationships import DependencyBuilder
from clickup_client.fluent.tasks import (
    TaskCreateBuilder,
    TaskQueryBuilder,
    TaskUpdateBuilder,
    TeamTaskQueryBuilder,
)
from clickup_client.fluent.time_tracking import TimeEntryCreateBuilder, TimeEntryQueryBuilder
from clickup_client.fluent.webhooks import WebhookCreateBuilder
from clickup_client.services import (
    FolderService,
    ListService,
    SpaceService,
    TaskRelationshipService,
    TaskService,
    TimeTrackingService,
    ViewService,
    WebhookService,
)

logger = logging.getLogger(__name__)


class ClickUpClient:
    """Client for the ClickUp v2 API.

    Services are exposed as attributes for direct calls; the builder methods
    open a fresh single-use builder for chained calls::

        async with ClickUpClient() as client:
            page = await client.task_query("901").with_subtasks().get()
            async for entry in client.time_entry_query("123").stream():
                ...
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        settings: ClickUpSettings | None = None,
        connection: ApiConnection | None = None,
    ) -> None:
        """Initialise the client.

        :param api_token: ClickUp API token. Defaults to CLICKUP_API_TOKEN.
        :param base_url: API base URL override.
        :param timeout: Request timeout override in seconds.
        :param settings: Explicit settings instead of the environment.
        :param connection: Pre-built connection; the other arguments are ignored when given.
        :raises ValueError: If no API token is configured.
        """
        self._connection = connection or ApiConnection(
            api_token=api_token, base_url=base_url, timeout=timeout, settings=settings
        )

        self.tasks = TaskService(self._connection)
        self.lists = ListService(self._connection)
        self.folders = FolderService(self._connection)
        self.spaces = SpaceService(self._connection)
        self.time_tracking = TimeTrackingService(self._connection)
        self.views = ViewService(self._connection)
        self.webhooks = WebhookService(self._connection)
        self.relationships = TaskRelationshipService(self._connection)

        logger.debug("ClickUpClient initialised")

    @property
    def connection(self) -> ApiConnection:
        """The underlying API connection."""
        return self._connection

    def task_query(self, list_id: str) -> TaskQueryBuilder:
        """Open a builder that queries the tasks of a list.

        :param list_id: List ID.
        :returns: A new builder.
        """
        return TaskQueryBuilder(self.tasks, list_id)

    def team_task_query(self, workspace_id: str) -> TeamTaskQueryBuilder:
        """Open a builder that queries tasks across a workspace.

        :param workspace_id: Workspace (team) ID.
        :returns: A new builder.
        """
        return TeamTaskQueryBuilder(self.tasks, workspace_id)

    def task_create(self, list_id: str) -> TaskCreateBuilder:
        """Open a builder that creates a task.

        :param list_id: List the task is created in.
        :returns: A new builder.
        """
        return TaskCreateBuilder(self.tasks, list_id)

    def task_update(self, task_id: str) -> TaskUpdateBuilder:
        """Open a builder that updates a task.

        :param task_id: Task to update.
        :returns: A new builder.
        """
        return TaskUpdateBuilder(self.tasks, task_id)

    def time_entry_query(self, workspace_id: str) -> TimeEntryQueryBuilder:
        """Open a builder that queries time entries.

        :param workspace_id: Workspace (team) ID.
        :returns: A new builder.
        """
        return TimeEntryQueryBuilder(self.time_tracking, workspace_id)

    def time_entry_create(self, workspace_id: str) -> TimeEntryCreateBuilder:
        """Open a builder that records a time entry.

        :param workspace_id: Workspace (team) ID.
        :returns: A new builder.
        """
        return TimeEntryCreateBuilder(self.time_tracking, workspace_id)

    def dependency(self, task_id: str) -> DependencyBuilder:
        """Open a builder that adds or removes a task dependency.

        :param task_id: Task whose dependency is changed.
        :returns: A new builder.
        """
        return DependencyBuilder(self.relationships, task_id)

    def list_create(self, folder_id: str) -> ListCreateBuilder:
        """Open a builder that creates a list in a folder.

        :param folder_id: Folder ID.
        :returns: A new builder.
        """
        return ListCreateBuilder(self.lists, folder_id=folder_id)

    def folderless_list_create(self, space_id: str) -> ListCreateBuilder:
        """Open a builder that creates a list directly in a space.

        :param space_id: Space ID.
        :returns: A new builder.
        """
        return ListCreateBuilder(self.lists, space_id=space_id)

    def webhook_create(self, workspace_id: str) -> WebhookCreateBuilder:
        """Open a builder that registers a webhook.

        :param workspace_id: Workspace (team) ID.
        :returns: A new builder.
        """
        return WebhookCreateBuilder(self.webhooks, workspace_id)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._connection.close()

    def __enter__(self) -> ClickUpClient:
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager."""
        self.close()

    async def __aenter__(self) -> ClickUpClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager."""
        self.close()
