"""Response envelopes returned by ClickUp endpoints.

Collections are optional: an envelope whose collection is missing or null
parses to None so the service layer can apply its empty-collection policy.
"""

from pydantic import Field

from clickup_client.models.entities import (
    ClickUpModel,
    Folder,
    Space,
    Task,
    TaskList,
    TimeEntry,
    Webhook,
)


class GetTasksResponse(ClickUpModel):
    """One page of tasks, from a list or the filtered workspace endpoint."""

    tasks: list[Task] | None = None
    last_page: bool | None = Field(None, description="True when no further page exists")


class GetListsResponse(ClickUpModel):
    """Lists in a folder or folderless lists in a space."""

    lists: list[TaskList] | None = None


class GetFoldersResponse(ClickUpModel):
    """Folders in a space."""

    folders: list[Folder] | None = None


class GetSpacesResponse(ClickUpModel):
    """Spaces in a workspace."""

    spaces: list[Space] | None = None


class GetTimeEntriesResponse(ClickUpModel):
    """One page of time entries."""

    data: list[TimeEntry] | None = None


class TimeEntryEnvelope(ClickUpModel):
    """A single time entry wrapped in ``data``."""

    data: TimeEntry | None = None


class GetWebhooksResponse(ClickUpModel):
    """Webhooks registered in a workspace."""

    webhooks: list[Webhook] | None = None


class WebhookEnvelope(ClickUpModel):
    """A single webhook wrapped in ``webhook``, as returned by create and update."""

    id: str | None = None
    webhook: Webhook | None = None


class TaskEnvelope(ClickUpModel):
    """A single task wrapped in ``task``, as returned by the task link endpoint."""

    task: Task | None = None
