"""ClickUp request, response and entity models."""

from clickup_client.models.entities import (
    Folder,
    Space,
    Task,
    TaskList,
    TimeEntry,
    User,
    Webhook,
)
from clickup_client.models.enums import TaskOrderBy, TaskPriority, WebhookStatus
from clickup_client.models.requests import (
    CreateListRequest,
    CreateSpaceRequest,
    CreateTaskRequest,
    CreateTimeEntryRequest,
    CreateWebhookRequest,
    DependencyRequest,
    FolderRequest,
    GetFilteredTeamTasksRequest,
    GetTasksRequest,
    GetTimeEntriesRequest,
    TaskAssigneesUpdate,
    TaskIdOptions,
    UpdateTaskRequest,
    UpdateWebhookRequest,
)

__all__ = [
    "CreateListRequest",
    "CreateSpaceRequest",
    "CreateTaskRequest",
    "CreateTimeEntryRequest",
    "CreateWebhookRequest",
    "DependencyRequest",
    "Folder",
    "FolderRequest",
    "GetFilteredTeamTasksRequest",
    "GetTasksRequest",
    "GetTimeEntriesRequest",
    "Space",
    "Task",
    "TaskAssigneesUpdate",
    "TaskIdOptions",
    "TaskList",
    "TaskOrderBy",
    "TaskPriority",
    "TimeEntry",
    "UpdateTaskRequest",
    "UpdateWebhookRequest",
    "User",
    "Webhook",
    "WebhookStatus",
]
