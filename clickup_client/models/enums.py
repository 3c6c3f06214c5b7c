"""Enum definitions for ClickUp request options."""

from enum import IntEnum, StrEnum


class TaskOrderBy(StrEnum):
    """Sort keys accepted by the task listing endpoints."""

    ID = "id"
    CREATED = "created"
    UPDATED = "updated"
    DUE_DATE = "due_date"


class TaskPriority(IntEnum):
    """ClickUp priority levels; lower is more urgent."""

    URGENT = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4


class WebhookStatus(StrEnum):
    """States a webhook can be switched between."""

    ACTIVE = "active"
    INACTIVE = "inactive"
