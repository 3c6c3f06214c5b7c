"""Pydantic models for ClickUp domain entities.

ClickUp returns identifiers as either strings or numbers depending on the
endpoint, and timestamps as strings of Unix milliseconds. Identifiers are
normalised to strings; timestamps are kept as returned and exposed as
datetimes where useful.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def _parse_timestamp(value: str | None) -> datetime | None:
    """Convert a Unix milliseconds string to an aware datetime.

    :param value: Timestamp string as returned by the API.
    :returns: UTC datetime, or None if the value is missing or malformed.
    """
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=UTC)
    except ValueError:
        return None


class ClickUpModel(BaseModel):
    """Base for entities parsed from API responses."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, populate_by_name=True)


class User(ClickUpModel):
    """A ClickUp user as embedded in other entities."""

    id: int
    username: str | None = None
    email: str | None = None
    color: str | None = None
    initials: str | None = None
    profile_picture: str | None = Field(default=None, alias="profilePicture")


class Status(ClickUpModel):
    """A task status."""

    status: str
    color: str | None = None
    type: str | None = None
    orderindex: int | None = None


class Priority(ClickUpModel):
    """A task priority."""

    id: str | None = None
    priority: str | None = None
    color: str | None = None


class Tag(ClickUpModel):
    """A tag attached to a task or time entry."""

    name: str
    tag_fg: str | None = None
    tag_bg: str | None = None


class Location(ClickUpModel):
    """A reference to the list, folder or space that contains a task."""

    id: str
    name: str | None = None
    access: bool | None = None


class TaskLink(ClickUpModel):
    """A link between two tasks."""

    task_id: str
    link_id: str
    date_created: str | None = None


class Dependency(ClickUpModel):
    """A waiting-on or blocking relationship between two tasks."""

    task_id: str
    depends_on: str
    type: int | None = None
    date_created: str | None = None


class Task(ClickUpModel):
    """A ClickUp task."""

    id: str = Field(..., min_length=1, description="Task ID")
    custom_id: str | None = Field(None, description="Custom task ID, if enabled")
    name: str = Field(..., description="Task name")
    text_content: str | None = None
    description: str | None = None
    markdown_description: str | None = None
    status: Status | None = None
    orderindex: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    date_closed: str | None = None
    date_done: str | None = None
    archived: bool | None = None
    creator: User | None = None
    assignees: list[User] = Field(default_factory=list)
    watchers: list[User] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    parent: str | None = Field(None, description="ID of the parent task for subtasks")
    priority: Priority | None = None
    due_date: str | None = None
    start_date: str | None = None
    points: float | None = None
    time_estimate: int | None = Field(None, description="Estimate in milliseconds")
    time_spent: int | None = Field(None, description="Tracked time in milliseconds")
    dependencies: list[Dependency] = Field(default_factory=list)
    linked_tasks: list[TaskLink] = Field(default_factory=list)
    team_id: str | None = None
    url: str | None = None
    list_ref: Location | None = Field(None, alias="list", description="Containing list")
    folder: Location | None = None
    space: Location | None = None

    @property
    def created_at(self) -> datetime | None:
        """Creation time as a UTC datetime."""
        return _parse_timestamp(self.date_created)

    @property
    def due_at(self) -> datetime | None:
        """Due time as a UTC datetime."""
        return _parse_timestamp(self.due_date)


class TaskList(ClickUpModel):
    """A ClickUp list."""

    id: str = Field(..., min_length=1, description="List ID")
    name: str
    orderindex: int | None = None
    content: str | None = None
    status: Status | None = None
    priority: Priority | None = None
    assignee: User | None = None
    task_count: int | None = None
    due_date: str | None = None
    start_date: str | None = None
    archived: bool | None = None
    override_statuses: bool | None = None
    permission_level: str | None = None
    folder: Location | None = None
    space: Location | None = None


class Folder(ClickUpModel):
    """A ClickUp folder."""

    id: str = Field(..., min_length=1, description="Folder ID")
    name: str
    orderindex: int | None = None
    override_statuses: bool | None = None
    hidden: bool | None = None
    task_count: str | None = None
    archived: bool | None = None
    space: Location | None = None
    lists: list[TaskList] = Field(default_factory=list)


class Space(ClickUpModel):
    """A ClickUp space."""

    id: str = Field(..., min_length=1, description="Space ID")
    name: str
    private: bool | None = None
    color: str | None = None
    avatar: str | None = None
    admin_can_manage: bool | None = None
    archived: bool | None = None
    multiple_assignees: bool | None = None
    statuses: list[Status] = Field(default_factory=list)


class TimeEntryTask(ClickUpModel):
    """The task a time entry is tracked against."""

    id: str
    custom_id: str | None = None
    name: str | None = None
    status: Status | None = None


class TimeEntry(ClickUpModel):
    """A tracked time entry."""

    id: str = Field(..., min_length=1, description="Time entry ID")
    task: TimeEntryTask | None = None
    wid: str | None = Field(None, description="Workspace ID")
    user: User | None = None
    billable: bool = False
    start: str | None = None
    end: str | None = None
    duration: int | None = Field(
        None, description="Duration in milliseconds; negative while a timer is running"
    )
    description: str | None = None
    tags: list[Tag] = Field(default_factory=list)
    source: str | None = None
    at: str | None = None
    task_url: str | None = None

    @property
    def started_at(self) -> datetime | None:
        """Start time as a UTC datetime."""
        return _parse_timestamp(self.start)

    @property
    def is_running(self) -> bool:
        """Whether the entry is a timer that has not been stopped."""
        return self.duration is not None and self.duration < 0


class WebhookHealth(ClickUpModel):
    """Delivery health of a webhook."""

    status: str | None = None
    fail_count: int | None = None


class Webhook(ClickUpModel):
    """A webhook subscription."""

    id: str = Field(..., min_length=1, description="Webhook ID")
    userid: int | None = None
    team_id: str | None = None
    endpoint: str
    client_id: str | None = None
    events: list[str] = Field(default_factory=list)
    task_id: str | None = None
    list_id: str | None = None
    folder_id: str | None = None
    space_id: str | None = None
    health: WebhookHealth | None = None
    secret: str | None = None
    status: str | None = None
