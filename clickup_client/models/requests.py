"""Immutable request models for ClickUp endpoints.

Every model is frozen and rejects unknown fields. Constraints that span
several fields (mutually exclusive options, date ranges) are checked when the
model is constructed, so an invalid request never reaches the transport.

Query models render themselves through ``to_query_params``; body models are
serialised by the connection with ``exclude_unset`` so that an option the
caller never set is absent from the request rather than sent as a default.
"""

from datetime import datetime
from typing import Annotated, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_serializer,
    field_validator,
    model_validator,
)

from clickup_client.models.enums import TaskOrderBy, TaskPriority, WebhookStatus
from clickup_client.query import ListStyle, QueryParams

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def to_unix_ms(value: datetime) -> int:
    """Convert a datetime to Unix milliseconds, the format ClickUp expects.

    :param value: Datetime to convert. Naive values are treated as local time.
    :returns: Milliseconds since the epoch.
    """
    return int(value.timestamp() * 1000)


def _ms_or_none(value: datetime | None) -> int | None:
    return to_unix_ms(value) if value is not None else None


def _check_range(lower: datetime | None, upper: datetime | None, name: str) -> None:
    if lower is not None and upper is not None and lower >= upper:
        raise ValueError(f"{name}_gt must be earlier than {name}_lt")


class RequestModel(BaseModel):
    """Base for all request models."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class TaskIdOptions(RequestModel):
    """Options for endpoints addressed by a task ID.

    :param custom_task_ids: Treat the task ID as a custom task ID.
    :param team_id: Workspace ID, required when custom_task_ids is set.
    """

    custom_task_ids: bool | None = None
    team_id: NonBlankStr | None = None

    @model_validator(mode="after")
    def team_required_for_custom_ids(self) -> Self:
        """Require a workspace when custom task IDs are used."""
        if self.custom_task_ids and self.team_id is None:
            raise ValueError("team_id is required when custom_task_ids is true")
        return self

    def to_query_params(self) -> QueryParams:
        """Render the options as query parameters.

        :returns: Query parameters.
        """
        return QueryParams().add_bool("custom_task_ids", self.custom_task_ids).add("team_id", self.team_id)


class GetTasksRequest(RequestModel):
    """Filters for listing the tasks of a list.

    Date filters are exclusive bounds and are sent as Unix milliseconds.
    The page index is not part of the request; it is supplied per fetch.
    """

    archived: bool | None = None
    include_markdown_description: bool | None = None
    order_by: TaskOrderBy | None = None
    reverse: bool | None = None
    subtasks: bool | None = None
    statuses: tuple[NonBlankStr, ...] | None = None
    include_closed: bool | None = None
    assignees: tuple[int, ...] | None = None
    watchers: tuple[int, ...] | None = None
    tags: tuple[NonBlankStr, ...] | None = None
    due_date_gt: datetime | None = None
    due_date_lt: datetime | None = None
    date_created_gt: datetime | None = None
    date_created_lt: datetime | None = None
    date_updated_gt: datetime | None = None
    date_updated_lt: datetime | None = None
    date_done_gt: datetime | None = None
    date_done_lt: datetime | None = None
    custom_items: tuple[int, ...] | None = None

    @model_validator(mode="after")
    def check_date_ranges(self) -> Self:
        """Reject empty date windows."""
        _check_range(self.due_date_gt, self.due_date_lt, "due_date")
        _check_range(self.date_created_gt, self.date_created_lt, "date_created")
        _check_range(self.date_updated_gt, self.date_updated_lt, "date_updated")
        _check_range(self.date_done_gt, self.date_done_lt, "date_done")
        return self

    def to_query_params(self) -> QueryParams:
        """Render the filters as query parameters.

        :returns: Query parameters, without the page index.
        """
        params = QueryParams()
        params.add_bool("archived", self.archived)
        params.add_bool("include_markdown_description", self.include_markdown_description)
        params.add("order_by", self.order_by.value if self.order_by else None)
        params.add_bool("reverse", self.reverse)
        params.add_bool("subtasks", self.subtasks)
        params.add_list("statuses", self.statuses)
        params.add_bool("include_closed", self.include_closed)
        params.add_list("assignees", self.assignees)
        params.add_list("watchers", self.watchers)
        params.add_list("tags", self.tags)
        params.add("due_date_gt", _ms_or_none(self.due_date_gt))
        params.add("due_date_lt", _ms_or_none(self.due_date_lt))
        params.add("date_created_gt", _ms_or_none(self.date_created_gt))
        params.add("date_created_lt", _ms_or_none(self.date_created_lt))
        params.add("date_updated_gt", _ms_or_none(self.date_updated_gt))
        params.add("date_updated_lt", _ms_or_none(self.date_updated_lt))
        params.add("date_done_gt", _ms_or_none(self.date_done_gt))
        params.add("date_done_lt", _ms_or_none(self.date_done_lt))
        params.add_list("custom_items", self.custom_items)
        return params


class GetFilteredTeamTasksRequest(GetTasksRequest):
    """Filters for listing tasks across a whole workspace."""

    space_ids: tuple[NonBlankStr, ...] | None = None
    project_ids: tuple[NonBlankStr, ...] | None = Field(None, description="Folder IDs")
    list_ids: tuple[NonBlankStr, ...] | None = None
    parent: NonBlankStr | None = None

    def to_query_params(self) -> QueryParams:
        """Render the filters as query parameters.

        :returns: Query parameters, without the page index.
        """
        params = super().to_query_params()
        params.add_list("space_ids", self.space_ids)
        params.add_list("project_ids", self.project_ids)
        params.add_list("list_ids", self.list_ids)
        params.add("parent", self.parent)
        return params


class CreateTaskRequest(RequestModel):
    """Body for creating a task in a list."""

    name: NonBlankStr
    description: str | None = None
    markdown_description: str | None = None
    assignees: tuple[int, ...] | None = None
    tags: tuple[NonBlankStr, ...] | None = None
    status: NonBlankStr | None = None
    priority: TaskPriority | None = None
    due_date: datetime | None = None
    due_date_time: bool | None = None
    start_date: datetime | None = None
    start_date_time: bool | None = None
    time_estimate: int | None = Field(None, ge=0, description="Estimate in milliseconds")
    points: float | None = Field(None, ge=0)
    notify_all: bool | None = None
    parent: NonBlankStr | None = None
    links_to: NonBlankStr | None = None

    @model_validator(mode="after")
    def start_before_due(self) -> Self:
        """Reject a start date after the due date."""
        if self.start_date and self.due_date and self.start_date > self.due_date:
            raise ValueError("start_date must not be after due_date")
        return self

    @field_serializer("due_date", "start_date")
    def serialise_dates(self, value: datetime | None) -> int | None:
        """Send dates as Unix milliseconds."""
        return _ms_or_none(value)


class TaskAssigneesUpdate(RequestModel):
    """Assignee changes applied by a task update."""

    add: tuple[int, ...] = ()
    rem: tuple[int, ...] = ()


class UpdateTaskRequest(RequestModel):
    """Body for updating a task. Only fields that were set are sent."""

    name: NonBlankStr | None = None
    description: str | None = None
    markdown_description: str | None = None
    status: NonBlankStr | None = None
    priority: TaskPriority | None = None
    due_date: datetime | None = None
    due_date_time: bool | None = None
    start_date: datetime | None = None
    start_date_time: bool | None = None
    time_estimate: int | None = Field(None, ge=0)
    points: float | None = Field(None, ge=0)
    parent: NonBlankStr | None = None
    archived: bool | None = None
    assignees: TaskAssigneesUpdate | None = None

    @model_validator(mode="after")
    def require_a_change(self) -> Self:
        """Reject an update that changes nothing."""
        if not self.model_fields_set:
            raise ValueError("At least one field must be set to update a task")
        return self

    @field_serializer("due_date", "start_date")
    def serialise_dates(self, value: datetime | None) -> int | None:
        """Send dates as Unix milliseconds."""
        return _ms_or_none(value)


class GetTimeEntriesRequest(RequestModel):
    """Filters for listing time entries in a workspace.

    At most one location filter (task, list, folder, space) may be set.
    """

    start_date: datetime | None = None
    end_date: datetime | None = None
    assignees: tuple[int, ...] | None = Field(None, description="User IDs")
    task_id: NonBlankStr | None = None
    list_id: NonBlankStr | None = None
    folder_id: NonBlankStr | None = None
    space_id: NonBlankStr | None = None
    include_task_tags: bool | None = None
    include_location_names: bool | None = None
    is_billable: bool | None = None

    @model_validator(mode="after")
    def check_filters(self) -> Self:
        """Reject an inverted date window or several location filters."""
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")

        locations = [
            name
            for name in ("task_id", "list_id", "folder_id", "space_id")
            if getattr(self, name) is not None
        ]
        if len(locations) > 1:
            raise ValueError(f"Only one location filter may be set, got: {', '.join(locations)}")
        return self

    def to_query_params(self) -> QueryParams:
        """Render the filters as query parameters.

        :returns: Query parameters, without the page index.
        """
        params = QueryParams()
        params.add("start_date", _ms_or_none(self.start_date))
        params.add("end_date", _ms_or_none(self.end_date))
        params.add_list("assignee", self.assignees, style=ListStyle.COMMA)
        params.add("task_id", self.task_id)
        params.add("list_id", self.list_id)
        params.add("folder_id", self.folder_id)
        params.add("space_id", self.space_id)
        params.add_bool("include_task_tags", self.include_task_tags)
        params.add_bool("include_location_names", self.include_location_names)
        params.add_bool("is_billable", self.is_billable)
        return params


class CreateTimeEntryRequest(RequestModel):
    """Body for creating a time entry.

    Either a duration or a stop time is required.
    """

    start: datetime
    duration: int | None = Field(None, gt=0, description="Duration in milliseconds")
    stop: datetime | None = None
    description: str | None = None
    tags: tuple[NonBlankStr, ...] | None = None
    billable: bool | None = None
    assignee: int | None = None
    task_id: NonBlankStr | None = Field(None, serialization_alias="tid")

    @model_validator(mode="after")
    def check_span(self) -> Self:
        """Require a duration or a stop time after the start."""
        if self.duration is None and self.stop is None:
            raise ValueError("Either duration or stop must be provided")
        if self.stop is not None and self.stop <= self.start:
            raise ValueError("stop must be after start")
        return self

    @field_serializer("start", "stop")
    def serialise_times(self, value: datetime | None) -> int | None:
        """Send times as Unix milliseconds."""
        return _ms_or_none(value)

    @field_serializer("tags")
    def serialise_tags(self, value: tuple[str, ...] | None) -> list[dict[str, str]] | None:
        """Send tags in the object form the endpoint expects."""
        if value is None:
            return None
        return [{"name": tag} for tag in value]


class DependencyRequest(RequestModel):
    """A dependency between the addressed task and one other task.

    Exactly one direction must be given: the addressed task waits on
    ``depends_on``, or it blocks ``dependency_of``.
    """

    depends_on: NonBlankStr | None = None
    dependency_of: NonBlankStr | None = None

    @model_validator(mode="after")
    def exactly_one_direction(self) -> Self:
        """Enforce that exactly one of depends_on and dependency_of is set."""
        if (self.depends_on is None) == (self.dependency_of is None):
            raise ValueError("Exactly one of depends_on or dependency_of must be provided")
        return self

    def to_query_params(self) -> QueryParams:
        """Render the dependency as query parameters, as used when deleting.

        :returns: Query parameters.
        """
        return QueryParams().add("depends_on", self.depends_on).add("dependency_of", self.dependency_of)


class CreateListRequest(RequestModel):
    """Body for creating a list in a folder or directly in a space."""

    name: NonBlankStr
    content: str | None = None
    markdown_content: str | None = None
    due_date: datetime | None = None
    due_date_time: bool | None = None
    priority: TaskPriority | None = None
    assignee: int | None = None
    status: NonBlankStr | None = None

    @model_validator(mode="after")
    def single_description(self) -> Self:
        """Reject setting both plain and markdown content."""
        if self.content is not None and self.markdown_content is not None:
            raise ValueError("Only one of content or markdown_content may be set")
        return self

    @field_serializer("due_date")
    def serialise_due_date(self, value: datetime | None) -> int | None:
        """Send the due date as Unix milliseconds."""
        return _ms_or_none(value)


class FolderRequest(RequestModel):
    """Body for creating or renaming a folder."""

    name: NonBlankStr


class CreateSpaceRequest(RequestModel):
    """Body for creating a space."""

    name: NonBlankStr
    multiple_assignees: bool | None = None


class CreateWebhookRequest(RequestModel):
    """Body for registering a webhook.

    At most one location (space, folder, list, task) may scope the webhook.
    """

    endpoint: NonBlankStr
    events: tuple[NonBlankStr, ...] = Field(..., min_length=1)
    space_id: NonBlankStr | None = None
    folder_id: NonBlankStr | None = None
    list_id: NonBlankStr | None = None
    task_id: NonBlankStr | None = None

    @field_validator("endpoint")
    @classmethod
    def check_endpoint(cls, v: str) -> str:
        """Require an absolute HTTP(S) URL.

        :param v: Endpoint URL.
        :returns: The validated URL.
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        return v

    @model_validator(mode="after")
    def single_location(self) -> Self:
        """Reject more than one location scope."""
        locations = [
            name
            for name in ("space_id", "folder_id", "list_id", "task_id")
            if getattr(self, name) is not None
        ]
        if len(locations) > 1:
            raise ValueError(f"Only one location may be set, got: {', '.join(locations)}")
        return self


class UpdateWebhookRequest(RequestModel):
    """Body for updating a webhook."""

    endpoint: NonBlankStr | None = None
    events: tuple[NonBlankStr, ...] | None = Field(None, min_length=1)
    status: WebhookStatus | None = None

    @model_validator(mode="after")
    def require_a_change(self) -> Self:
        """Reject an update that changes nothing."""
        if not self.model_fields_set:
            raise ValueError("At least one field must be set to update a webhook")
        return self
