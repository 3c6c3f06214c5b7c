"""Tests for request models."""

import unittest
from datetime import UTC, datetime, timedelta

from pydantic import ValidationError

from clickup_client.models.enums import TaskOrderBy, TaskPriority
from clickup_client.models.requests import (
    CreateListRequest,
    CreateTaskRequest,
    CreateTimeEntryRequest,
    CreateWebhookRequest,
    DependencyRequest,
    GetFilteredTeamTasksRequest,
    GetTasksRequest,
    GetTimeEntriesRequest,
    TaskAssigneesUpdate,
    TaskIdOptions,
    UpdateTaskRequest,
    UpdateWebhookRequest,
    to_unix_ms,
)

JAN_1 = datetime(2024, 1, 1, tzinfo=UTC)
JAN_1_MS = 1704067200000


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


class TestToUnixMs(unittest.TestCase):
    """Tests for to_unix_ms."""

    def test_converts_aware_datetime(self) -> None:
        """Test that an aware datetime converts to epoch milliseconds."""
        self.assertEqual(to_unix_ms(JAN_1), JAN_1_MS)

    def test_keeps_millisecond_precision(self) -> None:
        """Test that sub-second precision is kept to the millisecond."""
        self.assertEqual(to_unix_ms(JAN_1 + timedelta(milliseconds=250)), JAN_1_MS + 250)


class TestRequestModelBase(unittest.TestCase):
    """Tests for behaviour shared by every request model."""

    def test_models_are_frozen(self) -> None:
        """Test that a constructed request cannot be mutated."""
        request = GetTasksRequest(archived=True)

        with self.assertRaises(ValidationError):
            request.archived = False

    def test_unknown_fields_are_rejected(self) -> None:
        """Test that an unexpected field fails validation."""
        with self.assertRaises(ValidationError):
            GetTasksRequest(archive=True)

    def test_blank_strings_are_rejected(self) -> None:
        """Test that whitespace-only names fail validation."""
        with self.assertRaises(ValidationError):
            CreateTaskRequest(name="   ")


class TestTaskIdOptions(unittest.TestCase):
    """Tests for TaskIdOptions."""

    def test_team_required_for_custom_ids(self) -> None:
        """Test that custom_task_ids without team_id is rejected."""
        with self.assertRaises(ValidationError):
            TaskIdOptions(custom_task_ids=True)

    def test_query_params(self) -> None:
        """Test that both options render in order."""
        options = TaskIdOptions(custom_task_ids=True, team_id="123")

        self.assertEqual(options.to_query_params().render(), "?custom_task_ids=true&team_id=123")

    def test_empty_options_render_nothing(self) -> None:
        """Test that unset options produce no parameters."""
        self.assertEqual(TaskIdOptions().to_query_params().render(), "")


class TestGetTasksRequest(unittest.TestCase):
    """Tests for GetTasksRequest."""

    def test_empty_request_renders_nothing(self) -> None:
        """Test that a request with no filters has no parameters."""
        self.assertEqual(len(GetTasksRequest().to_query_params()), 0)

    def test_query_params(self) -> None:
        """Test that filters render as ClickUp expects them."""
        request = GetTasksRequest(
            archived=False,
            order_by=TaskOrderBy.CREATED,
            statuses=("open", "in progress"),
            assignees=(1, 2),
            due_date_gt=JAN_1,
        )

        self.assertEqual(
            request.to_query_params().pairs,
            [
                ("archived", "false"),
                ("order_by", "created"),
                ("statuses[]", "open"),
                ("statuses[]", "in progress"),
                ("assignees[]", "1"),
                ("assignees[]", "2"),
                ("due_date_gt", str(JAN_1_MS)),
            ],
        )

    def test_inverted_date_range_rejected(self) -> None:
        """Test that a lower bound after the upper bound is rejected."""
        with self.assertRaises(ValidationError):
            GetTasksRequest(date_created_gt=JAN_1 + timedelta(days=1), date_created_lt=JAN_1)

    def test_equal_bounds_rejected(self) -> None:
        """Test that an empty exclusive window is rejected."""
        with self.assertRaises(ValidationError):
            GetTasksRequest(due_date_gt=JAN_1, due_date_lt=JAN_1)

    def test_team_request_adds_location_filters(self) -> None:
        """Test that workspace filters follow the list filters."""
        request = GetFilteredTeamTasksRequest(
            include_closed=True,
            space_ids=("s1",),
            project_ids=("f1",),
            list_ids=("l1", "l2"),
            parent="p1",
        )

        self.assertEqual(
            request.to_query_params().pairs,
            [
                ("include_closed", "true"),
                ("space_ids[]", "s1"),
                ("project_ids[]", "f1"),
                ("list_ids[]", "l1"),
                ("list_ids[]", "l2"),
                ("parent", "p1"),
            ],
        )


class TestCreateTaskRequest(unittest.TestCase):
    """Tests for CreateTaskRequest."""

    def test_dump_sends_only_set_fields(self) -> None:
        """Test that the body contains only set fields with dates in milliseconds."""
        request = CreateTaskRequest(name="Write report", priority=TaskPriority.HIGH, due_date=JAN_1)

        self.assertEqual(_dump(request), {"name": "Write report", "priority": 2, "due_date": JAN_1_MS})

    def test_start_after_due_rejected(self) -> None:
        """Test that a start date after the due date is rejected."""
        with self.assertRaises(ValidationError):
            CreateTaskRequest(name="x", start_date=JAN_1 + timedelta(hours=1), due_date=JAN_1)

    def test_negative_estimate_rejected(self) -> None:
        """Test that a negative time estimate is rejected."""
        with self.assertRaises(ValidationError):
            CreateTaskRequest(name="x", time_estimate=-1)


class TestUpdateTaskRequest(unittest.TestCase):
    """Tests for UpdateTaskRequest."""

    def test_empty_update_rejected(self) -> None:
        """Test that an update without any field is rejected."""
        with self.assertRaises(ValidationError):
            UpdateTaskRequest()

    def test_false_value_counts_as_change(self) -> None:
        """Test that explicitly setting a field to False is a change and is sent."""
        request = UpdateTaskRequest(archived=False)

        self.assertEqual(_dump(request), {"archived": False})

    def test_assignee_changes(self) -> None:
        """Test that assignee additions and removals are sent as add/rem."""
        request = UpdateTaskRequest(assignees=TaskAssigneesUpdate(add=(1,), rem=(2,)))

        self.assertEqual(_dump(request), {"assignees": {"add": [1], "rem": [2]}})


class TestGetTimeEntriesRequest(unittest.TestCase):
    """Tests for GetTimeEntriesRequest."""

    def test_assignees_render_comma_separated(self) -> None:
        """Test that assignees render as one comma-joined value."""
        request = GetTimeEntriesRequest(start_date=JAN_1, assignees=(5, 6), include_task_tags=True)

        self.assertEqual(
            request.to_query_params().render(),
            f"?start_date={JAN_1_MS}&assignee=5,6&include_task_tags=true",
        )

    def test_start_after_end_rejected(self) -> None:
        """Test that an inverted window is rejected."""
        with self.assertRaises(ValidationError):
            GetTimeEntriesRequest(start_date=JAN_1, end_date=JAN_1 - timedelta(days=1))

    def test_single_location_filter(self) -> None:
        """Test that two location filters are rejected."""
        with self.assertRaises(ValidationError):
            GetTimeEntriesRequest(list_id="1", space_id="2")


class TestCreateTimeEntryRequest(unittest.TestCase):
    """Tests for CreateTimeEntryRequest."""

    def test_dump_uses_wire_names(self) -> None:
        """Test that the task ID is sent as tid and tags as objects."""
        request = CreateTimeEntryRequest(
            start=JAN_1, duration=60000, task_id="abc", tags=("deep work",)
        )

        self.assertEqual(
            _dump(request),
            {
                "start": JAN_1_MS,
                "duration": 60000,
                "tid": "abc",
                "tags": [{"name": "deep work"}],
            },
        )

    def test_duration_or_stop_required(self) -> None:
        """Test that a span needs a duration or a stop time."""
        with self.assertRaises(ValidationError):
            CreateTimeEntryRequest(start=JAN_1)

    def test_stop_must_follow_start(self) -> None:
        """Test that a stop time before the start is rejected."""
        with self.assertRaises(ValidationError):
            CreateTimeEntryRequest(start=JAN_1, stop=JAN_1 - timedelta(minutes=1))

    def test_zero_duration_rejected(self) -> None:
        """Test that a zero duration is rejected."""
        with self.assertRaises(ValidationError):
            CreateTimeEntryRequest(start=JAN_1, duration=0)


class TestDependencyRequest(unittest.TestCase):
    """Tests for DependencyRequest."""

    def test_neither_direction_rejected(self) -> None:
        """Test that a dependency without a direction is rejected."""
        with self.assertRaises(ValidationError):
            DependencyRequest()

    def test_both_directions_rejected(self) -> None:
        """Test that setting both directions is rejected."""
        with self.assertRaises(ValidationError):
            DependencyRequest(depends_on="a", dependency_of="b")

    def test_single_direction_accepted(self) -> None:
        """Test that one direction is valid and renders as a query."""
        request = DependencyRequest(dependency_of="b")

        self.assertEqual(request.to_query_params().render(), "?dependency_of=b")
        self.assertEqual(_dump(request), {"dependency_of": "b"})


class TestContainerRequests(unittest.TestCase):
    """Tests for list and webhook request models."""

    def test_list_content_is_exclusive(self) -> None:
        """Test that plain and markdown content cannot both be set."""
        with self.assertRaises(ValidationError):
            CreateListRequest(name="Backlog", content="a", markdown_content="*a*")

    def test_webhook_endpoint_must_be_http(self) -> None:
        """Test that a non-HTTP endpoint is rejected."""
        with self.assertRaises(ValidationError):
            CreateWebhookRequest(endpoint="ftp://example.test", events=("taskCreated",))

    def test_webhook_needs_events(self) -> None:
        """Test that an empty event list is rejected."""
        with self.assertRaises(ValidationError):
            CreateWebhookRequest(endpoint="https://example.test/hook", events=())

    def test_webhook_single_location(self) -> None:
        """Test that a webhook cannot be scoped to two locations."""
        with self.assertRaises(ValidationError):
            CreateWebhookRequest(
                endpoint="https://example.test/hook",
                events=("taskCreated",),
                space_id="1",
                list_id="2",
            )

    def test_webhook_update_needs_a_change(self) -> None:
        """Test that an empty webhook update is rejected."""
        with self.assertRaises(ValidationError):
            UpdateWebhookRequest()


if __name__ == "__main__":
    unittest.main()
