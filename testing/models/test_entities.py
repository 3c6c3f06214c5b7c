"""Tests for entity and response models."""

import unittest
from datetime import UTC, datetime

from clickup_client.models.entities import Task, TimeEntry, User
from clickup_client.models.responses import GetTasksResponse, GetTimeEntriesResponse


class TestTask(unittest.TestCase):
    """Tests for the Task model."""

    def test_parses_api_payload(self) -> None:
        """Test that a typical task payload parses with nested objects."""
        task = Task.model_validate(
            {
                "id": "86abc",
                "name": "Write report",
                "status": {"status": "open", "color": "#d3d3d3", "type": "open", "orderindex": 0},
                "assignees": [{"id": 42, "username": "sam", "profilePicture": "https://img"}],
                "tags": [{"name": "urgent"}],
                "list": {"id": "901", "name": "Backlog"},
                "date_created": "1704067200000",
                "unknown_field": "ignored",
            }
        )

        self.assertEqual(task.status.status, "open")
        self.assertEqual(task.assignees[0].profile_picture, "https://img")
        self.assertEqual(task.list_ref.id, "901")
        self.assertEqual(task.created_at, datetime(2024, 1, 1, tzinfo=UTC))

    def test_numeric_ids_become_strings(self) -> None:
        """Test that numeric identifiers are normalised to strings."""
        task = Task.model_validate({"id": 123, "name": "x", "team_id": 456})

        self.assertEqual(task.id, "123")
        self.assertEqual(task.team_id, "456")

    def test_missing_dates_are_none(self) -> None:
        """Test that absent or malformed timestamps give None."""
        task = Task.model_validate({"id": "1", "name": "x", "due_date": "soon"})

        self.assertIsNone(task.created_at)
        self.assertIsNone(task.due_at)


class TestTimeEntry(unittest.TestCase):
    """Tests for the TimeEntry model."""

    def test_running_timer(self) -> None:
        """Test that a negative duration marks a running timer."""
        entry = TimeEntry.model_validate({"id": "1", "duration": "-1704067200000", "start": "1704067200000"})

        self.assertTrue(entry.is_running)
        self.assertEqual(entry.started_at, datetime(2024, 1, 1, tzinfo=UTC))

    def test_stopped_entry(self) -> None:
        """Test that a positive duration is not running."""
        entry = TimeEntry.model_validate({"id": "1", "duration": 3600000, "user": {"id": 7}})

        self.assertFalse(entry.is_running)
        self.assertEqual(entry.user, User(id=7))


class TestResponses(unittest.TestCase):
    """Tests for response envelopes."""

    def test_missing_collection_is_none(self) -> None:
        """Test that an absent collection parses to None rather than empty."""
        self.assertIsNone(GetTasksResponse.model_validate({}).tasks)
        self.assertIsNone(GetTimeEntriesResponse.model_validate({"data": None}).data)

    def test_last_page_flag(self) -> None:
        """Test that last_page is read when present."""
        response = GetTasksResponse.model_validate({"tasks": [], "last_page": True})

        self.assertEqual(response.tasks, [])
        self.assertTrue(response.last_page)


if __name__ == "__main__":
    unittest.main()
