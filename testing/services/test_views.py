"""Tests for ViewService."""

import unittest
from unittest.mock import MagicMock

from clickup_client.cancellation import CancellationToken
from clickup_client.connection import ApiConnection
from clickup_client.exceptions import OperationCancelledError, RequestValidationError
from clickup_client.models.entities import Task
from clickup_client.models.responses import GetTasksResponse
from clickup_client.services.views import ViewService


def _page(*task_ids: str, last_page: bool | None = None) -> GetTasksResponse:
    return GetTasksResponse(tasks=[Task(id=t, name=f"Task {t}") for t in task_ids], last_page=last_page)


class TestViewService(unittest.IsolatedAsyncioTestCase):
    """Tests for ViewService."""

    def setUp(self) -> None:
        """Set up a service over a mocked connection."""
        self.connection = MagicMock(spec=ApiConnection)
        self.service = ViewService(self.connection)

    async def test_get_view_tasks(self) -> None:
        """Test that one page is read from the view task endpoint."""
        self.connection.get.return_value = _page("1", last_page=False)

        page = await self.service.get_view_tasks("V1", page=3)

        self.assertEqual([t.id for t in page.items], ["1"])
        self.assertFalse(page.last_page)
        self.connection.get.assert_awaited_once_with(
            "view/V1/task?page=3", GetTasksResponse, cancellation=None
        )

    async def test_null_response_is_empty(self) -> None:
        """Test that a null response gives an empty page."""
        self.connection.get.return_value = None

        page = await self.service.get_view_tasks("V1")

        self.assertEqual(page.items, [])
        self.assertIsNone(page.last_page)

    async def test_blank_view_id_rejected(self) -> None:
        """Test that a blank view ID fails before any request."""
        with self.assertRaises(RequestValidationError):
            await self.service.get_view_tasks(" ")

        self.connection.get.assert_not_called()

    async def test_stream_follows_last_page(self) -> None:
        """Test that the stream walks pages until last_page is set."""
        self.connection.get.side_effect = [
            _page("1", "2", last_page=False),
            _page("3", last_page=True),
        ]

        tasks = [t.id async for t in self.service.stream_view_tasks("V1")]

        self.assertEqual(tasks, ["1", "2", "3"])
        self.assertEqual(
            [c.args[0] for c in self.connection.get.await_args_list],
            ["view/V1/task?page=0", "view/V1/task?page=1"],
        )

    async def test_stream_stops_on_null_response(self) -> None:
        """Test that a null page ends the stream without an error."""
        self.connection.get.side_effect = [_page("1", last_page=False), None]

        tasks = [t.id async for t in self.service.stream_view_tasks("V1")]

        self.assertEqual(tasks, ["1"])

    async def test_cancelled_stream_sends_nothing(self) -> None:
        """Test that a cancelled token stops the stream before the first fetch."""
        token = CancellationToken()
        token.cancel("done")

        with self.assertRaises(OperationCancelledError):
            [t async for t in self.service.stream_view_tasks("V1", cancellation=token)]

        self.connection.get.assert_not_called()


if __name__ == "__main__":
    unittest.main()
