"""Tests for the paginated streaming engine."""

import unittest
from unittest.mock import AsyncMock, call

from clickup_client.cancellation import CancellationToken, cancellation_scope
from clickup_client.exceptions import ClickUpNetworkError, OperationCancelledError
from clickup_client.pagination import Page, stream_pages


async def _collect(iterator) -> list:
    return [item async for item in iterator]


def _fetcher(*pages: Page | None) -> AsyncMock:
    return AsyncMock(side_effect=list(pages))


class TestStreamPagesTermination(unittest.IsolatedAsyncioTestCase):
    """Tests for how stream_pages decides to stop."""

    async def test_stops_on_empty_page(self) -> None:
        """Test that [A,B], [C], [] yields A,B,C over pages 0, 1 and 2."""
        fetch = _fetcher(Page(items=["A", "B"]), Page(items=["C"]), Page(items=[]))

        items = await _collect(stream_pages(fetch))

        self.assertEqual(items, ["A", "B", "C"])
        self.assertEqual(fetch.await_args_list, [call(0, None), call(1, None), call(2, None)])

    async def test_null_first_page_yields_nothing(self) -> None:
        """Test that a None response at page 0 ends the stream after one fetch."""
        fetch = _fetcher(None)

        items = await _collect(stream_pages(fetch))

        self.assertEqual(items, [])
        fetch.assert_awaited_once_with(0, None)

    async def test_null_item_collection_ends_stream(self) -> None:
        """Test that a page without an item collection ends the stream without error."""
        fetch = _fetcher(Page(items=["A"]), Page(items=None))

        items = await _collect(stream_pages(fetch))

        self.assertEqual(items, ["A"])
        self.assertEqual(fetch.await_count, 2)

    async def test_stops_on_last_page_flag(self) -> None:
        """Test that last_page=True stops the stream without fetching another page."""
        fetch = _fetcher(
            Page(items=[1, 2], last_page=False),
            Page(items=[3], last_page=True),
        )

        items = await _collect(stream_pages(fetch))

        self.assertEqual(items, [1, 2, 3])
        self.assertEqual(fetch.await_count, 2)

    async def test_empty_page_stops_even_when_flag_says_more(self) -> None:
        """Test that an empty page with last_page=False still ends the stream."""
        fetch = _fetcher(Page(items=[1], last_page=False), Page(items=[], last_page=False))

        items = await _collect(stream_pages(fetch))

        self.assertEqual(items, [1])
        self.assertEqual(fetch.await_count, 2)

    async def test_yields_sum_of_pages_with_n_plus_one_fetches(self) -> None:
        """Test that n non-empty pages then an empty page cost exactly n+1 fetches."""
        pages = [Page(items=list(range(k * 10, k * 10 + 3))) for k in range(5)]
        fetch = _fetcher(*pages, Page(items=[]))

        items = await _collect(stream_pages(fetch))

        self.assertEqual(len(items), 15)
        self.assertEqual(fetch.await_count, 6)

    async def test_preserves_server_order(self) -> None:
        """Test that items are yielded in the order the server returned them."""
        fetch = _fetcher(Page(items=["z", "a", "m"]), Page(items=[]))

        items = await _collect(stream_pages(fetch))

        self.assertEqual(items, ["z", "a", "m"])


class TestStreamPagesLaziness(unittest.IsolatedAsyncioTestCase):
    """Tests for pull-based page fetching."""

    async def test_next_page_fetched_only_after_current_is_consumed(self) -> None:
        """Test that page 1 is not requested while page 0 still has items."""
        fetch = _fetcher(Page(items=["A", "B"]), Page(items=["C"]), Page(items=[]))
        stream = stream_pages(fetch)

        first = await anext(stream)
        second = await anext(stream)

        self.assertEqual([first, second], ["A", "B"])
        self.assertEqual(fetch.await_count, 1)

        third = await anext(stream)

        self.assertEqual(third, "C")
        self.assertEqual(fetch.await_count, 2)

    async def test_each_call_starts_at_page_zero(self) -> None:
        """Test that two streams over the same fetcher start independent cursors."""
        fetch = _fetcher(
            Page(items=["A"]),
            Page(items=[]),
            Page(items=["A"]),
            Page(items=[]),
        )

        first = await _collect(stream_pages(fetch))
        second = await _collect(stream_pages(fetch))

        self.assertEqual(first, ["A"])
        self.assertEqual(second, ["A"])
        self.assertEqual(
            [c.args[0] for c in fetch.await_args_list],
            [0, 1, 0, 1],
        )


class TestStreamPagesErrors(unittest.IsolatedAsyncioTestCase):
    """Tests for error propagation and cancellation."""

    async def test_transport_error_propagates(self) -> None:
        """Test that an error from the fetcher aborts the stream unchanged."""
        error = ClickUpNetworkError("connection reset")
        fetch = AsyncMock(side_effect=[Page(items=["A"]), error])
        received = []

        with self.assertRaises(ClickUpNetworkError) as context:
            async for item in stream_pages(fetch):
                received.append(item)

        self.assertIs(context.exception, error)
        self.assertEqual(received, ["A"])

    async def test_cancelled_before_start_raises_without_fetching(self) -> None:
        """Test that an already cancelled token prevents any fetch."""
        token = CancellationToken()
        token.cancel()
        fetch = _fetcher(Page(items=["A"]))

        with self.assertRaises(OperationCancelledError):
            await _collect(stream_pages(fetch, cancellation=token))

        fetch.assert_not_awaited()

    async def test_cancel_mid_stream_stops_further_fetches(self) -> None:
        """Test that cancelling after k items raises and issues no new fetch."""
        token = CancellationToken()
        fetch = _fetcher(Page(items=["A", "B", "C"]), Page(items=["D"]), Page(items=[]))
        received = []

        with self.assertRaises(OperationCancelledError):
            async for item in stream_pages(fetch, cancellation=token):
                received.append(item)
                if len(received) == 2:
                    token.cancel("enough")

        self.assertEqual(received, ["A", "B"])
        self.assertEqual(fetch.await_count, 1)

    async def test_cancel_reason_in_message(self) -> None:
        """Test that the cancellation reason appears in the raised error."""
        token = CancellationToken()
        token.cancel("shutting down")

        with self.assertRaises(OperationCancelledError) as context:
            await _collect(stream_pages(_fetcher(None), cancellation=token))

        self.assertIn("shutting down", str(context.exception))

    async def test_ambient_scope_token_is_passed_to_fetcher(self) -> None:
        """Test that the scoped token is used when none is passed explicitly."""
        fetch = _fetcher(Page(items=[]))

        with cancellation_scope() as token:
            await _collect(stream_pages(fetch))

        fetch.assert_awaited_once_with(0, token)

    async def test_normal_end_raises_nothing(self) -> None:
        """Test that a normally terminated stream with zero items raises no error."""
        items = await _collect(stream_pages(_fetcher(Page(items=[]))))

        self.assertEqual(items, [])


if __name__ == "__main__":
    unittest.main()
