"""View endpoints."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import Task
from clickup_client.models.responses import GetTasksResponse
from clickup_client.pagination import Page, stream_pages
from clickup_client.query import build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


class ViewService(BaseService):
    """Read the tasks shown in a view.

    A view applies its own saved filters and sorting, so the listing takes
    no options beyond the page index.
    """

    async def get_view_tasks(
        self,
        view_id: str,
        *,
        page: int = 0,
        cancellation: CancellationToken | None = None,
    ) -> Page[Task]:
        """Get one page of the tasks in a view.

        :param view_id: View ID.
        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The page; a missing collection is returned as empty.
        """
        view_id = self._require_id(view_id, "view_id")
        page = self._require_page(page)
        result = await self._fetch_page(view_id, page, cancellation)
        if result is None:
            return Page(items=[], last_page=None)
        return Page(items=self._items_or_empty(result.items), last_page=result.last_page)

    def stream_view_tasks(
        self,
        view_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[Task]:
        """Stream every task in a view across all pages.

        :param view_id: View ID.
        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the tasks.
        """
        view_id = self._require_id(view_id, "view_id")
        logger.info(f"Streaming tasks for view {view_id}")

        async def fetch(page: int, token: CancellationToken | None) -> Page[Task] | None:
            return await self._fetch_page(view_id, page, token)

        return stream_pages(fetch, cancellation=cancellation, description=f"tasks in view {view_id}")

    async def _fetch_page(
        self,
        view_id: str,
        page: int,
        cancellation: CancellationToken | None,
    ) -> Page[Task] | None:
        response = await self._connection.get(
            build_path(f"view/{view_id}/task", self._with_page(None, page)),
            GetTasksResponse,
            cancellation=cancellation,
        )
        if response is None:
            return None
        return Page(items=response.tasks, last_page=response.last_page)
