"""List endpoints."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import TaskList
from clickup_client.models.requests import CreateListRequest
from clickup_client.models.responses import GetListsResponse
from clickup_client.pagination import Page, stream_pages
from clickup_client.query import QueryParams, build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


class ListService(BaseService):
    """Read and write lists, both inside folders and directly in spaces."""

    async def get_list(
        self,
        list_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> TaskList:
        """Get a single list.

        :param list_id: List ID.
        :param cancellation: Cancellation token.
        :returns: The list.
        :raises InvalidResponseError: If the API returned no list.
        """
        list_id = self._require_id(list_id, "list_id")
        response = await self._connection.get(f"list/{list_id}", TaskList, cancellation=cancellation)
        return self._require_payload(response, f"get_list({list_id})")

    async def get_lists(
        self,
        folder_id: str,
        *,
        archived: bool | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[TaskList]:
        """Get the lists in a folder.

        :param folder_id: Folder ID.
        :param archived: Include archived lists.
        :param cancellation: Cancellation token.
        :returns: The lists; empty if the API returned none.
        """
        folder_id = self._require_id(folder_id, "folder_id")
        params = QueryParams().add_bool("archived", archived)
        response = await self._connection.get(
            build_path(f"folder/{folder_id}/list", params),
            GetListsResponse,
            cancellation=cancellation,
        )
        return self._items_or_empty(response.lists if response else None)

    async def get_folderless_lists(
        self,
        space_id: str,
        *,
        archived: bool | None = None,
        page: int = 0,
        cancellation: CancellationToken | None = None,
    ) -> list[TaskList]:
        """Get one page of the lists that sit directly in a space.

        :param space_id: Space ID.
        :param archived: Include archived lists.
        :param page: Zero-based page index.
        :param cancellation: Cancellation token.
        :returns: The lists; empty if the API returned none.
        """
        space_id = self._require_id(space_id, "space_id")
        page = self._require_page(page)
        result = await self._fetch_folderless_page(space_id, archived, page, cancellation)
        return self._items_or_empty(result.items if result else None)

    def stream_folderless_lists(
        self,
        space_id: str,
        *,
        archived: bool | None = None,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[TaskList]:
        """Stream the lists that sit directly in a space.

        This endpoint has no last-page flag; the stream ends at the first
        empty page. A page that repeats the previous page's lists also ends
        it, since the server may return every list regardless of the page.

        :param space_id: Space ID.
        :param archived: Include archived lists.
        :param cancellation: Token checked before each page and each item.
        :returns: Async iterator over the lists.
        """
        space_id = self._require_id(space_id, "space_id")
        logger.info(f"Streaming folderless lists for space {space_id}")

        previous_ids: list[str] | None = None

        async def fetch(page: int, token: CancellationToken | None) -> Page[TaskList] | None:
            nonlocal previous_ids
            result = await self._fetch_folderless_page(space_id, archived, page, token)
            if result is None or not result.items:
                return result
            page_ids = [lst.id for lst in result.items]
            if page_ids == previous_ids:
                logger.debug(f"Page {page} repeats page {page - 1} for space {space_id}, stopping")
                return Page(items=[])
            previous_ids = page_ids
            return result

        return stream_pages(
            fetch, cancellation=cancellation, description=f"folderless lists in space {space_id}"
        )

    async def create_list(
        self,
        folder_id: str,
        request: CreateListRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> TaskList:
        """Create a list in a folder.

        :param folder_id: Folder ID.
        :param request: List to create.
        :param cancellation: Cancellation token.
        :returns: The created list.
        :raises InvalidResponseError: If the API returned no list.
        """
        folder_id = self._require_id(folder_id, "folder_id")
        logger.info(f"Creating list in folder {folder_id}: {request.name}")
        response = await self._connection.post(
            f"folder/{folder_id}/list", request, TaskList, cancellation=cancellation
        )
        return self._require_payload(response, f"create_list({folder_id})")

    async def create_folderless_list(
        self,
        space_id: str,
        request: CreateListRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> TaskList:
        """Create a list directly in a space.

        :param space_id: Space ID.
        :param request: List to create.
        :param cancellation: Cancellation token.
        :returns: The created list.
        :raises InvalidResponseError: If the API returned no list.
        """
        space_id = self._require_id(space_id, "space_id")
        logger.info(f"Creating folderless list in space {space_id}: {request.name}")
        response = await self._connection.post(
            f"space/{space_id}/list", request, TaskList, cancellation=cancellation
        )
        return self._require_payload(response, f"create_folderless_list({space_id})")

    async def delete_list(
        self,
        list_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Delete a list.

        :param list_id: List ID.
        :param cancellation: Cancellation token.
        """
        list_id = self._require_id(list_id, "list_id")
        logger.info(f"Deleting list {list_id}")
        await self._connection.delete(f"list/{list_id}", cancellation=cancellation)

    async def _fetch_folderless_page(
        self,
        space_id: str,
        archived: bool | None,
        page: int,
        cancellation: CancellationToken | None,
    ) -> Page[TaskList] | None:
        params = QueryParams().add_bool("archived", archived)
        response = await self._connection.get(
            build_path(f"space/{space_id}/list", self._with_page(params, page)),
            GetListsResponse,
            cancellation=cancellation,
        )
        if response is None:
            return None
        return Page(items=response.lists)
