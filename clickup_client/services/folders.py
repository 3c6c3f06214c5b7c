"""Folder endpoints."""

from __future__ import annotations

import logging

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import Folder
from clickup_client.models.requests import FolderRequest
from clickup_client.models.responses import GetFoldersResponse
from clickup_client.query import QueryParams, build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


class FolderService(BaseService):
    """Read and write folders."""

    async def get_folders(
        self,
        space_id: str,
        *,
        archived: bool | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[Folder]:
        """Get the folders in a space.

        :param space_id: Space ID.
        :param archived: Include archived folders.
        :param cancellation: Cancellation token.
        :returns: The folders; empty if the API returned none.
        """
        space_id = self._require_id(space_id, "space_id")
        params = QueryParams().add_bool("archived", archived)
        response = await self._connection.get(
            build_path(f"space/{space_id}/folder", params),
            GetFoldersResponse,
            cancellation=cancellation,
        )
        return self._items_or_empty(response.folders if response else None)

    async def get_folder(
        self,
        folder_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Folder:
        """Get a single folder.

        :param folder_id: Folder ID.
        :param cancellation: Cancellation token.
        :returns: The folder.
        :raises InvalidResponseError: If the API returned no folder.
        """
        folder_id = self._require_id(folder_id, "folder_id")
        response = await self._connection.get(f"folder/{folder_id}", Folder, cancellation=cancellation)
        return self._require_payload(response, f"get_folder({folder_id})")

    async def create_folder(
        self,
        space_id: str,
        request: FolderRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Folder:
        """Create a folder in a space.

        :param space_id: Space ID.
        :param request: Folder to create.
        :param cancellation: Cancellation token.
        :returns: The created folder.
        :raises InvalidResponseError: If the API returned no folder.
        """
        space_id = self._require_id(space_id, "space_id")
        logger.info(f"Creating folder in space {space_id}: {request.name}")
        response = await self._connection.post(
            f"space/{space_id}/folder", request, Folder, cancellation=cancellation
        )
        return self._require_payload(response, f"create_folder({space_id})")

    async def update_folder(
        self,
        folder_id: str,
        request: FolderRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Folder:
        """Rename a folder.

        :param folder_id: Folder ID.
        :param request: New folder name.
        :param cancellation: Cancellation token.
        :returns: The updated folder.
        :raises InvalidResponseError: If the API returned no folder.
        """
        folder_id = self._require_id(folder_id, "folder_id")
        logger.info(f"Updating folder {folder_id}")
        response = await self._connection.put(
            f"folder/{folder_id}", request, Folder, cancellation=cancellation
        )
        return self._require_payload(response, f"update_folder({folder_id})")

    async def delete_folder(
        self,
        folder_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Delete a folder.

        :param folder_id: Folder ID.
        :param cancellation: Cancellation token.
        """
        folder_id = self._require_id(folder_id, "folder_id")
        logger.info(f"Deleting folder {folder_id}")
        await self._connection.delete(f"folder/{folder_id}", cancellation=cancellation)
