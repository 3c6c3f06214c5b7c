"""Space endpoints."""

from __future__ import annotations

import logging

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import Space
from clickup_client.models.requests import CreateSpaceRequest
from clickup_client.models.responses import GetSpacesResponse
from clickup_client.query import QueryParams, build_path
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


class SpaceService(BaseService):
    """Read and write spaces."""

    async def get_spaces(
        self,
        workspace_id: str,
        *,
        archived: bool | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[Space]:
        """Get the spaces in a workspace.

        :param workspace_id: Workspace (team) ID.
        :param archived: Include archived spaces.
        :param cancellation: Cancellation token.
        :returns: The spaces; empty if the API returned none.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        params = QueryParams().add_bool("archived", archived)
        response = await self._connection.get(
            build_path(f"team/{workspace_id}/space", params),
            GetSpacesResponse,
            cancellation=cancellation,
        )
        return self._items_or_empty(response.spaces if response else None)

    async def get_space(
        self,
        space_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Space:
        """Get a single space.

        :param space_id: Space ID.
        :param cancellation: Cancellation token.
        :returns: The space.
        :raises InvalidResponseError: If the API returned no space.
        """
        space_id = self._require_id(space_id, "space_id")
        response = await self._connection.get(f"space/{space_id}", Space, cancellation=cancellation)
        return self._require_payload(response, f"get_space({space_id})")

    async def create_space(
        self,
        workspace_id: str,
        request: CreateSpaceRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Space:
        """Create a space in a workspace.

        :param workspace_id: Workspace (team) ID.
        :param request: Space to create.
        :param cancellation: Cancellation token.
        :returns: The created space.
        :raises InvalidResponseError: If the API returned no space.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        logger.info(f"Creating space in workspace {workspace_id}: {request.name}")
        response = await self._connection.post(
            f"team/{workspace_id}/space", request, Space, cancellation=cancellation
        )
        return self._require_payload(response, f"create_space({workspace_id})")

    async def delete_space(
        self,
        space_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Delete a space.

        :param space_id: Space ID.
        :param cancellation: Cancellation token.
        """
        space_id = self._require_id(space_id, "space_id")
        logger.info(f"Deleting space {space_id}")
        await self._connection.delete(f"space/{space_id}", cancellation=cancellation)
