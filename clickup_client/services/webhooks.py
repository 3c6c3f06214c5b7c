"""Webhook endpoints."""

from __future__ import annotations

import logging

from clickup_client.cancellation import CancellationToken
from clickup_client.models.entities import Webhook
from clickup_client.models.requests import CreateWebhookRequest, UpdateWebhookRequest
from clickup_client.models.responses import GetWebhooksResponse, WebhookEnvelope
from clickup_client.services.base import BaseService

logger = logging.getLogger(__name__)


class WebhookService(BaseService):
    """Manage webhook subscriptions."""

    async def get_webhooks(
        self,
        workspace_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> list[Webhook]:
        """Get the webhooks created by the authenticated user in a workspace.

        :param workspace_id: Workspace (team) ID.
        :param cancellation: Cancellation token.
        :returns: The webhooks; empty if the API returned none.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        response = await self._connection.get(
            f"team/{workspace_id}/webhook", GetWebhooksResponse, cancellation=cancellation
        )
        return self._items_or_empty(response.webhooks if response else None)

    async def create_webhook(
        self,
        workspace_id: str,
        request: CreateWebhookRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Webhook:
        """Register a webhook.

        :param workspace_id: Workspace (team) ID.
        :param request: Webhook to register.
        :param cancellation: Cancellation token.
        :returns: The created webhook, including its signing secret.
        :raises InvalidResponseError: If the API returned no webhook.
        """
        workspace_id = self._require_id(workspace_id, "workspace_id")
        logger.info(f"Creating webhook in workspace {workspace_id} for {request.endpoint}")
        response = await self._connection.post(
            f"team/{workspace_id}/webhook", request, WebhookEnvelope, cancellation=cancellation
        )
        operation = f"create_webhook({workspace_id})"
        envelope = self._require_payload(response, operation)
        return self._require_payload(envelope.webhook, operation)

    async def update_webhook(
        self,
        webhook_id: str,
        request: UpdateWebhookRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Webhook:
        """Update a webhook's endpoint, events or status.

        :param webhook_id: Webhook ID.
        :param request: Changes to apply.
        :param cancellation: Cancellation token.
        :returns: The updated webhook.
        :raises InvalidResponseError: If the API returned no webhook.
        """
        webhook_id = self._require_id(webhook_id, "webhook_id")
        logger.info(f"Updating webhook {webhook_id}")
        response = await self._connection.put(
            f"webhook/{webhook_id}", request, WebhookEnvelope, cancellation=cancellation
        )
        operation = f"update_webhook({webhook_id})"
        envelope = self._require_payload(response, operation)
        return self._require_payload(envelope.webhook, operation)

    async def delete_webhook(
        self,
        webhook_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Delete a webhook.

        :param webhook_id: Webhook ID.
        :param cancellation: Cancellation token.
        """
        webhook_id = self._require_id(webhook_id, "webhook_id")
        logger.info(f"Deleting webhook {webhook_id}")
        await self._connection.delete(f"webhook/{webhook_id}", cancellation=cancellation)
