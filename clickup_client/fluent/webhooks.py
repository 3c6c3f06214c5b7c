"""Fluent builder for registering webhooks."""

from __future__ import annotations

from typing import Self

from clickup_client.cancellation import CancellationToken
from clickup_client.fluent.base import FluentRequest
from clickup_client.models.entities import Webhook
from clickup_client.models.requests import CreateWebhookRequest
from clickup_client.services.webhooks import WebhookService


class WebhookCreateBuilder(FluentRequest[CreateWebhookRequest]):
    """Register a webhook in a workspace."""

    request_model = CreateWebhookRequest

    def __init__(self, service: WebhookService, workspace_id: str) -> None:
        """Initialise the builder.

        :param service: Service that registers the webhook.
        :param workspace_id: Workspace (team) the webhook belongs to.
        """
        super().__init__()
        self._service = service
        self._workspace_id = workspace_id

    @property
    def workspace_id(self) -> str:
        """Workspace the webhook belongs to."""
        return self._workspace_id

    def with_endpoint(self, endpoint: str) -> Self:
        """Set the URL events are posted to (required)."""
        return self._set("endpoint", endpoint)

    def with_events(self, *events: str) -> Self:
        """Subscribe to events, e.g. ``taskCreated``; ``*`` subscribes to all."""
        return self._set("events", events)

    def with_space(self, space_id: str) -> Self:
        """Only events from this space."""
        return self._set("space_id", space_id)

    def with_folder(self, folder_id: str) -> Self:
        """Only events from this folder."""
        return self._set("folder_id", folder_id)

    def with_list(self, list_id: str) -> Self:
        """Only events from this list."""
        return self._set("list_id", list_id)

    def with_task(self, task_id: str) -> Self:
        """Only events from this task."""
        return self._set("task_id", task_id)

    async def create(self, *, cancellation: CancellationToken | None = None) -> Webhook:
        """Register the webhook.

        :param cancellation: Cancellation token.
        :returns: The created webhook.
        """
        request = self._build()
        return await self._service.create_webhook(
            self._workspace_id, request, cancellation=cancellation
        )
