"""Resource services: the only layer that talks to the API connection."""

from clickup_client.services.base import BaseService
from clickup_client.services.folders import FolderService
from clickup_client.services.lists import ListService
from clickup_client.services.relationships import TaskRelationshipService
from clickup_client.services.spaces import SpaceService
from clickup_client.services.tasks import TaskService
from clickup_client.services.time_tracking import TimeTrackingService
from clickup_client.services.views import ViewService
from clickup_client.services.webhooks import WebhookService

__all__ = [
    "BaseService",
    "FolderService",
    "ListService",
    "SpaceService",
    "TaskRelationshipService",
    "TaskService",
    "TimeTrackingService",
    "ViewService",
    "WebhookService",
]
