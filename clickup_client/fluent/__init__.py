"""Fluent request builders and the ClickUpClient entry point."""

from clickup_client.fluent.base import FluentRequest, TaskScopedRequest
from clickup_client.fluent.client import ClickUpClient
from clickup_client.fluent.lists import ListCreateBuilder
from clickup_client.fluent.relationships import DependencyBuilder
from clickup_client.fluent.tasks import (
    TaskCreateBuilder,
    TaskQueryBuilder,
    TaskUpdateBuilder,
    TeamTaskQueryBuilder,
)
from clickup_client.fluent.time_tracking import TimeEntryCreateBuilder, TimeEntryQueryBuilder
from clickup_client.fluent.webhooks import WebhookCreateBuilder

__all__ = [
    "ClickUpClient",
    "DependencyBuilder",
    "FluentRequest",
    "ListCreateBuilder",
    "TaskCreateBuilder",
    "TaskQueryBuilder",
    "TaskScopedRequest",
    "TaskUpdateBuilder",
    "TeamTaskQueryBuilder",
    "TimeEntryCreateBuilder",
    "TimeEntryQueryBuilder",
    "WebhookCreateBuilder",
]
