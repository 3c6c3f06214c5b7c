"""Base class for fluent request builders."""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ValidationError

from clickup_client.exceptions import BuilderAlreadyExecutedError, RequestValidationError
from clickup_client.models.requests import TaskIdOptions

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_fields(model: type[ModelT], fields: dict[str, Any]) -> ModelT:
    """Validate collected builder fields into a request model.

    :param model: Request model class.
    :param fields: Field values keyed by field name.
    :returns: The constructed request.
    :raises RequestValidationError: If any constraint fails.
    """
    try:
        return model.model_validate(fields)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        summary = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or model.__name__}: {error['msg']}"
            for error in errors
        )
        raise RequestValidationError(f"Invalid {model.__name__}: {summary}", errors) from e


class FluentRequest(Generic[ModelT]):
    """Accumulates request options and performs one terminal call.

    ``with_*`` methods record a single field and return the builder, so calls
    chain. Nothing is validated and no I/O happens until a terminal method
    runs; at that point the fields are validated into an immutable request
    model and handed to the bound service.

    A builder is single-use: once a terminal method has validated its request,
    every further ``with_*`` or terminal call raises
    BuilderAlreadyExecutedError. A terminal call that fails validation does
    not consume the builder, so the caller can correct the fields and retry.
    """

    request_model: type[ModelT]

    def __init__(self) -> None:
        """Initialise an empty builder."""
        self._fields: dict[str, Any] = {}
        self._executed = False

    @property
    def pending_fields(self) -> dict[str, Any]:
        """A deep copy of the fields set so far."""
        return copy.deepcopy(self._fields)

    @property
    def is_executed(self) -> bool:
        """Whether a terminal method has already run."""
        return self._executed

    def _set(self, name: str, value: Any) -> Self:
        self._ensure_not_executed()
        self._fields[name] = value
        return self

    def _ensure_not_executed(self) -> None:
        if self._executed:
            raise BuilderAlreadyExecutedError(type(self).__name__)

    def _build(self) -> ModelT:
        """Validate the pending fields and consume the builder.

        :returns: The request model.
        :raises BuilderAlreadyExecutedError: If the builder was already used.
        :raises RequestValidationError: If the fields are invalid.
        """
        self._ensure_not_executed()
        request = validate_fields(self.request_model, self._fields)
        self._executed = True
        logger.debug(f"{type(self).__name__} built {self.request_model.__name__}")
        return request


class TaskScopedRequest(FluentRequest[ModelT]):
    """A builder for an endpoint addressed by a task ID.

    Adds the custom task ID options accepted by every such endpoint.
    """

    def __init__(self) -> None:
        """Initialise an empty builder."""
        super().__init__()
        self._options: dict[str, Any] = {}

    def with_custom_task_ids(self, team_id: str) -> Self:
        """Treat task IDs as custom task IDs within a workspace.

        :param team_id: Workspace (team) ID the custom IDs belong to.
        :returns: This builder.
        """
        self._ensure_not_executed()
        self._options = {"custom_task_ids": True, "team_id": team_id}
        return self

    def _build_options(self) -> TaskIdOptions | None:
        if not self._options:
            return None
        return validate_fields(TaskIdOptions, self._options)
