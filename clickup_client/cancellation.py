"""Cooperative cancellation for requests and paginated streams."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from clickup_client.exceptions import OperationCancelledError

logger = logging.getLogger(__name__)

# Ambient token for the current call chain
_current_token: ContextVar[CancellationToken | None] = ContextVar(
    "clickup_cancellation_token", default=None
)


class CancellationToken:
    """A one-shot cancellation signal.

    Cancelling is thread-safe and idempotent. Work that honours the token
    checks it at its own checkpoints (before each request, before each page
    fetch); work already in flight is allowed to finish.
    """

    def __init__(self) -> None:
        """Initialise an un-cancelled token."""
        self._event = threading.Event()
        self._reason: str | None = None

    @property
    def is_cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """Reason passed to cancel(), if any."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation.

        :param reason: Optional human readable reason, included in the raised error.
        """
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()
        logger.debug(f"Cancellation requested: reason={reason}")

    def raise_if_cancelled(self) -> None:
        """Raise if cancellation has been requested.

        :raises OperationCancelledError: If the token is cancelled.
        """
        if self._event.is_set():
            message = "Operation was cancelled"
            if self._reason:
                message = f"{message}: {self._reason}"
            raise OperationCancelledError(message)


def get_current_token() -> CancellationToken | None:
    """Get the ambient cancellation token.

    :returns: Token installed by the innermost cancellation_scope, or None.
    """
    return _current_token.get()


def resolve_token(token: CancellationToken | None) -> CancellationToken | None:
    """Pick the explicit token if given, otherwise the ambient one.

    :param token: Explicitly passed token.
    :returns: The token to honour, or None if there is none.
    """
    return token if token is not None else _current_token.get()


@contextmanager
def cancellation_scope(token: CancellationToken | None = None) -> Iterator[CancellationToken]:
    """Install a cancellation token for every client call made inside the block.

    Scopes nest; the innermost one wins. The previous token is restored on exit.

    :param token: Token to install. A fresh one is created if not provided.
    :returns: The installed token.
    """
    scope_token = token or CancellationToken()
    reset = _current_token.set(scope_token)
    try:
        yield scope_token
    finally:
        _current_token.reset(reset)
