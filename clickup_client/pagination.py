"""Paginated streaming engine.

Turns a "fetch page N" coroutine into a single lazy async stream of items.
Pages are requested strictly one after another and only when the consumer
asks for the item following the end of the current page, so at most one page
is held in memory.

Two termination signals exist across ClickUp endpoints: some responses carry
an explicit ``last_page`` flag, others simply return an empty page once the
data runs out. :class:`Page` models both; ``last_page=None`` means the
resource has no flag.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from clickup_client.cancellation import CancellationToken, resolve_token

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus its termination signal.

    :param items: Items on this page in server order; None when the response
        carried no collection at all.
    :param last_page: Explicit last-page flag, or None when the resource
        signals the end with an empty page.
    """

    items: Sequence[T] | None
    last_page: bool | None = None


PageFetcher = Callable[[int, CancellationToken | None], Awaitable[Page[T] | None]]


async def stream_pages(
    fetch_page: PageFetcher[T],
    *,
    cancellation: CancellationToken | None = None,
    description: str = "items",
) -> AsyncIterator[T]:
    """Stream every item across all pages, starting at page 0.

    The stream ends normally when a fetch returns None, a page has no item
    collection, a page is empty, or a page reports ``last_page=True``.
    Errors raised by ``fetch_page`` propagate unchanged and end the stream.

    :param fetch_page: Coroutine function taking (page_index, token) and
        returning the page, or None when there is no more data.
    :param cancellation: Token checked before each page fetch and before each
        yielded item. Falls back to the ambient cancellation_scope token.
    :param description: Label used in log messages.
    :returns: Async iterator over the items.
    :raises OperationCancelledError: If the token is cancelled mid-stream.
    """
    token = resolve_token(cancellation)
    page_index = 0
    total_yielded = 0

    while True:
        if token is not None:
            token.raise_if_cancelled()

        logger.debug(f"Fetching page {page_index} of {description}")
        page = await fetch_page(page_index, token)

        if page is None or page.items is None:
            logger.debug(f"No payload for page {page_index} of {description}, ending stream")
            break

        page_count = 0
        for item in page.items:
            if token is not None:
                token.raise_if_cancelled()
            page_count += 1
            total_yielded += 1
            yield item

        if page.last_page or page_count == 0:
            break

        page_index += 1

    logger.info(f"Finished streaming {total_yielded} {description} over {page_index + 1} page(s)")
