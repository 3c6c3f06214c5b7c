"""Stream tasks or time entries to stdout.

Usage::

    python -m clickup_client tasks <list_id> [--status open] [--include-closed]
    python -m clickup_client time-entries <workspace_id> [--days 7]

The API token is read from CLICKUP_API_TOKEN (or the nearest .env file above the
working directory).
"""

import argparse
import asyncio
import logging
import signal
from datetime import UTC, datetime, timedelta
from types import FrameType

from dotenv import find_dotenv, load_dotenv

from clickup_client.cancellation import CancellationToken, cancellation_scope
from clickup_client.exceptions import ClickUpError, OperationCancelledError
from clickup_client.fluent.client import ClickUpClient
from clickup_client.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clickup_client", description=__doc__.splitlines()[0])
    subparsers = parser.add_subparsers(dest="command", required=True)

    tasks = subparsers.add_parser("tasks", help="Stream the tasks of a list")
    tasks.add_argument("list_id")
    tasks.add_argument("--status", action="append", default=[], help="Only this status (repeatable)")
    tasks.add_argument("--include-closed", action="store_true")

    entries = subparsers.add_parser("time-entries", help="Stream time entries of a workspace")
    entries.add_argument("workspace_id")
    entries.add_argument("--days", type=int, default=7, help="How many days back to look")

    return parser


async def _stream_tasks(client: ClickUpClient, args: argparse.Namespace) -> int:
    query = client.task_query(args.list_id)
    if args.status:
        query.with_statuses(*args.status)
    if args.include_closed:
        query.with_include_closed()

    count = 0
    async for task in query.stream():
        status = task.status.status if task.status else "-"
        print(f"{task.id}\t{status}\t{task.name}")
        count += 1
    return count


async def _stream_time_entries(client: ClickUpClient, args: argparse.Namespace) -> int:
    end = datetime.now(tz=UTC)
    query = (
        client.time_entry_query(args.workspace_id)
        .with_start_date(end - timedelta(days=args.days))
        .with_end_date(end)
    )

    count = 0
    async for entry in query.stream():
        task_name = entry.task.name if entry.task else "-"
        minutes = (entry.duration or 0) // 60000
        print(f"{entry.id}\t{minutes}m\t{task_name}\t{entry.description or ''}")
        count += 1
    return count


def _setup_signal_handlers(token: CancellationToken) -> None:
    """Cancel the run on SIGINT or SIGTERM.

    The stream stops at its next checkpoint. A second SIGINT while the
    cancellation is pending raises KeyboardInterrupt straight away.

    :param token: Token cancelled by the first signal.
    """

    def signal_handler(signum: int, frame: FrameType | None) -> None:
        if token.is_cancelled and signum == signal.SIGINT:
            raise KeyboardInterrupt
        logger.info(f"Received signal {signum}, cancelling")
        token.cancel(f"received signal {signum}")

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


async def run(args: argparse.Namespace, token: CancellationToken) -> int:
    """Run one command.

    :param args: Parsed command line arguments.
    :param token: Token installed as the ambient cancellation for the run.
    :returns: Number of items printed.
    """
    with ClickUpClient() as client, cancellation_scope(token):
        if args.command == "tasks":
            return await _stream_tasks(client, args)
        return await _stream_time_entries(client, args)


def main() -> None:
    """Entry point for the command line tool."""
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()
    args = _build_parser().parse_args()

    token = CancellationToken()
    _setup_signal_handlers(token)
    try:
        count = asyncio.run(run(args, token))
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        raise SystemExit(130) from None
    except OperationCancelledError as e:
        logger.warning(f"Cancelled: {e}")
        raise SystemExit(130) from e
    except ClickUpError as e:
        logger.error(f"ClickUp request failed: {e}")
        raise SystemExit(1) from e
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise SystemExit(2) from e

    logger.info(f"Printed {count} item(s)")


if __name__ == "__main__":
    main()
