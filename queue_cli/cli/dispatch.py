"""
Command Dispatch.

Every command body is an async function run through run_command. This is
the only place that turns an ApplicationError into a printed diagnostic and
a non-zero exit status.
"""

import asyncio
from collections.abc import Awaitable, Callable

import typer

from queue_cli.cli.client import get_api_client
from queue_cli.cli.output import print_error
from queue_cli.core.exceptions import ApplicationError
from queue_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

Action = Callable[[], Awaitable[None]]


async def _run_action(action: Action) -> None:
    client = get_api_client()
    try:
        await action()
    finally:
        await client.close()


def run_command(action: Action) -> None:
    """
    Run an async command body to completion.

    Raises:
        typer.Exit: With status 1 if the command raised an ApplicationError.
    """
    try:
        asyncio.run(_run_action(action))
    except ApplicationError as e:
        log_with_source(logger, "cli", "debug", "Command failed", code=e.code, error=e.message)
        print_error(e.message)
        raise typer.Exit(1) from e
