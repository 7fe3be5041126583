"""
Output Rendering.

Responses are printed to stdout; progress messages and errors go to stderr.
"""

import json
from collections.abc import Awaitable

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def print_json_bytes(data: bytes) -> None:
    """Pretty-print a JSON response body, or print it verbatim if it is not JSON."""
    try:
        parsed = json.loads(data)
    except ValueError:
        console.print(data.decode("utf-8", errors="replace"), markup=False, soft_wrap=True)
        return
    console.print(json.dumps(parsed, indent=2), markup=False, soft_wrap=True)


def print_message(message: str) -> None:
    """Print a progress message to stderr."""
    err_console.print(message, markup=False)


def print_error(message: str) -> None:
    """Print an error diagnostic to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


async def print_response(result: Awaitable[bytes]) -> None:
    """Await a query and pretty-print its response body."""
    print_json_bytes(await result)
