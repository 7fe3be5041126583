"""
Run Commands.

Add, list and remove runs in the queue. Each command sends exactly one
request and prints the JSON response.
"""

from urllib.parse import quote

import typer

from queue_cli.cli.client import get_api_client
from queue_cli.cli.dispatch import run_command
from queue_cli.cli.output import print_json_bytes
from queue_cli.cli.spec_upload import encode_run_spec
from queue_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

RUNS_PATH = "v1/runs"


def create_app() -> typer.Typer:
    """Build the run management command group."""
    app = typer.Typer(help="Run management", no_args_is_help=True)

    @app.command("list")
    def list_runs() -> None:
        """
        Lists all active runs in the queue.

        Examples:
            queue-cli run list
        """
        run_command(_list_runs)

    @app.command("add")
    def add_run(
        spec_type: str = typer.Argument(..., metavar="TYPE", help="Type of run"),
        spec_file: str = typer.Argument(
            ..., metavar="PATH", help="Path to run spec file, or 'stdin' to read from stdin"
        ),
    ) -> None:
        """
        Adds a new run to the queue from a spec file.

        Examples:
            queue-cli run add spark ./nightly.json
            cat nightly.json | queue-cli run add spark stdin
        """
        run_command(lambda: _add_run(spec_type, spec_file))

    @app.command("remove")
    def remove_run(
        name: str = typer.Argument(..., help="Name of run to delete"),
    ) -> None:
        """
        Uninstalls an active run from the queue.

        Examples:
            queue-cli run remove nightly
        """
        run_command(lambda: _remove_run(name))

    return app


async def _list_runs() -> None:
    response = await get_api_client().get(RUNS_PATH)
    print_json_bytes(response.content)


async def _add_run(spec_type: str, spec_file: str) -> None:
    # Encoding must succeed before anything is sent.
    payload, content_type = encode_run_spec(spec_type, spec_file)

    log_with_source(
        logger,
        "cli",
        "info",
        "Submitting run spec",
        run_type=spec_type,
        spec_file=spec_file,
        size=len(payload),
    )

    response = await get_api_client().post(
        RUNS_PATH,
        content=payload,
        headers={"Content-Type": content_type},
    )
    print_json_bytes(response.content)


async def _remove_run(name: str) -> None:
    response = await get_api_client().delete(f"{RUNS_PATH}/{quote(name, safe='')}")
    log_with_source(logger, "cli", "info", "Run removed", run=name)
    print_json_bytes(response.content)
