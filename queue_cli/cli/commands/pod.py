"""Pod Commands."""

from typing import Optional

import typer

from queue_cli.cli.dispatch import run_command
from queue_cli.cli.output import print_response
from queue_cli.queries import PodQueries


def create_app(queries: PodQueries) -> typer.Typer:
    """Build the pod command group."""
    app = typer.Typer(help="View Pod/Task state", no_args_is_help=True)

    @app.command("list")
    def list_pods() -> None:
        """Display the list of known pod instances."""
        run_command(lambda: print_response(queries.list()))

    @app.command("status")
    def status(pod: Optional[str] = typer.Argument(None, help="Name of a specific pod instance to display")) -> None:
        """Display the status for tasks in one pod or all pods."""
        run_command(lambda: print_response(queries.status(pod)))

    @app.command("info")
    def info(pod: str = typer.Argument(..., help="Name of the pod instance to display")) -> None:
        """Display the full state information for tasks in a pod."""
        run_command(lambda: print_response(queries.info(pod)))

    @app.command("restart")
    def restart(pod: str = typer.Argument(..., help="Name of the pod instance to restart")) -> None:
        """Restarts a given pod without moving it to a new agent."""
        run_command(lambda: print_response(queries.restart(pod)))

    @app.command("replace")
    def replace(pod: str = typer.Argument(..., help="Name of the pod instance to replace")) -> None:
        """Destroys a given pod and moves it to a new agent."""
        run_command(lambda: print_response(queries.replace(pod)))

    return app
