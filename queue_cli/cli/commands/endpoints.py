"""Endpoint Commands."""

import typer

from queue_cli.cli.dispatch import run_command
from queue_cli.cli.output import print_response
from queue_cli.queries import EndpointsQueries


def create_app(queries: EndpointsQueries) -> typer.Typer:
    """Build the endpoints command group."""
    app = typer.Typer(help="View client endpoints", no_args_is_help=True)

    @app.command("list")
    def list_endpoints() -> None:
        """View client endpoints."""
        run_command(lambda: print_response(queries.list()))

    @app.command("show")
    def show_endpoint(name: str = typer.Argument(..., help="Name of the endpoint to display")) -> None:
        """View a specific client endpoint."""
        run_command(lambda: print_response(queries.show(name)))

    return app
