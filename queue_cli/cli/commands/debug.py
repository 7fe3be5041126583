"""
Debug Commands.

View service state useful in debugging: stored configurations, persisted
state and pod pause/resume. All of these are scoped to the active run.
"""

import typer

from queue_cli.cli.dispatch import run_command
from queue_cli.cli.output import print_response
from queue_cli.queries import ConfigQueries, PodQueries, StateQueries


def create_app(
    config_queries: ConfigQueries,
    pod_queries: PodQueries,
    state_queries: StateQueries,
) -> typer.Typer:
    """Build the debug command group."""
    app = typer.Typer(help="View service state useful in debugging", no_args_is_help=True)
    app.add_typer(_create_config_app(config_queries), name="config")
    app.add_typer(_create_pod_app(pod_queries), name="pod")
    app.add_typer(_create_state_app(state_queries), name="state")
    return app


def _create_config_app(queries: ConfigQueries) -> typer.Typer:
    app = typer.Typer(help="View persisted configurations", no_args_is_help=True)

    @app.command("list")
    def list_configs() -> None:
        """List IDs of all available configurations."""
        run_command(lambda: print_response(queries.list()))

    @app.command("show")
    def show_config(config_id: str = typer.Argument(..., help="ID of the configuration to display")) -> None:
        """Display a specified configuration."""
        run_command(lambda: print_response(queries.show(config_id)))

    @app.command("target")
    def target() -> None:
        """Display the target configuration."""
        run_command(lambda: print_response(queries.target()))

    @app.command("target_id")
    def target_id() -> None:
        """List ID of the target configuration."""
        run_command(lambda: print_response(queries.target_id()))

    return app


def _create_pod_app(queries: PodQueries) -> typer.Typer:
    app = typer.Typer(help="Debug pods", no_args_is_help=True)

    @app.command("pause")
    def pause(
        pod: str = typer.Argument(..., help="Name of the pod instance to pause"),
        tasks: list[str] = typer.Option([], "--tasks", "-t", help="Task to pause within the pod (repeatable)"),
    ) -> None:
        """Pauses a pod's tasks for debugging."""
        run_command(lambda: print_response(queries.pause(pod, tasks)))

    @app.command("resume")
    def resume(
        pod: str = typer.Argument(..., help="Name of the pod instance to resume"),
        tasks: list[str] = typer.Option([], "--tasks", "-t", help="Task to resume within the pod (repeatable)"),
    ) -> None:
        """Resumes a pod's normal execution following a pause command."""
        run_command(lambda: print_response(queries.resume(pod, tasks)))

    return app


def _create_state_app(queries: StateQueries) -> typer.Typer:
    app = typer.Typer(help="View persisted state", no_args_is_help=True)

    @app.command("framework_id")
    def framework_id() -> None:
        """Display the framework ID."""
        run_command(lambda: print_response(queries.framework_id()))

    @app.command("properties")
    def properties() -> None:
        """List names of all custom properties."""
        run_command(lambda: print_response(queries.list_properties()))

    @app.command("property")
    def show_property(name: str = typer.Argument(..., help="Name of the property to display")) -> None:
        """Display the content of a specified property."""
        run_command(lambda: print_response(queries.show_property(name)))

    @app.command("refresh_cache")
    def refresh_cache() -> None:
        """Refresh the state cache, used for debugging."""
        run_command(lambda: print_response(queries.refresh_cache()))

    return app
