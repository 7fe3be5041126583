"""
CLI Application.

Builds the command tree for the queue service:

    queue-cli describe                      # Package configuration (no run needed)
    queue-cli update start|status|package-versions
    queue-cli run list|add|remove           # Run lifecycle
    queue-cli --run NAME run plan ...       # Run-scoped queries
    queue-cli --run NAME run pod ...
    queue-cli --run NAME run endpoints ...
    queue-cli --run NAME run debug config|pod|state ...

Options:
    --run RUN_NAME    Active run for run-scoped commands (or RUN_NAME envvar)
    --name NAME       Queue service name (or QUEUE_CLI_SERVICE_NAME envvar)
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
"""

from typing import Optional

import typer

from queue_cli.cli.client import configure_api_client
from queue_cli.cli.commands import (
    create_debug_app,
    create_endpoints_app,
    create_plan_app,
    create_pod_app,
    create_runs_app,
    create_update_app,
    register_describe,
)
from queue_cli.cli.output import err_console, print_error
from queue_cli.cli.run_name import RunName
from queue_cli.core.exceptions import ApplicationError
from queue_cli.core.logging import setup_logging
from queue_cli.queries import (
    ConfigQueries,
    EndpointsQueries,
    PackageQueries,
    PlanQueries,
    PodQueries,
    StateQueries,
)

RUN_HELP = "The active Run to query"


def build_app() -> typer.Typer:
    """
    Assemble the command tree.

    A single RunName is created here and its resolve_prefix is installed into
    every run-scoped query family. Package queries go to the package manager
    and get no prefix callback.
    """
    run_name = RunName()

    config_queries = ConfigQueries(prefix_cb=run_name.resolve_prefix)
    endpoints_queries = EndpointsQueries(prefix_cb=run_name.resolve_prefix)
    package_queries = PackageQueries()
    plan_queries = PlanQueries(prefix_cb=run_name.resolve_prefix)
    pod_queries = PodQueries(prefix_cb=run_name.resolve_prefix)
    state_queries = StateQueries(prefix_cb=run_name.resolve_prefix)

    app = typer.Typer(
        name="queue-cli",
        help="Queue CLI - Manage runs and query their plans, pods and endpoints.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )

    @app.callback()
    def root(
        run: Optional[str] = typer.Option(
            None, "--run", envvar="RUN_NAME", metavar="RUN_NAME", help=RUN_HELP,
        ),
        name: Optional[str] = typer.Option(
            None, "--name", envvar="QUEUE_CLI_SERVICE_NAME", help="Name of the queue service instance",
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Enable verbose output (INFO level logging)",
        ),
        debug: bool = typer.Option(
            False, "--debug", "-d", help="Enable debug mode (DEBUG level logging)",
        ),
    ) -> None:
        """
        Queue CLI.

        Add, list and remove runs, and inspect the plans, pods and endpoints of
        a run selected with --run.
        """
        if debug:
            level = "DEBUG"
        elif verbose:
            level = "INFO"
        else:
            level = None

        try:
            setup_logging(level=level)
        except (OSError, ApplicationError) as e:
            print_error(f"Failed to configure logging: {e}")
            raise typer.Exit(1) from e

        if debug:
            err_console.print("[dim]Debug mode enabled[/dim]")

        run_name.set(run)

        package_queries.service_name = name
        if name:
            configure_api_client(name)

    register_describe(app, package_queries)
    app.add_typer(create_update_app(package_queries, plan_queries), name="update")

    run_app = create_runs_app()

    @run_app.callback()
    def run_group(
        run: Optional[str] = typer.Option(None, "--run", metavar="RUN_NAME", help=RUN_HELP),
    ) -> None:
        """Run management."""
        if run:
            run_name.set(run)

    endpoints_app = create_endpoints_app(endpoints_queries)

    run_app.add_typer(create_debug_app(config_queries, pod_queries, state_queries), name="debug")
    run_app.add_typer(endpoints_app, name="endpoints")
    run_app.add_typer(endpoints_app, name="endpoint", hidden=True)
    run_app.add_typer(create_plan_app(plan_queries), name="plan")
    run_app.add_typer(create_pod_app(pod_queries), name="pod")

    app.add_typer(run_app, name="run")
    app.add_typer(run_app, name="runs", hidden=True)

    return app


app = build_app()


def main() -> None:
    """Console script entry point."""
    app()
