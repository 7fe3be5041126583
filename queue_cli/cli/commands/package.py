"""
Package Commands.

describe and update talk to the cluster package manager and are not run
scoped, except update status, which reads the active run's deploy plan.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer

from queue_cli.cli.commands.plan import print_plan_status
from queue_cli.cli.dispatch import run_command
from queue_cli.cli.output import print_json_bytes, print_response
from queue_cli.core.exceptions import SpecReadError
from queue_cli.queries import PackageQueries, PlanQueries

DEPLOY_PLAN = "deploy"


def register_describe(app: typer.Typer, package_queries: PackageQueries) -> None:
    """Add the top-level describe command."""

    @app.command("describe")
    def describe() -> None:
        """View the configuration for this service."""
        run_command(lambda: print_response(package_queries.describe()))


def create_update_app(package_queries: PackageQueries, plan_queries: PlanQueries) -> typer.Typer:
    """Build the update command group."""
    app = typer.Typer(help="Update the service configuration or package version", no_args_is_help=True)

    @app.command("package-versions")
    def package_versions() -> None:
        """View a list of available package versions to downgrade or upgrade to."""
        run_command(lambda: _package_versions(package_queries))

    @app.command("start")
    def start(
        options: Optional[Path] = typer.Option(None, "--options", help="Path to a JSON file that contains customized package installation options"),
        package_version: Optional[str] = typer.Option(None, "--package-version", help="The desired package version"),
        replace: bool = typer.Option(False, "--replace", help="Replace the existing options instead of merging with them"),
    ) -> None:
        """Launches an update operation."""
        run_command(lambda: _start(package_queries, options, package_version, replace))

    @app.command("status")
    def status(
        json_output: bool = typer.Option(False, "--json", help="Show raw JSON response instead of user-friendly tree"),
    ) -> None:
        """View status of a running update."""
        run_command(lambda: print_plan_status(plan_queries, DEPLOY_PLAN, json_output))

    return app


def load_options(path: Path) -> dict[str, Any]:
    """
    Read an options JSON file.

    Raises:
        SpecReadError: If the file cannot be read or is not a JSON object.
    """
    try:
        options = json.loads(path.read_text())
    except OSError as e:
        raise SpecReadError(f"Failed to read options file {path}: {e}") from e
    except ValueError as e:
        raise SpecReadError(f"Options file {path} is not valid JSON: {e}") from e
    if not isinstance(options, dict):
        raise SpecReadError(f"Options file {path} must contain a JSON object")
    return options


async def _package_versions(queries: PackageQueries) -> None:
    versions = await queries.package_versions()
    print_json_bytes(json.dumps(versions).encode())


async def _start(
    queries: PackageQueries,
    options_path: Path | None,
    package_version: str | None,
    replace: bool,
) -> None:
    options = load_options(options_path) if options_path else None
    print_json_bytes(await queries.update(options, package_version, replace))
