"""
Plan Commands.

Query and control the active run's deployment plans.
"""

import json
from typing import Any, Optional

import typer
from rich.markup import escape
from rich.tree import Tree

from queue_cli.cli.dispatch import run_command
from queue_cli.cli.output import console, print_json_bytes, print_response
from queue_cli.core.exceptions import UsageError
from queue_cli.queries import PlanQueries


def create_app(queries: PlanQueries) -> typer.Typer:
    """Build the plan command group."""
    app = typer.Typer(help="Query service plans", no_args_is_help=True)

    @app.command("list")
    def list_plans() -> None:
        """Show all plans for this service."""
        run_command(lambda: print_response(queries.list()))

    @app.command("status")
    def status(
        plan: str = typer.Argument(..., help="Name of the plan to show"),
        json_output: bool = typer.Option(False, "--json", help="Show raw JSON response instead of user-friendly tree"),
    ) -> None:
        """
        Display the status of the plan with the provided plan name.

        Examples:
            queue-cli --run nightly run plan status deploy
            queue-cli --run nightly run plan status deploy --json
        """
        run_command(lambda: print_plan_status(queries, plan, json_output))

    @app.command("start")
    def start(
        plan: str = typer.Argument(..., help="Name of the plan to start"),
        params: list[str] = typer.Option(
            [], "--params", "-p", help="Envvar definition in VAR=value form; can be repeated"
        ),
    ) -> None:
        """Start the plan with the provided name and any optional plan arguments."""
        run_command(lambda: _start(queries, plan, params))

    @app.command("stop")
    def stop(plan: str = typer.Argument(..., help="Name of the plan to stop")) -> None:
        """Stop the running plan with the provided name."""
        run_command(lambda: print_response(queries.stop(plan)))

    @app.command("pause")
    def pause(
        plan: str = typer.Argument(..., help="Name of the plan to pause"),
        phase: Optional[str] = typer.Argument(None, help="Name or UUID of a specific phase to pause"),
    ) -> None:
        """Pause the plan, or a specific phase in that plan with the provided phase name (or UUID)."""
        run_command(lambda: print_response(queries.pause(plan, phase)))

    @app.command("resume")
    def resume(
        plan: str = typer.Argument(..., help="Name of the plan to resume"),
        phase: Optional[str] = typer.Argument(None, help="Name or UUID of a specific phase to continue"),
    ) -> None:
        """Resume the plan, or a specific phase in that plan with the provided phase name (or UUID)."""
        run_command(lambda: print_response(queries.resume(plan, phase)))

    @app.command("force-restart")
    def force_restart(
        plan: str = typer.Argument(..., help="Name of the plan to restart"),
        phase: Optional[str] = typer.Argument(None, help="Name or UUID of the phase containing the provided step"),
        step: Optional[str] = typer.Argument(None, help="Name or UUID of step to be restarted"),
    ) -> None:
        """Restart the plan with the provided name, or a specific phase in the plan, or a specific step in a phase."""
        if step and not phase:
            raise typer.BadParameter("a phase is required when a step is given")
        run_command(lambda: print_response(queries.force_restart(plan, phase, step)))

    @app.command("force-complete")
    def force_complete(
        plan: str = typer.Argument(..., help="Name of the plan to force complete"),
        phase: str = typer.Argument(..., help="Name or UUID of the phase containing the provided step"),
        step: str = typer.Argument(..., help="Name or UUID of step to be force completed"),
    ) -> None:
        """Force complete a specific step in the provided phase."""
        run_command(lambda: print_response(queries.force_complete(plan, phase, step)))

    return app


def parse_plan_parameters(params: list[str]) -> dict[str, str]:
    """
    Parse VAR=value pairs given with --params.

    Raises:
        UsageError: If an entry has no '=' or an empty name.
    """
    parsed = {}
    for entry in params:
        name, sep, value = entry.partition("=")
        if not sep or not name:
            raise UsageError(f"Invalid plan parameter '{entry}': expected VAR=value")
        parsed[name] = value
    return parsed


async def _start(queries: PlanQueries, plan: str, params: list[str]) -> None:
    print_json_bytes(await queries.start(plan, parse_plan_parameters(params)))


async def print_plan_status(queries: PlanQueries, plan: str, json_output: bool) -> None:
    """Fetch a plan and print it as raw JSON or as a tree of phases and steps."""
    body = await queries.status(plan)
    if json_output:
        print_json_bytes(body)
        return
    try:
        parsed = json.loads(body)
    except ValueError:
        print_json_bytes(body)
        return
    console.print(render_plan_tree(plan, parsed), soft_wrap=True)


def render_plan_tree(plan_name: str, plan: dict[str, Any]) -> Tree:
    """Build a rich Tree: plan, then phases, then steps, each with its status."""
    tree = Tree(_label(plan_name, plan), highlight=False)
    for phase in plan.get("phases", []):
        branch = tree.add(_label(phase.get("name", "?"), phase))
        for step in phase.get("steps", []):
            branch.add(escape(f"{step.get('name', '?')} ({step.get('status', 'UNKNOWN')})"))
    for error in plan.get("errors", []):
        tree.add(f"[red]error:[/red] {escape(str(error))}")
    return tree


def _label(name: str, element: dict[str, Any]) -> str:
    strategy = element.get("strategy")
    status = element.get("status", "UNKNOWN")
    if strategy:
        return escape(f"{name} ({strategy} strategy) ({status})")
    return escape(f"{name} ({status})")
