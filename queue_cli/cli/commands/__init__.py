"""
CLI Commands.

Organized by command group. Groups that need query objects are built by
factory functions so that the queries can be injected at setup time.
"""

from queue_cli.cli.commands.debug import create_app as create_debug_app
from queue_cli.cli.commands.endpoints import create_app as create_endpoints_app
from queue_cli.cli.commands.package import create_update_app, register_describe
from queue_cli.cli.commands.plan import create_app as create_plan_app
from queue_cli.cli.commands.pod import create_app as create_pod_app
from queue_cli.cli.commands.runs import create_app as create_runs_app

__all__ = [
    "create_debug_app",
    "create_endpoints_app",
    "create_plan_app",
    "create_pod_app",
    "create_runs_app",
    "create_update_app",
    "register_describe",
]
