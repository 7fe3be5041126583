"""
Queue CLI.

- core/: Configuration, logging, exceptions
- queries/: HTTP query families for the queue service (plans, pods, state, ...)
- cli/: Typer command tree, HTTP client, run targeting
"""

__version__ = "0.1.0"
