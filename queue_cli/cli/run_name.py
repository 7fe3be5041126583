"""
Run Targeting.

Holds the run selected with --run (or RUN_NAME) and turns it into the
v1/run/<name>/ path prefix used by every run-scoped query family.

One RunName is created per process. Its bound resolve_prefix method is
installed as the prefix callback of each scoped query object, so they all
read the same identifier. The identifier is only checked when a scoped
request is actually built; commands that never touch a run never fail
because --run is missing.
"""

from urllib.parse import quote

from queue_cli.core.exceptions import UsageError

MISSING_RUN_MESSAGE = "Missing required '--run' argument or 'RUN_NAME' envvar"


class RunName:
    """The active run, shared by reference across query families."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name or ""

    def set(self, value: str | None) -> None:
        """Store the run name. Empty values are accepted until first use."""
        self.name = value or ""

    def resolve_prefix(self) -> str:
        """
        Return the path prefix for the active run.

        Raises:
            UsageError: If no run name was supplied.
        """
        if not self.name:
            raise UsageError(MISSING_RUN_MESSAGE)
        return f"v1/run/{quote(self.name, safe='')}/"
