"""
Query Base.

Shared plumbing for query families: the prefix callback slot and access
to the HTTP client.
"""

from collections.abc import Callable
from urllib.parse import quote

from queue_cli.cli.client import APIClient, get_api_client

PrefixCallback = Callable[[], str]


def default_prefix() -> str:
    """Prefix used when no run-specific callback is installed."""
    return "v1/"


class BaseQueries:
    """
    Base class for query families.

    prefix_cb is evaluated on every request, never at construction, so a
    callback that raises (e.g. a missing run name) only fails the commands
    that actually build a request with it.
    """

    def __init__(
        self,
        prefix_cb: PrefixCallback | None = None,
        client: APIClient | None = None,
    ) -> None:
        self.prefix_cb: PrefixCallback = prefix_cb or default_prefix
        self._client = client

    @property
    def client(self) -> APIClient:
        return self._client or get_api_client()

    def path(self, *segments: str) -> str:
        """Join URL-escaped path segments onto the current prefix."""
        return self.prefix_cb() + "/".join(quote(segment, safe="") for segment in segments)
