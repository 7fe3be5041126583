"""
HTTP Client for CLI.

Provides async HTTP client for communicating with the queue service API.
Any transport failure or unexpected status is raised as ExternalServiceError
with the underlying message; nothing is retried.
"""

from typing import Any

import httpx

from queue_cli import __version__
from queue_cli.core.config import get_request_timeout, get_service_base_url
from queue_cli.core.exceptions import ConfigurationError, ExternalServiceError
from queue_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def _get_client_config(service_name: str | None = None) -> tuple[str, float]:
    """Load base URL and timeout from application.yaml and the environment."""
    return get_service_base_url(service_name), get_request_timeout()


class APIClient:
    """
    HTTP client for queue service communication.

    Features:
    - Automatic base URL from settings
    - Structured logging of requests/responses
    - Non-success responses raised as ExternalServiceError

    Usage:
        client = APIClient()
        response = await client.get("v1/runs")
        response = await client.post("v1/runs", content=body, headers=headers)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        service_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Service API base URL. If None, built from application.yaml.
            timeout: Request timeout in seconds. If None, read from application.yaml.
            service_name: Service name used when building the base URL.
            transport: Alternative httpx transport (used by tests).
        """
        try:
            config_base_url, config_timeout = _get_client_config(service_name)
        except Exception as e:
            if base_url is None:
                raise ConfigurationError(
                    f"Could not determine service URL from application.yaml: {e}"
                ) from e
            config_base_url = base_url
            config_timeout = timeout if timeout is not None else 30.0

        self.base_url = (base_url or config_base_url).rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else config_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"User-Agent": f"queue-cli/{__version__}"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        accept_status: tuple[int, ...] = (),
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the service.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path relative to the base URL (e.g., v1/runs), or an absolute URL
            accept_status: Non-2xx status codes to return instead of raising
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            ExternalServiceError: On transport failure or an unexpected status
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise ExternalServiceError(str(e) or type(e).__name__) from e

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.is_success or response.status_code in accept_status:
            return response

        body = response.text.strip()
        message = f"{method} {response.request.url} failed with HTTP {response.status_code}"
        if body:
            message = f"{message}: {body}"
        raise ExternalServiceError(message, status_code=response.status_code)

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path, **kwargs)


# Module-level client instance
_client: APIClient | None = None
_service_name: str | None = None


def get_api_client() -> APIClient:
    """Get or create the API client singleton."""
    global _client
    if _client is None:
        _client = APIClient(service_name=_service_name)
    return _client


def configure_api_client(service_name: str) -> None:
    """
    Target a different service name.

    The client itself is built on the next get_api_client() call, so
    configuration errors surface inside the command that needs it.
    """
    global _client, _service_name
    _service_name = service_name
    _client = None
