"""
Package Queries.

Describe and update the installed package through the cluster package
manager. These requests do not go to the queue service itself, so no run
prefix is ever applied.
"""

import json
from typing import Any

from queue_cli.core.config import get_cosmos_base_url, get_service_name
from queue_cli.queries.base import BaseQueries

DESCRIBE_CONTENT_TYPE = "application/vnd.dcos.service.describe-request+json;charset=utf-8;version=v1"
DESCRIBE_ACCEPT = "application/vnd.dcos.service.describe-response+json;charset=utf-8;version=v1"
UPDATE_CONTENT_TYPE = "application/vnd.dcos.service.update-request+json;charset=utf-8;version=v1"
UPDATE_ACCEPT = "application/vnd.dcos.service.update-response+json;charset=utf-8;version=v1"


class PackageQueries(BaseQueries):
    """Queries against the package manager for the configured service."""

    def __init__(self, service_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.service_name = service_name

    def _app_id(self) -> str:
        return "/" + (self.service_name or get_service_name()).strip("/")

    async def describe(self) -> bytes:
        response = await self.client.post(
            f"{get_cosmos_base_url()}/service/describe",
            content=json.dumps({"appId": self._app_id()}).encode(),
            headers={"Content-Type": DESCRIBE_CONTENT_TYPE, "Accept": DESCRIBE_ACCEPT},
        )
        return response.content

    async def package_versions(self) -> dict[str, Any]:
        """Return the upgradesTo/downgradesTo lists from describe."""
        described = json.loads(await self.describe())
        package = described.get("package", {})
        return {
            "upgradesTo": package.get("upgradesTo", []),
            "downgradesTo": package.get("downgradesTo", []),
        }

    async def update(
        self,
        options: dict[str, Any] | None = None,
        package_version: str | None = None,
        replace: bool = False,
    ) -> bytes:
        payload: dict[str, Any] = {"appId": self._app_id(), "replace": replace}
        if options is not None:
            payload["options"] = options
        if package_version:
            payload["packageVersion"] = package_version
        response = await self.client.post(
            f"{get_cosmos_base_url()}/service/update",
            content=json.dumps(payload).encode(),
            headers={"Content-Type": UPDATE_CONTENT_TYPE, "Accept": UPDATE_ACCEPT},
        )
        return response.content
