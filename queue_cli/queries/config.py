"""Configuration queries: GET <prefix>configurations/..."""

from queue_cli.queries.base import BaseQueries


class ConfigQueries(BaseQueries):
    """Queries against the service's stored configurations."""

    async def list(self) -> bytes:
        response = await self.client.get(self.path("configurations"))
        return response.content

    async def show(self, config_id: str) -> bytes:
        response = await self.client.get(self.path("configurations", config_id))
        return response.content

    async def target(self) -> bytes:
        response = await self.client.get(self.path("configurations", "target"))
        return response.content

    async def target_id(self) -> bytes:
        response = await self.client.get(self.path("configurations", "targetId"))
        return response.content
