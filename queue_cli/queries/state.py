"""State queries: <prefix>state/..."""

from queue_cli.queries.base import BaseQueries


class StateQueries(BaseQueries):
    """Queries against the scheduler's persisted state."""

    async def framework_id(self) -> bytes:
        response = await self.client.get(self.path("state", "frameworkId"))
        return response.content

    async def list_properties(self) -> bytes:
        response = await self.client.get(self.path("state", "properties"))
        return response.content

    async def show_property(self, name: str) -> bytes:
        response = await self.client.get(self.path("state", "properties", name))
        return response.content

    async def refresh_cache(self) -> bytes:
        response = await self.client.put(self.path("state", "refresh"))
        return response.content
