"""Endpoint queries: GET <prefix>endpoints/..."""

from queue_cli.queries.base import BaseQueries


class EndpointsQueries(BaseQueries):
    """Queries for the client endpoints a service advertises."""

    async def list(self) -> bytes:
        response = await self.client.get(self.path("endpoints"))
        return response.content

    async def show(self, name: str) -> bytes:
        response = await self.client.get(self.path("endpoints", name))
        return response.content
