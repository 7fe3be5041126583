"""Pod queries: <prefix>pod/..."""

from __future__ import annotations

from queue_cli.queries.base import BaseQueries


class PodQueries(BaseQueries):
    """Queries against a service's pods."""

    async def list(self) -> bytes:
        response = await self.client.get(self.path("pod"))
        return response.content

    async def status(self, pod: str | None = None) -> bytes:
        if pod:
            path = self.path("pod", pod, "status")
        else:
            path = self.path("pod", "status")
        response = await self.client.get(path)
        return response.content

    async def info(self, pod: str) -> bytes:
        response = await self.client.get(self.path("pod", pod, "info"))
        return response.content

    async def restart(self, pod: str) -> bytes:
        response = await self.client.post(self.path("pod", pod, "restart"))
        return response.content

    async def replace(self, pod: str) -> bytes:
        response = await self.client.post(self.path("pod", pod, "replace"))
        return response.content

    async def pause(self, pod: str, tasks: list[str] | None = None) -> bytes:
        response = await self.client.post(self.path("pod", pod, "pause"), json=tasks or [])
        return response.content

    async def resume(self, pod: str, tasks: list[str] | None = None) -> bytes:
        response = await self.client.post(self.path("pod", pod, "resume"), json=tasks or [])
        return response.content
