"""
Plan Queries.

Read and control deployment plans: <prefix>plans/...

A plan that is in an error state is reported by the service with HTTP 417
and a normal plan body, so status treats 417 as a valid response.
"""

from typing import Any

from queue_cli.queries.base import BaseQueries

PLAN_ERROR_STATUS = 417


class PlanQueries(BaseQueries):
    """Queries against a service's plans."""

    async def list(self) -> bytes:
        response = await self.client.get(self.path("plans"))
        return response.content

    async def status(self, plan: str) -> bytes:
        response = await self.client.get(
            self.path("plans", plan),
            accept_status=(PLAN_ERROR_STATUS,),
        )
        return response.content

    async def start(self, plan: str, parameters: dict[str, str] | None = None) -> bytes:
        response = await self.client.post(
            self.path("plans", plan, "start"),
            json=parameters or {},
        )
        return response.content

    async def stop(self, plan: str) -> bytes:
        response = await self.client.post(self.path("plans", plan, "stop"))
        return response.content

    async def pause(self, plan: str, phase: str | None = None) -> bytes:
        response = await self.client.post(
            self.path("plans", plan, "interrupt"),
            **_phase_body(phase),
        )
        return response.content

    async def resume(self, plan: str, phase: str | None = None) -> bytes:
        response = await self.client.post(
            self.path("plans", plan, "continue"),
            **_phase_body(phase),
        )
        return response.content

    async def force_restart(
        self,
        plan: str,
        phase: str | None = None,
        step: str | None = None,
    ) -> bytes:
        response = await self.client.post(
            self.path("plans", plan, "restart"),
            params=_step_params(phase, step),
        )
        return response.content

    async def force_complete(self, plan: str, phase: str, step: str) -> bytes:
        response = await self.client.post(
            self.path("plans", plan, "forceComplete"),
            params=_step_params(phase, step),
        )
        return response.content


def _phase_body(phase: str | None) -> dict[str, Any]:
    if phase:
        return {"json": {"phase": phase}}
    return {}


def _step_params(phase: str | None, step: str | None) -> dict[str, str]:
    params = {}
    if phase:
        params["phase"] = phase
    if step:
        params["step"] = step
    return params
