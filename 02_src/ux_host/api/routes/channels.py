"""Channel API routes: transport wiring for the embedded module."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...models import ResultStatus


class InvokeRequest(BaseModel):
    """Request model for a channel invocation."""

    method: str
    arguments: Any = None


class InvokeResponse(BaseModel):
    """Response model for a channel acknowledgment."""

    status: ResultStatus
    result: Any = None
    error_message: str | None = None


class BridgeStatsResponse(BaseModel):
    """Response model for bridge listener counters."""

    received: int
    appended: int
    dropped: int
    not_implemented: int


def create_channels_router(app: Application) -> APIRouter:
    """Create channels router."""
    router = APIRouter(prefix="/api", tags=["channels"])

    @router.post("/channels/{channel_name:path}/invoke", response_model=InvokeResponse)
    async def invoke(channel_name: str, request: InvokeRequest) -> dict:
        """Invoke a method on a named channel."""
        channel = app.get_channel(channel_name)
        if channel is None:
            raise HTTPException(
                status_code=404, detail=f"Unknown channel: {channel_name}"
            )

        ack = channel.invoke(request.method, request.arguments)
        return {
            "status": ack.status,
            "result": ack.result,
            "error_message": ack.error_message,
        }

    @router.get("/bridge/stats", response_model=BridgeStatsResponse)
    async def bridge_stats() -> dict:
        """Get bridge listener counters."""
        try:
            return app.listener.stats.as_dict()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
