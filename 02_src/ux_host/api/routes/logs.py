"""Event log API routes for the viewing surface."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application


class LogEntryResponse(BaseModel):
    """Response model for a rendered log row."""

    header: str
    badge: str
    color: str
    time: str
    message: str
    meta_line: str | None = None


class EventResponse(BaseModel):
    """Response model for a stored event."""

    type: str
    step: str | None = None
    message: str
    meta: str | None = None
    timestamp_millis: int


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_logs_router(app: Application) -> APIRouter:
    """Create logs router."""
    router = APIRouter(prefix="/api", tags=["logs"])

    @router.get("/logs", response_model=list[LogEntryResponse])
    async def get_logs() -> list[dict[str, Any]]:
        """Render the log newest-first (each read is a visibility transition)."""
        try:
            rows = app.presenter.on_visible()
            return [
                {
                    "header": row.header,
                    "badge": row.badge,
                    "color": row.color,
                    "time": row.time,
                    "message": row.message,
                    "meta_line": row.meta_line,
                }
                for row in rows
            ]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/events", response_model=list[EventResponse])
    async def get_events() -> list[dict[str, Any]]:
        """Get the raw store snapshot, newest first."""
        try:
            return [
                {
                    "type": e.type,
                    "step": e.step,
                    "message": e.message,
                    "meta": e.meta,
                    "timestamp_millis": e.timestamp_millis,
                }
                for e in app.store.snapshot()
            ]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.delete("/logs", response_model=StatusResponse)
    async def clear_logs() -> dict:
        """Clear the event log."""
        try:
            app.presenter.clear_log()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
