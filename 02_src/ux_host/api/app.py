"""FastAPI application setup."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from ..config import DEFAULT_CORS_ORIGINS
from ..logging_config import get_logger
from .routes import channels, control, logs

logger = get_logger(__name__)


def create_fastapi_app(
    application: Application | None = None,
    sim: Any = None,
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS,
) -> FastAPI:
    """Create and configure FastAPI application.

    The Application is created here (or passed in) and handed to every router;
    nothing looks it up globally.
    """
    if application is None:
        application = Application()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        # Startup
        application.start()
        logger.info("HTTP adapter ready")
        yield
        # Shutdown
        if sim is not None:
            await sim.stop()
        application.stop()

    fastapi_app = FastAPI(
        title="UX Host API",
        description="Event log host for the universal experience module",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.application = application

    # Enable CORS
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    fastapi_app.include_router(channels.create_channels_router(application))
    fastapi_app.include_router(logs.create_logs_router(application))
    fastapi_app.include_router(control.create_control_router(sim))

    return fastapi_app
