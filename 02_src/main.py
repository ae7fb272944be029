"""Main entry point for the UX host."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from sim import Sim
from ux_host.api import create_fastapi_app
from ux_host.app import Application
from ux_host.config import load_settings
from ux_host.logging_config import setup_logging


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = load_settings()
    setup_logging(settings)

    # Single creation point for the log store and its consumers
    application = Application()

    sim = Sim(api_url=settings.api_url) if settings.sim_enabled else None

    app = create_fastapi_app(
        application=application,
        sim=sim,
        cors_origins=settings.cors_origins,
    )

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
