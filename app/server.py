# =============================================================================
# app/server.py - Process Entry Point
# =============================================================================
# Runs the app under uvicorn and starts the startup demo from the server's
# ready hook, i.e. only after the listening socket is bound. If binding
# fails uvicorn exits the process with status 1 and the demo never runs.
#
# Usage:
#   python -m app
#   starter-server
# =============================================================================

import asyncio
import logging

import uvicorn
from fastapi import FastAPI

from app.config import Settings, get_settings
from app.logging_config import configure_logging
from app.main import create_app
from core.services.demo_service import DemoOrchestrator


class StarterServer(uvicorn.Server):
    """
    uvicorn server with a listener-ready hook.

    The hook runs the DemoOrchestrator as a task on the server's loop; the
    task is cancelled on shutdown if it hasn't finished.
    """

    def __init__(
        self,
        config: uvicorn.Config,
        orchestrator: DemoOrchestrator | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(config)
        self.orchestrator = orchestrator
        self.logger = logger or logging.getLogger(__name__)
        self.demo_task: asyncio.Task | None = None

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit or not self.started:
            return
        self.on_ready()

    def on_ready(self) -> None:
        """Called once the port is bound and the app lifespan has started."""
        self.logger.info(f"Server running on port {self.config.port}...")
        if self.orchestrator is not None:
            self.demo_task = asyncio.create_task(self.orchestrator.run(), name="startup-demo")

    async def shutdown(self, sockets=None) -> None:
        if self.demo_task is not None and not self.demo_task.done():
            self.demo_task.cancel()
            try:
                await self.demo_task
            except asyncio.CancelledError:
                pass
        await super().shutdown(sockets=sockets)


def build_server(
    settings: Settings,
    logger: logging.Logger,
    app: FastAPI | None = None,
) -> StarterServer:
    """Assemble the uvicorn server, app and demo from one settings object."""
    app = app or create_app(settings=settings, logger=logger)
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    orchestrator = DemoOrchestrator.from_settings(settings, logger) if settings.RUN_DEMO else None
    return StarterServer(config, orchestrator=orchestrator, logger=logger)


def main() -> None:
    settings = get_settings()
    logger = configure_logging(settings)
    server = build_server(settings, logger)
    server.run()


if __name__ == "__main__":
    main()
