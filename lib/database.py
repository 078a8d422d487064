# =============================================================================
# lib/database.py - MongoDB Connection
# =============================================================================
# Owns the MongoDB client and the background task that checks it can reach
# the server. The startup path never waits on that task; anything that
# needs to know the outcome reads `state` or awaits `wait()`.
#
# Usage:
#   from lib.database import DatabaseConnector
#   db = DatabaseConnector(settings.MONGO_URI, logger=logger)
#   db.start()                  # returns immediately
#   db.state                    # DatabaseState.PENDING / CONNECTED / FAILED
#   await db.close()
# =============================================================================

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from app.exceptions import DatabaseConnectionError


class DatabaseState(str, Enum):
    """
    Lifecycle of the connection attempt.

    Flow: idle -> pending -> connected | failed -> closed
    """
    IDLE = "idle"
    PENDING = "pending"
    CONNECTED = "connected"
    FAILED = "failed"
    CLOSED = "closed"


class DatabaseConnector:
    """
    MongoDB client holder with an observable connection attempt.

    The client itself is created lazily by pymongo and does no I/O until
    used; connect() forces a round trip with a `ping` command.
    """

    def __init__(
        self,
        uri: str,
        timeout_ms: int = 30000,
        client_factory: Callable[..., Any] = AsyncMongoClient,
        logger: logging.Logger | None = None,
    ):
        self.uri = uri
        self.timeout_ms = timeout_ms
        self.client_factory = client_factory
        self.logger = logger or logging.getLogger(__name__)

        self.client: Any = None
        self.state = DatabaseState.IDLE
        self.error: DatabaseConnectionError | None = None
        self._task: asyncio.Task | None = None

    @property
    def is_ready(self) -> bool:
        return self.state == DatabaseState.CONNECTED

    @property
    def task(self) -> asyncio.Task | None:
        return self._task

    async def connect(self) -> None:
        """
        Create the client and ping the server.

        Raises:
            DatabaseConnectionError: If the URI is invalid or the server
                can't be reached within the selection timeout
        """
        self.state = DatabaseState.PENDING
        try:
            if self.client is None:
                self.client = self.client_factory(
                    self.uri,
                    serverSelectionTimeoutMS=self.timeout_ms,
                )
            await self.client.admin.command("ping")
        except (PyMongoError, ValueError, TypeError) as e:
            self.state = DatabaseState.FAILED
            self.error = DatabaseConnectionError(str(e))
            raise self.error from e

        self.state = DatabaseState.CONNECTED
        self.error = None

    async def _connect_and_log(self) -> None:
        try:
            await self.connect()
        except DatabaseConnectionError as e:
            self.logger.error("Could not connect to MongoDB...", extra={"error": e.message})
            return
        self.logger.info("Connected to MongoDB...")

    def start(self) -> asyncio.Task:
        """
        Start the connection attempt in the background.

        Must be called from a running event loop. Calling it again while an
        attempt is in flight returns the same task.
        """
        if self._task is None or self._task.done():
            self.state = DatabaseState.PENDING
            self._task = asyncio.create_task(self._connect_and_log(), name="mongo-connect")
        return self._task

    async def wait(self, timeout: float | None = None) -> DatabaseState:
        """
        Wait for the background attempt to finish and return the final state.

        A timeout leaves the attempt running and returns PENDING.
        """
        if self._task is None:
            return self.state
        try:
            await asyncio.wait_for(asyncio.shield(self._task), timeout)
        except asyncio.TimeoutError:
            pass
        return self.state

    async def close(self) -> None:
        """Cancel a pending attempt and close the client."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        if self.client is not None:
            await self.client.close()
            self.client = None
        self.state = DatabaseState.CLOSED
