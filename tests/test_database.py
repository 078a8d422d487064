# =============================================================================
# tests/test_database.py - MongoDB Connector Tests
# =============================================================================
# A fake client factory stands in for AsyncMongoClient.
# =============================================================================

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from app.exceptions import DatabaseConnectionError
from lib.database import DatabaseConnector, DatabaseState


def make_factory(ping=None):
    """Build a client factory whose client answers ping with `ping`."""
    client = MagicMock()
    client.admin.command = ping or AsyncMock(return_value={"ok": 1.0})
    client.close = AsyncMock()
    return MagicMock(return_value=client), client


class TestConnect:
    """Tests for DatabaseConnector.connect."""

    def test_connect_success(self):
        factory, client = make_factory()
        db = DatabaseConnector("mongodb://db:27017/app", timeout_ms=500, client_factory=factory)

        asyncio.run(db.connect())

        factory.assert_called_once_with("mongodb://db:27017/app", serverSelectionTimeoutMS=500)
        client.admin.command.assert_awaited_once_with("ping")
        assert db.state == DatabaseState.CONNECTED
        assert db.is_ready

    def test_connect_failure(self):
        ping = AsyncMock(side_effect=ServerSelectionTimeoutError("db:27017: timed out"))
        factory, _ = make_factory(ping)
        db = DatabaseConnector("mongodb://db:27017/app", client_factory=factory)

        with pytest.raises(DatabaseConnectionError) as exc_info:
            asyncio.run(db.connect())

        assert "timed out" in exc_info.value.message
        assert db.state == DatabaseState.FAILED
        assert db.error is exc_info.value
        assert not db.is_ready

    def test_invalid_uri(self):
        factory = MagicMock(side_effect=ValueError("invalid URI scheme"))
        db = DatabaseConnector("postgres://nope", client_factory=factory)

        with pytest.raises(DatabaseConnectionError):
            asyncio.run(db.connect())

        assert db.state == DatabaseState.FAILED


class TestBackgroundAttempt:
    """Tests for the start/wait/close lifecycle."""

    def test_start_does_not_block(self):
        async def scenario():
            gate = asyncio.Event()

            async def slow_ping(*args):
                await gate.wait()
                return {"ok": 1.0}

            factory, _ = make_factory(AsyncMock(side_effect=slow_ping))
            db = DatabaseConnector("mongodb://db", client_factory=factory)

            task = db.start()
            await asyncio.sleep(0)
            state_while_running = db.state
            gate.set()
            final_state = await db.wait()
            return task, state_while_running, final_state

        task, state_while_running, final_state = asyncio.run(scenario())

        assert state_while_running == DatabaseState.PENDING
        assert final_state == DatabaseState.CONNECTED
        assert task.done()

    def test_failure_is_logged_not_raised(self, caplog, test_logger):
        async def scenario():
            ping = AsyncMock(side_effect=ServerSelectionTimeoutError("unreachable"))
            factory, _ = make_factory(ping)
            db = DatabaseConnector("mongodb://db", client_factory=factory, logger=test_logger)
            db.start()
            return await db.wait()

        with caplog.at_level("ERROR", logger=test_logger.name):
            state = asyncio.run(scenario())

        assert state == DatabaseState.FAILED
        assert "Could not connect to MongoDB..." in caplog.text

    def test_success_is_logged(self, caplog, test_logger):
        async def scenario():
            factory, _ = make_factory()
            db = DatabaseConnector("mongodb://db", client_factory=factory, logger=test_logger)
            db.start()
            return await db.wait()

        with caplog.at_level("INFO", logger=test_logger.name):
            asyncio.run(scenario())

        assert "Connected to MongoDB..." in caplog.text

    def test_wait_timeout_leaves_attempt_pending(self):
        async def scenario():
            async def hang(*args):
                await asyncio.sleep(10)

            factory, _ = make_factory(AsyncMock(side_effect=hang))
            db = DatabaseConnector("mongodb://db", client_factory=factory)
            db.start()
            state = await db.wait(timeout=0.01)
            still_running = not db.task.done()
            await db.close()
            return state, still_running, db

        state, still_running, db = asyncio.run(scenario())

        assert state == DatabaseState.PENDING
        assert still_running
        assert db.state == DatabaseState.CLOSED

    def test_start_twice_reuses_task(self):
        async def scenario():
            factory, _ = make_factory()
            db = DatabaseConnector("mongodb://db", client_factory=factory)
            first = db.start()
            second = db.start()
            await db.wait()
            return first, second, factory

        first, second, factory = asyncio.run(scenario())

        assert first is second
        assert factory.call_count == 1

    def test_close_closes_client(self):
        async def scenario():
            factory, client = make_factory()
            db = DatabaseConnector("mongodb://db", client_factory=factory)
            db.start()
            await db.wait()
            await db.close()
            return db, client

        db, client = asyncio.run(scenario())

        client.close.assert_awaited_once()
        assert db.client is None
        assert db.state == DatabaseState.CLOSED

    def test_wait_without_start(self):
        db = DatabaseConnector("mongodb://db", client_factory=MagicMock())

        assert asyncio.run(db.wait()) == DatabaseState.IDLE
