"""
Tests for database connection management
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from catalog.database import connection
from catalog.database.connection import (
    check_database_connection,
    get_async_session,
    init_database,
    reset_database,
    to_async_url,
)


class TestToAsyncUrl:
    def test_postgresql_uses_asyncpg(self):
        assert (
            to_async_url("postgresql://u:p@localhost:5432/catalog")
            == "postgresql+asyncpg://u:p@localhost:5432/catalog"
        )

    def test_explicit_driver_is_kept(self):
        url = "postgresql+asyncpg://u:p@localhost/catalog"
        assert to_async_url(url) == url


class TestInitDatabase:
    def test_initializes_once(self):
        init_database("postgresql://u:p@localhost:5432/catalog")
        engine = connection.get_async_engine()

        init_database()

        assert connection.get_async_engine() is engine
        assert engine.dialect.name == "postgresql"
        assert engine.dialect.driver == "asyncpg"

    def test_force_reinit_replaces_engine(self):
        init_database("postgresql://u:p@localhost:5432/catalog")
        engine = connection.get_async_engine()

        init_database("postgresql://u:p@localhost:5432/other", force_reinit=True)

        assert connection.get_async_engine() is not engine

    def test_reset(self):
        init_database("postgresql://u:p@localhost:5432/catalog")

        reset_database()

        assert connection._async_engine is None
        assert connection._async_session_local is None


def patched_sessionmaker(session: AsyncMock) -> MagicMock:
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = session
    factory.return_value.__aexit__.return_value = False
    return factory


class TestGetAsyncSession:
    @pytest.mark.asyncio
    async def test_commits_on_success(self):
        session = AsyncMock()
        with patch.object(connection, "_async_session_local", patched_sessionmaker(session)):
            async with get_async_session() as s:
                assert s is session

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_and_reraises(self):
        session = AsyncMock()
        with patch.object(connection, "_async_session_local", patched_sessionmaker(session)):
            with pytest.raises(ValueError):
                async with get_async_session():
                    raise ValueError("query failed")

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()


class TestCheckDatabaseConnection:
    @staticmethod
    def failing_engine(error: Exception) -> MagicMock:
        engine = MagicMock()
        engine.connect.return_value.__aenter__.side_effect = error
        return engine

    @pytest.mark.asyncio
    async def test_success(self):
        conn = AsyncMock()
        engine = MagicMock()
        engine.connect.return_value.__aenter__.return_value = conn
        engine.connect.return_value.__aexit__.return_value = False

        with patch.object(connection, "get_async_engine", return_value=engine):
            assert await check_database_connection() == (True, None)

        conn.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        engine = self.failing_engine(OSError("Connection refused"))

        with patch.object(connection, "get_async_engine", return_value=engine):
            ok, message = await check_database_connection()

        assert ok is False
        assert "down or unreachable" in message

    @pytest.mark.asyncio
    async def test_bad_password(self):
        engine = self.failing_engine(Exception("password authentication failed for user"))

        with patch.object(connection, "get_async_engine", return_value=engine):
            ok, message = await check_database_connection()

        assert ok is False
        assert "credentials" in message

    @pytest.mark.asyncio
    async def test_other_errors(self):
        engine = self.failing_engine(RuntimeError("weird"))

        with patch.object(connection, "get_async_engine", return_value=engine):
            ok, message = await check_database_connection()

        assert ok is False
        assert message == "Database connection error (RuntimeError): weird"
