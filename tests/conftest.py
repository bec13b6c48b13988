"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.fixture
def sample_rows() -> list[SimpleNamespace]:
    """Rows shaped like the four-column products SELECT result."""
    return [
        SimpleNamespace(id=3, name="Desk Lamp", price=Decimal("24.50"), stock=35),
        SimpleNamespace(id=1, name="Ballpoint Pen", price=Decimal("1.49"), stock=500),
    ]


@pytest.fixture
def mock_session(sample_rows: list[SimpleNamespace]) -> AsyncMock:
    """An AsyncSession whose execute() returns sample_rows."""
    session = AsyncMock(spec=AsyncSession)
    mock_result = MagicMock()
    mock_result.all.return_value = sample_rows
    session.execute.return_value = mock_result
    return session


@pytest.fixture
def test_database_url() -> str:
    """DSN of a disposable PostgreSQL database, or skip."""
    dsn = os.getenv("CATALOG_TEST_DATABASE_URL")
    if not dsn:
        pytest.skip("CATALOG_TEST_DATABASE_URL not set")
    return dsn


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_shared_db_connections() -> Generator[None, None, None]:
    """Drop shared engine state so tests never share a pool."""
    from catalog.database.connection import reset_database

    reset_database()
    yield
    reset_database()

