"""Integration test fixtures.

Tests in this package run against the PostgreSQL database named by
DATABASE_URL. Tables are created on first use and emptied around every
test. When the database cannot be reached, the tests are skipped.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import delete
from sqlalchemy.exc import DBAPIError

import src.infrastructure.persistence.models  # noqa: F401  (registers tables)
from src.core.config import settings
from src.infrastructure.persistence import BaseModel, Database


async def _clear_tables(db: Database) -> None:
    async with db.engine.begin() as conn:
        for table in reversed(BaseModel.metadata.sorted_tables):
            await conn.execute(delete(table))


@pytest_asyncio.fixture
async def test_database() -> AsyncGenerator[Database, None]:
    """Database with an empty schema, closed after the test."""
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    try:
        async with db.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)
    except (OSError, DBAPIError) as exc:
        await db.close()
        pytest.skip(f"PostgreSQL not available: {exc}")

    await _clear_tables(db)
    yield db
    await _clear_tables(db)
    await db.close()
