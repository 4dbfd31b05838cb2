"""Pytest configuration for all tests."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from dailyforms.core.config import Settings
from dailyforms.domain.services import CollectorDeletionService, EntryStore, SchemaStore
from dailyforms.infrastructure.persistence.database import DatabaseManager

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_manager() -> AsyncGenerator[DatabaseManager, None]:
    """Create a database manager over an in-memory SQLite database.

    Foreign keys are enforced, so deletions must respect dependency order.
    """
    settings = Settings(environment="testing", database_url=TEST_DATABASE_URL)
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    db = DatabaseManager(settings, engine=engine)
    assert await db.connect() is True

    yield db

    await db.drop_tables()
    await db.disconnect()


@pytest_asyncio.fixture
async def schema_store(db_manager: DatabaseManager) -> SchemaStore:
    return SchemaStore(db_manager)


@pytest_asyncio.fixture
async def entry_store(db_manager: DatabaseManager) -> EntryStore:
    return EntryStore(db_manager)


@pytest_asyncio.fixture
async def deletion_service(db_manager: DatabaseManager) -> CollectorDeletionService:
    return CollectorDeletionService(db_manager)


@pytest.fixture
def count_rows(db_manager: DatabaseManager):
    """Count raw rows in a table, soft-deleted ones included."""

    async def count(table: str, **filters: Any) -> int:
        where = " AND ".join(f"{column} = :{column}" for column in filters)
        sql = f'SELECT count(*) AS total FROM "{table}"' + (f" WHERE {where}" if where else "")
        rows = await db_manager.fetch_all(sql, filters)
        return rows[0]["total"]

    return count
