"""Database gateway using SQLAlchemy 2.0 async.

This module provides the engine, session, and transaction management shared
by the stores. It supports SQLite (aiosqlite) and PostgreSQL (asyncpg).
The manager is created once by the process bootstrap and passed to every
store explicitly.
"""

from collections.abc import AsyncGenerator, Iterator, Mapping, Sequence
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from dailyforms.core.config import Settings, get_settings
from dailyforms.core.exceptions import (
    ConstraintViolationError,
    DailyFormsError,
    StorageError,
)
from dailyforms.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def _as_statement(statement: str | Executable) -> Executable:
    return text(statement) if isinstance(statement, str) else statement


class DatabaseManager:
    """Database connection, session, and transaction manager.

    The manager owns one async engine. ``connect()`` probes the database
    once; if it is unreachable the failure is logged rather than raised,
    and every later operation fails fast with StorageError until a probe
    succeeds again.
    """

    def __init__(self, settings: Settings | None = None, engine: AsyncEngine | None = None) -> None:
        """Initialize the database manager.

        Args:
            settings: Application settings. Loaded from the environment if omitted.
            engine: Pre-built engine (used by tests). Created lazily if omitted.
        """
        self.settings = settings or get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._available = False
        if engine is not None:
            self._engine = self._configure_engine(engine)

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine."""
        if self._engine is None:
            url = self.settings.database_url
            if self.settings.is_sqlite:
                kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            else:
                kwargs = {
                    "pool_size": self.settings.db_pool_size,
                    "max_overflow": self.settings.db_max_overflow,
                    "pool_timeout": self.settings.db_pool_timeout,
                    "pool_recycle": self.settings.db_pool_recycle,
                }
            self._engine = self._configure_engine(
                create_async_engine(url, echo=self.settings.db_echo, **kwargs)
            )
            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    def _configure_engine(self, engine: AsyncEngine) -> AsyncEngine:
        if engine.dialect.name == "sqlite":
            foreign_keys = "ON" if self.settings.db_sqlite_foreign_keys else "OFF"
            busy_timeout = self.settings.db_sqlite_busy_timeout

            @event.listens_for(engine.sync_engine, "connect")
            def _set_sqlite_pragmas(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute(f"PRAGMA foreign_keys={foreign_keys}")
                cursor.execute(f"PRAGMA busy_timeout={busy_timeout}")
                cursor.close()

        return engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    @property
    def is_available(self) -> bool:
        return self._available

    async def check_connection(self) -> bool:
        """Run one lightweight round trip against the database.

        Returns:
            bool: True if the query succeeded, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.debug("Database connection check successful")
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error("Database connection check failed", error=str(e))
            return False

    async def connect(self) -> bool:
        """Verify connectivity and prepare the schema.

        Never raises: an unreachable store is logged and recorded so that
        core operations fail fast instead of crashing the host process.

        Returns:
            bool: Whether the database is available.
        """
        if self.settings.is_sqlite:
            self._ensure_sqlite_directory()

        if not await self.check_connection():
            self._available = False
            logger.error("Database unreachable at startup; operations will fail until it recovers")
            return False

        if not self.settings.is_production:
            try:
                await self.create_tables()
            except SQLAlchemyError as e:
                self._available = False
                logger.error("Failed to create database tables", error=str(e))
                return False

        self._available = True
        logger.info("Database connected")
        return True

    def _ensure_sqlite_directory(self) -> None:
        db_path = self.settings.database_url.split(":///")[-1]
        if not db_path or db_path.startswith(":memory:"):
            return
        try:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create database directory", path=db_path, error=str(e))

    async def ensure_available(self) -> None:
        """Fail fast while the database is known to be unreachable.

        Re-probes once, so availability is restored as soon as the
        database answers again.

        Raises:
            StorageError: If the database is still unreachable.
        """
        if self._available:
            return
        if await self.check_connection():
            self._available = True
            logger.info("Database connectivity restored")
            return
        raise StorageError("Database is unavailable")

    async def create_tables(self) -> None:
        """Create all tables defined on Base.metadata."""
        from dailyforms.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def drop_tables(self) -> None:
        """Drop all tables. Testing only."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.warning("Database tables dropped")

    async def disconnect(self) -> None:
        """Dispose the engine and all pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._available = False

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session, rolled back on any exception.

        Raises:
            StorageError: If the database is unavailable.
        """
        await self.ensure_available()
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session inside one explicit transaction.

        Commits when the block exits normally; rolls back and re-raises
        on any exception, so callers never observe partial writes.
        """
        async with self.session() as session:
            async with session.begin():
                yield session

    async def execute(self, statement: str | Executable, params: Mapping[str, Any] | None = None) -> int:
        """Execute one parameterized write statement and commit.

        Returns:
            int: Number of rows affected.
        """
        async with self.transaction() as session:
            result = await session.execute(_as_statement(statement), params or {})
            return result.rowcount

    async def execute_batch(
        self, statement: str | Executable, params_list: Sequence[Mapping[str, Any]]
    ) -> int:
        """Execute one statement for every parameter set in a single transaction.

        Either every row is written or none is.

        Returns:
            int: Number of parameter sets executed.
        """
        if not params_list:
            return 0
        async with self.transaction() as session:
            await session.execute(_as_statement(statement), [dict(p) for p in params_list])
        return len(params_list)

    async def fetch_all(
        self, statement: str | Executable, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Execute one parameterized read statement.

        Returns:
            list[dict]: Rows as plain dictionaries.
        """
        async with self.session() as session:
            result = await session.execute(_as_statement(statement), params or {})
            return [dict(row) for row in result.mappings().all()]

    @contextmanager
    def translate_errors(self, operation: str, **context: Any) -> Iterator[None]:
        """Classify storage failures raised inside the block.

        Classified errors pass through unchanged. Integrity failures become
        ConstraintViolationError; any other SQLAlchemy or OS error is logged
        and re-raised as StorageError.

        Args:
            operation: Human-readable operation name, e.g. "create entry".
            **context: Extra key/value pairs for the log entry.
        """
        try:
            yield
        except DailyFormsError:
            raise
        except IntegrityError as e:
            logger.warning("Constraint violation", operation=operation, error=str(e.orig), **context)
            raise ConstraintViolationError(f"Failed to {operation}: constraint violated") from e
        except (SQLAlchemyError, OSError) as e:
            if isinstance(e, DBAPIError) and e.connection_invalidated:
                self._available = False
            logger.error("Storage operation failed", operation=operation, error=str(e), **context)
            raise StorageError(f"Failed to {operation}") from e
