"""Repository for collector operations.

Provides CRUD operations for the collectors table.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from dailyforms.infrastructure.persistence.models import CollectorModel


class CollectorRepository:
    """Repository for collector database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collector: CollectorModel) -> CollectorModel:
        """Create a new collector.

        Args:
            collector: The collector model to create.

        Returns:
            The created collector model.
        """
        self.session.add(collector)
        await self.session.flush()
        return collector

    async def get_by_id(self, collector_id: str) -> CollectorModel | None:
        """Get a collector by ID, whether active or soft-deleted."""
        result = await self.session.execute(
            select(CollectorModel).where(CollectorModel.id == collector_id)
        )
        return result.scalar_one_or_none()

    async def get_active_by_id(
        self, collector_id: str, for_update: bool = False
    ) -> CollectorModel | None:
        """Get an active collector by ID.

        Args:
            collector_id: The collector ID.
            for_update: Lock the row for the rest of the transaction
                (ignored by SQLite, whose writers are already serialized).

        Returns:
            The collector model if found and not soft-deleted, None otherwise.
        """
        query = select(CollectorModel).where(
            CollectorModel.id == collector_id,
            CollectorModel.deleted_at.is_(None),
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_active(self) -> list[CollectorModel]:
        """List active collectors, newest first."""
        result = await self.session.execute(
            select(CollectorModel)
            .where(CollectorModel.deleted_at.is_(None))
            .order_by(CollectorModel.created_at.desc(), CollectorModel.id.desc())
        )
        return list(result.scalars().all())

    async def delete_by_id(self, collector_id: str) -> int:
        """Hard-delete a collector row.

        Returns:
            Number of rows removed.
        """
        result = await self.session.execute(
            delete(CollectorModel)
            .where(CollectorModel.id == collector_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
