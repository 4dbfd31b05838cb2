"""Repository for entry operations.

Provides CRUD operations for the entries table.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dailyforms.infrastructure.persistence.models import EntryModel


class EntryRepository:
    """Repository for entry database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, entry: EntryModel) -> EntryModel:
        """Create a new entry row."""
        self.session.add(entry)
        await self.session.flush()
        return entry

    async def get_active_by_id(self, entry_id: str) -> EntryModel | None:
        """Get an active entry by ID."""
        result = await self.session.execute(
            select(EntryModel).where(
                EntryModel.id == entry_id,
                EntryModel.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def list_active(self, collector_id: str, entry_date: str) -> list[EntryModel]:
        """List a collector's active entries for one date, newest first."""
        result = await self.session.execute(
            select(EntryModel)
            .where(
                EntryModel.collector_id == collector_id,
                EntryModel.entry_date == entry_date,
                EntryModel.deleted_at.is_(None),
            )
            .order_by(EntryModel.created_at.desc(), EntryModel.id.desc())
        )
        return list(result.scalars().all())

    async def count_active(self, collector_id: str, entry_date: str) -> int:
        """Count a collector's active entries for one date."""
        result = await self.session.execute(
            select(func.count())
            .select_from(EntryModel)
            .where(
                EntryModel.collector_id == collector_id,
                EntryModel.entry_date == entry_date,
                EntryModel.deleted_at.is_(None),
            )
        )
        return result.scalar_one()

    async def soft_delete(self, entry_id: str) -> int:
        """Mark an entry as deleted."""
        now = datetime.now(timezone.utc)
        result = await self.session.execute(
            update(EntryModel)
            .where(EntryModel.id == entry_id, EntryModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_by_collector(self, collector_id: str) -> int:
        """Hard-delete every entry of a collector."""
        result = await self.session.execute(
            delete(EntryModel)
            .where(EntryModel.collector_id == collector_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
