"""Repository for field operations.

Provides CRUD operations for the fields table.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dailyforms.infrastructure.persistence.models import FieldModel


class FieldRepository:
    """Repository for field database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, field: FieldModel) -> FieldModel:
        """Create a new field."""
        self.session.add(field)
        await self.session.flush()
        return field

    async def get_active(self, collector_id: str, field_id: str) -> FieldModel | None:
        """Get an active field belonging to a collector."""
        result = await self.session.execute(
            select(FieldModel).where(
                FieldModel.id == field_id,
                FieldModel.collector_id == collector_id,
                FieldModel.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def list_active_by_collector(self, collector_id: str) -> list[FieldModel]:
        """List a collector's active fields in definition order."""
        result = await self.session.execute(
            select(FieldModel)
            .where(
                FieldModel.collector_id == collector_id,
                FieldModel.deleted_at.is_(None),
            )
            .order_by(FieldModel.created_at.asc(), FieldModel.id.asc())
        )
        return list(result.scalars().all())

    async def soft_delete(self, field_id: str) -> int:
        """Mark a field as deleted.

        Returns:
            Number of rows updated.
        """
        now = datetime.now(timezone.utc)
        result = await self.session.execute(
            update(FieldModel)
            .where(FieldModel.id == field_id, FieldModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_by_collector(self, collector_id: str) -> int:
        """Hard-delete every field of a collector, active or not."""
        result = await self.session.execute(
            delete(FieldModel)
            .where(FieldModel.collector_id == collector_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
