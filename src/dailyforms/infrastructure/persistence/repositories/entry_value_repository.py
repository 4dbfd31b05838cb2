"""Repository for entry value operations.

Values are written in one batched insert per entry and read back grouped
by entry, each joined with its field's label and type.
"""

from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dailyforms.infrastructure.persistence.models import (
    EntryModel,
    EntryValueModel,
    FieldModel,
)


class EntryValueRepository:
    """Repository for entry value database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_many(self, rows: Sequence[dict[str, Any]]) -> int:
        """Insert value rows in one batched statement.

        Args:
            rows: Dicts with ``id``, ``entry_id``, ``field_id`` and ``value_text``.

        Returns:
            Number of rows inserted.
        """
        if not rows:
            return 0
        now = datetime.now(timezone.utc)
        await self.session.execute(
            insert(EntryValueModel),
            [{**row, "created_at": now, "updated_at": now} for row in rows],
        )
        return len(rows)

    async def list_for_entries(self, entry_ids: Sequence[str]) -> dict[str, list[dict[str, Any]]]:
        """Fetch active values for several entries.

        Returns:
            Mapping of entry ID to its values in field definition order.
            Every requested entry ID is present, possibly with an empty list.
        """
        grouped: dict[str, list[dict[str, Any]]] = defaultdict(list)
        if not entry_ids:
            return {}

        result = await self.session.execute(
            select(
                EntryValueModel.id,
                EntryValueModel.entry_id,
                EntryValueModel.field_id,
                EntryValueModel.value_text,
                FieldModel.label,
                FieldModel.type,
            )
            .join(FieldModel, EntryValueModel.field_id == FieldModel.id)
            .where(
                EntryValueModel.entry_id.in_(list(entry_ids)),
                EntryValueModel.deleted_at.is_(None),
            )
            .order_by(FieldModel.created_at.asc(), FieldModel.id.asc())
        )
        for row in result.mappings().all():
            grouped[row["entry_id"]].append(dict(row))
        return {entry_id: grouped.get(entry_id, []) for entry_id in entry_ids}

    async def soft_delete_for_entry(self, entry_id: str) -> int:
        """Mark every value of an entry as deleted."""
        now = datetime.now(timezone.utc)
        result = await self.session.execute(
            update(EntryValueModel)
            .where(EntryValueModel.entry_id == entry_id, EntryValueModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_by_collector(self, collector_id: str) -> int:
        """Hard-delete every value of every entry of a collector."""
        entry_ids = select(EntryModel.id).where(EntryModel.collector_id == collector_id)
        result = await self.session.execute(
            delete(EntryValueModel)
            .where(EntryValueModel.entry_id.in_(entry_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
