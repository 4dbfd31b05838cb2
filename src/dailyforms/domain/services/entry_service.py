"""Entry store: dated submissions and their field values.

Entries are written as one transaction: the collector row is locked, the
daily quota is checked, every value is resolved against the collector's
fields and coerced, the entry and its values are inserted, and the quota is
re-checked before commit. Any failure rolls the whole entry back.
"""

import uuid
from collections.abc import Mapping, Sequence
from typing import Any

from dailyforms.core.exceptions import NotFoundError, QuotaExceededError, UnknownFieldError
from dailyforms.core.logging import get_logger
from dailyforms.domain.entities import UNLIMITED_OCCURRENCES, Entry, EntryValue
from dailyforms.domain.services.input_validator import InputValidator, raise_for_failures
from dailyforms.domain.services.schema_service import require_collector
from dailyforms.domain.services.value_coercer import ValueCoercer
from dailyforms.infrastructure.persistence.database import DatabaseManager
from dailyforms.infrastructure.persistence.models import EntryModel
from dailyforms.infrastructure.persistence.repositories import (
    CollectorRepository,
    EntryRepository,
    EntryValueRepository,
    FieldRepository,
)

logger = get_logger(__name__)


def entry_from_model(model: EntryModel, values: list[dict[str, Any]]) -> Entry:
    return Entry(
        id=model.id,
        collector_id=model.collector_id,
        entry_date=model.entry_date,
        values=[
            EntryValue(
                id=v["id"],
                entry_id=v["entry_id"],
                field_id=v["field_id"],
                value_text=v["value_text"],
                label=v.get("label"),
                type=v.get("type"),
            )
            for v in values
        ],
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )


class EntryStore:
    """Store for entries and entry values."""

    def __init__(self, db: DatabaseManager) -> None:
        """Initialize the store.

        Args:
            db: Database manager shared by the process.
        """
        self.db = db

    async def get_entries(self, collector_id: str, date: str) -> list[Entry]:
        """List a collector's active entries for one date, newest first.

        Each entry carries its values in field definition order.

        Raises:
            InvalidInputError: If the collector ID or date is malformed.
            NotFoundError: If the collector does not exist.
            StorageError: On storage failure.
        """
        failures = InputValidator.validate_id(collector_id, "collector_id")
        failures.extend(InputValidator.validate_date(date))
        raise_for_failures(failures)

        with self.db.translate_errors("get entries", collector_id=collector_id, date=date):
            async with self.db.session() as session:
                await require_collector(CollectorRepository(session), collector_id)
                entries = await EntryRepository(session).list_active(collector_id, date)
                values = await EntryValueRepository(session).list_for_entries(
                    [e.id for e in entries]
                )
        return [entry_from_model(e, values[e.id]) for e in entries]

    async def get_entry(self, entry_id: str) -> Entry:
        """Get one active entry with its values."""
        raise_for_failures(InputValidator.validate_id(entry_id, "entry_id"))

        with self.db.translate_errors("get entry", entry_id=entry_id):
            async with self.db.session() as session:
                entry = await EntryRepository(session).get_active_by_id(entry_id)
                if entry is None:
                    raise NotFoundError("Entry not found", code="entry_not_found")
                values = await EntryValueRepository(session).list_for_entries([entry_id])
        return entry_from_model(entry, values[entry_id])

    async def count_entries(self, collector_id: str, date: str) -> int:
        """Count a collector's active entries for one date."""
        failures = InputValidator.validate_id(collector_id, "collector_id")
        failures.extend(InputValidator.validate_date(date))
        raise_for_failures(failures)

        with self.db.translate_errors("count entries", collector_id=collector_id, date=date):
            async with self.db.session() as session:
                return await EntryRepository(session).count_active(collector_id, date)

    async def create_entry(
        self, collector_id: str, date: str, values: Sequence[Mapping[str, Any]]
    ) -> str:
        """Create an entry and all of its values atomically.

        Args:
            collector_id: Target collector ID.
            date: Entry date as YYYY-MM-DD.
            values: Non-empty sequence of ``{"field_id": ..., "value": ...}``.

        Returns:
            The new entry ID.

        Raises:
            InvalidInputError: If the input is malformed or a value cannot be coerced.
            NotFoundError: If the collector does not exist.
            QuotaExceededError: If the collector's daily quota is reached.
            UnknownFieldError: If a value references a field outside the collector.
            StorageError: On storage failure.
        """
        failures = InputValidator.validate_id(collector_id, "collector_id")
        failures.extend(InputValidator.validate_date(date))
        failures.extend(InputValidator.validate_values(values))
        raise_for_failures(failures)

        entry_id = str(uuid.uuid4())
        with self.db.translate_errors("create entry", collector_id=collector_id, date=date):
            async with self.db.transaction() as session:
                collector = await require_collector(
                    CollectorRepository(session), collector_id, for_update=True
                )
                entries = EntryRepository(session)
                limit = collector.max_occurrences_per_day
                quota_applies = limit != UNLIMITED_OCCURRENCES

                if quota_applies and await entries.count_active(collector_id, date) >= limit:
                    raise QuotaExceededError(limit)

                fields = {
                    f.id: f
                    for f in await FieldRepository(session).list_active_by_collector(collector_id)
                }
                for item in values:
                    if item["field_id"] not in fields:
                        raise UnknownFieldError(item["field_id"])

                rows = []
                for item in values:
                    field = fields[item["field_id"]]
                    rows.append(
                        {
                            "id": str(uuid.uuid4()),
                            "entry_id": entry_id,
                            "field_id": field.id,
                            "value_text": ValueCoercer.coerce(item.get("value"), field.type, field.label),
                        }
                    )

                await entries.create(
                    EntryModel(id=entry_id, collector_id=collector_id, entry_date=date)
                )
                await EntryValueRepository(session).create_many(rows)

                # Concurrent submissions may have committed since the first check.
                if quota_applies and await entries.count_active(collector_id, date) > limit:
                    raise QuotaExceededError(limit)

        logger.info(
            "Entry created",
            entry_id=entry_id,
            collector_id=collector_id,
            date=date,
            value_count=len(rows),
        )
        return entry_id

    async def delete_entry(self, entry_id: str) -> None:
        """Soft-delete an entry and its values in one transaction.

        Soft-deleted entries no longer count toward the daily quota.
        """
        raise_for_failures(InputValidator.validate_id(entry_id, "entry_id"))

        with self.db.translate_errors("delete entry", entry_id=entry_id):
            async with self.db.transaction() as session:
                entries = EntryRepository(session)
                if await entries.get_active_by_id(entry_id) is None:
                    raise NotFoundError("Entry not found", code="entry_not_found")
                await EntryValueRepository(session).soft_delete_for_entry(entry_id)
                await entries.soft_delete(entry_id)

        logger.info("Entry deleted", entry_id=entry_id)
