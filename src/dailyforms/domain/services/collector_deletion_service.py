"""Cascading deletion of a collector.

Foreign keys carry no ON DELETE CASCADE, so deleting a collector is an
explicit protocol: every dependent table is cleared leaves-first inside one
transaction, and any failure leaves all five tables untouched.
"""

from dailyforms.core.exceptions import NotFoundError
from dailyforms.core.logging import get_logger
from dailyforms.domain.services.input_validator import InputValidator, raise_for_failures
from dailyforms.infrastructure.persistence.database import DatabaseManager
from dailyforms.infrastructure.persistence.repositories import (
    CollectorRepository,
    EntryRepository,
    EntryValueRepository,
    FieldRepository,
    FileRepository,
)

logger = get_logger(__name__)


class CollectorDeletionService:
    """Removes a collector and everything that references it."""

    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    async def delete_collector(self, collector_id: str) -> dict[str, int]:
        """Hard-delete a collector with its fields, entries, values and files.

        Steps run in this order, all in one transaction:
        files -> entry_values -> entries -> fields -> collectors.

        Args:
            collector_id: The collector ID.

        Returns:
            Number of rows removed per table.

        Raises:
            InvalidInputError: If the ID is blank.
            NotFoundError: If the collector does not exist.
            StorageError: If any step fails; nothing is removed.
        """
        raise_for_failures(InputValidator.validate_id(collector_id, "collector_id"))

        removed: dict[str, int] = {}
        with self.db.translate_errors("delete collector", collector_id=collector_id):
            async with self.db.transaction() as session:
                collectors = CollectorRepository(session)
                if await collectors.get_by_id(collector_id) is None:
                    raise NotFoundError("Collector not found", code="collector_not_found")

                steps = (
                    ("files", FileRepository(session).delete_by_collector),
                    ("entry_values", EntryValueRepository(session).delete_by_collector),
                    ("entries", EntryRepository(session).delete_by_collector),
                    ("fields", FieldRepository(session).delete_by_collector),
                    ("collectors", collectors.delete_by_id),
                )
                for table, step in steps:
                    removed[table] = await step(collector_id)
                    logger.debug(
                        "Cascade step completed",
                        collector_id=collector_id,
                        table=table,
                        rows=removed[table],
                    )

        logger.info("Collector deleted", collector_id=collector_id, removed=removed)
        return removed
