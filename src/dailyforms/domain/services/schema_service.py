"""Schema store: collectors and their field definitions.

Handles creation, lookup and soft-deletion of collectors' schemas. Every
public method validates its input first, then runs its statements through
the database manager; storage failures surface as StorageError.
"""

import json
import uuid
from collections.abc import Mapping
from typing import Any

from dailyforms.core.exceptions import NotFoundError
from dailyforms.core.logging import get_logger
from dailyforms.domain.entities import UNLIMITED_OCCURRENCES, Collector, Field, FieldType
from dailyforms.domain.services.input_validator import InputValidator, raise_for_failures
from dailyforms.infrastructure.persistence.database import DatabaseManager
from dailyforms.infrastructure.persistence.models import CollectorModel, FieldModel
from dailyforms.infrastructure.persistence.repositories import (
    CollectorRepository,
    FieldRepository,
)

logger = get_logger(__name__)


def collector_from_model(model: CollectorModel) -> Collector:
    return Collector(
        id=model.id,
        name=model.name,
        description=model.description,
        max_occurrences_per_day=model.max_occurrences_per_day,
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )


def field_from_model(model: FieldModel) -> Field:
    return Field(
        id=model.id,
        collector_id=model.collector_id,
        label=model.label,
        type=FieldType(model.type),
        required=model.required,
        settings=json.loads(model.settings) if model.settings else {},
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )


def _normalize_settings(settings: Any) -> dict[str, Any]:
    if settings is None:
        return {}
    if isinstance(settings, str):
        return json.loads(settings)
    return dict(settings)


async def require_collector(
    repository: CollectorRepository, collector_id: str, for_update: bool = False
) -> CollectorModel:
    collector = await repository.get_active_by_id(collector_id, for_update=for_update)
    if collector is None:
        raise NotFoundError("Collector not found", code="collector_not_found")
    return collector


class SchemaStore:
    """Store for collector and field definitions."""

    def __init__(self, db: DatabaseManager) -> None:
        """Initialize the store.

        Args:
            db: Database manager shared by the process.
        """
        self.db = db

    async def create_collector(self, data: Mapping[str, Any]) -> str:
        """Create a collector.

        Args:
            data: Mapping with ``name``, optional ``description`` and optional
                ``max_occurrences_per_day`` (defaults to unlimited).

        Returns:
            The new collector ID.

        Raises:
            InvalidInputError: If the definition is invalid.
            StorageError: On storage failure.
        """
        raise_for_failures(InputValidator.validate_collector(data))

        description = data.get("description")
        max_occurrences = data.get("max_occurrences_per_day")
        collector = CollectorModel(
            id=str(uuid.uuid4()),
            name=data["name"].strip(),
            description=description.strip() if description is not None else None,
            max_occurrences_per_day=(
                UNLIMITED_OCCURRENCES if max_occurrences is None else max_occurrences
            ),
        )

        with self.db.translate_errors("create collector", collector_name=collector.name):
            async with self.db.transaction() as session:
                await CollectorRepository(session).create(collector)

        logger.info(
            "Collector created",
            collector_id=collector.id,
            collector_name=collector.name,
            max_occurrences_per_day=collector.max_occurrences_per_day,
        )
        return collector.id

    async def get_collectors(self) -> list[Collector]:
        """List active collectors, newest first."""
        with self.db.translate_errors("get collectors"):
            async with self.db.session() as session:
                models = await CollectorRepository(session).list_active()
        return [collector_from_model(m) for m in models]

    async def get_collector(self, collector_id: str) -> Collector:
        """Get one active collector.

        Raises:
            InvalidInputError: If the ID is blank.
            NotFoundError: If no active collector has this ID.
            StorageError: On storage failure.
        """
        raise_for_failures(InputValidator.validate_id(collector_id, "collector_id"))

        with self.db.translate_errors("get collector", collector_id=collector_id):
            async with self.db.session() as session:
                model = await require_collector(CollectorRepository(session), collector_id)
        return collector_from_model(model)

    async def create_field(self, collector_id: str, data: Mapping[str, Any]) -> str:
        """Add a field to an active collector.

        Args:
            collector_id: Owning collector ID.
            data: Mapping with ``label``, ``type``, optional ``required``
                (defaults to True) and optional ``settings`` (defaults to {}).

        Returns:
            The new field ID.
        """
        failures = InputValidator.validate_id(collector_id, "collector_id")
        failures.extend(InputValidator.validate_field(data))
        raise_for_failures(failures)

        required = data.get("required")
        field = FieldModel(
            id=str(uuid.uuid4()),
            collector_id=collector_id,
            label=data["label"].strip(),
            type=data["type"],
            required=True if required is None else required,
            settings=json.dumps(_normalize_settings(data.get("settings"))),
        )

        with self.db.translate_errors("create field", collector_id=collector_id):
            async with self.db.transaction() as session:
                await require_collector(CollectorRepository(session), collector_id)
                await FieldRepository(session).create(field)

        logger.info(
            "Field created",
            field_id=field.id,
            collector_id=collector_id,
            field_type=field.type,
        )
        return field.id

    async def get_fields(self, collector_id: str) -> list[Field]:
        """List an active collector's active fields in definition order."""
        raise_for_failures(InputValidator.validate_id(collector_id, "collector_id"))

        with self.db.translate_errors("get fields", collector_id=collector_id):
            async with self.db.session() as session:
                await require_collector(CollectorRepository(session), collector_id)
                models = await FieldRepository(session).list_active_by_collector(collector_id)
        return [field_from_model(m) for m in models]

    async def get_field(self, collector_id: str, field_id: str) -> Field:
        """Get one active field of a collector."""
        failures = InputValidator.validate_id(collector_id, "collector_id")
        failures.extend(InputValidator.validate_id(field_id, "field_id"))
        raise_for_failures(failures)

        with self.db.translate_errors("get field", collector_id=collector_id, field_id=field_id):
            async with self.db.session() as session:
                model = await FieldRepository(session).get_active(collector_id, field_id)
        if model is None:
            raise NotFoundError("Field not found", code="field_not_found")
        return field_from_model(model)

    async def delete_field(self, collector_id: str, field_id: str) -> None:
        """Soft-delete a field. Stored values referencing it are kept."""
        failures = InputValidator.validate_id(collector_id, "collector_id")
        failures.extend(InputValidator.validate_id(field_id, "field_id"))
        raise_for_failures(failures)

        with self.db.translate_errors("delete field", collector_id=collector_id, field_id=field_id):
            async with self.db.transaction() as session:
                repository = FieldRepository(session)
                if await repository.get_active(collector_id, field_id) is None:
                    raise NotFoundError("Field not found", code="field_not_found")
                await repository.soft_delete(field_id)

        logger.info("Field deleted", field_id=field_id, collector_id=collector_id)
