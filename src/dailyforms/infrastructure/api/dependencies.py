"""FastAPI dependencies wiring the stores to the shared database manager."""

from typing import Annotated

from fastapi import Depends, Request

from dailyforms.domain.services import CollectorDeletionService, EntryStore, SchemaStore
from dailyforms.infrastructure.persistence.database import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """Return the database manager created by the application lifespan."""
    return request.app.state.db


def get_schema_store(db: Annotated[DatabaseManager, Depends(get_db)]) -> SchemaStore:
    return SchemaStore(db)


def get_entry_store(db: Annotated[DatabaseManager, Depends(get_db)]) -> EntryStore:
    return EntryStore(db)


def get_deletion_service(
    db: Annotated[DatabaseManager, Depends(get_db)],
) -> CollectorDeletionService:
    return CollectorDeletionService(db)


SchemaStoreDep = Annotated[SchemaStore, Depends(get_schema_store)]
EntryStoreDep = Annotated[EntryStore, Depends(get_entry_store)]
DeletionServiceDep = Annotated[CollectorDeletionService, Depends(get_deletion_service)]
