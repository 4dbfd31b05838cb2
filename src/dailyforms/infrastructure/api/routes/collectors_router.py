"""Collectors API routes.

Provides endpoints for managing collectors and their fields.
"""

from fastapi import APIRouter, Response, status

from dailyforms.infrastructure.api.dependencies import DeletionServiceDep, SchemaStoreDep
from dailyforms.infrastructure.api.schemas import (
    CollectorResponse,
    CreateCollectorRequest,
    CreatedResponse,
    CreateFieldRequest,
    FieldResponse,
)

router = APIRouter()


@router.get("", response_model=list[CollectorResponse])
async def list_collectors(store: SchemaStoreDep) -> list[CollectorResponse]:
    """List active collectors, newest first."""
    collectors = await store.get_collectors()
    return [CollectorResponse(**c.to_dict()) for c in collectors]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_collector(request: CreateCollectorRequest, store: SchemaStoreDep) -> CreatedResponse:
    """Create a collector."""
    collector_id = await store.create_collector(request.to_data())
    return CreatedResponse(id=collector_id, message="Collector created successfully")


@router.get("/{collector_id}", response_model=CollectorResponse)
async def get_collector(collector_id: str, store: SchemaStoreDep) -> CollectorResponse:
    """Get one collector."""
    collector = await store.get_collector(collector_id)
    return CollectorResponse(**collector.to_dict())


@router.delete("/{collector_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_collector(collector_id: str, service: DeletionServiceDep) -> Response:
    """Delete a collector with all of its fields, entries and files."""
    await service.delete_collector(collector_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{collector_id}/fields", response_model=list[FieldResponse])
async def list_fields(collector_id: str, store: SchemaStoreDep) -> list[FieldResponse]:
    """List a collector's fields in definition order."""
    fields = await store.get_fields(collector_id)
    return [FieldResponse(**f.to_dict()) for f in fields]


@router.post(
    "/{collector_id}/fields",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
)
async def create_field(
    collector_id: str, request: CreateFieldRequest, store: SchemaStoreDep
) -> CreatedResponse:
    """Add a field to a collector."""
    field_id = await store.create_field(collector_id, request.to_data())
    return CreatedResponse(id=field_id, message="Field created successfully")


@router.delete("/{collector_id}/fields/{field_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_field(collector_id: str, field_id: str, store: SchemaStoreDep) -> Response:
    """Soft-delete a field."""
    await store.delete_field(collector_id, field_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
