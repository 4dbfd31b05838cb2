"""Entries API routes.

Provides endpoints for submitting and reading daily entries.
"""

from fastapi import APIRouter, Query, Response, status

from dailyforms.infrastructure.api.dependencies import EntryStoreDep
from dailyforms.infrastructure.api.schemas import (
    CreatedResponse,
    CreateEntryRequest,
    EntryResponse,
)

router = APIRouter()


@router.get("", response_model=list[EntryResponse])
async def list_entries(
    store: EntryStoreDep,
    collector_id: str = Query(default="", alias="collectorId"),
    date: str = Query(default=""),
) -> list[EntryResponse]:
    """List a collector's entries for one date, newest first."""
    entries = await store.get_entries(collector_id, date)
    return [EntryResponse(**e.to_dict()) for e in entries]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_entry(request: CreateEntryRequest, store: EntryStoreDep) -> CreatedResponse:
    """Submit an entry."""
    entry_id = await store.create_entry(request.collector_id, request.date, request.to_values())
    return CreatedResponse(id=entry_id, message="Entry created successfully")


@router.get("/{entry_id}", response_model=EntryResponse)
async def get_entry(entry_id: str, store: EntryStoreDep) -> EntryResponse:
    """Get one entry."""
    entry = await store.get_entry(entry_id)
    return EntryResponse(**entry.to_dict())


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: str, store: EntryStoreDep) -> Response:
    """Soft-delete an entry."""
    await store.delete_entry(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
