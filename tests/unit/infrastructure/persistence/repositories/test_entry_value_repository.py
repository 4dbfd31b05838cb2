"""Unit tests for EntryValueRepository."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from dailyforms.infrastructure.persistence.repositories import EntryValueRepository


@pytest.fixture
def mock_session():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def repository(mock_session):
    return EntryValueRepository(mock_session)


@pytest.mark.asyncio
async def test_create_many_single_statement(repository, mock_session):
    rows = [
        {"id": "v1", "entry_id": "e1", "field_id": "f1", "value_text": "42"},
        {"id": "v2", "entry_id": "e1", "field_id": "f2", "value_text": "true"},
    ]

    assert await repository.create_many(rows) == 2

    mock_session.execute.assert_called_once()
    params = mock_session.execute.call_args.args[1]
    assert [p["id"] for p in params] == ["v1", "v2"]
    assert all(p["created_at"] == p["updated_at"] for p in params)


@pytest.mark.asyncio
async def test_create_many_empty(repository, mock_session):
    assert await repository.create_many([]) == 0
    mock_session.execute.assert_not_called()


@pytest.mark.asyncio
async def test_list_for_entries_groups_by_entry(repository, mock_session):
    mock_result = MagicMock()
    mock_result.mappings.return_value.all.return_value = [
        {"id": "v1", "entry_id": "e1", "field_id": "f1", "value_text": "a", "label": "A", "type": "text"},
        {"id": "v2", "entry_id": "e2", "field_id": "f1", "value_text": "b", "label": "A", "type": "text"},
        {"id": "v3", "entry_id": "e1", "field_id": "f2", "value_text": "1", "label": "B", "type": "number"},
    ]
    mock_session.execute.return_value = mock_result

    grouped = await repository.list_for_entries(["e1", "e2", "e3"])

    assert [v["id"] for v in grouped["e1"]] == ["v1", "v3"]
    assert [v["id"] for v in grouped["e2"]] == ["v2"]
    assert grouped["e3"] == []


@pytest.mark.asyncio
async def test_list_for_entries_no_ids(repository, mock_session):
    assert await repository.list_for_entries([]) == {}
    mock_session.execute.assert_not_called()
