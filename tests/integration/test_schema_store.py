"""Integration tests for SchemaStore against SQLite."""

import pytest

from dailyforms.core.exceptions import InvalidInputError, NotFoundError
from dailyforms.domain.entities import UNLIMITED_OCCURRENCES, FieldType


@pytest.mark.asyncio
async def test_create_and_get_collector(schema_store):
    collector_id = await schema_store.create_collector(
        {"name": "Mood", "description": "Daily mood", "max_occurrences_per_day": 2}
    )

    collector = await schema_store.get_collector(collector_id)

    assert collector.id == collector_id
    assert collector.name == "Mood"
    assert collector.description == "Daily mood"
    assert collector.max_occurrences_per_day == 2
    assert collector.created_at is not None


@pytest.mark.asyncio
async def test_collector_defaults_to_unlimited(schema_store):
    collector_id = await schema_store.create_collector({"name": "Water"})

    collector = await schema_store.get_collector(collector_id)

    assert collector.max_occurrences_per_day == UNLIMITED_OCCURRENCES
    assert collector.is_unlimited
    assert collector.description is None


@pytest.mark.asyncio
async def test_get_collectors_newest_first(schema_store):
    first = await schema_store.create_collector({"name": "Mood"})
    second = await schema_store.create_collector({"name": "Sleep"})

    collectors = await schema_store.get_collectors()

    assert [c.id for c in collectors] == [second, first]


@pytest.mark.asyncio
async def test_get_collectors_empty(schema_store):
    assert await schema_store.get_collectors() == []


@pytest.mark.asyncio
async def test_invalid_collector_is_not_written(schema_store, count_rows):
    with pytest.raises(InvalidInputError) as exc_info:
        await schema_store.create_collector({"name": "  ", "max_occurrences_per_day": 0})

    assert exc_info.value.code == "invalid_name"
    assert len(exc_info.value.errors) == 2
    assert await count_rows("collectors") == 0


@pytest.mark.asyncio
async def test_get_collector_not_found(schema_store):
    with pytest.raises(NotFoundError) as exc_info:
        await schema_store.get_collector("missing")
    assert exc_info.value.code == "collector_not_found"


@pytest.mark.asyncio
async def test_get_collector_blank_id(schema_store):
    with pytest.raises(InvalidInputError):
        await schema_store.get_collector("")


@pytest.mark.asyncio
async def test_create_field_defaults(schema_store):
    collector_id = await schema_store.create_collector({"name": "Mood"})

    field_id = await schema_store.create_field(collector_id, {"label": "Score", "type": "number"})

    field = await schema_store.get_field(collector_id, field_id)
    assert field.label == "Score"
    assert field.type == FieldType.NUMBER
    assert field.required is True
    assert field.settings == {}


@pytest.mark.asyncio
async def test_create_field_with_settings(schema_store):
    collector_id = await schema_store.create_collector({"name": "Mood"})

    from_text = await schema_store.create_field(
        collector_id, {"label": "Score", "type": "number", "settings": '{"min": 0, "max": 10}'}
    )
    from_mapping = await schema_store.create_field(
        collector_id,
        {"label": "Notes", "type": "textarea", "required": False, "settings": {"rows": 4}},
    )

    assert (await schema_store.get_field(collector_id, from_text)).settings == {"min": 0, "max": 10}
    notes = await schema_store.get_field(collector_id, from_mapping)
    assert notes.settings == {"rows": 4}
    assert notes.required is False


@pytest.mark.asyncio
async def test_get_fields_in_definition_order(schema_store):
    collector_id = await schema_store.create_collector({"name": "Mood"})
    ids = [
        await schema_store.create_field(collector_id, {"label": label, "type": "text"})
        for label in ("First", "Second", "Third")
    ]

    fields = await schema_store.get_fields(collector_id)

    assert [f.id for f in fields] == ids
    assert all(f.collector_id == collector_id for f in fields)


@pytest.mark.asyncio
async def test_get_fields_unknown_collector(schema_store):
    with pytest.raises(NotFoundError):
        await schema_store.get_fields("missing")


@pytest.mark.asyncio
async def test_create_field_unknown_collector(schema_store, count_rows):
    with pytest.raises(NotFoundError):
        await schema_store.create_field("missing", {"label": "Score", "type": "number"})
    assert await count_rows("fields") == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data, code",
    [
        ({"label": "", "type": "text"}, "invalid_label"),
        ({"label": "Q", "type": "date"}, "invalid_type"),
        ({"label": "Q", "type": "text", "required": "yes"}, "invalid_required"),
        ({"label": "Q", "type": "text", "settings": "[1]"}, "invalid_settings"),
    ],
)
async def test_create_field_invalid(schema_store, data, code):
    collector_id = await schema_store.create_collector({"name": "Mood"})

    with pytest.raises(InvalidInputError) as exc_info:
        await schema_store.create_field(collector_id, data)
    assert exc_info.value.code == code


@pytest.mark.asyncio
async def test_delete_field(schema_store):
    collector_id = await schema_store.create_collector({"name": "Mood"})
    keep = await schema_store.create_field(collector_id, {"label": "Keep", "type": "text"})
    drop = await schema_store.create_field(collector_id, {"label": "Drop", "type": "text"})

    await schema_store.delete_field(collector_id, drop)

    assert [f.id for f in await schema_store.get_fields(collector_id)] == [keep]
    with pytest.raises(NotFoundError) as exc_info:
        await schema_store.get_field(collector_id, drop)
    assert exc_info.value.code == "field_not_found"
    with pytest.raises(NotFoundError):
        await schema_store.delete_field(collector_id, drop)


@pytest.mark.asyncio
async def test_get_field_from_other_collector(schema_store):
    mood = await schema_store.create_collector({"name": "Mood"})
    sleep = await schema_store.create_collector({"name": "Sleep"})
    field_id = await schema_store.create_field(mood, {"label": "Score", "type": "number"})

    with pytest.raises(NotFoundError):
        await schema_store.get_field(sleep, field_id)
