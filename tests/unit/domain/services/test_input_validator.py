"""Unit tests for InputValidator."""

import pytest

from dailyforms.core.exceptions import InvalidInputError
from dailyforms.domain.services import InputValidator, raise_for_failures


class TestValidateId:
    @pytest.mark.parametrize("value", ["abc", " x "])
    def test_accepts_non_blank_strings(self, value):
        assert InputValidator.validate_id(value) == []

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_rejects_blank_or_non_string(self, value):
        failures = InputValidator.validate_id(value, "collector_id")
        assert len(failures) == 1
        assert failures[0].code == "invalid_collector_id"
        assert failures[0].field == "collector_id"


class TestValidateDate:
    def test_accepts_iso_date(self):
        assert InputValidator.validate_date("2024-03-15") == []

    def test_shape_only_not_calendar(self):
        assert InputValidator.validate_date("2024-13-45") == []

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_missing(self, value):
        failures = InputValidator.validate_date(value)
        assert failures[0].code == "invalid_date"

    @pytest.mark.parametrize("value", ["2024/03/15", "24-03-15", "2024-3-15", "2024-03-15T00:00", "march"])
    def test_bad_format(self, value):
        failures = InputValidator.validate_date(value)
        assert failures[0].code == "invalid_date_format"


class TestValidateCollector:
    def test_valid_minimal(self):
        assert InputValidator.validate_collector({"name": "Mood"}) == []

    def test_valid_full(self):
        data = {"name": "Mood", "description": "How I feel", "max_occurrences_per_day": 3}
        assert InputValidator.validate_collector(data) == []

    def test_unlimited_sentinel(self):
        assert InputValidator.validate_collector({"name": "Mood", "max_occurrences_per_day": -1}) == []

    @pytest.mark.parametrize("name", [None, "", "   ", 5])
    def test_invalid_name(self, name):
        failures = InputValidator.validate_collector({"name": name})
        assert [f.code for f in failures] == ["invalid_name"]

    def test_invalid_description(self):
        failures = InputValidator.validate_collector({"name": "Mood", "description": 12})
        assert [f.code for f in failures] == ["invalid_description"]

    @pytest.mark.parametrize("quota", [0, -2, 1.5, "3", True])
    def test_invalid_quota(self, quota):
        failures = InputValidator.validate_collector({"name": "Mood", "max_occurrences_per_day": quota})
        assert [f.code for f in failures] == ["invalid_max_occurrences"]

    def test_collects_every_failure(self):
        failures = InputValidator.validate_collector(
            {"name": "", "description": [], "max_occurrences_per_day": 0}
        )
        assert len(failures) == 3


class TestValidateField:
    @pytest.mark.parametrize("field_type", ["text", "number", "checkbox", "textarea"])
    def test_every_known_type(self, field_type):
        assert InputValidator.validate_field({"label": "Q", "type": field_type}) == []

    @pytest.mark.parametrize("field_type", ["date", "", None, "TEXT"])
    def test_unknown_type(self, field_type):
        failures = InputValidator.validate_field({"label": "Q", "type": field_type})
        assert [f.code for f in failures] == ["invalid_type"]

    def test_blank_label(self):
        failures = InputValidator.validate_field({"label": "  ", "type": "text"})
        assert [f.code for f in failures] == ["invalid_label"]

    def test_required_must_be_bool(self):
        failures = InputValidator.validate_field({"label": "Q", "type": "text", "required": "yes"})
        assert [f.code for f in failures] == ["invalid_required"]

    @pytest.mark.parametrize("settings", [{"min": 0}, '{"min": 0}', "{}", None])
    def test_valid_settings(self, settings):
        data = {"label": "Q", "type": "number", "settings": settings}
        assert InputValidator.validate_field(data) == []

    @pytest.mark.parametrize("settings", ["not json", "[1, 2]", 7, {"bad": object()}])
    def test_invalid_settings(self, settings):
        data = {"label": "Q", "type": "number", "settings": settings}
        failures = InputValidator.validate_field(data)
        assert [f.code for f in failures] == ["invalid_settings"]


class TestValidateValues:
    def test_valid(self):
        values = [{"field_id": "a", "value": "1"}, {"field_id": "b", "value": True}]
        assert InputValidator.validate_values(values) == []

    @pytest.mark.parametrize("values", [None, [], "abc", {"field_id": "a"}, 3])
    def test_not_a_non_empty_array(self, values):
        failures = InputValidator.validate_values(values)
        assert [f.code for f in failures] == ["invalid_values"]

    def test_item_not_an_object(self):
        failures = InputValidator.validate_values(["a"])
        assert failures[0].code == "invalid_values"
        assert failures[0].field == "values[0]"

    def test_missing_field_id(self):
        failures = InputValidator.validate_values([{"value": "x"}])
        assert failures[0].code == "invalid_field_id"
        assert failures[0].field == "values[0].field_id"

    def test_duplicate_field_id(self):
        failures = InputValidator.validate_values(
            [{"field_id": "a", "value": "1"}, {"field_id": "a", "value": "2"}]
        )
        assert [f.code for f in failures] == ["duplicate_field_id"]
        assert failures[0].field == "values[1].field_id"


def test_raise_for_failures():
    raise_for_failures([])

    with pytest.raises(InvalidInputError) as exc_info:
        raise_for_failures(InputValidator.validate_date("bad"))
    assert exc_info.value.code == "invalid_date_format"
