"""
People API · Person Model Unit Tests
======================================

What:  Tests for new_person() validated construction and document shape.
How:   Pure Python; no store involved.
"""

import pytest

from people_api.exceptions import ValidationError
from people_api.models.person import new_person


class TestNewPerson:
    """Validated construction of Person documents."""

    def test_valid_payload_builds_document(self):
        person = new_person({
            "name": "John",
            "age": 30,
            "favoriteFoods": ["Pizza", "Burger"],
            "email": "john@example.com",
        })

        assert person.to_document() == {
            "name": "John",
            "age": 30,
            "favoriteFoods": ["Pizza", "Burger"],
            "email": "john@example.com",
        }

    def test_favorite_foods_default_to_empty_list(self):
        person = new_person({"name": "Ann", "age": 40})
        assert person.favorite_foods == []
        assert person.to_document()["favoriteFoods"] == []

    def test_missing_email_is_left_out_of_document(self):
        document = new_person({"name": "Ann", "age": 40}).to_document()
        assert "email" not in document

    def test_python_field_names_are_accepted(self):
        person = new_person({"name": "Ann", "age": 1, "favorite_foods": ["Tea"]})
        assert person.favorite_foods == ["Tea"]

    def test_zero_age_is_allowed(self):
        assert new_person({"name": "Baby", "age": 0}).age == 0

    def test_numeric_string_age_is_coerced(self):
        assert new_person({"name": "Ann", "age": "41"}).age == 41

    def test_negative_age_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            new_person({"name": "Ann", "age": -1})
        assert exc_info.value.field == "age"

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            new_person({"age": 30})
        assert exc_info.value.field == "name"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            new_person({"name": "", "age": 30})

    def test_missing_age_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            new_person({"name": "Ann"})
        assert exc_info.value.field == "age"

    def test_non_integer_age_rejected(self):
        with pytest.raises(ValidationError):
            new_person({"name": "Ann", "age": "old"})

    def test_favorite_foods_must_be_strings(self):
        with pytest.raises(ValidationError) as exc_info:
            new_person({"name": "Ann", "age": 3, "favoriteFoods": [{"dish": "soup"}]})
        assert exc_info.value.field.startswith("favoriteFoods")

    def test_all_errors_kept_in_context(self):
        with pytest.raises(ValidationError) as exc_info:
            new_person({})
        fields = {err["loc"][0] for err in exc_info.value.context["errors"]}
        assert fields == {"name", "age"}
