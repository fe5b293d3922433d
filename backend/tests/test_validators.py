"""
QA Pet API — Validator Unit Tests
==================================

What:  Tests for the ordered field checks in services/validators.py.
Why:   QA suites assert on the first error a bad payload produces; order,
       boundaries and messages are part of the contract.

What we test:
    ✅ Create: required fields, types, trimmed emptiness, lengths, age range
    ✅ Create: first violation wins (name → kind → age → breed → ownerName)
    ✅ Update: empty body rejected, only present fields checked
    ✅ Filters: unknown kind, non-numeric and negative age
    ✅ UUID-v4 identifier predicate
"""

import pytest

from pet_api.exceptions import ErrorCode, ValidationError
from pet_api.models.pet import PetKind
from pet_api.services.validators import (
    is_valid_identifier,
    validate_create,
    validate_filters,
    validate_update,
)


class TestValidateCreate:
    """Tests for validate_create."""

    def test_valid_payload_returns_typed_dto(self, valid_payload):
        dto = validate_create(valid_payload)
        assert dto.name == "Thor"
        assert dto.kind is PetKind.DOG
        assert dto.age == 4
        assert dto.breed == "Beagle"
        assert dto.owner_name == "Ana Costa"

    def test_optional_fields_may_be_omitted(self):
        dto = validate_create({"name": "Kiwi", "kind": "bird", "age": 1})
        assert dto.breed is None
        assert dto.owner_name is None

    def test_missing_name(self):
        with pytest.raises(ValidationError, match="'name' is required") as exc_info:
            validate_create({"kind": "dog", "age": 3})
        assert exc_info.value.code is ErrorCode.VALIDATION
        assert exc_info.value.details == {"field": "name"}

    def test_name_not_a_string(self):
        with pytest.raises(ValidationError, match="'name' must be a string"):
            validate_create({"name": 42, "kind": "dog", "age": 3})

    def test_name_blank_after_trim(self):
        with pytest.raises(ValidationError, match="'name' must not be empty"):
            validate_create({"name": "   ", "kind": "dog", "age": 3})

    def test_name_length_boundary(self):
        validate_create({"name": "a" * 100, "kind": "dog", "age": 3})
        with pytest.raises(ValidationError, match="at most 100"):
            validate_create({"name": "a" * 101, "kind": "dog", "age": 3})

    def test_missing_kind(self):
        with pytest.raises(ValidationError, match="'kind' is required"):
            validate_create({"name": "Rex", "age": 3})

    def test_unknown_kind_lists_valid_values(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create({"name": "Rex", "kind": "dragon", "age": 3})
        assert exc_info.value.details["validKinds"] == ["dog", "cat", "bird", "other"]
        assert exc_info.value.details["field"] == "kind"

    def test_missing_age(self):
        with pytest.raises(ValidationError, match="'age' is required"):
            validate_create({"name": "Rex", "kind": "dog"})

    @pytest.mark.parametrize("age", ["5", True, [5], {"years": 5}])
    def test_age_not_a_number(self, age):
        with pytest.raises(ValidationError, match="'age' must be a number"):
            validate_create({"name": "Rex", "kind": "dog", "age": age})

    def test_age_not_an_integer(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_create({"name": "Rex", "kind": "dog", "age": 2.5})

    def test_integral_float_age_is_normalised(self):
        dto = validate_create({"name": "Rex", "kind": "dog", "age": 5.0})
        assert dto.age == 5
        assert isinstance(dto.age, int)

    @pytest.mark.parametrize("age", [-1, 151])
    def test_age_out_of_range(self, age):
        with pytest.raises(ValidationError):
            validate_create({"name": "Rex", "kind": "dog", "age": age})

    @pytest.mark.parametrize("age", [0, 150])
    def test_age_boundaries_accepted(self, age):
        assert validate_create({"name": "Rex", "kind": "dog", "age": age}).age == age

    def test_breed_not_a_string(self):
        with pytest.raises(ValidationError, match="'breed' must be a string"):
            validate_create({"name": "Rex", "kind": "dog", "age": 3, "breed": 7})

    def test_owner_name_too_long(self):
        with pytest.raises(ValidationError, match="'ownerName' must be at most 100"):
            validate_create({"name": "Rex", "kind": "dog", "age": 3, "ownerName": "x" * 101})

    def test_null_optional_fields_count_as_absent(self):
        dto = validate_create({"name": "Rex", "kind": "dog", "age": 3, "breed": None, "ownerName": None})
        assert dto.breed is None
        assert dto.owner_name is None

    def test_first_violation_wins(self):
        """Name is checked before kind, kind before age."""
        with pytest.raises(ValidationError) as exc_info:
            validate_create({"name": "", "kind": "dragon", "age": -1, "breed": 1})
        assert exc_info.value.field == "name"

        with pytest.raises(ValidationError) as exc_info:
            validate_create({"name": "Rex", "kind": "dragon", "age": -1})
        assert exc_info.value.field == "kind"

        with pytest.raises(ValidationError) as exc_info:
            validate_create({"name": "Rex", "kind": "cat", "age": -1, "breed": 1})
        assert exc_info.value.field == "age"

    def test_body_must_be_an_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_create(["Rex", "dog", 3])

    def test_missing_body_reads_as_empty_object(self):
        with pytest.raises(ValidationError, match="'name' is required"):
            validate_create(None)


class TestValidateUpdate:
    """Tests for validate_update."""

    def test_empty_body_rejected(self):
        with pytest.raises(ValidationError, match="At least one field"):
            validate_update({})

    def test_unknown_fields_only_rejected(self):
        with pytest.raises(ValidationError, match="At least one field"):
            validate_update({"color": "brown"})

    def test_only_present_fields_are_recorded(self):
        dto = validate_update({"age": 9})
        assert dto.model_fields_set == {"age"}
        assert dto.age == 9

    def test_owner_name_maps_to_snake_case(self):
        dto = validate_update({"ownerName": "Carla"})
        assert dto.model_fields_set == {"owner_name"}
        assert dto.owner_name == "Carla"

    def test_null_breed_is_present_and_clears(self):
        dto = validate_update({"breed": None})
        assert "breed" in dto.model_fields_set
        assert dto.breed is None

    def test_null_name_rejected(self):
        with pytest.raises(ValidationError, match="'name' is required"):
            validate_update({"name": None})

    def test_empty_breed_accepted(self):
        dto = validate_update({"breed": ""})
        assert dto.breed == ""

    def test_present_fields_use_create_rules(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            validate_update({"name": "  "})
        with pytest.raises(ValidationError, match="validKinds|must be one of"):
            validate_update({"kind": "fish"})
        with pytest.raises(ValidationError, match="realistic"):
            validate_update({"age": 151})

    def test_order_after_presence_check(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update({"age": -3, "kind": "fish"})
        assert exc_info.value.field == "kind"


class TestValidateFilters:
    """Tests for validate_filters."""

    def test_no_filters(self):
        filters = validate_filters()
        assert filters.is_empty

    def test_empty_strings_are_ignored(self):
        assert validate_filters(kind="", age="").is_empty

    def test_valid_filters(self):
        filters = validate_filters(kind="cat", age="3")
        assert filters.kind is PetKind.CAT
        assert filters.age == 3

    def test_unknown_kind(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_filters(kind="fish")
        assert exc_info.value.details["validKinds"] == PetKind.values()

    @pytest.mark.parametrize("age", ["abc", "nan", "inf"])
    def test_age_not_a_number(self, age):
        with pytest.raises(ValidationError, match="valid number"):
            validate_filters(age=age)

    def test_unparseable_age_hides_parse_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_filters(age="abc")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True

    def test_negative_age(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            validate_filters(age="-2")


class TestIsValidIdentifier:
    """Tests for the UUID-v4 predicate."""

    @pytest.mark.parametrize(
        "value",
        [
            "550e8400-e29b-41d4-a716-446655440001",
            "550E8400-E29B-41D4-A716-446655440001",
            "123e4567-e89b-42d3-8456-426614174000",
            "123e4567-e89b-42d3-b456-426614174000",
        ],
    )
    def test_accepts_v4(self, value):
        assert is_valid_identifier(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "",
            "550e8400-e29b-11d4-a716-446655440001",  # version 1
            "550e8400-e29b-41d4-c716-446655440001",  # variant nibble c
            "550e8400e29b41d4a716446655440001",      # no dashes
            "550e8400-e29b-41d4-a716-44665544000",   # short last group
            None,
            123,
        ],
    )
    def test_rejects_everything_else(self, value):
        assert is_valid_identifier(value) is False
