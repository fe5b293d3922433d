"""
QA Pet API — Input Validators
==============================

What:  Pure functions that check untyped request input and return typed DTOs.
Why:   QA suites assert on the exact first error a bad payload produces, so
       checks run in a fixed order and stop at the first violation.
How:   Each field has one checker shared by create and update. Failures raise
       ValidationError (→ 400 ERRO_VALIDACAO) naming the offending field.
Who:   Called by PetService (bodies) and the pets router (filters, path ids).

Check order:
    create:  name → kind → age → breed → ownerName
    update:  at-least-one-field → name → kind → age → breed → ownerName

Null handling:
    A JSON null counts as "missing" on create. On update it is a present
    value: rejected for name/kind/age, and a request to clear breed/ownerName.
"""

import math
import re
from typing import Any, Dict, Mapping, Optional

from pet_api.exceptions import ValidationError
from pet_api.models.pet import PetKind
from pet_api.schemas.pet import PetCreate, PetFilters, PetUpdate

MAX_TEXT_LENGTH = 100
MIN_AGE = 0
MAX_AGE = 150

# Wire names of the fields a client may send, in check order
UPDATABLE_FIELDS = ("name", "kind", "age", "breed", "ownerName")

_UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_identifier(value: Any) -> bool:
    """True iff `value` is canonical UUID-v4 text. Never raises."""
    return isinstance(value, str) and _UUID_V4_PATTERN.match(value) is not None


# ── Field checkers ────────────────────────────────────────────────────────


def _check_name(value: Any) -> str:
    if value is None:
        raise ValidationError("Field 'name' is required", field="name")
    if not isinstance(value, str):
        raise ValidationError("Field 'name' must be a string", field="name")
    if not value.strip():
        raise ValidationError("Field 'name' must not be empty", field="name")
    if len(value) > MAX_TEXT_LENGTH:
        raise ValidationError(
            f"Field 'name' must be at most {MAX_TEXT_LENGTH} characters",
            field="name",
        )
    return value


def _check_kind(value: Any) -> PetKind:
    if value is None:
        raise ValidationError("Field 'kind' is required", field="kind")
    valid = PetKind.values()
    if not isinstance(value, str) or value not in valid:
        raise ValidationError(
            f"Field 'kind' must be one of: {', '.join(valid)}",
            field="kind",
            details={"validKinds": valid},
        )
    return PetKind(value)


def _check_age(value: Any) -> int:
    if value is None:
        raise ValidationError("Field 'age' is required", field="age")
    # bool is an int subclass; JSON true/false is not an age
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Field 'age' must be a number", field="age")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError("Field 'age' must be an integer", field="age")
    if value < MIN_AGE:
        raise ValidationError("Field 'age' must not be negative", field="age")
    if value > MAX_AGE:
        raise ValidationError(
            f"Field 'age' must be a realistic value (at most {MAX_AGE} years)",
            field="age",
        )
    return int(value)


def _check_optional_text(field: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{field}' must be a string", field=field)
    if len(value) > MAX_TEXT_LENGTH:
        raise ValidationError(
            f"Field '{field}' must be at most {MAX_TEXT_LENGTH} characters",
            field=field,
        )
    return value


def _require_object(payload: Any) -> Mapping[str, Any]:
    # No body at all reads as an empty object, so field rules report it
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload


# ── Public validators ─────────────────────────────────────────────────────


def validate_create(payload: Any) -> PetCreate:
    """
    Validate a create body and return it as a PetCreate.

    Raises:
        ValidationError: on the first violated rule
    """
    data = _require_object(payload)
    name = _check_name(data.get("name"))
    kind = _check_kind(data.get("kind"))
    age = _check_age(data.get("age"))
    breed = _check_optional_text("breed", data.get("breed"))
    owner_name = _check_optional_text("ownerName", data.get("ownerName"))
    return PetCreate(name=name, kind=kind, age=age, breed=breed, owner_name=owner_name)


def validate_update(payload: Any) -> PetUpdate:
    """
    Validate a partial update body and return it as a PetUpdate.

    Absent fields are never an error; the returned model's
    `model_fields_set` lists exactly the fields the client sent.

    Raises:
        ValidationError: if no updatable field is present, or on the first
            violated rule among the present fields
    """
    data = _require_object(payload)
    if not any(field in data for field in UPDATABLE_FIELDS):
        raise ValidationError(
            "At least one field must be provided for update",
            details={"allowedFields": list(UPDATABLE_FIELDS)},
        )

    fields: Dict[str, Any] = {}
    if "name" in data:
        fields["name"] = _check_name(data["name"])
    if "kind" in data:
        fields["kind"] = _check_kind(data["kind"])
    if "age" in data:
        fields["age"] = _check_age(data["age"])
    if "breed" in data:
        fields["breed"] = _check_optional_text("breed", data["breed"])
    if "ownerName" in data:
        fields["owner_name"] = _check_optional_text("ownerName", data["ownerName"])
    return PetUpdate(**fields)


def validate_filters(kind: Optional[str] = None, age: Optional[str] = None) -> PetFilters:
    """
    Validate raw list query parameters.

    Empty strings count as "not supplied". The age filter accepts any finite
    non-negative number; since stored ages are integers a fractional filter
    simply matches nothing.

    Raises:
        ValidationError: unknown kind, or age that is not a non-negative number
    """
    kind_filter: Optional[PetKind] = None
    age_filter: Optional[float] = None

    if kind:
        valid = PetKind.values()
        if kind not in valid:
            raise ValidationError(
                f"Filter 'kind' must be one of: {', '.join(valid)}",
                field="kind",
                details={"validKinds": valid},
            )
        kind_filter = PetKind(kind)

    if age:
        try:
            parsed = float(age)
        except ValueError:
            raise ValidationError("Filter 'age' must be a valid number", field="age") from None
        if not math.isfinite(parsed):
            raise ValidationError("Filter 'age' must be a valid number", field="age")
        if parsed < 0:
            raise ValidationError("Filter 'age' must not be negative", field="age")
        age_filter = parsed

    return PetFilters(kind=kind_filter, age=age_filter)
