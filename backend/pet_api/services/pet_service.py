"""
QA Pet API — Pet Service (Business Logic)
==========================================

What:  Orchestrates validation, identifier/timestamp generation and storage.
Why:   The only component with business rules; routes stay HTTP-only and the
       store stays a dumb map.
How:   Each operation is a one-shot transition: validate, touch the store once,
       return a Pet or raise a PetApiError.
Who:   Called by the pets router through the get_pet_service dependency.

Operation Flow (PUT /pets/{id}):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │  exists? │───▶│  validate   │───▶│    merge     │───▶│   put    │
    │  (404)   │    │  (400)      │    │  + updatedAt │    │  (store) │
    └──────────┘    └─────────────┘    └──────────────┘    └──────────┘

    The existence check runs before validation, so an unknown id answers 404
    even when the body is also invalid.

Design Decision:
    The store is injected, never imported as a global. The clock is injected
    too, which lets tests pin timestamps.
"""

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

from pet_api.exceptions import NotFoundError
from pet_api.models.pet import Pet, utc_now
from pet_api.schemas.pet import PetFilters
from pet_api.services.validators import validate_create, validate_update
from pet_api.storage import PetStore

logger = logging.getLogger(__name__)


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class PetService:
    """
    Business logic layer for pet operations.

    Responsibilities:
        - create():     validate, assign id and timestamps, store
        - list():       filtered listing straight from the store
        - get_by_id():  single pet with not-found handling
        - update():     partial merge with updatedAt refresh
        - delete():     permanent removal
        - stats():      diagnostic count
    """

    def __init__(self, store: PetStore, clock: Callable[[], datetime] = utc_now):
        self.store = store
        self._clock = clock

    def create(self, payload: Any) -> Pet:
        """
        Validate a create body and store a new pet.

        Name, breed and owner name are trimmed. createdAt and updatedAt share
        a single timestamp. The id is always freshly generated, so an existing
        record is never overwritten.

        Raises:
            ValidationError: invalid payload (→ 400)
        """
        data = validate_create(payload)
        now = self._clock()
        pet = Pet(
            id=str(uuid.uuid4()),
            name=data.name.strip(),
            kind=data.kind,
            age=data.age,
            breed=_strip(data.breed),
            owner_name=_strip(data.owner_name),
            created_at=now,
            updated_at=now,
        )
        self.store.put(pet)
        logger.info("Pet created: %s (%s)", pet.id, pet.kind.value)
        return pet

    def list(self, filters: Optional[PetFilters] = None) -> List[Pet]:
        return self.store.list_all(filters)

    def get_by_id(self, pet_id: str) -> Pet:
        """
        Raises:
            NotFoundError: no pet with this id (→ 404)
        """
        pet = self.store.get_by_id(pet_id)
        if pet is None:
            raise NotFoundError(resource="Pet", resource_id=pet_id)
        return pet

    def update(self, pet_id: str, payload: Any) -> Pet:
        """
        Merge the fields present in `payload` into an existing pet.

        Fields the client did not send keep their prior value exactly,
        including an absent breed or owner name. Present text fields are
        trimmed; an explicit null clears breed/ownerName.

        Raises:
            NotFoundError: no pet with this id (→ 404), checked first and
                again when the merged record is written back
            ValidationError: invalid partial payload (→ 400)
        """
        existing = self.get_by_id(pet_id)
        data = validate_update(payload)

        changes: Dict[str, Any] = {}
        for field in data.model_fields_set:
            value = getattr(data, field)
            if field in ("name", "breed", "owner_name"):
                value = _strip(value)
            changes[field] = value
        changes["updated_at"] = self._next_timestamp(existing.updated_at)

        updated = replace(existing, **changes)
        if not self.store.replace_existing(updated):
            # Deleted between the lookup and the write
            raise NotFoundError(resource="Pet", resource_id=pet_id)
        logger.info("Pet updated: %s (fields=%s)", pet_id, sorted(data.model_fields_set))
        return updated

    def delete(self, pet_id: str) -> None:
        """
        Raises:
            NotFoundError: no pet with this id (→ 404)
        """
        if not self.store.delete(pet_id):
            raise NotFoundError(resource="Pet", resource_id=pet_id)
        logger.info("Pet deleted: %s", pet_id)

    def stats(self) -> Dict[str, int]:
        return {"total": self.store.count()}

    def _next_timestamp(self, previous: datetime) -> datetime:
        # updatedAt must move strictly forward even if the clock has not ticked
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now
