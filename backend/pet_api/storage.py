"""
QA Pet API — In-Memory Pet Storage
===================================

What:  The authoritative id → Pet map for the lifetime of the process.
Why:   The API is a QA practice target; there is nothing to persist and
       restarts are expected to reset the data.
How:   A plain dict guarded by a re-entrant lock. No validation and no
       business rules live here; those belong to the service layer.
Who:   Constructed by the application factory (main.create_app) and handed to
       PetService. Tests construct their own instances.
When:  Created once per application; seeded with two fixture pets on demand.

Concurrency:
    Route handlers run on a single event loop, so requests never interleave
    mid-mutation. The lock still guards every read and write so a store shared
    between worker threads keeps the "exists fully or not at all" invariant.
    Read-modify-write callers finish with replace_existing(), which re-checks
    presence under the lock, so a delete that lands mid-update is not undone.
"""

import logging
import threading
from typing import Dict, List, Optional

from pet_api.models.pet import Pet, PetKind, utc_now
from pet_api.schemas.pet import PetFilters

logger = logging.getLogger(__name__)

# Fixed identifiers so integration tests can address the fixtures directly
REX_ID = "550e8400-e29b-41d4-a716-446655440001"
MIMI_ID = "550e8400-e29b-41d4-a716-446655440002"


class PetStore:
    """
    Process-local pet storage.

    Operations:
        put(pet)            insert or replace by id
        replace_existing()  replace only if the id is still stored
        get_by_id(id)       Pet or None
        list_all(filters)   all pets, optionally narrowed by kind AND age
        exists(id)          presence check
        delete(id)          removal; returns whether a record was removed
        count()             number of stored pets
        seed()              insert the Rex and Mimi fixtures
        clear()             remove everything
    """

    def __init__(self) -> None:
        self._pets: Dict[str, Pet] = {}
        self._lock = threading.RLock()

    def put(self, pet: Pet) -> None:
        with self._lock:
            self._pets[pet.id] = pet

    def replace_existing(self, pet: Pet) -> bool:
        """
        Replace the record with pet.id only if it is still stored.

        Returns False, storing nothing, when the id was deleted in the
        meantime, so an update never resurrects a deleted pet.
        """
        with self._lock:
            if pet.id not in self._pets:
                return False
            self._pets[pet.id] = pet
            return True

    def get_by_id(self, pet_id: str) -> Optional[Pet]:
        with self._lock:
            return self._pets.get(pet_id)

    def list_all(self, filters: Optional[PetFilters] = None) -> List[Pet]:
        """
        Return stored pets, narrowed by exact-match filters when given.

        Order follows insertion but is not part of the contract.
        """
        with self._lock:
            pets = list(self._pets.values())

        if filters is None or filters.is_empty:
            return pets
        if filters.kind is not None:
            pets = [pet for pet in pets if pet.kind == filters.kind]
        if filters.age is not None:
            pets = [pet for pet in pets if pet.age == filters.age]
        return pets

    def exists(self, pet_id: str) -> bool:
        with self._lock:
            return pet_id in self._pets

    def delete(self, pet_id: str) -> bool:
        with self._lock:
            return self._pets.pop(pet_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._pets)

    def clear(self) -> None:
        with self._lock:
            self._pets.clear()

    def seed(self) -> None:
        """
        Insert the two fixture pets.

        Existing records with the fixture ids are replaced, so calling seed()
        twice still leaves exactly one Rex and one Mimi.
        """
        now = utc_now()
        fixtures = [
            Pet(
                id=REX_ID,
                name="Rex",
                kind=PetKind.DOG,
                age=5,
                breed="Labrador",
                owner_name="João Silva",
                created_at=now,
                updated_at=now,
            ),
            Pet(
                id=MIMI_ID,
                name="Mimi",
                kind=PetKind.CAT,
                age=3,
                breed="Persian",
                owner_name="Maria Santos",
                created_at=now,
                updated_at=now,
            ),
        ]
        with self._lock:
            for pet in fixtures:
                self._pets[pet.id] = pet
        logger.info("Seeded %d fixture pets", len(fixtures))
