"""
QA Pet API — Pet Store Unit Tests
==================================

What:  Tests for the in-memory PetStore.
Why:   The store is the single source of truth; filters and seeding feed
       every integration test.

What we test:
    ✅ put/get/exists/delete/count basics
    ✅ list_all with kind, age, and both filters (AND)
    ✅ seed() inserts exactly the two fixtures, idempotently
    ✅ Separate instances do not share state
"""

from datetime import datetime, timezone

from pet_api.models.pet import Pet, PetKind
from pet_api.schemas.pet import PetFilters
from pet_api.storage import MIMI_ID, REX_ID, PetStore

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_pet(pet_id: str, kind: PetKind = PetKind.DOG, age: int = 5, name: str = "Buddy") -> Pet:
    return Pet(id=pet_id, name=name, kind=kind, age=age, created_at=NOW, updated_at=NOW)


class TestPetStoreBasics:
    """Tests for single-record operations."""

    def test_new_store_is_empty(self, empty_store):
        assert empty_store.count() == 0
        assert empty_store.list_all() == []

    def test_put_then_get(self, empty_store):
        pet = make_pet("a")
        empty_store.put(pet)
        assert empty_store.get_by_id("a") == pet
        assert empty_store.exists("a")
        assert empty_store.count() == 1

    def test_put_replaces_by_id(self, empty_store):
        empty_store.put(make_pet("a", name="Old"))
        empty_store.put(make_pet("a", name="New"))
        assert empty_store.count() == 1
        assert empty_store.get_by_id("a").name == "New"

    def test_get_missing_returns_none(self, empty_store):
        assert empty_store.get_by_id("missing") is None
        assert not empty_store.exists("missing")

    def test_delete_reports_whether_removed(self, empty_store):
        empty_store.put(make_pet("a"))
        assert empty_store.delete("a") is True
        assert empty_store.delete("a") is False
        assert not empty_store.exists("a")

    def test_replace_existing_only_touches_stored_ids(self, empty_store):
        empty_store.put(make_pet("a", name="Old"))
        assert empty_store.replace_existing(make_pet("a", name="New")) is True
        assert empty_store.get_by_id("a").name == "New"

        assert empty_store.replace_existing(make_pet("gone")) is False
        assert not empty_store.exists("gone")
        assert empty_store.count() == 1

    def test_clear(self, store):
        store.clear()
        assert store.count() == 0


class TestPetStoreFilters:
    """Tests for list_all filtering."""

    def setup_method(self):
        self.store = PetStore()
        self.store.put(make_pet("dog5", PetKind.DOG, 5))
        self.store.put(make_pet("dog3", PetKind.DOG, 3))
        self.store.put(make_pet("cat5", PetKind.CAT, 5))
        self.store.put(make_pet("bird1", PetKind.BIRD, 1))

    def ids(self, pets):
        return {pet.id for pet in pets}

    def test_no_filters_returns_everything(self):
        assert self.ids(self.store.list_all()) == {"dog5", "dog3", "cat5", "bird1"}
        assert self.ids(self.store.list_all(PetFilters())) == {"dog5", "dog3", "cat5", "bird1"}

    def test_kind_filter(self):
        assert self.ids(self.store.list_all(PetFilters(kind=PetKind.DOG))) == {"dog5", "dog3"}

    def test_age_filter(self):
        assert self.ids(self.store.list_all(PetFilters(age=5))) == {"dog5", "cat5"}

    def test_both_filters_are_a_conjunction(self):
        result = self.store.list_all(PetFilters(kind=PetKind.DOG, age=5))
        assert self.ids(result) == {"dog5"}

    def test_no_match(self):
        assert self.store.list_all(PetFilters(kind=PetKind.OTHER)) == []
        assert self.store.list_all(PetFilters(age=2.5)) == []


class TestPetStoreSeed:
    """Tests for the fixture seed."""

    def test_seed_inserts_rex_and_mimi(self, empty_store):
        empty_store.seed()
        assert empty_store.count() == 2

        rex = empty_store.get_by_id(REX_ID)
        assert rex.name == "Rex"
        assert rex.kind is PetKind.DOG
        assert rex.created_at == rex.updated_at

        mimi = empty_store.get_by_id(MIMI_ID)
        assert mimi.name == "Mimi"
        assert mimi.kind is PetKind.CAT

    def test_seed_twice_keeps_two_records(self, empty_store):
        empty_store.seed()
        empty_store.seed()
        assert empty_store.count() == 2

    def test_construction_does_not_seed(self):
        assert PetStore().count() == 0

    def test_instances_are_isolated(self, store, empty_store):
        store.delete(REX_ID)
        other = PetStore()
        other.seed()
        assert other.exists(REX_ID)
        assert not store.exists(REX_ID)
        assert empty_store.count() == 0
