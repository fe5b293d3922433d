"""
QA Pet API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (stores, services, API client).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── store:          PetStore seeded with Rex and Mimi
    ├── empty_store:    PetStore with no records
    ├── service:        PetService bound to `store`
    ├── clock:          FakeClock ticking one second per call
    ├── valid_payload:  A create body that passes validation
    ├── app:            Fresh FastAPI app with its own seeded store
    └── test_client:    HTTPX AsyncClient talking to `app`
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any pet_api import so the settings singleton picks them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_FIXTURES"] = "true"

from pet_api.main import create_app  # noqa: E402
from pet_api.services.pet_service import PetService  # noqa: E402
from pet_api.storage import PetStore  # noqa: E402


class FakeClock:
    """Deterministic clock; each call advances by one second."""

    def __init__(self, start: datetime = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def store() -> PetStore:
    pet_store = PetStore()
    pet_store.seed()
    return pet_store


@pytest.fixture
def empty_store() -> PetStore:
    return PetStore()


@pytest.fixture
def service(store) -> PetService:
    return PetService(store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def valid_payload():
    """A create body that passes every validation rule."""
    return {
        "name": "Thor",
        "kind": "dog",
        "age": 4,
        "breed": "Beagle",
        "ownerName": "Ana Costa",
    }


@pytest.fixture
def app():
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP client bound to a freshly built app.

    Each test gets its own app and therefore its own seeded store.
    raise_app_exceptions=False lets the catch-all 500 handler's response
    reach the test instead of re-raising the original exception.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
