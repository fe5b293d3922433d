"""
QA Pet API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract between clients and backend.
Why:   Automatic serialization, camelCase wire names and OpenAPI doc generation.
How:   Request bodies are validated by services/validators.py (ordered, first
       violation wins) and come out as the typed DTOs below. Responses are
       built from the Pet dataclass via `from_attributes`.

Design Decision:
    Schemas are separate from the Pet dataclass because:
    1. The wire format uses camelCase (ownerName, createdAt); Python uses snake_case
    2. Optional fields that are absent must be omitted from responses
    3. OpenAPI docs are generated from schemas, not from the domain model
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pet_api.models.pet import PetKind


class CamelModel(BaseModel):
    """Base model that reads snake_case and writes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Request DTOs: produced by the validators, consumed by PetService
# ══════════════════════════════════════════════════════════════════════════


class PetCreate(CamelModel):
    """Validated body of POST /pets. Text fields are not yet trimmed."""

    name: str = Field(description="Pet name (1-100 characters)")
    kind: PetKind = Field(description="One of: dog, cat, bird, other")
    age: int = Field(description="Age in years (0-150)")
    breed: Optional[str] = Field(default=None, description="Breed (max 100 characters)")
    owner_name: Optional[str] = Field(default=None, description="Owner name (max 100 characters)")


class PetUpdate(CamelModel):
    """
    Validated body of PUT /pets/{id}.

    Only fields present in the request end up in `model_fields_set`; the
    service merges exactly those. An explicit None for breed/owner_name is
    present and clears the stored value.
    """

    name: Optional[str] = None
    kind: Optional[PetKind] = None
    age: Optional[int] = None
    breed: Optional[str] = None
    owner_name: Optional[str] = None


class PetFilters(BaseModel):
    """Validated query filters for GET /pets. Both apply as an AND."""

    kind: Optional[PetKind] = None
    age: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.kind is None and self.age is None


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PetResponse(CamelModel):
    """
    Full representation of a pet.

    Routes set response_model_exclude_none so an absent breed or ownerName is
    left out of the JSON object rather than sent as null.
    """

    id: str = Field(description="Unique pet identifier (UUID v4)")
    name: str
    kind: PetKind
    age: int
    breed: Optional[str] = None
    owner_name: Optional[str] = None
    created_at: datetime = Field(description="Creation timestamp (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last update timestamp (UTC ISO 8601)")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "erro": "ID_INVALIDO",
            "mensagem": "The provided ID is not a valid UUID"
        }
    """

    erro: str = Field(description="Machine-readable error code")
    mensagem: str = Field(description="Human-readable error description")
    detalhes: Optional[dict] = Field(default=None, description="Additional error context")


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str = Field(description="Always 'ok' while the process serves requests")
    timestamp: datetime = Field(description="Current server time (UTC)")
    uptime: float = Field(description="Seconds since the service started")


class ServiceInfo(BaseModel):
    """Metadata returned by GET /."""

    message: str
    version: str
    description: str
    documentation: str
    routes: Dict[str, str]
    kinds: List[str]
