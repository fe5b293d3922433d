"""
QA Pet API — Pet Domain Model
==============================

What:  The Pet entity and the fixed enumeration of pet kinds.
Why:   One immutable record type flows through storage, service and routes.
How:   A frozen dataclass. Updates never mutate a Pet in place; the service
       builds a replacement with dataclasses.replace() and stores that.
Who:   Created by PetService, held by PetStore, serialized by PetResponse.

Field Rules (enforced by services/validators.py, not here):
    - id:          UUID-v4 text, generated server-side, immutable
    - name:        non-empty after trim, at most 100 characters
    - kind:        one of PetKind
    - age:         integer between 0 and 150 inclusive
    - breed:       optional, at most 100 characters
    - owner_name:  optional, at most 100 characters
    - created_at:  set once at creation (UTC)
    - updated_at:  set at creation, refreshed on every update (UTC)

    created_at <= updated_at always holds.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class PetKind(str, Enum):
    """Kinds of pet the API accepts."""

    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"
    OTHER = "other"

    @classmethod
    def values(cls) -> List[str]:
        return [kind.value for kind in cls]


def utc_now() -> datetime:
    """Timezone-aware current time; never use naive datetimes."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Pet:
    """
    A stored pet record.

    Lifecycle:
        1. Created by PetService.create (id and timestamps generated)
        2. Replaced by PetService.update (merge of old values and partial input)
        3. Removed by PetService.delete (no recovery)
    """

    id: str
    name: str
    kind: PetKind
    age: int
    created_at: datetime
    updated_at: datetime
    breed: Optional[str] = None
    owner_name: Optional[str] = None

    def __repr__(self) -> str:
        return f"<Pet(id={self.id}, name={self.name!r}, kind={self.kind.value})>"
