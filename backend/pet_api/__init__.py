"""
QA Pet API — Application Package Initializer
=============================================

What: Marks the `pet_api` directory as a Python package.
Why:  Enables module imports like `from pet_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows a thin layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Business Logic)        │  ← Validation, ids, timestamps
    ├─────────────────────────────────────┤
    │      Models & Schemas (Data)        │  ← Pet entity + Pydantic DTOs
    ├─────────────────────────────────────┤
    │       Storage (In-Memory)           │  ← id → Pet map, process lifetime
    └─────────────────────────────────────┘

    Each layer only talks to the one below it. The store is created by the
    application factory and handed to the service, so tests can build as many
    isolated stacks as they like.
"""

__version__ = "1.0.0"
