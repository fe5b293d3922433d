# Services package init
"""
QA Pet API — Services Layer
============================

What:  Business logic sitting between routes (HTTP) and storage (in-memory map).
Why:   Separation of concerns: routes handle HTTP, services handle rules.
How:   PetService receives its PetStore at construction and is handed to
       routes through FastAPI's dependency injection.

Service Inventory:
    - validators: ordered field checks turning raw JSON into typed DTOs
    - PetService: create / list / get / update / delete / stats
"""
