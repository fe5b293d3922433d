"""
QA Pet API — Route Dependencies
================================

What:  FastAPI dependency that hands each request the application's PetService.
Why:   The service is owned by the app instance (app.state), not by a module
       global, so every create_app() call gets an isolated store.
"""

from fastapi import Request

from pet_api.services.pet_service import PetService


def get_pet_service(request: Request) -> PetService:
    return request.app.state.pet_service
