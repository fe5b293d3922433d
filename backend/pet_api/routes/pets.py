"""
QA Pet API — Pets Route Handlers
=================================

What:  CRUD endpoints under /pets.
Why:   The resource QA suites exercise.
How:   Extract parameters, reject malformed ids, delegate to PetService,
       serialize with PetResponse. Domain errors propagate to the global
       handlers registered in main.py.

Route Inventory:
    POST   /pets        create            201 | 400
    GET    /pets        list (kind, age)  200 | 400
    GET    /pets/{id}   fetch             200 | 400 | 404
    PUT    /pets/{id}   partial update    200 | 400 | 404
    DELETE /pets/{id}   remove            204 | 400 | 404

Identifier gate:
    A path id that is not UUID-v4 text is answered with 400 ID_INVALIDO right
    here, without raising and without touching the store.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from fastapi.responses import JSONResponse

from pet_api.dependencies import get_pet_service
from pet_api.exceptions import ErrorCode, error_body
from pet_api.schemas.pet import ErrorResponse, PetResponse
from pet_api.services.pet_service import PetService
from pet_api.services.validators import is_valid_identifier, validate_filters

router = APIRouter(prefix="/pets", tags=["Pets"])

_ID_ERROR_RESPONSES = {
    400: {"description": "Malformed ID or invalid input", "model": ErrorResponse},
    404: {"description": "Pet not found", "model": ErrorResponse},
}

# Examples for the OpenAPI docs. Handlers accept any JSON so the validators
# can report the first violation in a fixed order.
_CREATE_EXAMPLE = {"name": "Rex", "kind": "dog", "age": 5, "breed": "Labrador", "ownerName": "João Silva"}
_UPDATE_EXAMPLE = {"age": 6}


def _invalid_id_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_body(ErrorCode.INVALID_ID, "The provided ID is not a valid UUID"),
    )


@router.post(
    "",
    status_code=201,
    response_model=PetResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid data or malformed JSON", "model": ErrorResponse}},
    summary="Create a pet",
)
async def create_pet(
    payload: Any = Body(default=None, examples=[_CREATE_EXAMPLE]),
    service: PetService = Depends(get_pet_service),
) -> PetResponse:
    pet = service.create(payload)
    return PetResponse.model_validate(pet)


@router.get(
    "",
    response_model=List[PetResponse],
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid filter", "model": ErrorResponse}},
    summary="List pets, optionally filtered by kind and age",
)
async def list_pets(
    kind: Optional[str] = Query(default=None, description="dog, cat, bird or other"),
    age: Optional[str] = Query(default=None, description="Exact age in years"),
    service: PetService = Depends(get_pet_service),
) -> List[PetResponse]:
    filters = validate_filters(kind=kind, age=age)
    pets = service.list(filters)
    return [PetResponse.model_validate(pet) for pet in pets]


@router.get(
    "/{pet_id}",
    response_model=PetResponse,
    response_model_exclude_none=True,
    responses=_ID_ERROR_RESPONSES,
    summary="Get a pet by ID",
)
async def get_pet(
    pet_id: str,
    service: PetService = Depends(get_pet_service),
):
    if not is_valid_identifier(pet_id):
        return _invalid_id_response()
    pet = service.get_by_id(pet_id)
    return PetResponse.model_validate(pet)


@router.put(
    "/{pet_id}",
    response_model=PetResponse,
    response_model_exclude_none=True,
    responses=_ID_ERROR_RESPONSES,
    summary="Partially update a pet",
    description="Only the fields sent are changed; at least one field is required.",
)
async def update_pet(
    pet_id: str,
    payload: Any = Body(default=None, examples=[_UPDATE_EXAMPLE]),
    service: PetService = Depends(get_pet_service),
):
    if not is_valid_identifier(pet_id):
        return _invalid_id_response()
    pet = service.update(pet_id, payload)
    return PetResponse.model_validate(pet)


@router.delete(
    "/{pet_id}",
    status_code=204,
    response_class=Response,
    responses=_ID_ERROR_RESPONSES,
    summary="Delete a pet",
)
async def delete_pet(
    pet_id: str,
    service: PetService = Depends(get_pet_service),
) -> Response:
    if not is_valid_identifier(pet_id):
        return _invalid_id_response()
    service.delete(pet_id)
    return Response(status_code=204)
