"""
QA Pet API — Service Info & Health Routes
==========================================

What:  GET / (service metadata) and GET /health (liveness probe).
Why:   Gives QA tooling a discoverable entry point and load balancers a
       cheap probe.
How:   No dependencies to check: the store is an in-process dict, so the
       service is healthy whenever it can answer at all.
"""

import time

from fastapi import APIRouter, Request, Response

from pet_api import __version__
from pet_api.models.pet import PetKind, utc_now
from pet_api.schemas.pet import HealthResponse, ServiceInfo

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/",
    response_model=ServiceInfo,
    summary="Service metadata",
)
async def service_info(request: Request) -> ServiceInfo:
    """Describe the API and point clients at its routes and docs."""
    docs_url = request.app.docs_url or ""
    return ServiceInfo(
        message="Welcome to the QA Pet API!",
        version=__version__,
        description="REST API for practising API and QA testing",
        documentation=docs_url,
        routes={
            "pets": "/pets",
            "health": "/health",
            "documentation": docs_url,
        },
        kinds=PetKind.values(),
    )


@router.get("/favicon.ico", status_code=204, include_in_schema=False)
async def favicon() -> Response:
    """Browsers opening the docs ask for an icon; answer without a 404."""
    return Response(status_code=204)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        timestamp=utc_now(),
        uptime=round(time.time() - _start_time, 3),
    )
