"""
QA Pet API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware, exception handlers, route
       mounting and the ownership of the pet store in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own PetStore and PetService on app.state.
Who:   Called by uvicorn (uvicorn pet_api.main:app), by `python -m pet_api`
       and by the test suite (one fresh app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌─────────┐  │
    │  │  Req ID  │→│   Logging   │→│ GZip │→│  CORS   │  │
    │  └──────────┘ └─────────────┘ └──────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /pets CRUD   │ │ GET /        │ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ PetApiError→code tag │ bad JSON→400 │ *→500   │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

    App state:
        app.state.pet_store    PetStore (seeded unless SEED_FIXTURES=false)
        app.state.pet_service  PetService bound to that store
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pet_api import __version__
from pet_api.config import Settings, settings
from pet_api.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    ErrorCode,
    PetApiError,
    error_body,
    internal_error_response,
)
from pet_api.middleware.logging import RequestLoggingMiddleware
from pet_api.middleware.request_id import RequestIDMiddleware, request_id_var
from pet_api.routes import health, pets
from pet_api.services.pet_service import PetService
from pet_api.storage import PetStore

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "The request body contains invalid JSON"

# Detail FastAPI attaches when the body cannot be read as JSON text at all
BODY_PARSE_ERROR_DETAIL = "There was an error parsing the body"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once at startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log the startup banner and the shutdown; the store needs no cleanup."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info("=" * 60)
    logger.info("%s %s starting up...", app_settings.app_name, __version__)
    logger.info("Pets in store: %d", app.state.pet_store.count())
    logger.info(
        "Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )
    logger.info(
        "API docs: http://%s:%d%s",
        app_settings.backend_host,
        app_settings.backend_port,
        app_settings.docs_url,
    )
    logger.info("Routes: POST/GET /pets, GET/PUT/DELETE /pets/{id}, GET /health")
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down; in-memory pets are discarded.", app_settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers so every error uses the same body.

    Handler map:
        PetApiError             → status and `erro` taken from the error's code tag
        RequestValidationError  → 400 JSON_INVALIDO (unparseable body)
                                  or 400 ERRO_VALIDACAO (anything else)
        HTTPException           → same status, body reshaped (e.g. unknown route);
                                  undecodable body → 400 JSON_INVALIDO
        Exception (fallback)    → 500 ERRO_INTERNO, details logged server-side only
    """

    @app.exception_handler(PetApiError)
    async def handle_pet_api_error(request: Request, exc: PetApiError):
        rid = request_id_var.get("")
        if exc.code is ErrorCode.VALIDATION:
            logger.warning("[%s] Validation error: %s", rid, exc.message)
        else:
            logger.info("[%s] %s: %s", rid, exc.code.value, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        errors = exc.errors()
        if any(err.get("type") == "json_invalid" for err in errors):
            logger.warning("[%s] Malformed JSON body on %s %s", rid, request.method, request.url.path)
            return JSONResponse(
                status_code=400,
                content=error_body(ErrorCode.INVALID_JSON, INVALID_JSON_MESSAGE),
            )

        logger.warning("[%s] Request validation error: %s", rid, errors)
        return JSONResponse(
            status_code=400,
            content=error_body(
                ErrorCode.VALIDATION,
                "The request is invalid",
                {
                    "errors": [
                        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
                        for err in errors
                    ]
                },
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            code = ErrorCode.NOT_FOUND
            message = f"Route {request.method} {request.url.path} was not found"
        elif exc.status_code == 400 and exc.detail == BODY_PARSE_ERROR_DETAIL:
            # Body bytes that never decode to text (e.g. invalid UTF-8)
            logger.warning(
                "[%s] Undecodable body on %s %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
            )
            code = ErrorCode.INVALID_JSON
            message = INVALID_JSON_MESSAGE
        elif exc.status_code >= 500:
            code = ErrorCode.INTERNAL
            message = INTERNAL_ERROR_MESSAGE
        else:
            code = ErrorCode.VALIDATION
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(code, message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for errors raised outside the request logging middleware.

        Errors raised by route handlers are turned into the same response
        inside RequestLoggingMiddleware, so they still get an access line and
        an X-Request-ID header.
        """
        return internal_error_response(request, exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[PetStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings override (defaults to the module singleton)
        store:        PetStore to serve; a fresh one is created when omitted
                      and seeded with the fixtures if seed_fixtures is on.
                      A caller-supplied store is used as-is.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or settings

    if store is None:
        store = PetStore()
        if app_settings.seed_fixtures:
            store.seed()

    app = FastAPI(
        title=app_settings.app_name,
        description=(
            "Minimal in-memory REST API for managing pets. "
            "Built as a practice target for API and QA testing."
        ),
        version=__version__,
        docs_url=app_settings.docs_url,
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.pet_store = store
    app.state.pet_service = PetService(store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → GZip → CORS
    origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(pets.router)

    return app


# uvicorn expects `pet_api.main:app` to be importable
app = create_app()
