"""
QA Pet API — Custom Exception Hierarchy
========================================

What:  Defines application-specific exceptions and the error codes they carry.
Why:   Every failure a client can see maps to one stable, machine-readable code.
       QA suites assert on these codes, so they are part of the API contract.
How:   Each exception class is tagged with an ErrorCode and an HTTP status.
       A single global handler (registered in main.py) reads the tag and
       builds the error body; it never needs to know the concrete class.
Who:   Raised by validators and services; caught by the global handler.

Exception Hierarchy:
    PetApiError (base)
    ├── ValidationError   → 400 ERRO_VALIDACAO
    └── NotFoundError     → 404 RECURSO_NAO_ENCONTRADO

Codes without an exception class:
    ID_INVALIDO    → returned directly by route handlers (malformed path id)
    JSON_INVALIDO  → translated from FastAPI's RequestValidationError
    ERRO_INTERNO   → catch-all for unexpected exceptions

Error body shape (all 4xx/5xx):
    {
        "erro": "ERRO_VALIDACAO",
        "mensagem": "Field 'age' must not be negative",
        "detalhes": {"field": "age"}
    }
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the `erro` field."""

    VALIDATION = "ERRO_VALIDACAO"
    NOT_FOUND = "RECURSO_NAO_ENCONTRADO"
    INVALID_ID = "ID_INVALIDO"
    INVALID_JSON = "JSON_INVALIDO"
    INTERNAL = "ERRO_INTERNO"


def error_body(
    code: ErrorCode,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the JSON error payload; `detalhes` is omitted when empty."""
    body: Dict[str, Any] = {"erro": code.value, "mensagem": message}
    if details:
        body["detalhes"] = details
    return body


class PetApiError(Exception):
    """
    Base exception for all QA Pet API errors.

    Attributes:
        code:        ErrorCode tag the global handler dispatches on
        status_code: HTTP status the tag maps to
        message:     User-facing error description (safe to return)
        details:     Structured extra info, returned as `detalhes`
    """

    code: ErrorCode = ErrorCode.INTERNAL
    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return error_body(self.code, self.message, self.details)


class ValidationError(PetApiError):
    """
    Raised when client input fails validation.

    When:    Missing required field, wrong type, out-of-range age, unknown kind,
             empty update body, invalid list filter.
    HTTP:    400 Bad Request

    Example response:
        {
            "erro": "ERRO_VALIDACAO",
            "mensagem": "Field 'kind' must be one of: dog, cat, bird, other",
            "detalhes": {"field": "kind", "validKinds": ["dog", "cat", "bird", "other"]}
        }
    """

    code = ErrorCode.VALIDATION
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(details or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, details=ctx)
        self.field = field


class NotFoundError(PetApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /pets/{id} with a well-formed but unassigned UUID.
    HTTP:    404 Not Found

    The store returns None for missing records; the service converts that
    into NotFoundError so HTTP concerns stay out of the storage layer.
    """

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        super().__init__(message=message)
        self.resource = resource
        self.resource_id = resource_id


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unexpected exception and build the generic 500 response.

    The client only sees ERRO_INTERNO and a fixed message. Method, path,
    exception name, message and traceback go to the server log.
    """
    rid = getattr(request.state, "request_id", "")
    logger.error(
        "[%s] Unexpected error on %s %s: %s: %s",
        rid,
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=error_body(ErrorCode.INTERNAL, INTERNAL_ERROR_MESSAGE),
    )
