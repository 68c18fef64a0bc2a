"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses (SRP, OCP for adding new handlers).

Body shapes:
- NotFoundException -> 404 {"message": ...}
- DomainException -> 422 {"errors": [{"message": ...}, ...]}
- RequestValidationError -> 422 {"message": "Request validation failed", "errors": [...]}
- other CatalogException -> status by error_code, to_dict()
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import CatalogException, DomainException, NotFoundException
from app.domain.validation import Error

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "DOMAIN_ERROR": 422,
    "SERVICE_UNAVAILABLE": 503,
}


def errors_body(errors: list[Error]) -> dict[str, Any]:
    """Render an error list as {"errors": [{"message": ...}]}."""
    return {"errors": [{"message": error.message} for error in errors]}


def _not_found_exception_handler(
    request: Request, exc: NotFoundException
) -> JSONResponse:
    """Return 404 with the not-found message only."""
    return JSONResponse(status_code=404, content={"message": exc.message})


def _domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Return 422 with the exception's errors (or its message as the only error)."""
    errors = exc.errors or [Error(exc.message)]
    return JSONResponse(status_code=422, content=errors_body(errors))


def _catalog_exception_handler(
    request: Request, exc: CatalogException
) -> JSONResponse:
    """Return JSON from CatalogException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _format_validation_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with one {"message"} entry per request validation error."""
    return JSONResponse(
        status_code=422,
        content={
            "message": "Request validation failed",
            "errors": [
                {"message": _format_validation_error(error)} for error in exc.errors()
            ],
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Starlette resolves handlers by the
    exception's MRO, so NotFoundException wins over DomainException, which
    wins over CatalogException.
    """
    app.add_exception_handler(NotFoundException, _not_found_exception_handler)
    app.add_exception_handler(DomainException, _domain_exception_handler)
    app.add_exception_handler(CatalogException, _catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
