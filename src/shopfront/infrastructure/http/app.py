"""FastAPI application factory.

Domain exceptions raised anywhere below a route are translated here into
status codes. Every error body is ``{"error": "<short message>"}``; storage
and unexpected failures are logged with their cause and reported as a
generic internal error.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shopfront.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    PermissionDeniedError,
    StorageError,
    ValidationError,
)
from shopfront.infrastructure.bootstrap import Container, build_container
from shopfront.infrastructure.config import Settings
from shopfront.infrastructure.http.routes import auth, cart, products, wishlist

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"

_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (PermissionDeniedError, 403),
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (ConfigurationError, 500),
    (StorageError, 500),
]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def status_for(exc: DomainException) -> int:
    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def _on_domain_error(request: Request, exc: DomainException) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error(500, INTERNAL_ERROR)
    return _error(status_for(exc), str(exc))


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        return _error(400, "Missing required fields")
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "invalid value")
        return _error(400, f"Invalid request: {where}: {message}" if where else f"Invalid request: {message}")
    return _error(400, "Invalid request")


async def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error(404, "Not found")
    if exc.status_code == 405:
        return _error(405, "Method not allowed")
    return _error(exc.status_code, str(exc.detail))


async def _on_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, INTERNAL_ERROR)


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """Build the API. Settings default to the process environment."""
    if container is None:
        container = build_container(settings or Settings.from_env())

    app = FastAPI(title="Shopfront API")
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainException, _on_domain_error)
    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(Exception, _on_unexpected_error)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    app.include_router(auth.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(wishlist.router)

    return app
