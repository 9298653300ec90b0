# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .routes import health, mortgage
from .schemas.error import ErrorResponse, FieldViolation

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mortgage Check API",
    description="Mortgage rate catalog and loan feasibility checks",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _problem(body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=body.status, content=body.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    field = getattr(exc, "field", None)
    errors = [FieldViolation(field=field, message=str(exc.detail))] if field else None
    body = ErrorResponse.build(
        exc.status_code, str(exc.detail), _request_id(request), request.url.path, errors,
    )
    return _problem(body)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert request validation errors to a 400 Problem Details.

    Messages are grouped per field: ``"income: msg, msg; loanValue: msg"``.
    """
    grouped: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        grouped.setdefault(field, []).append(err.get("msg", "invalid value"))

    detail = "; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in grouped.items())
    logger.error("Rejected request to %s: %s", request.url.path, detail)
    errors = [
        FieldViolation(field=field, message=msg)
        for field, msgs in grouped.items()
        for msg in msgs
    ]
    body = ErrorResponse.build(
        status.HTTP_400_BAD_REQUEST, detail, _request_id(request), request.url.path, errors,
    )
    return _problem(body)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Illegal arguments that slipped past request validation are still client errors."""
    logger.error("Invalid argument on %s: %s", request.url.path, exc)
    body = ErrorResponse.build(
        status.HTTP_400_BAD_REQUEST, str(exc), _request_id(request), request.url.path,
    )
    return _problem(body)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = ErrorResponse.build(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        request_id,
        request.url.path,
    )
    return _problem(body)


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(mortgage.router, prefix=settings.API_PREFIX, tags=["mortgage"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Mortgage Check API"}
