# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .middleware.request_info import RequestInfoMiddleware
from .routes import health, mortgage
from .schemas.error import ErrorResponse
from .services.cache import get_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    store = get_store()
    logger.info("Mortgage calculator started (cached entries=%d)", len(store))
    yield
    logger.info("Mortgage calculator stopped (cached entries=%d)", len(store))


app = FastAPI(
    title="Mortgage Calculator API",
    description="Annuity mortgage calculation with an in-memory result cache",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Request logging -- added last so it wraps CORS and sees the final status
app.add_middleware(RequestInfoMiddleware)


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    body = ErrorResponse.for_status(
        exc.status_code,
        str(exc.detail),
        request_id=_request_id(request),
        instance=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    body = ErrorResponse.for_status(
        422,
        str(exc.errors()),
        request_id=_request_id(request),
        instance=request.url.path,
    )
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = ErrorResponse.for_status(
        500,
        "An unexpected error occurred.",
        request_id=request_id,
        instance=request.url.path,
    )
    return JSONResponse(status_code=500, content=body.model_dump())


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(mortgage.router, tags=["mortgage"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Mortgage Calculator API"}
