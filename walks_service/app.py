"""
Main FastAPI application.

Wires together the layers:
- Domain: entities and exceptions
- Repositories: data access
- Validators: request and cross-entity checks
- Routers: HTTP endpoints
"""

from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .database import init_db
from .domain.exceptions import (
    EntityNotFoundException,
    ReferenceConflictException,
    ValidationException,
    WalksServiceException,
)
from .logging_config import setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .metrics_middleware import PrometheusMiddleware
from .routers import health_router, regions_router, walk_difficulties_router, walks_router
from .schemas import ErrorResponse

setup_logging(log_level=settings.LOG_LEVEL, use_json=settings.LOG_JSON)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Walks Service", version=settings.SERVICE_VERSION)

    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    logger.info("Walks Service started")

    yield

    logger.info("Walks Service stopped")


app = FastAPI(
    title="NZ Walks Service",
    description="Manage walks, regions and walk difficulty ratings",
    version=settings.SERVICE_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Request-ID"],
    expose_headers=["Location", "X-Request-ID"],
    max_age=600,
)

# Add Prometheus metrics middleware
app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID for distributed tracing."""
    request_id = request.headers.get("X-Request-ID") or f"req-{uuid4().hex}"
    # Read back by the 500 handler, which runs outside this middleware
    request.state.request_id = request_id

    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers["X-Request-ID"] = request_id
    return response


def _error_response(status_code: int, error: str, message: str, errors=None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report schema errors as 400 with errors keyed by wire field name.

    A malformed id in the path matches no resource, so it is a 404.
    """
    if any(error["loc"] and error["loc"][0] == "path" for error in exc.errors()):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    errors: dict = {}
    for error in exc.errors():
        location = error["loc"]
        field = ".".join(str(part) for part in location[1:]) or str(location[0])
        errors.setdefault(field, []).append(error["msg"])

    logger.info("Request body rejected", path=request.url.path, fields=sorted(errors))

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "validation_failed",
        "One or more validation errors occurred",
        errors,
    )


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "validation_failed", exc.message, exc.errors
    )


@app.exception_handler(EntityNotFoundException)
async def not_found_exception_handler(request: Request, exc: EntityNotFoundException):
    logger.info("Entity not found", path=request.url.path, **exc.details)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(ReferenceConflictException)
async def reference_conflict_exception_handler(
    request: Request, exc: ReferenceConflictException
):
    return _error_response(status.HTTP_409_CONFLICT, "reference_conflict", exc.message)


@app.exception_handler(WalksServiceException)
async def service_exception_handler(request: Request, exc: WalksServiceException):
    """Store failures and any other domain error surface as a generic 500."""
    logger.error(
        "Service error",
        path=request.url.path,
        method=request.method,
        error=exc.message,
        details=exc.details,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_server_error",
        "An unexpected error occurred",
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    request_id = getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID"
    )
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        request_id=request_id,
        exc_info=True,
    )

    response = _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_server_error",
        "An unexpected error occurred",
    )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


# Include routers
app.include_router(health_router.router)
app.include_router(regions_router.router)
app.include_router(walk_difficulties_router.router)
app.include_router(walks_router.router)


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": "NZ Walks Service",
        "version": settings.SERVICE_VERSION,
        "status": "operational",
        "resources": ["/Regions", "/WalkDifficulties", "/Walks"],
        "health": "/health",
        "ready": "/ready",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "walks_service.app:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
