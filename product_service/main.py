"""Product service main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown
events.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_service.api.categories import router as categories_router
from product_service.api.errors import error_response
from product_service.api.health import router as health_router
from product_service.api.middleware import setup_middleware
from product_service.api.products import router as products_router
from product_service.catalog.generator import seed_store
from product_service.catalog.store import CatalogStore, set_catalog_store
from product_service.domain.exceptions import (
    DomainError,
    ProductNotFoundError,
    ValidationError,
)
from product_service.infrastructure.config import Settings, settings
from product_service.infrastructure.logging import configure_logging

logger = structlog.get_logger()


def build_catalog_store(config: Settings) -> CatalogStore:
    """Create the process-wide store, seeded according to settings."""
    store = CatalogStore()
    created = seed_store(
        store,
        include_sample=config.seed_catalog,
        generated=config.generated_products,
        seed=config.random_seed,
    )
    set_catalog_store(store)
    logger.info("Catalog initialized", product_count=created)
    return store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level, json_logs=settings.log_json)
    logger.info(
        "Starting product service",
        version=settings.api_version,
        debug=settings.debug,
    )

    build_catalog_store(settings)

    yield

    set_catalog_store(None)
    logger.info("Product service shutdown complete")


app = FastAPI(
    title="Product Service API",
    description="In-memory product catalog with filtering, search and pagination",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

app.include_router(health_router)
app.include_router(products_router)
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Map domain errors onto 404 / 400 responses."""
    if isinstance(exc, ProductNotFoundError):
        return error_response(
            request, status.HTTP_404_NOT_FOUND, exc.error_code, exc.message
        )

    message = exc.message
    details: list[dict[str, Any]] = []
    if isinstance(exc, ValidationError):
        fields = [to_camel(issue.field) for issue in exc.issues]
        message = f"Invalid product data: {', '.join(fields)}"
        details = [
            {"field": field, "message": issue.message}
            for field, issue in zip(fields, exc.issues)
        ]
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, exc.error_code, message, details
    )


def _wire_field(loc: tuple[Any, ...]) -> str:
    """Dotted field path without the location prefix or positional indexes.

    Body-level failures such as malformed JSON report ``"body"``.
    """
    names = [str(part) for part in loc[1:] if isinstance(part, str)]
    return ".".join(names) or str(loc[0])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400 instead of FastAPI's default 422."""
    details = [
        {"field": _wire_field(error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    logger.warning("Request rejected", path=request.url.path, errors=len(details))
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        ValidationError.error_code,
        "Invalid request body",
        details,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        return error_response(
            request,
            exc.status_code,
            detail.get("error_code", "ERROR"),
            detail.get("message", str(detail)),
            detail.get("details", []),
        )
    return error_response(request, exc.status_code, "ERROR", str(detail))
