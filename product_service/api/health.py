"""Health check endpoints.

Provides endpoints for monitoring service health.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from product_service.api.dependencies import get_store
from product_service.api.schemas import HealthResponse
from product_service.catalog.store import CatalogStore, utc_now
from product_service.infrastructure.config import settings

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name, version and catalog size.
    """
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.api_version,
        timestamp=utc_now(),
        product_count=len(store),
    )
