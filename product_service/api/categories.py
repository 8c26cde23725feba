"""Category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from product_service.api.dependencies import get_store
from product_service.api.schemas import CategoriesResponse
from product_service.catalog.categories import list_categories
from product_service.catalog.store import CatalogStore

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get("/categories", response_model=CategoriesResponse)
async def get_categories(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> CategoriesResponse:
    """List the distinct categories of the live catalog."""
    return CategoriesResponse(categories=list_categories(store))
