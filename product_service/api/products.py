"""Product endpoints.

CRUD and listing over the in-memory catalog. Domain errors raised by
the store are turned into JSON error responses by the handlers
registered in ``product_service.main``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from product_service.api.dependencies import get_store
from product_service.api.params import pagination_params, product_filters
from product_service.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from product_service.catalog.query import PaginationParams, ProductFilter, query_products
from product_service.catalog.store import CatalogStore

router = APIRouter(prefix="/api/products", tags=["Products"])

Store = Annotated[CatalogStore, Depends(get_store)]


@router.get("", response_model=ProductListResponse)
async def list_products(
    store: Store,
    filters: Annotated[ProductFilter, Depends(product_filters)],
    pagination: Annotated[PaginationParams, Depends(pagination_params)],
) -> ProductListResponse:
    """List products with filtering, search and pagination.

    All filters are optional and combined with AND. ``total`` in the
    pagination envelope counts the filtered products, not the catalog.
    """
    result = query_products(store, filters, pagination)
    return ProductListResponse.from_result(result)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(product_id: str, store: Store) -> ProductResponse:
    """Get product details by ID."""
    return ProductResponse.from_domain(store.get(product_id))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(request: ProductCreateRequest, store: Store) -> ProductResponse:
    """Create a product.

    The store assigns the ID and timestamps; ``inStock`` defaults to true.
    """
    product = store.create(request.to_domain())
    return ProductResponse.from_domain(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    store: Store,
) -> ProductResponse:
    """Partially update a product.

    Only the fields present in the body change; ``updatedAt`` always
    advances.
    """
    product = store.update(product_id, request.to_domain())
    return ProductResponse.from_domain(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_product(product_id: str, store: Store) -> Response:
    """Delete a product permanently."""
    store.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
