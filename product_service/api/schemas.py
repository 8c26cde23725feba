"""API request and response schemas.

Pydantic models for the product HTTP API. Field names are snake_case
in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from product_service.catalog.models import Product, ProductCreate, ProductPatch
from product_service.catalog.query import PaginatedResult


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(CamelModel):
    """Body of POST /api/products.

    Only JSON types are checked here, without coercion: ``price`` must be
    a number and ``inStock`` a boolean. Value constraints (non-empty
    strings, positive price) are enforced by the catalog store.
    """

    name: str = Field(..., description="Product name", examples=["Organic Bananas"])
    price: float = Field(
        ..., strict=True, description="Unit price, greater than 0", examples=[2.99]
    )
    description: str = Field(..., description="Product description")
    image: str = Field(..., description="Image URL")
    data_ai_hint: str = Field(..., description="Free-text tag used by search")
    category: str | None = Field(None, description="Category name")
    in_stock: bool | None = Field(
        None, strict=True, description="Availability, true when omitted"
    )

    def to_domain(self) -> ProductCreate:
        return ProductCreate(**self.model_dump())


class ProductUpdateRequest(CamelModel):
    """Body of PUT /api/products/{id}.

    Merge semantics: only the keys present in the body are applied.
    """

    name: str | None = Field(None, description="Product name")
    price: float | None = Field(None, strict=True, description="Unit price, greater than 0")
    description: str | None = Field(None, description="Product description")
    image: str | None = Field(None, description="Image URL")
    data_ai_hint: str | None = Field(None, description="Free-text tag used by search")
    category: str | None = Field(None, description="Category name, null clears it")
    in_stock: bool | None = Field(None, strict=True, description="Availability")

    def to_domain(self) -> ProductPatch:
        return ProductPatch.from_dict(self.model_dump(exclude_unset=True))


class ProductResponse(CamelModel):
    """Product details."""

    id: str = Field(..., description="Product ID")
    name: str
    price: float
    description: str
    image: str
    data_ai_hint: str
    category: str | None = None
    in_stock: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            image=product.image,
            data_ai_hint=product.data_ai_hint,
            category=product.category,
            in_stock=product.in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PaginationSchema(CamelModel):
    """Pagination envelope of a product listing."""

    total: int = Field(..., ge=0, description="Number of products matching the filters")
    page: int = Field(..., ge=1, description="Current page")
    limit: int = Field(..., ge=1, description="Items per page")
    total_pages: int = Field(..., ge=0, description="ceil(total / limit)")


class ProductListResponse(CamelModel):
    """Paginated product list response."""

    products: list[ProductResponse]
    pagination: PaginationSchema

    @classmethod
    def from_result(cls, result: PaginatedResult[Product]) -> "ProductListResponse":
        return cls(
            products=[ProductResponse.from_domain(p) for p in result.items],
            pagination=PaginationSchema(
                total=result.total,
                page=result.page,
                limit=result.limit,
                total_pages=result.total_pages,
            ),
        )


class CategoriesResponse(BaseModel):
    """Distinct categories of the live catalog."""

    categories: list[str]


# ============================================================================
# Common Schemas
# ============================================================================


class HealthResponse(CamelModel):
    """Health check response."""

    status: str
    service: str
    version: str
    timestamp: datetime
    product_count: int


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint."""

    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    details: list[dict[str, Any]] = Field(default_factory=list)
    request_id: str | None = None
