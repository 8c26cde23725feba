"""Product catalog.

In-memory store, query engine, category index and sample data.
"""

from product_service.catalog.categories import list_categories
from product_service.catalog.generator import SAMPLE_PRODUCTS, ProductGenerator, seed_store
from product_service.catalog.models import UNSET, Product, ProductCreate, ProductPatch
from product_service.catalog.query import (
    PaginatedResult,
    PaginationParams,
    ProductFilter,
    query_products,
)
from product_service.catalog.store import (
    CatalogStore,
    IdAllocator,
    get_catalog_store,
    set_catalog_store,
)

__all__ = [
    # Models
    "UNSET",
    "Product",
    "ProductCreate",
    "ProductPatch",
    # Store
    "CatalogStore",
    "IdAllocator",
    "get_catalog_store",
    "set_catalog_store",
    # Query
    "PaginatedResult",
    "PaginationParams",
    "ProductFilter",
    "query_products",
    # Categories
    "list_categories",
    # Sample data
    "SAMPLE_PRODUCTS",
    "ProductGenerator",
    "seed_store",
]
