"""Product query engine.

Read-only filtering, search and pagination over one snapshot of the
catalog store.
"""

import math
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

import structlog

from product_service.catalog.models import Product
from product_service.catalog.store import CatalogStore

logger = structlog.get_logger()

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass
class ProductFilter:
    """Filter parameters for product search.

    Every field is optional; supplied fields are AND-combined.

    Attributes:
        category: Exact category match.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        in_stock: Availability match.
        search: Case-insensitive substring over name, description and
            data hint. Empty means no search.
    """

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    in_stock: bool | None = None
    search: str | None = None

    def predicates(self) -> list[Callable[[Product], bool]]:
        """Build one predicate per supplied filter."""
        checks: list[Callable[[Product], bool]] = []

        if self.category is not None:
            category = self.category
            checks.append(lambda p: p.category == category)

        if self.min_price is not None:
            min_price = self.min_price
            checks.append(lambda p: p.price >= min_price)

        if self.max_price is not None:
            max_price = self.max_price
            checks.append(lambda p: p.price <= max_price)

        if self.in_stock is not None:
            in_stock = self.in_stock
            checks.append(lambda p: p.in_stock is in_stock)

        if self.search:
            term = self.search.lower()
            checks.append(
                lambda p: term in p.name.lower()
                or term in p.description.lower()
                or term in p.data_ai_hint.lower()
            )

        return checks

    def matches(self, product: Product) -> bool:
        return all(check(product) for check in self.predicates())


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        limit: Items per page.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            self.page = DEFAULT_PAGE
        if self.limit < 1:
            self.limit = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on the requested page.
        total: Size of the filtered set, before pagination.
        page: Current page.
        limit: Items per page.
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return math.ceil(self.total / self.limit)


def filter_products(products: Iterable[Product], filters: ProductFilter) -> list[Product]:
    """Keep the products satisfying every supplied filter, order preserved."""
    checks = filters.predicates()
    return [p for p in products if all(check(p) for check in checks)]


def paginate(items: list[T], pagination: PaginationParams) -> PaginatedResult[T]:
    """Slice ``items`` to the requested page window."""
    start = pagination.offset
    return PaginatedResult(
        items=items[start : start + pagination.limit],
        total=len(items),
        page=pagination.page,
        limit=pagination.limit,
    )


def query_products(
    store: CatalogStore,
    filters: ProductFilter | None = None,
    pagination: PaginationParams | None = None,
) -> PaginatedResult[Product]:
    """Filter, search and paginate the current catalog.

    Args:
        store: Catalog to read; never mutated.
        filters: Filter parameters, none by default.
        pagination: Page window, first page of 10 by default.

    Returns:
        Requested page plus the filtered total.
    """
    filters = filters or ProductFilter()
    pagination = pagination or PaginationParams()

    matched = filter_products(store.list(), filters)
    result = paginate(matched, pagination)

    logger.debug(
        "Products queried",
        total=result.total,
        page=result.page,
        limit=result.limit,
        returned=len(result.items),
    )
    return result
