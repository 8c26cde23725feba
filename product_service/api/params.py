"""Query-string coercion for product listings.

Query values arrive as strings. Unparseable values are treated as not
supplied instead of failing the request.
"""

import math
from typing import Annotated

from fastapi import Query

from product_service.catalog.query import DEFAULT_PAGE, PaginationParams, ProductFilter
from product_service.infrastructure.config import settings


def parse_float(raw: str | None) -> float | None:
    """Parse a finite float, or None."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_int(raw: str | None) -> int | None:
    """Parse an integer, or None. Accepts integral floats like ``"2.0"``."""
    value = parse_float(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def parse_bool(raw: str | None) -> bool | None:
    """Parse ``true``/``false`` (any case), or None."""
    if raw is None:
        return None
    return {"true": True, "false": False}.get(raw.strip().lower())


def parse_text(raw: str | None) -> str | None:
    """Empty strings count as not supplied."""
    return raw if raw else None


def product_filters(
    category: Annotated[str | None, Query(description="Exact category match")] = None,
    min_price: Annotated[
        str | None, Query(alias="minPrice", description="Inclusive lower price bound")
    ] = None,
    max_price: Annotated[
        str | None, Query(alias="maxPrice", description="Inclusive upper price bound")
    ] = None,
    in_stock: Annotated[
        str | None, Query(alias="inStock", description="true or false")
    ] = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive search in name, description and data hint"),
    ] = None,
) -> ProductFilter:
    """Build product filters from the query string."""
    return ProductFilter(
        category=parse_text(category),
        min_price=parse_float(min_price),
        max_price=parse_float(max_price),
        in_stock=parse_bool(in_stock),
        search=parse_text(search),
    )


def pagination_params(
    page: Annotated[str | None, Query(description="Page number (1-based)")] = None,
    limit: Annotated[str | None, Query(description="Items per page")] = None,
) -> PaginationParams:
    """Build pagination from the query string, falling back to defaults."""
    parsed_page = parse_int(page)
    parsed_limit = parse_int(limit)
    return PaginationParams(
        page=parsed_page if parsed_page is not None else DEFAULT_PAGE,
        limit=parsed_limit if parsed_limit is not None else settings.default_page_limit,
    )
