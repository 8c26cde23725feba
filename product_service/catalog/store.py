"""In-memory catalog store.

Authoritative holder of all products and the only writer. Every
operation runs under one mutex so callers always observe a settled
catalog.
"""

import itertools
import math
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from numbers import Real
from typing import Any, Callable, Iterable

import structlog

from product_service.catalog.models import Product, ProductCreate, ProductPatch
from product_service.domain.exceptions import (
    FieldIssue,
    ProductNotFoundError,
    ValidationError,
)

logger = structlog.get_logger()

Clock = Callable[[], datetime]

# Smallest step used to keep updated_at strictly advancing.
_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


# ============================================================================
# Validation
# ============================================================================


def _check_text(value: Any, name: str, issues: list[FieldIssue], required: bool) -> None:
    if value is None:
        issues.append(FieldIssue(name, "is required"))
    elif not isinstance(value, str):
        issues.append(FieldIssue(name, "must be a string"))
    elif required and not value.strip():
        issues.append(FieldIssue(name, "must not be empty"))


def _check_price(value: Any, issues: list[FieldIssue]) -> None:
    if value is None:
        issues.append(FieldIssue("price", "is required"))
    elif isinstance(value, bool) or not isinstance(value, Real):
        issues.append(FieldIssue("price", "must be a number"))
    elif not math.isfinite(value) or value <= 0:
        issues.append(FieldIssue("price", "must be greater than 0"))


def _check_category(value: Any, issues: list[FieldIssue]) -> None:
    if value is not None and not isinstance(value, str):
        issues.append(FieldIssue("category", "must be a string"))


def _check_in_stock(value: Any, issues: list[FieldIssue]) -> None:
    if not isinstance(value, bool):
        issues.append(FieldIssue("in_stock", "must be a boolean"))


def validate_create(data: ProductCreate) -> None:
    """Check every constraint on a create input.

    Raises:
        ValidationError: Listing all offending fields.
    """
    issues: list[FieldIssue] = []
    _check_text(data.name, "name", issues, required=True)
    _check_price(data.price, issues)
    _check_text(data.description, "description", issues, required=True)
    _check_text(data.image, "image", issues, required=False)
    _check_text(data.data_ai_hint, "data_ai_hint", issues, required=False)
    _check_category(data.category, issues)
    if data.in_stock is not None:
        _check_in_stock(data.in_stock, issues)
    if issues:
        raise ValidationError(issues)


def validate_patch(changes: dict[str, Any]) -> None:
    """Check the supplied fields of a patch.

    Raises:
        ValidationError: Listing all offending fields.
    """
    issues: list[FieldIssue] = []
    for name in ("name", "description"):
        if name in changes:
            _check_text(changes[name], name, issues, required=True)
    for name in ("image", "data_ai_hint"):
        if name in changes:
            _check_text(changes[name], name, issues, required=False)
    if "price" in changes:
        _check_price(changes["price"], issues)
    if "category" in changes:
        _check_category(changes["category"], issues)
    if "in_stock" in changes:
        _check_in_stock(changes["in_stock"], issues)
    if issues:
        raise ValidationError(issues)


def _normalize_category(value: str | None) -> str | None:
    """Blank categories are stored as absent."""
    if value is None or not value.strip():
        return None
    return value


# ============================================================================
# Id Allocation
# ============================================================================


class IdAllocator:
    """Issues unique product IDs.

    IDs combine a per-instance salt with a monotonically increasing
    counter, so back-to-back allocations never collide regardless of
    clock resolution.
    """

    def __init__(self, salt: str | None = None) -> None:
        self.salt = salt or uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"{self.salt}-{next(self._counter):06d}"


# ============================================================================
# Catalog Store
# ============================================================================


class CatalogStore:
    """In-memory product store.

    Products are kept in insertion order. Returned products are copies,
    so callers can never mutate stored state.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        id_allocator: IdAllocator | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            clock: Source of timestamps, UTC now by default.
            id_allocator: ID source, a fresh salted counter by default.
        """
        self._clock = clock or utc_now
        self._ids = id_allocator or IdAllocator()
        self._products: dict[str, Product] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    def create(self, data: ProductCreate) -> Product:
        """Validate and store a new product.

        Args:
            data: Create input.

        Returns:
            The stored product with its assigned ID and timestamps.

        Raises:
            ValidationError: If a required constraint is violated.
        """
        try:
            validate_create(data)
        except ValidationError as e:
            logger.warning("Product rejected", fields=e.fields)
            raise

        with self._lock:
            now = self._clock()
            product = Product(
                id=self._ids.next_id(),
                name=data.name,
                price=float(data.price),
                description=data.description,
                image=data.image,
                data_ai_hint=data.data_ai_hint,
                category=_normalize_category(data.category),
                in_stock=True if data.in_stock is None else data.in_stock,
                created_at=now,
                updated_at=now,
            )
            self._products[product.id] = product

        logger.info("Product created", product_id=product.id, category=product.category)
        return replace(product)

    def create_many(self, items: Iterable[ProductCreate]) -> list[Product]:
        """Create products in order, stopping at the first invalid one."""
        return [self.create(item) for item in items]

    def find(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product copy or None if not found.
        """
        with self._lock:
            product = self._products.get(product_id)
            return replace(product) if product else None

    def get(self, product_id: str) -> Product:
        """Get product by ID.

        Raises:
            ProductNotFoundError: If no live product has this ID.
        """
        product = self.find(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def update(self, product_id: str, patch: ProductPatch) -> Product:
        """Merge the supplied fields of ``patch`` into a stored product.

        Args:
            product_id: Product ID.
            patch: Fields to overwrite; unset fields are left untouched.

        Returns:
            The updated product.

        Raises:
            ProductNotFoundError: If no live product has this ID.
            ValidationError: If a supplied field is invalid. The stored
                product is left unchanged.
        """
        changes = patch.supplied()

        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                raise ProductNotFoundError(product_id)

            try:
                validate_patch(changes)
            except ValidationError as e:
                logger.warning("Product update rejected", product_id=product_id, fields=e.fields)
                raise

            if "price" in changes:
                changes["price"] = float(changes["price"])
            if "category" in changes:
                changes["category"] = _normalize_category(changes["category"])

            now = max(self._clock(), current.updated_at + _TICK)
            updated = replace(current, **changes, updated_at=now)
            self._products[product_id] = updated

        logger.info("Product updated", product_id=product_id, fields=sorted(changes))
        return replace(updated)

    def delete(self, product_id: str) -> None:
        """Remove a product permanently.

        Raises:
            ProductNotFoundError: If no live product has this ID.
        """
        with self._lock:
            if self._products.pop(product_id, None) is None:
                raise ProductNotFoundError(product_id)

        logger.info("Product deleted", product_id=product_id)

    def list(self) -> list[Product]:
        """Snapshot of all live products in insertion order."""
        with self._lock:
            return [replace(p) for p in self._products.values()]

    def count(self) -> int:
        return len(self)

    def clear(self) -> None:
        """Drop every product. Issued IDs are never reused."""
        with self._lock:
            removed = len(self._products)
            self._products.clear()
        logger.info("Catalog cleared", removed=removed)


# Global catalog store instance
_catalog_store: CatalogStore | None = None


def get_catalog_store() -> CatalogStore:
    """Get or create the process-wide store instance.

    Returns:
        CatalogStore instance.
    """
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = CatalogStore()
    return _catalog_store


def set_catalog_store(store: CatalogStore | None) -> None:
    """Replace the process-wide store (None resets it)."""
    global _catalog_store
    _catalog_store = store
