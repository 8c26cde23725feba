"""Catalog data model.

Plain dataclasses for the product entity and for the inputs accepted
by the store. Wire (camelCase) naming lives in the API schemas only.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any


class _Unset:
    """Marker for patch fields the caller did not supply."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class Product:
    """Product held by the catalog.

    Attributes:
        id: Opaque identifier assigned by the store.
        name: Display name.
        price: Unit price, always greater than zero.
        description: Free-text description.
        image: Image URL.
        data_ai_hint: Free-text tag used by search.
        category: Optional category name.
        in_stock: Availability flag.
        created_at: Creation timestamp (UTC).
        updated_at: Last update timestamp (UTC).
    """

    id: str
    name: str
    price: float
    description: str
    image: str
    data_ai_hint: str
    category: str | None
    in_stock: bool
    created_at: datetime
    updated_at: datetime


@dataclass
class ProductCreate:
    """Input for creating a product.

    Fields are untyped: the store checks every constraint and reports
    all offending fields at once.
    """

    name: Any = None
    price: Any = None
    description: Any = None
    image: Any = None
    data_ai_hint: Any = None
    category: Any = None
    in_stock: Any = None


PATCHABLE_FIELDS = (
    "name",
    "price",
    "description",
    "image",
    "data_ai_hint",
    "category",
    "in_stock",
)


@dataclass
class ProductPatch:
    """Partial update applied field by field onto a stored product.

    Every field defaults to UNSET; only supplied fields are merged.
    Supplying ``category=None`` clears the category.
    """

    name: Any = UNSET
    price: Any = UNSET
    description: Any = UNSET
    image: Any = UNSET
    data_ai_hint: Any = UNSET
    category: Any = UNSET
    in_stock: Any = UNSET

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductPatch":
        """Build a patch from a mapping, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if k in PATCHABLE_FIELDS})

    def supplied(self) -> dict[str, Any]:
        """Return the fields that were explicitly set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
