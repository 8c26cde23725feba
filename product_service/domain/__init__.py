"""Domain layer.

Exceptions shared by the catalog and the API layer.
"""

from product_service.domain.exceptions import (
    DomainError,
    FieldIssue,
    ProductNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "FieldIssue",
    "ProductNotFoundError",
    "ValidationError",
]
