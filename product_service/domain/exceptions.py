"""Domain exceptions.

All catalog-level errors that represent business rule violations.
The HTTP layer maps them onto status codes; nothing below the API
knows about HTTP.
"""

from dataclasses import dataclass
from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Product Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when no live product has the requested ID."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The ID that was looked up.
        """
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )
        self.product_id = product_id


@dataclass(frozen=True)
class FieldIssue:
    """A single violated constraint on one input field."""

    field: str
    message: str


class ValidationError(DomainError):
    """Raised when a create or update input violates a product constraint.

    Carries every offending field, not just the first one found.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(self, issues: list[FieldIssue]) -> None:
        """Initialize validation error.

        Args:
            issues: Violated constraints, at least one.
        """
        fields = ", ".join(issue.field for issue in issues)
        super().__init__(
            f"Invalid product data: {fields}",
            details={"fields": [issue.field for issue in issues]},
        )
        self.issues = list(issues)

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields."""
        return [issue.field for issue in self.issues]
