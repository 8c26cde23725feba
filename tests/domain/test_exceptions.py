"""Tests for domain exceptions."""

from product_service.domain import (
    DomainError,
    FieldIssue,
    ProductNotFoundError,
    ValidationError,
)


def test_not_found_carries_product_id():
    error = ProductNotFoundError("abc-000001")

    assert isinstance(error, DomainError)
    assert error.error_code == "PRODUCT_NOT_FOUND"
    assert error.product_id == "abc-000001"
    assert error.message == "Product not found: abc-000001"
    assert error.details == {"product_id": "abc-000001"}


def test_validation_error_lists_every_field():
    error = ValidationError(
        [
            FieldIssue("name", "must not be empty"),
            FieldIssue("price", "must be greater than 0"),
        ]
    )

    assert error.error_code == "VALIDATION_ERROR"
    assert error.fields == ["name", "price"]
    assert error.message == "Invalid product data: name, price"
    assert str(error) == error.message
