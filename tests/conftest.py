"""Test fixtures for product service tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

import product_service.catalog.store as store_module
from product_service.catalog.models import ProductCreate
from product_service.catalog.store import CatalogStore, IdAllocator


class FakeClock:
    """Deterministic clock; every call returns the current fixed time."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def reset_store():
    """Reset the global store before and after each test."""
    store_module._catalog_store = None
    yield
    store_module._catalog_store = None


@pytest.fixture
def client():
    """Create test client (runs the app lifespan, which seeds the catalog)."""
    from product_service.main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> CatalogStore:
    """Create an empty store with a fixed clock."""
    return CatalogStore(clock=clock, id_allocator=IdAllocator(salt="test"))


@pytest.fixture
def product_data() -> ProductCreate:
    """Valid create input."""
    return ProductCreate(
        name="Test Organic Bananas",
        price=2.99,
        description="Fresh organic bananas, perfect for snacking",
        image="https://placehold.co/300x200.png",
        data_ai_hint="fruit organic banana",
        category="fruits",
        in_stock=True,
    )


@pytest.fixture
def product_payload() -> dict:
    """Valid create body in wire format."""
    return {
        "name": "Test Organic Bananas",
        "price": 2.99,
        "description": "Fresh organic bananas, perfect for snacking",
        "image": "https://placehold.co/300x200.png",
        "dataAiHint": "fruit organic banana",
        "category": "fruits",
        "inStock": True,
    }
