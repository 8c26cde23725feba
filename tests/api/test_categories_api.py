"""Tests for the categories endpoint."""

from fastapi.testclient import TestClient

from product_service.api.dependencies import get_store
from product_service.catalog.store import CatalogStore


def test_list_categories(client: TestClient):
    response = client.get("/api/categories")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert categories == ["grains", "vegetables", "dairy", "fruits", "bakery", "meat"]
    assert len(categories) == len(set(categories))
    assert all(isinstance(c, str) and c for c in categories)


def test_new_category_appears_after_create(client: TestClient, product_payload):
    product_payload["category"] = "new-test-category"
    client.post("/api/products", json=product_payload)

    categories = client.get("/api/categories").json()["categories"]

    assert "new-test-category" in categories


def test_category_removed_with_last_product(client: TestClient):
    meat = client.get("/api/products?category=meat").json()["products"]
    for product in meat:
        client.delete(f"/api/products/{product['id']}")

    categories = client.get("/api/categories").json()["categories"]

    assert "meat" not in categories


def test_every_category_has_products(client: TestClient):
    for category in client.get("/api/categories").json()["categories"]:
        total = client.get("/api/products", params={"category": category}).json()[
            "pagination"
        ]["total"]
        assert total > 0


def test_empty_catalog_has_no_categories(client: TestClient):
    from product_service.main import app

    app.dependency_overrides[get_store] = CatalogStore

    response = client.get("/api/categories")

    assert response.json() == {"categories": []}
