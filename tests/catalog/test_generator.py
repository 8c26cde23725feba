"""Tests for sample data and the product generator."""

import pytest

from product_service.catalog.generator import (
    CATEGORIES,
    SAMPLE_PRODUCTS,
    ProductGenerator,
    seed_store,
)
from product_service.catalog.store import validate_create


class TestSampleProducts:
    """Tests for the built-in sample catalog."""

    def test_sample_prices(self):
        assert sorted(p.price for p in SAMPLE_PRODUCTS) == [
            2.49, 2.99, 3.79, 3.99, 4.49, 4.99, 5.99, 9.99,
        ]

    def test_sample_products_are_valid(self):
        for product in SAMPLE_PRODUCTS:
            validate_create(product)

    def test_seed_store_loads_sample(self, store):
        created = seed_store(store)

        assert created == len(SAMPLE_PRODUCTS)
        assert [p.name for p in store.list()] == [p.name for p in SAMPLE_PRODUCTS]

    def test_seed_store_with_generated_products(self, store):
        created = seed_store(store, include_sample=False, generated=12, seed=3)

        assert created == 12
        assert len(store) == 12


class TestProductGenerator:
    """Tests for ProductGenerator."""

    @pytest.fixture
    def generator(self) -> ProductGenerator:
        return ProductGenerator(seed=42)

    def test_generates_requested_count(self, generator):
        assert len(list(generator.generate(15))) == 15

    def test_generated_products_are_valid(self, generator):
        for product in generator.generate(50):
            validate_create(product)
            assert product.price > 0

    def test_deterministic(self):
        first = list(ProductGenerator(seed=123).generate(10))
        second = list(ProductGenerator(seed=123).generate(10))

        assert first == second

    def test_different_seeds_differ(self):
        first = [p.name for p in ProductGenerator(seed=1).generate(10)]
        second = [p.name for p in ProductGenerator(seed=2).generate(10)]

        assert first != second

    def test_names_are_distinct(self, generator):
        names = [p.name for p in generator.generate(30)]

        assert len(set(names)) == 30

    def test_categories_come_from_known_set(self, generator):
        known = {c["name"] for c in CATEGORIES}

        assert {p.category for p in generator.generate(30)} <= known

    def test_forced_category(self, generator):
        products = list(generator.generate(5, category="integration-test"))

        assert all(p.category == "integration-test" for p in products)

    def test_prices_end_in_nine_cents(self, generator):
        for product in generator.generate(20):
            assert round(product.price * 100) % 10 == 9

    def test_generated_products_load_into_store(self, generator, store):
        created = store.create_many(generator.generate(15))

        assert len({p.id for p in created}) == 15
