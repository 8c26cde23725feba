"""Sample catalog and synthetic product generator.

Provides the built-in grocery sample loaded at startup and a seeded
generator for padding the catalog or building test data.
"""

import hashlib
import random
from typing import Iterator

from product_service.catalog.models import ProductCreate
from product_service.catalog.store import CatalogStore


# ============================================================================
# Constants
# ============================================================================

PLACEHOLDER_IMAGE = "https://placehold.co/300x200.png"

SAMPLE_PRODUCTS: list[ProductCreate] = [
    ProductCreate(
        name="Brown Rice",
        price=2.49,
        description="Whole grain brown rice, rich in fiber",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="grain rice",
        category="grains",
        in_stock=True,
    ),
    ProductCreate(
        name="Organic Spinach",
        price=2.99,
        description="Fresh organic baby spinach leaves",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="vegetable spinach leafy",
        category="vegetables",
        in_stock=True,
    ),
    ProductCreate(
        name="Almond Milk",
        price=3.79,
        description="Unsweetened almond milk, dairy free",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="milk almond",
        category="dairy",
        in_stock=True,
    ),
    ProductCreate(
        name="Organic Apples",
        price=3.99,
        description="Crisp organic red apples from local orchards",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="fruit apple",
        category="fruits",
        in_stock=True,
    ),
    ProductCreate(
        name="Whole Wheat Bread",
        price=4.49,
        description="Freshly baked whole wheat loaf",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="bread bakery",
        category="bakery",
        in_stock=True,
    ),
    ProductCreate(
        name="Greek Yogurt",
        price=4.99,
        description="Thick and creamy plain greek yogurt",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="yogurt dairy",
        category="dairy",
        in_stock=True,
    ),
    ProductCreate(
        name="Free-Range Eggs",
        price=5.99,
        description="A dozen large free-range eggs",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="eggs dairy",
        category="dairy",
        in_stock=False,
    ),
    ProductCreate(
        name="Chicken Breast",
        price=9.99,
        description="Boneless skinless chicken breast, 1 lb",
        image=PLACEHOLDER_IMAGE,
        data_ai_hint="meat chicken poultry",
        category="meat",
        in_stock=True,
    ),
]

ADJECTIVES = [
    "Organic",
    "Fresh",
    "Local",
    "Premium",
    "Classic",
    "Farm",
    "Golden",
    "Wholesome",
    "Natural",
    "Artisan",
]

# Generator categories with price ranges (in cents) and name templates
CATEGORIES = [
    {
        "name": "fruits",
        "price_range": (99, 699),
        "items": ["Apples", "Bananas", "Pears", "Grapes", "Oranges"],
    },
    {
        "name": "vegetables",
        "price_range": (99, 499),
        "items": ["Carrots", "Spinach", "Broccoli", "Peppers", "Kale"],
    },
    {
        "name": "dairy",
        "price_range": (199, 799),
        "items": ["Milk", "Yogurt", "Cheddar", "Butter", "Cream"],
    },
    {
        "name": "bakery",
        "price_range": (199, 699),
        "items": ["Sourdough", "Bagels", "Croissants", "Baguette", "Muffins"],
    },
    {
        "name": "meat",
        "price_range": (499, 1999),
        "items": ["Chicken Thighs", "Ground Beef", "Pork Chops", "Turkey", "Sausages"],
    },
    {
        "name": "snacks",
        "price_range": (149, 599),
        "items": ["Crackers", "Trail Mix", "Pretzels", "Popcorn", "Granola Bars"],
    },
]


# ============================================================================
# Generator
# ============================================================================


class ProductGenerator:
    """Seeded generator of valid product create inputs.

    The same seed always yields the same sequence of products.
    """

    def __init__(self, seed: int = 42, in_stock_ratio: float = 0.8) -> None:
        """Initialize generator.

        Args:
            seed: Random seed for reproducibility.
            in_stock_ratio: Share of generated products marked in stock.
        """
        self.seed = seed
        self.in_stock_ratio = in_stock_ratio

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments."""
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def generate_one(self, index: int, category: str | None = None) -> ProductCreate:
        """Generate the ``index``-th product.

        Args:
            index: Position in the generated sequence.
            category: Force a category instead of picking one.
        """
        rng = random.Random(self._deterministic_seed(self.seed, index))

        entry = rng.choice(CATEGORIES)
        if category is not None:
            entry = next((c for c in CATEGORIES if c["name"] == category), entry)

        adj = rng.choice(ADJECTIVES)
        item = rng.choice(entry["items"])
        tag = hashlib.md5(f"{self.seed}:{index}".encode()).hexdigest()[:6]

        min_price, max_price = entry["price_range"]
        cents = rng.randint(min_price, max_price)
        cents = (cents // 10) * 10 + 9  # Round to .x9

        return ProductCreate(
            name=f"{adj} {item} {tag}",
            price=cents / 100,
            description=f"{adj} {item.lower()} from our {category or entry['name']} aisle.",
            image=f"{PLACEHOLDER_IMAGE}?text={tag}",
            data_ai_hint=f"{entry['name']} {item.lower()}",
            category=category or entry["name"],
            in_stock=rng.random() < self.in_stock_ratio,
        )

    def generate(self, count: int, category: str | None = None) -> Iterator[ProductCreate]:
        """Generate ``count`` products.

        Args:
            count: Number of products.
            category: Optional category applied to every product.

        Yields:
            Product create inputs.
        """
        for index in range(count):
            yield self.generate_one(index, category=category)


def seed_store(
    store: CatalogStore,
    include_sample: bool = True,
    generated: int = 0,
    seed: int = 42,
) -> int:
    """Load sample and/or generated products into a store.

    Args:
        store: Target store.
        include_sample: Whether to add the built-in grocery sample.
        generated: Number of synthetic products to add after it.
        seed: Generator seed.

    Returns:
        Number of products created.
    """
    created = 0
    if include_sample:
        created += len(store.create_many(SAMPLE_PRODUCTS))
    if generated > 0:
        created += len(store.create_many(ProductGenerator(seed).generate(generated)))
    return created
