"""Category index derived from the live catalog."""

from product_service.catalog.store import CatalogStore


def list_categories(store: CatalogStore) -> list[str]:
    """Distinct non-empty categories in discovery order.

    Recomputed from the store on every call, so a newly created
    product's category shows up immediately and a category disappears
    with its last product.
    """
    seen: dict[str, None] = {}
    for product in store.list():
        if product.category:
            seen.setdefault(product.category, None)
    return list(seen)
