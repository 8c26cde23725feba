"""FastAPI dependencies shared by the routers."""

from product_service.catalog.store import CatalogStore, get_catalog_store


def get_store() -> CatalogStore:
    """Get catalog store dependency."""
    return get_catalog_store()
