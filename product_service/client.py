"""Product service API client.

Thin async HTTP client for the product service REST API. Handles
query-string encoding, error parsing and transport failures.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


@dataclass
class APIError:
    """Represents an API error response."""

    error_code: str
    message: str
    status_code: int
    details: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class APIResponse:
    """Represents an API response."""

    success: bool
    status_code: int = 0
    data: dict[str, Any] | list[Any] | None = None
    error: APIError | None = None


def _query_value(value: Any) -> Any:
    """Encode booleans the way the service parses them."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class ProductServiceClient:
    """HTTP client for the product service REST API.

    Example usage:
        client = ProductServiceClient("http://localhost:3001")
        created = await client.create_product({"name": "Kiwi", ...})
        page = await client.list_products({"category": "fruits"}, page=1, limit=5)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Product service base URL.
            timeout: Request timeout in seconds.
            transport: Optional transport, e.g. ``httpx.ASGITransport`` in tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ProductServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> APIResponse:
        """Make an API request.

        Args:
            method: HTTP method.
            path: API endpoint path.
            json: Request body as JSON.
            params: Query parameters; None values are dropped.

        Returns:
            APIResponse with success status and data or error.
        """
        client = await self._get_client()

        if params:
            params = {k: _query_value(v) for k, v in params.items() if v is not None}

        try:
            logger.debug(
                "Making API request",
                method=method,
                path=path,
                has_body=json is not None,
            )

            response = await client.request(
                method=method,
                url=path,
                json=json,
                params=params,
            )
        except httpx.TimeoutException as e:
            logger.error("API request timeout", path=path, error=str(e))
            return APIResponse(
                success=False,
                status_code=504,
                error=APIError(
                    error_code="TIMEOUT",
                    message=f"Request timed out: {path}",
                    status_code=504,
                ),
            )
        except httpx.RequestError as e:
            logger.error("API request failed", path=path, error=str(e))
            return APIResponse(
                success=False,
                status_code=503,
                error=APIError(
                    error_code="REQUEST_ERROR",
                    message=f"Request failed: {e}",
                    status_code=503,
                ),
            )

        if response.status_code >= 400:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {"error": response.text}
            return APIResponse(
                success=False,
                status_code=response.status_code,
                error=APIError(
                    error_code=error_data.get("error_code", "UNKNOWN_ERROR"),
                    message=error_data.get("error", "Unknown error"),
                    status_code=response.status_code,
                    details=error_data.get("details", []),
                ),
            )

        # Handle empty responses (204 No Content)
        if response.status_code == 204:
            return APIResponse(success=True, status_code=204, data=None)

        return APIResponse(
            success=True,
            status_code=response.status_code,
            data=response.json(),
        )

    # =========================================================================
    # Product Endpoints
    # =========================================================================

    async def list_products(
        self,
        filters: dict[str, Any] | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> APIResponse:
        """List products.

        Args:
            filters: Wire-named filters (category, minPrice, maxPrice,
                inStock, search).
            page: Page number.
            limit: Items per page.

        Returns:
            APIResponse with ``products`` and ``pagination``.
        """
        return await self._request(
            method="GET",
            path="/api/products",
            params={**(filters or {}), "page": page, "limit": limit},
        )

    async def search_products(self, term: str) -> APIResponse:
        return await self.list_products({"search": term})

    async def get_product(self, product_id: str) -> APIResponse:
        """Get a product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            APIResponse with product data.
        """
        return await self._request(method="GET", path=f"/api/products/{product_id}")

    async def create_product(self, product: dict[str, Any]) -> APIResponse:
        """Create a product.

        Args:
            product: Wire-named product fields.

        Returns:
            APIResponse with the created product.
        """
        return await self._request(method="POST", path="/api/products", json=product)

    async def update_product(
        self,
        product_id: str,
        updates: dict[str, Any],
    ) -> APIResponse:
        """Partially update a product.

        Args:
            product_id: Product identifier.
            updates: Wire-named fields to change.

        Returns:
            APIResponse with the updated product.
        """
        return await self._request(
            method="PUT",
            path=f"/api/products/{product_id}",
            json=updates,
        )

    async def delete_product(self, product_id: str) -> APIResponse:
        """Delete a product.

        Args:
            product_id: Product identifier.

        Returns:
            APIResponse with no data on success.
        """
        return await self._request(method="DELETE", path=f"/api/products/{product_id}")

    # =========================================================================
    # Catalog Endpoints
    # =========================================================================

    async def get_categories(self) -> APIResponse:
        """Get the distinct categories of the catalog."""
        return await self._request(method="GET", path="/api/categories")

    async def health(self) -> APIResponse:
        """Check service health."""
        return await self._request(method="GET", path="/api/health")
