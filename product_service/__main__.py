"""Run the product service with uvicorn.

Usage:
    python -m product_service
"""

import uvicorn

from product_service.infrastructure.config import settings


def main() -> None:
    """Main entry point."""
    uvicorn.run(
        "product_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
