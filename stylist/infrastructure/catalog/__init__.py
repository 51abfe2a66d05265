# Catalog Package
"""
Catalog repository implementations.

Provides:
- JsonCatalogRepository: Read-only catalog loaded from a JSON file
- BUNDLED_CATALOG_PATH: The demo catalog shipped with the package
"""

from stylist.infrastructure.catalog.json_catalog import (
    BUNDLED_CATALOG_PATH,
    JsonCatalogRepository,
)

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "JsonCatalogRepository",
]
