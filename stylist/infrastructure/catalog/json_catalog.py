"""
JSON file catalog repository.

Loads the product catalog once from a JSON array of product records
(``id, name, image, category, color, fit, price``) and serves it
read-only in file order.

Example:
    >>> from stylist.infrastructure.catalog import JsonCatalogRepository
    >>> catalog = JsonCatalogRepository()  # bundled demo catalog
    >>> catalog.get("sku004").name
    'Navy Chinos'
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from stylist.domain.entities.product import Product
from stylist.domain.interfaces.catalog_interface import CatalogInterface
from stylist.utils.config import CatalogConfig
from stylist.utils.exceptions import CatalogError, CatalogLoadError, EmptyCatalogError, ProductNotFoundError
from stylist.utils.logger import get_logger

logger = get_logger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).parent.parent.parent / "data" / "catalog.json"


def _read_records(path: Path) -> List[Dict[str, Any]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Catalog file not found: {path}")
        raise CatalogLoadError(f"Catalog file not found: {path}", path=str(path)) from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}")
        raise CatalogLoadError(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    if not isinstance(data, list):
        raise CatalogLoadError("Catalog file must contain a JSON array", path=str(path))
    return data


def _check_unique_ids(products: Sequence[Product]) -> None:
    seen = set()
    for product in products:
        if product.id in seen:
            raise CatalogError(
                f"Duplicate product id in catalog: {product.id}",
                code="CATALOG_DUPLICATE_ID",
                context={"product_id": product.id},
            )
        seen.add(product.id)


class JsonCatalogRepository(CatalogInterface):
    """
    Read-only catalog backed by a JSON file or an in-memory product list.
    """

    def __init__(
        self,
        path: Optional[Path | str] = None,
        current_product_id: Optional[str] = None,
        products: Optional[Sequence[Product]] = None,
    ):
        """
        Initialize the repository.

        Args:
            path: Catalog JSON file. Defaults to the bundled demo catalog.
            current_product_id: Product shown on the product page.
            products: Use these products instead of reading a file.

        Raises:
            CatalogLoadError: If the file cannot be read or a record is invalid.
            CatalogError: If two products share an id.
        """
        if products is not None:
            self._products = list(products)
            self.path = None
        else:
            self.path = Path(path) if path is not None else BUNDLED_CATALOG_PATH
            self._products = self._load(self.path)

        _check_unique_ids(self._products)
        self._by_id = {product.id: product for product in self._products}
        self.current_product_id = current_product_id

        logger.info(f"Catalog ready with {len(self._products)} products")

    @classmethod
    def from_config(cls, config: CatalogConfig) -> "JsonCatalogRepository":
        """Create the repository from the catalog section of AppConfig."""
        return cls(path=config.path, current_product_id=config.current_product_id)

    @staticmethod
    def _load(path: Path) -> List[Product]:
        records = _read_records(path)
        products = []
        for index, record in enumerate(records):
            try:
                products.append(Product.model_validate(record))
            except ValidationError as e:
                raise CatalogLoadError(
                    f"Invalid product record at index {index}: {e}",
                    path=str(path),
                    context={"index": index},
                ) from e
        logger.info(f"Loaded {len(products)} products from {path}")
        return products

    def get_all(self) -> List[Product]:
        return list(self._products)

    def find(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def get(self, product_id: str) -> Product:
        product = self._by_id.get(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product not found: {product_id}", product_id=product_id)
        return product

    def current_product(self) -> Product:
        """
        Return the configured current product.

        Falls back to the first catalog product when the configured id is
        unset or unknown.

        Raises:
            EmptyCatalogError: If the catalog is empty.
        """
        if not self._products:
            raise EmptyCatalogError()

        if self.current_product_id:
            product = self._by_id.get(self.current_product_id)
            if product is not None:
                return product
            logger.warning(
                f"Current product {self.current_product_id} not in catalog, using first product"
            )
        return self._products[0]

    def count(self) -> int:
        return len(self._products)
