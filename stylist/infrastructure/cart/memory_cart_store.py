"""
In-memory cart store.

Holds cart lines in insertion order behind a lock, so several request
handlers can share one store. Every read returns a snapshot that later
writes cannot change.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from stylist.domain.entities.product import CartItem, Product
from stylist.domain.interfaces.cart_store_interface import CartStoreInterface
from stylist.domain.interfaces.catalog_interface import CatalogInterface
from stylist.utils.exceptions import InvalidQuantityError
from stylist.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryCartStore(CartStoreInterface):
    """Thread-safe cart kept in process memory."""

    def __init__(self, items: Optional[Iterable[CartItem]] = None):
        """
        Initialize the store.

        Args:
            items: Initial cart lines.
        """
        self._lock = threading.Lock()
        self._items: List[CartItem] = []
        for item in items or []:
            if item.quantity < 1:
                raise InvalidQuantityError(quantity=item.quantity)
            self._items.append(item)

    @classmethod
    def seeded(cls, catalog: CatalogInterface, product_ids: Iterable[str]) -> "InMemoryCartStore":
        """
        Create a store with one unit of each listed product.

        Raises:
            ProductNotFoundError: If an id is not in the catalog.
        """
        store = cls()
        for product_id in product_ids:
            store.add(catalog.get(product_id))
        return store

    def get_all(self) -> List[CartItem]:
        with self._lock:
            return list(self._items)

    def add(self, product: Product) -> List[CartItem]:
        """Append one unit, or bump the quantity of an existing line."""
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == product.id:
                    self._items[index] = item.model_copy(update={"quantity": item.quantity + 1})
                    logger.debug(f"Cart: {product.id} quantity -> {item.quantity + 1}")
                    break
            else:
                self._items.append(CartItem.from_product(product))
                logger.debug(f"Cart: added {product.id}")
            return list(self._items)

    def remove(self, product_id: str) -> bool:
        with self._lock:
            remaining = [item for item in self._items if item.id != product_id]
            removed = len(remaining) != len(self._items)
            self._items = remaining
        if removed:
            logger.debug(f"Cart: removed {product_id}")
        return removed

    def clear(self) -> None:
        with self._lock:
            self._items = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
