"""
Abstract interface for product catalogs.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from stylist.domain.entities.product import Product


class CatalogInterface(ABC):
    """
    Abstract base class for catalog repositories.

    Catalog order is significant: the recommender breaks ties by taking
    the first matching product.
    """

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Return all products in catalog order."""
        pass

    @abstractmethod
    def find(self, product_id: str) -> Optional[Product]:
        """
        Look up a product by id.

        Args:
            product_id: The unique identifier of the product.

        Returns:
            The Product if found, None otherwise.
        """
        pass

    @abstractmethod
    def get(self, product_id: str) -> Product:
        """Look up a product by id, raising ProductNotFoundError when absent."""
        pass

    @abstractmethod
    def current_product(self) -> Product:
        """Return the product currently shown on the product page."""
        pass

    def count(self) -> int:
        """Return the number of products in the catalog."""
        return len(self.get_all())
