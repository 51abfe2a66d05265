"""
Abstract interface for cart storage.
"""

from abc import ABC, abstractmethod
from typing import List

from stylist.domain.entities.product import CartItem, Product


class CartStoreInterface(ABC):
    """
    Abstract base class for cart stores.

    The recommender never touches a store; its callers read a snapshot
    with :meth:`get_all` and pass it in.
    """

    @abstractmethod
    def get_all(self) -> List[CartItem]:
        """Return a snapshot of the cart lines, in insertion order."""
        pass

    @abstractmethod
    def add(self, product: Product) -> List[CartItem]:
        """
        Add one unit of a product.

        Args:
            product: Catalog product to add.

        Returns:
            The cart snapshot after the change.
        """
        pass

    @abstractmethod
    def remove(self, product_id: str) -> bool:
        """
        Remove the cart line for a product.

        Args:
            product_id: Id of the product to drop.

        Returns:
            True if a line was removed, False if the product was not in the cart.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Empty the cart."""
        pass
