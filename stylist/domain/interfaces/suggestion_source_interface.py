"""
Abstract interface for external suggestion sources (e.g. a chat model).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from stylist.domain.entities.product import CartItem, Product
from stylist.domain.entities.suggestion import ExternalSuggestion


@dataclass(frozen=True)
class SuggestionRequest:
    """Snapshot handed to an external suggestion source."""

    current_product: Product
    cart_items: Sequence[CartItem]
    catalog: Sequence[Product]

    def to_payload(self) -> Dict[str, Any]:
        """Request body; the catalog is reduced to id, name, category, color, fit."""
        return {
            "currentProduct": self.current_product.model_dump(mode='json'),
            "cartItems": [item.model_dump(mode='json') for item in self.cart_items],
            "catalog": self.catalog_projection(),
        }

    def catalog_projection(self) -> List[Dict[str, str]]:
        return [product.to_prompt_dict() for product in self.catalog]


class SuggestionSourceInterface(ABC):
    """
    Abstract base class for advisory suggestion sources.

    A source gets exactly one attempt per recommendation. Implementations
    raise :class:`~stylist.utils.exceptions.SuggestionSourceError`
    subclasses on any failure; they never validate the id against the
    catalog, the recommender does.
    """

    @abstractmethod
    async def suggest(self, request: SuggestionRequest) -> ExternalSuggestion:
        """
        Propose one product for the outfit.

        Args:
            request: Current product, cart snapshot and catalog.

        Returns:
            The parsed suggestion.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the source name used in logs."""
        pass
