# Get Suggestion Use Case
"""
Use cases behind the stylist panel.

Reads the current product, a cart snapshot and the catalog from their
stores, asks the recommender, and turns errors into results the
storefront can render.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from stylist.domain.entities.product import CartItem, Product
from stylist.domain.entities.suggestion import Suggestion
from stylist.domain.interfaces.cart_store_interface import CartStoreInterface
from stylist.domain.interfaces.catalog_interface import CatalogInterface
from stylist.utils.exceptions import CatalogError, EmptyCatalogError
from stylist.utils.logger import get_logger

from .recommend_outfit import ExternalOutcome, OutfitRecommender

logger = get_logger(__name__)


@dataclass
class SuggestionResult:
    """Result of a suggestion request."""
    suggestion: Optional[Suggestion]
    current_product: Optional[Product] = None
    cart_size: int = 0
    external_outcome: Optional[ExternalOutcome] = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.suggestion is not None


@dataclass
class CartUpdateResult:
    """Result of adding a suggested product to the cart."""
    success: bool
    cart: List[CartItem] = field(default_factory=list)
    message: str = ""


class GetSuggestionUseCase:
    """
    Use case for getting the stylist's suggestion.

    This use case:
    1. Resolves the current product (explicit id or the catalog default)
    2. Takes a snapshot of the cart
    3. Runs the two-tier recommender on those inputs
    """

    def __init__(
        self,
        catalog: CatalogInterface,
        cart_store: CartStoreInterface,
        recommender: OutfitRecommender,
    ):
        """
        Initialize the use case.

        Args:
            catalog: Product catalog.
            cart_store: Cart store; only read here.
            recommender: Two-tier recommender.
        """
        self.catalog = catalog
        self.cart_store = cart_store
        self.recommender = recommender

    async def execute(self, product_id: Optional[str] = None) -> SuggestionResult:
        """
        Suggest one product completing the outfit.

        Args:
            product_id: Product being viewed. Defaults to the catalog's
                current product.

        Returns:
            SuggestionResult; ``suggestion`` is None when nothing can be
            suggested.
        """
        products = self.catalog.get_all()
        if not products:
            logger.warning("Catalog is empty, no suggestion available")
            return SuggestionResult(suggestion=None, message=EmptyCatalogError().message)

        try:
            if product_id is None:
                current = self.catalog.current_product()
            else:
                current = self.catalog.get(product_id)
        except CatalogError as e:
            logger.error(f"Cannot resolve current product: {e}")
            return SuggestionResult(suggestion=None, message=e.message)

        cart_items = self.cart_store.get_all()
        logger.info(
            f"Suggesting for {current.id} with {len(cart_items)} cart items "
            f"and {len(products)} catalog products"
        )

        try:
            suggestion, attempt = await self.recommender.recommend_with_attempt(
                current, cart_items, products
            )
        except EmptyCatalogError as e:
            return SuggestionResult(suggestion=None, current_product=current, message=e.message)

        return SuggestionResult(
            suggestion=suggestion,
            current_product=current,
            cart_size=len(cart_items),
            external_outcome=attempt.outcome,
            message=f"Suggested {suggestion.product.name}.",
        )


class AddSuggestionToCartUseCase:
    """Use case for adding a suggested product to the cart."""

    def __init__(self, catalog: CatalogInterface, cart_store: CartStoreInterface):
        """
        Initialize the use case.

        Args:
            catalog: Product catalog, used to re-resolve the suggested id.
            cart_store: Cart store receiving the product.
        """
        self.catalog = catalog
        self.cart_store = cart_store

    def execute(self, suggestion: Suggestion) -> CartUpdateResult:
        """
        Add the suggested product to the cart.

        Returns:
            CartUpdateResult with the cart snapshot after the change.
        """
        try:
            product = self.catalog.get(suggestion.suggested_product_id)
        except CatalogError as e:
            logger.error(f"Failed to add suggestion to cart: {e}")
            return CartUpdateResult(
                success=False,
                cart=self.cart_store.get_all(),
                message=e.message,
            )

        cart = self.cart_store.add(product)
        logger.info(f"Added {product.id} to cart ({len(cart)} lines)")
        return CartUpdateResult(
            success=True,
            cart=cart,
            message=f"{product.name} added to cart.",
        )
