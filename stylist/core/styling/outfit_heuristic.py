"""
Rule-based outfit completion.

Given the product being viewed, the cart and the catalog, pick one
garment that fills the missing top or bottom slot:

1. Analyse the outfit (current product first, then cart lines).
2. Strict search: complementary slot, new category, not already owned,
   color compatible with the dominant color, fit equal to the dominant
   fit or "regular".
3. Relaxed search: complementary slot, not already owned.
4. Last resort: the first catalog product.

The dominant color and fit are those of the first outfit item, not the
most frequent ones.

Example:
    >>> from stylist.core.styling import recommend_locally
    >>> suggestion = recommend_locally(current, cart_items, catalog)
    >>> suggestion.suggested_product_id
    'sku002'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence

from stylist.domain.entities.product import CartItem, GarmentSlot, Product
from stylist.domain.entities.suggestion import Suggestion, SuggestionSource
from stylist.utils.exceptions import EmptyCatalogError
from stylist.utils.logger import get_logger

from .color_scheme import matches_color_scheme
from .style_tags import derive_style_tags

logger = get_logger(__name__)

DEFAULT_DOMINANT_COLOR = "neutral"
DEFAULT_DOMINANT_FIT = "regular"


@dataclass(frozen=True)
class OutfitAnalysis:
    """What the current outfit already covers."""

    items: tuple
    categories_present: FrozenSet[str]
    has_top: bool
    has_bottom: bool
    dominant_color: str
    dominant_fit: str

    @property
    def missing_slot(self) -> Optional[GarmentSlot]:
        """First unfilled slot (top before bottom), None when both are filled."""
        if not self.has_top:
            return GarmentSlot.TOP
        if not self.has_bottom:
            return GarmentSlot.BOTTOM
        return None


def analyze_outfit(current_product: Product, cart_items: Sequence[CartItem]) -> OutfitAnalysis:
    """
    Build the outfit set and derive the slots and reference attributes.

    Args:
        current_product: Product being viewed (takes priority).
        cart_items: Cart snapshot.

    Returns:
        OutfitAnalysis for the outfit.
    """
    items = (current_product, *cart_items)
    first = items[0]

    return OutfitAnalysis(
        items=items,
        categories_present=frozenset(item.category for item in items),
        has_top=any(item.is_top for item in items),
        has_bottom=any(item.is_bottom for item in items),
        dominant_color=first.color or DEFAULT_DOMINANT_COLOR,
        dominant_fit=first.fit or DEFAULT_DOMINANT_FIT,
    )


def _strict_target(current_product: Product, analysis: OutfitAnalysis) -> Optional[GarmentSlot]:
    """Slot for the strict search, which only runs from a top or a bottom."""
    if current_product.is_bottom and not analysis.has_top:
        return GarmentSlot.TOP
    if current_product.is_top and not analysis.has_bottom:
        return GarmentSlot.BOTTOM
    return None


def _first_match(catalog: Sequence[Product], predicate: Callable[[Product], bool]) -> Optional[Product]:
    for product in catalog:
        if predicate(product):
            return product
    return None


def find_strict_match(
    current_product: Product,
    cart_ids: FrozenSet[str],
    catalog: Sequence[Product],
    analysis: OutfitAnalysis,
) -> Optional[Product]:
    """Strict search: slot, new category, color and fit all have to agree."""
    target = _strict_target(current_product, analysis)
    if target is None:
        return None

    def qualifies(candidate: Product) -> bool:
        return (
            candidate.slot is target
            and candidate.category not in analysis.categories_present
            and candidate.id != current_product.id
            and candidate.id not in cart_ids
            and matches_color_scheme(candidate.color, analysis.dominant_color)
            and (candidate.fit == analysis.dominant_fit or candidate.fit == "regular")
        )

    match = _first_match(catalog, qualifies)
    if match is not None:
        logger.debug(f"Strict match for missing {target.value}: {match.id}")
    return match


def find_relaxed_match(
    current_product: Product,
    cart_ids: FrozenSet[str],
    catalog: Sequence[Product],
    analysis: OutfitAnalysis,
) -> Optional[Product]:
    """Relaxed search: any product for the missing slot that is not owned yet."""
    target = analysis.missing_slot
    if target is None:
        return None

    match = _first_match(
        catalog,
        lambda candidate: (
            candidate.slot is target
            and candidate.id != current_product.id
            and candidate.id not in cart_ids
        ),
    )
    if match is not None:
        logger.debug(f"Relaxed match for missing {target.value}: {match.id}")
    return match


def build_reason(product: Product, analysis: OutfitAnalysis) -> str:
    """Explain a suggestion by its color against the dominant color and its fit."""
    return (
        f"This {product.name} complements your outfit. "
        f"The {product.color} color pairs well with {analysis.dominant_color}, "
        f"and the {product.fit} fit matches your style."
    )


def recommend_locally(
    current_product: Product,
    cart_items: Sequence[CartItem],
    catalog: Sequence[Product],
) -> Suggestion:
    """
    Suggest one complementary product using the local rules only.

    Pure function of its inputs: the same inputs always give the same
    suggestion.

    Args:
        current_product: Product being viewed.
        cart_items: Cart snapshot (quantities are ignored).
        catalog: Products in catalog order.

    Returns:
        Suggestion sourced from the heuristic.

    Raises:
        EmptyCatalogError: If the catalog has no products.
    """
    if not catalog:
        raise EmptyCatalogError()

    analysis = analyze_outfit(current_product, cart_items)
    cart_ids = frozenset(item.id for item in cart_items)

    logger.debug(
        f"Outfit analysis: top={analysis.has_top}, bottom={analysis.has_bottom}, "
        f"color={analysis.dominant_color}, fit={analysis.dominant_fit}"
    )

    suggested = find_strict_match(current_product, cart_ids, catalog, analysis)
    if suggested is None:
        suggested = find_relaxed_match(current_product, cart_ids, catalog, analysis)
    if suggested is None:
        suggested = catalog[0]
        logger.debug(f"No complementary product found, using first catalog product {suggested.id}")

    outfit: List[Product] = [*analysis.items, suggested]

    return Suggestion(
        suggested_product_id=suggested.id,
        product=suggested,
        reason=build_reason(suggested, analysis),
        style_tags=derive_style_tags(outfit),
        source=SuggestionSource.HEURISTIC,
    )
