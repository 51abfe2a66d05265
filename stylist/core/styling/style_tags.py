"""Style tag derivation for an assembled outfit."""

from __future__ import annotations

from typing import Iterable, List

from stylist.domain.entities.product import Category, Product
from stylist.domain.entities.suggestion import StyleTag

CASUAL_CATEGORIES = frozenset({Category.TSHIRT, Category.HOODIE})


def derive_style_tags(items: Iterable[Product]) -> List[StyleTag]:
    """
    Classify an outfit as formal / casual / streetwear.

    Tags come out in that fixed order, only those that apply. An outfit
    matching none of the rules is tagged casual, so the result is never
    empty.

    Args:
        items: Every garment of the outfit, suggestion included.

    Returns:
        Ordered list of style tags.
    """
    items = list(items)

    has_formal = any(
        item.kind is Category.SHIRT and item.fit == "regular" for item in items
    )
    has_casual = any(item.kind in CASUAL_CATEGORIES for item in items)
    has_streetwear = any(item.fit == "oversized" for item in items)

    tags: List[StyleTag] = []
    if has_formal:
        tags.append(StyleTag.FORMAL)
    if has_casual:
        tags.append(StyleTag.CASUAL)
    if has_streetwear:
        tags.append(StyleTag.STREETWEAR)

    if not tags:
        tags.append(StyleTag.CASUAL)

    return tags
