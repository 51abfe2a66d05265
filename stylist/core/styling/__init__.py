# Styling Package
"""
Rule-based outfit completion.

Provides:
- matches_color_scheme: Named-color compatibility rule
- derive_style_tags: formal / casual / streetwear classification
- analyze_outfit: Slot coverage and dominant attributes of an outfit
- recommend_locally: The full local heuristic

Example:
    >>> from stylist.core.styling import recommend_locally
    >>> suggestion = recommend_locally(current, cart_items, catalog)
"""

from .color_scheme import CLASHING_PAIRS, NEUTRAL_COLORS, is_neutral, matches_color_scheme
from .outfit_heuristic import (
    OutfitAnalysis,
    analyze_outfit,
    build_reason,
    find_relaxed_match,
    find_strict_match,
    recommend_locally,
)
from .style_tags import derive_style_tags

__all__ = [
    # Colors
    "CLASHING_PAIRS",
    "NEUTRAL_COLORS",
    "is_neutral",
    "matches_color_scheme",
    # Tags
    "derive_style_tags",
    # Heuristic
    "OutfitAnalysis",
    "analyze_outfit",
    "build_reason",
    "find_relaxed_match",
    "find_strict_match",
    "recommend_locally",
]
