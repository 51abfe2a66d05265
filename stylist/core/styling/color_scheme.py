"""
Color compatibility rule for outfit suggestions.

Named colors only: a pair matches unless it is one of a few known
clashing pairs. Neutrals match everything.

Example:
    >>> from stylist.core.styling.color_scheme import matches_color_scheme
    >>> matches_color_scheme("red", "black")
    True
    >>> matches_color_scheme("red", "green")
    False
"""

from __future__ import annotations

NEUTRAL_COLORS = frozenset({"black", "white", "gray", "navy", "beige"})

CLASHING_PAIRS = (
    frozenset({"red", "green"}),
    frozenset({"blue", "orange"}),
    frozenset({"yellow", "purple"}),
)


def is_neutral(color: str) -> bool:
    """Return True for colors that pair with anything."""
    return color in NEUTRAL_COLORS


def matches_color_scheme(color_a: str, color_b: str) -> bool:
    """
    Check whether two named colors can be worn together.

    Rules, in order:
    - either color is neutral: match
    - same color: match
    - the unordered pair is a clashing pair: no match
    - anything else: match

    Args:
        color_a: Candidate color.
        color_b: Reference (dominant) color.

    Returns:
        True if the colors are compatible.
    """
    if is_neutral(color_a) or is_neutral(color_b):
        return True

    if color_a == color_b:
        return True

    return frozenset({color_a, color_b}) not in CLASHING_PAIRS
