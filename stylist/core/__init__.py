"""Core outfit recommendation logic for the Virtual Stylist."""

from .styling import matches_color_scheme, derive_style_tags, recommend_locally
from .use_cases import ExternalOutcome, OutfitRecommender, recommend

__all__ = [
    "matches_color_scheme",
    "derive_style_tags",
    "recommend_locally",
    "ExternalOutcome",
    "OutfitRecommender",
    "recommend",
]
