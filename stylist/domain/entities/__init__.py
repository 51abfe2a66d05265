# Domain Entities Package
"""
Core business entities as pydantic models.
"""

from .product import (
    BOTTOM_CATEGORIES,
    TOP_CATEGORIES,
    CartItem,
    Category,
    GarmentSlot,
    Product,
)
from .suggestion import ExternalSuggestion, StyleTag, Suggestion, SuggestionSource

__all__ = [
    "BOTTOM_CATEGORIES",
    "TOP_CATEGORIES",
    "CartItem",
    "Category",
    "GarmentSlot",
    "Product",
    "ExternalSuggestion",
    "StyleTag",
    "Suggestion",
    "SuggestionSource",
]
