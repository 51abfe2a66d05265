# Domain Interfaces Package
"""
Abstract base classes defining contracts for infrastructure implementations.
"""

from .cart_store_interface import CartStoreInterface
from .catalog_interface import CatalogInterface
from .suggestion_source_interface import SuggestionRequest, SuggestionSourceInterface

__all__ = [
    "CartStoreInterface",
    "CatalogInterface",
    "SuggestionRequest",
    "SuggestionSourceInterface",
]
