# Use Cases Package
"""
Application use cases (business logic).

Use cases orchestrate the flow of data between the catalog, the cart
store, the external suggestion source and the local heuristic.
"""

from stylist.core.use_cases.recommend_outfit import (
    ExternalAttempt,
    ExternalOutcome,
    OutfitRecommender,
    recommend,
)

from stylist.core.use_cases.get_suggestion import (
    AddSuggestionToCartUseCase,
    CartUpdateResult,
    GetSuggestionUseCase,
    SuggestionResult,
)

__all__ = [
    # Recommendation pipeline
    "ExternalAttempt",
    "ExternalOutcome",
    "OutfitRecommender",
    "recommend",
    # Stylist panel
    "AddSuggestionToCartUseCase",
    "CartUpdateResult",
    "GetSuggestionUseCase",
    "SuggestionResult",
]
