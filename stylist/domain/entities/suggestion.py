"""
Suggestion entities produced by the recommender and by external sources.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .product import Product


class StyleTag(str, Enum):
    """Aesthetic classification of an assembled outfit."""

    FORMAL = "formal"
    CASUAL = "casual"
    STREETWEAR = "streetwear"


class SuggestionSource(str, Enum):
    """Which tier produced a suggestion."""

    EXTERNAL = "external"
    HEURISTIC = "heuristic"


def _lower_tags(v: Any) -> Any:
    if isinstance(v, list):
        return [t.strip().lower() if isinstance(t, str) else t for t in v]
    return v


class ExternalSuggestion(BaseModel):
    """Payload expected back from an external suggestion source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    suggested_product_id: str = Field(..., alias="suggestedProductId", min_length=1)
    reason: str = Field(...)
    style_tags: list[StyleTag] = Field(..., alias="styleTags", min_length=1)

    @field_validator('style_tags', mode='before')
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        return _lower_tags(v)


class Suggestion(BaseModel):
    """One suggested catalog product with its rationale.

    Serialises with the camelCase keys consumed by the storefront
    (``suggestedProductId``, ``product``, ``reason``, ``styleTags``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    suggested_product_id: str = Field(..., alias="suggestedProductId")
    product: Product
    reason: str
    style_tags: list[StyleTag] = Field(..., alias="styleTags", min_length=1)
    source: SuggestionSource = Field(default=SuggestionSource.HEURISTIC)

    @field_validator('style_tags', mode='before')
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        return _lower_tags(v)

    @model_validator(mode='after')
    def check_product_matches_id(self) -> 'Suggestion':
        if self.product.id != self.suggested_product_id:
            raise ValueError(
                f"suggestedProductId {self.suggested_product_id!r} does not match "
                f"product id {self.product.id!r}"
            )
        return self

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with storefront field names."""
        return self.model_dump(mode='json', by_alias=True)
