"""
Product and cart entities shared by the catalog, cart and recommender.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Garment categories the recommender knows about."""

    TSHIRT = "tshirt"
    SHIRT = "shirt"
    HOODIE = "hoodie"
    PANTS = "pants"
    JEANS = "jeans"
    CHINOS = "chinos"
    SHORTS = "shorts"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Map a raw category string onto the vocabulary, OTHER when unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class GarmentSlot(str, Enum):
    """Which part of an outfit a garment fills."""

    TOP = "top"
    BOTTOM = "bottom"
    NONE = "none"


TOP_CATEGORIES = frozenset({Category.TSHIRT, Category.SHIRT, Category.HOODIE})
BOTTOM_CATEGORIES = frozenset({Category.PANTS, Category.JEANS, Category.CHINOS, Category.SHORTS})


class Product(BaseModel):
    """A catalog entry.

    ``category``, ``color`` and ``fit`` are stored lower-cased. Categories
    outside :class:`Category` are kept verbatim and classify as
    :attr:`GarmentSlot.NONE`.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable product identifier")
    name: str = Field(..., min_length=1, description="Display name")
    image: str = Field(default="", description="Reference image URI")
    category: str = Field(..., description="Garment category")
    color: str = Field(default="", description="Free-form color name")
    fit: str = Field(default="", description="Free-form fit name")
    price: float = Field(default=0.0, ge=0.0, description="Display price")

    @field_validator('category', 'color', 'fit', mode='before')
    @classmethod
    def normalize_attribute(cls, v: Any) -> Any:
        """Strip and lower-case descriptive attributes."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def kind(self) -> Category:
        """Category as an enum member (OTHER for unknown categories)."""
        return Category.parse(self.category)

    @property
    def slot(self) -> GarmentSlot:
        """Outfit slot filled by this product."""
        kind = self.kind
        if kind in TOP_CATEGORIES:
            return GarmentSlot.TOP
        if kind in BOTTOM_CATEGORIES:
            return GarmentSlot.BOTTOM
        return GarmentSlot.NONE

    @property
    def is_top(self) -> bool:
        return self.slot is GarmentSlot.TOP

    @property
    def is_bottom(self) -> bool:
        return self.slot is GarmentSlot.BOTTOM

    def to_prompt_dict(self) -> Dict[str, str]:
        """Reduced projection sent to the external suggestion source."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "fit": self.fit,
        }


class CartItem(Product):
    """A product placed in the cart."""

    quantity: int = Field(default=1, ge=1, description="Number of units")

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartItem":
        """Create a cart line from a catalog product."""
        data = product.model_dump()
        data.pop("quantity", None)
        return cls(**data, quantity=quantity)

    def to_product(self) -> Product:
        """Drop the quantity and return the plain catalog product."""
        return Product(**self.model_dump(exclude={"quantity"}))
