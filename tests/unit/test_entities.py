"""Unit tests for domain entities."""

import pytest
from pydantic import ValidationError

from stylist.domain.entities import (
    CartItem,
    Category,
    ExternalSuggestion,
    GarmentSlot,
    Product,
    StyleTag,
    Suggestion,
    SuggestionSource,
)


class TestProduct:
    """Test Product entity."""

    def test_attributes_normalized(self):
        product = Product(id="p1", name="Jeans", category=" Pants ", color="BLUE", fit="Slim")

        assert product.category == "pants"
        assert product.color == "blue"
        assert product.fit == "slim"

    def test_slots(self, make_product):
        assert make_product("a", "tshirt").slot is GarmentSlot.TOP
        assert make_product("b", "hoodie").is_top
        assert make_product("c", "chinos").is_bottom
        assert make_product("d", "shorts").slot is GarmentSlot.BOTTOM

    def test_unknown_category_is_other(self, make_product):
        product = make_product("s1", "sneakers")

        assert product.category == "sneakers"
        assert product.kind is Category.OTHER
        assert product.slot is GarmentSlot.NONE
        assert not product.is_top and not product.is_bottom

    def test_frozen(self, make_product):
        product = make_product("p1", "pants")
        with pytest.raises(ValidationError):
            product.color = "red"

    @pytest.mark.parametrize("field,value", [("id", ""), ("name", ""), ("price", -1.0)])
    def test_invalid_values(self, field, value):
        data = {"id": "p1", "name": "Jeans", "category": "pants", "price": 10.0}
        data[field] = value
        with pytest.raises(ValidationError):
            Product(**data)

    def test_prompt_projection_drops_price_and_image(self, make_product):
        projection = make_product("p1", "pants", color="blue", fit="slim").to_prompt_dict()

        assert set(projection) == {"id", "name", "category", "color", "fit"}
        assert projection["color"] == "blue"


class TestCartItem:
    """Test CartItem entity."""

    def test_from_product(self, make_product):
        product = make_product("p1", "pants")
        item = CartItem.from_product(product, quantity=2)

        assert item.id == "p1"
        assert item.quantity == 2
        assert item.is_bottom

    def test_to_product_round_trip(self, make_product):
        product = make_product("p1", "pants")
        assert CartItem.from_product(product).to_product() == product

    def test_quantity_must_be_positive(self, make_product):
        with pytest.raises(ValidationError):
            CartItem.from_product(make_product("p1", "pants"), quantity=0)


class TestExternalSuggestion:
    """Test the external source payload."""

    def test_parses_camel_case(self):
        external = ExternalSuggestion.model_validate({
            "suggestedProductId": "sku002",
            "reason": "White goes with everything",
            "styleTags": ["Casual", "streetwear"],
        })

        assert external.suggested_product_id == "sku002"
        assert external.style_tags == [StyleTag.CASUAL, StyleTag.STREETWEAR]

    def test_unknown_tag_rejected(self):
        with pytest.raises(ValidationError):
            ExternalSuggestion.model_validate({
                "suggestedProductId": "sku002",
                "reason": "",
                "styleTags": ["sporty"],
            })

    def test_empty_tags_rejected(self):
        with pytest.raises(ValidationError):
            ExternalSuggestion(suggested_product_id="sku002", reason="", style_tags=[])

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError):
            ExternalSuggestion.model_validate({"reason": "x", "styleTags": ["casual"]})


class TestSuggestion:
    """Test Suggestion entity."""

    def test_payload_uses_storefront_keys(self, make_product):
        product = make_product("t1", "tshirt", color="white")
        suggestion = Suggestion(
            suggested_product_id="t1",
            product=product,
            reason="Neutral top",
            style_tags=[StyleTag.CASUAL],
        )

        payload = suggestion.to_payload()

        assert payload["suggestedProductId"] == "t1"
        assert payload["product"]["id"] == "t1"
        assert payload["styleTags"] == ["casual"]
        assert payload["source"] == "heuristic"

    def test_id_must_match_product(self, make_product):
        with pytest.raises(ValidationError):
            Suggestion(
                suggested_product_id="other",
                product=make_product("t1", "tshirt"),
                reason="",
                style_tags=[StyleTag.CASUAL],
            )

    def test_source_recorded(self, make_product):
        suggestion = Suggestion(
            suggested_product_id="t1",
            product=make_product("t1", "tshirt"),
            reason="",
            style_tags=["formal"],
            source=SuggestionSource.EXTERNAL,
        )
        assert suggestion.source is SuggestionSource.EXTERNAL
        assert suggestion.style_tags == [StyleTag.FORMAL]
