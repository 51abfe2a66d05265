"""Unit tests for the JSON catalog repository."""

import json

import pytest

from stylist.infrastructure.catalog import JsonCatalogRepository
from stylist.utils.config import CatalogConfig
from stylist.utils.exceptions import (
    CatalogError,
    CatalogLoadError,
    EmptyCatalogError,
    ProductNotFoundError,
)


def _write_catalog(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestBundledCatalog:
    """Test the demo catalog shipped with the package."""

    def test_loads_in_file_order(self, demo_catalog):
        ids = [product.id for product in demo_catalog.get_all()]
        assert ids[0] == "sku001"
        assert ids[-1] == "sku789"
        assert demo_catalog.count() == 7

    def test_get_and_find(self, demo_catalog):
        assert demo_catalog.get("sku004").name == "Navy Chinos"
        assert demo_catalog.find("sku404") is None

    def test_get_unknown_raises(self, demo_catalog):
        with pytest.raises(ProductNotFoundError) as exc_info:
            demo_catalog.get("sku404")
        assert exc_info.value.context["product_id"] == "sku404"

    def test_get_all_returns_copy(self, demo_catalog):
        demo_catalog.get_all().clear()
        assert demo_catalog.count() == 7


class TestCurrentProduct:
    """Test product page resolution."""

    def test_configured_product(self):
        catalog = JsonCatalogRepository.from_config(CatalogConfig(current_product_id="sku003"))
        assert catalog.current_product().id == "sku003"

    def test_unknown_id_falls_back_to_first(self):
        catalog = JsonCatalogRepository(current_product_id="sku404")
        assert catalog.current_product().id == "sku001"

    def test_empty_catalog(self):
        catalog = JsonCatalogRepository(products=[])
        with pytest.raises(EmptyCatalogError):
            catalog.current_product()


class TestCatalogFile:
    """Test loading custom catalog files."""

    def test_custom_file(self, tmp_path):
        path = _write_catalog(tmp_path / "catalog.json", [
            {"id": "a1", "name": "Olive Shorts", "category": "Shorts", "color": "Olive", "fit": "regular", "price": 25},
        ])

        catalog = JsonCatalogRepository(path=path)

        product = catalog.get("a1")
        assert product.category == "shorts"
        assert product.color == "olive"
        assert product.is_bottom

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            JsonCatalogRepository(path=tmp_path / "missing.json")
        assert exc_info.value.code == "CATALOG_LOAD"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            JsonCatalogRepository(path=path)

    def test_root_must_be_array(self, tmp_path):
        path = _write_catalog(tmp_path / "catalog.json", {"id": "a1"})
        with pytest.raises(CatalogLoadError, match="array"):
            JsonCatalogRepository(path=path)

    def test_invalid_record(self, tmp_path):
        path = _write_catalog(tmp_path / "catalog.json", [
            {"id": "a1", "name": "Tee", "category": "tshirt"},
            {"id": "a2", "category": "pants"},
        ])
        with pytest.raises(CatalogLoadError) as exc_info:
            JsonCatalogRepository(path=path)
        assert exc_info.value.context["index"] == 1

    def test_duplicate_ids(self, make_product):
        with pytest.raises(CatalogError) as exc_info:
            JsonCatalogRepository(products=[make_product("a1", "tshirt"), make_product("a1", "pants")])
        assert exc_info.value.code == "CATALOG_DUPLICATE_ID"
