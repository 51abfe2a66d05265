"""Pytest fixtures and configuration for Virtual Stylist tests."""

import os
import tempfile

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("STYLIST_LOG_DIR", tempfile.mkdtemp(prefix="stylist-logs-"))

from typing import Callable, List

import pytest

from stylist.domain.entities import CartItem, Product
from stylist.infrastructure.catalog import JsonCatalogRepository
from stylist.utils.config import AppConfig, CartConfig, CatalogConfig, LLMConfig, reset_config


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for catalog products with sensible defaults."""

    def _make(
        id: str,
        category: str,
        color: str = "black",
        fit: str = "regular",
        name: str = None,
        price: float = 10.0,
    ) -> Product:
        return Product(
            id=id,
            name=name or f"{color.title()} {category.title()} {id}",
            image=f"https://example.com/{id}.jpg",
            category=category,
            color=color,
            fit=fit,
            price=price,
        )

    return _make


@pytest.fixture
def make_cart_item(make_product) -> Callable[..., CartItem]:
    """Factory for cart lines."""

    def _make(id: str, category: str, color: str = "black", fit: str = "regular", quantity: int = 1) -> CartItem:
        return CartItem.from_product(make_product(id, category, color, fit), quantity=quantity)

    return _make


@pytest.fixture
def demo_catalog() -> JsonCatalogRepository:
    """The bundled seven-product demo catalog."""
    return JsonCatalogRepository()


@pytest.fixture
def demo_products(demo_catalog) -> List[Product]:
    return demo_catalog.get_all()


@pytest.fixture
def test_config() -> AppConfig:
    """Provide test-specific configuration without API keys."""
    return AppConfig(
        llm=LLMConfig(
            base_url="http://127.0.0.1:9/api/ai",
            glm_api_key="",
            kimi_api_key="",
            timeout_seconds=2.0,
        ),
        catalog=CatalogConfig(current_product_id="sku789"),
        cart=CartConfig(seed_product_ids=[]),
        log_level="DEBUG",
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset cached configuration and provider keys between tests."""
    monkeypatch.delenv("GLM_API_KEY", raising=False)
    monkeypatch.delenv("KIMI_API_KEY", raising=False)
    monkeypatch.delenv("STYLIST_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()
