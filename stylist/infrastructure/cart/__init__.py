# Cart Package
"""Cart store implementations."""

from stylist.infrastructure.cart.memory_cart_store import InMemoryCartStore

__all__ = ["InMemoryCartStore"]
