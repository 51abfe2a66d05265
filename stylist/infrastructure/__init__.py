"""Infrastructure implementations: catalog, cart store and chat source."""
