"""Static card data."""

from .catalog import Card, Category, DEFAULT_CATALOG, load_catalog

__all__ = ["Card", "Category", "DEFAULT_CATALOG", "load_catalog"]
