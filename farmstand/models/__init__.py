"""Database models."""

from .product import CATEGORIES, Product, ProductCreate, ProductUpdate

__all__ = ["CATEGORIES", "Product", "ProductCreate", "ProductUpdate"]
