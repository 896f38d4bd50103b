"""Business logic services."""

from .product import ProductService

__all__ = ["ProductService"]
