"""Product service: the catalog's data store."""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

import pydantic
from sqlmodel import select

from farmstand.core.database import get_session
from farmstand.core.errors import (
    NotFoundError,
    ValidationError,
    describe_validation_errors,
)
from farmstand.models import Product, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


def _clean(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop blank form values so they count as missing."""
    return {
        key: value
        for key, value in data.items()
        if not (isinstance(value, str) and not value.strip())
    }


def _validate(model: type[pydantic.BaseModel], data: Mapping[str, Any]):
    try:
        return model.model_validate(_clean(data))
    except pydantic.ValidationError as e:
        raise ValidationError(
            "Product validation failed: " + describe_validation_errors(e)
        ) from e


class ProductService:
    """Service for product persistence."""

    @staticmethod
    def find(category: str | None = None) -> list[Product]:
        """List products, optionally limited to one category."""
        with get_session() as session:
            statement = select(Product).order_by(Product.created_at)
            if category:
                statement = statement.where(Product.category == category)
            return list(session.execute(statement).scalars().all())

    @staticmethod
    def find_by_id(product_id: UUID) -> Product:
        """Get product by ID."""
        with get_session() as session:
            product = session.get(Product, product_id)

            if product is None:
                raise NotFoundError(f"Product with id {product_id} not found")

            return product

    @staticmethod
    def save(data: Mapping[str, Any]) -> Product:
        """Validate and insert a new product."""
        fields = _validate(ProductCreate, data)

        with get_session() as session:
            product = Product.model_validate(fields)
            session.add(product)
            session.commit()
            session.refresh(product)

            logger.info(f"Created product {product.id} ({product.name})")
            return product

    @staticmethod
    def find_by_id_and_update(product_id: UUID, patch: Mapping[str, Any]) -> Product:
        """Validate ``patch`` and apply it, returning the updated product."""
        changes = _validate(ProductUpdate, patch).model_dump(
            exclude_unset=True, exclude_none=True
        )

        with get_session() as session:
            product = session.get(Product, product_id)

            if product is None:
                raise NotFoundError(f"Product with id {product_id} not found")

            for key, value in changes.items():
                setattr(product, key, value)

            session.add(product)
            session.commit()
            session.refresh(product)
            return product

    @staticmethod
    def find_by_id_and_delete(product_id: UUID) -> Product:
        """Delete a product and return it."""
        with get_session() as session:
            product = session.get(Product, product_id)

            if product is None:
                raise NotFoundError(f"Product with id {product_id} not found")

            session.delete(product)
            logger.info(f"Deleted product {product_id}")
            return product
