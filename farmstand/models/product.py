"""Product model for the farm stand catalog."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import field_validator
from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, SQLModel

CATEGORIES = ["fruit", "vegetable", "dairy"]


def _check_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("name cannot be blank")
    return value


def _check_category(value: str) -> str:
    value = value.strip().lower()
    if value not in CATEGORIES:
        raise ValueError(f"`{value}` is not one of {', '.join(CATEGORIES)}")
    return value


class Product(SQLModel, table=True):
    """Product offered at the farm stand."""

    __tablename__ = "products"

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier for the product",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True)),
        description="Timestamp when the product was created",
    )

    name: str = Field(description="Product name")
    price: float = Field(description="Unit price, never negative")
    category: str = Field(
        sa_column=Column(String, index=True),
        description="One of: fruit, vegetable, dairy",
    )


class ProductCreate(SQLModel):
    """Validated input for a new product."""

    name: str
    price: float = Field(ge=0)
    category: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _check_name(value)

    @field_validator("category")
    @classmethod
    def category_known(cls, value: str) -> str:
        return _check_category(value)


class ProductUpdate(SQLModel):
    """Validated partial update; only the given fields are checked."""

    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    category: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return None if value is None else _check_name(value)

    @field_validator("category")
    @classmethod
    def category_known(cls, value: str | None) -> str | None:
        return None if value is None else _check_category(value)
