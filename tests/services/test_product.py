"""Tests for ProductService."""

from uuid import uuid4

import pytest

from farmstand.core.errors import NotFoundError, ValidationError
from farmstand.services import ProductService
from tests.conftest import create_test_product


def test_save_product():
    """Test creating a product."""
    product = ProductService.save(
        {"name": "Ruby Grapefruit", "price": "1.99", "category": "Fruit"}
    )

    assert product.id is not None
    assert product.name == "Ruby Grapefruit"
    assert product.price == 1.99
    assert product.category == "fruit"
    assert product.created_at is not None


def test_save_product_missing_price():
    """Test that a missing price is a validation failure."""
    with pytest.raises(ValidationError) as exc_info:
        ProductService.save({"name": "Mini Seedless Watermelon", "category": "fruit"})

    assert exc_info.value.message.startswith("Product validation failed: ")
    assert "price: Field required" in exc_info.value.message


def test_save_product_blank_values_count_as_missing():
    with pytest.raises(ValidationError) as exc_info:
        ProductService.save({"name": "   ", "price": "", "category": "dairy"})

    assert "name" in exc_info.value.message
    assert "price" in exc_info.value.message


def test_save_product_negative_price():
    with pytest.raises(ValidationError) as exc_info:
        ProductService.save({"name": "Celery", "price": -1, "category": "vegetable"})

    assert "price" in exc_info.value.message
    assert "greater than or equal to 0" in exc_info.value.message


def test_save_product_unknown_category():
    with pytest.raises(ValidationError) as exc_info:
        ProductService.save({"name": "Bacon", "price": 5, "category": "meat"})

    assert "category" in exc_info.value.message
    assert "`meat` is not one of fruit, vegetable, dairy" in exc_info.value.message


def test_find_all_products():
    """Test listing products in insertion order."""
    create_test_product(name="Organic Goddess Melon", category="fruit")
    create_test_product(name="Organic Celery", category="vegetable")
    create_test_product(name="Chocolate Whole Milk", category="dairy")

    products = ProductService.find()

    assert [p.name for p in products] == [
        "Organic Goddess Melon",
        "Organic Celery",
        "Chocolate Whole Milk",
    ]


def test_find_products_by_category():
    create_test_product(name="Organic Goddess Melon", category="fruit")
    create_test_product(name="Organic Celery", category="vegetable")

    products = ProductService.find("fruit")

    assert len(products) == 1
    assert products[0].name == "Organic Goddess Melon"


def test_find_by_id():
    """Test getting a product by ID."""
    created = create_test_product()

    product = ProductService.find_by_id(created.id)

    assert product.id == created.id
    assert product.name == created.name


def test_find_by_id_not_found():
    """Test getting a non-existent product."""
    non_existent_id = uuid4()

    with pytest.raises(NotFoundError) as exc_info:
        ProductService.find_by_id(non_existent_id)

    assert exc_info.value.status == 404
    assert f"Product with id {non_existent_id} not found" in str(exc_info.value)


def test_find_by_id_and_update():
    """Test updating a product returns the new values."""
    product = create_test_product(name="Eggplant", price=1.0)

    updated = ProductService.find_by_id_and_update(
        product.id, {"price": "2.5", "category": "Vegetable"}
    )

    assert updated.id == product.id
    assert updated.name == "Eggplant"
    assert updated.price == 2.5
    assert updated.category == "vegetable"
    assert ProductService.find_by_id(product.id).price == 2.5


def test_find_by_id_and_update_runs_validators():
    product = create_test_product()

    with pytest.raises(ValidationError):
        ProductService.find_by_id_and_update(product.id, {"price": "-3"})

    assert ProductService.find_by_id(product.id).price == product.price


def test_find_by_id_and_update_not_found():
    with pytest.raises(NotFoundError):
        ProductService.find_by_id_and_update(uuid4(), {"price": 2})


def test_find_by_id_and_delete():
    product = create_test_product()

    deleted = ProductService.find_by_id_and_delete(product.id)

    assert deleted.id == product.id
    assert ProductService.find() == []


def test_find_by_id_and_delete_not_found():
    with pytest.raises(NotFoundError):
        ProductService.find_by_id_and_delete(uuid4())
