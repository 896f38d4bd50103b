"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path

# Set test environment before settings are loaded
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = (
    f"sqlite:///{Path(tempfile.mkdtemp()) / 'farmstand-test.db'}"
)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from farmstand.core.database import clean_database, close_db, create_tables  # noqa: E402
from farmstand.main import app  # noqa: E402
from farmstand.models import Product  # noqa: E402
from farmstand.services import ProductService  # noqa: E402


def create_test_product(
    name: str = "Fairy Eggplant",
    price: float = 1.0,
    category: str = "vegetable",
) -> Product:
    """Helper function to create a test product with default values."""
    return ProductService.save({"name": name, "price": price, "category": category})


@pytest.fixture(autouse=True, scope="function")
def clean_db():
    """Initialize and clean database for each test."""
    create_tables()

    # Clean all tables before test to ensure isolation
    clean_database()

    yield

    # Close DB connections
    close_db()


@pytest.fixture(scope="function")
def test_client():
    """Create a test client."""
    with TestClient(app) as client:
        yield client
