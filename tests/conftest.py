# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.database import Catalog, get_catalog, load_catalog
from app.main import app


def make_product(product_id: int, **fields) -> dict:
    product = {
        "id": product_id,
        "title": f"Product {product_id}",
        "description": f"Description of product {product_id}",
        "price": 10,
        "discountPercentage": 0,
        "rating": 4.5,
        "stock": 5,
        "brand": "Acme",
        "category": "misc",
        "thumbnail": f"https://example.com/{product_id}.jpg",
    }
    product.update(fields)
    return product


@pytest.fixture
def catalog() -> Catalog:
    """A fresh copy of the bundled dataset for every test."""
    return load_catalog()


@pytest.fixture
def hundred_products() -> Catalog:
    """Products 1..100 and nothing else."""
    return Catalog({"products": [make_product(i) for i in range(1, 101)]})


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
