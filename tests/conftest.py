"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample catalog data, a file-backed catalog and an API client.

==============================================================================
"""

import pytest
from pathlib import Path
from typing import Generator, List
from fastapi.testclient import TestClient

from product_library.main import app
from product_library.catalog.catalog import ProductCatalog
from product_library.catalog.models import CategoryItem, Product, ProductSKU
from product_library.catalog.store import CatalogStore
from product_library.core.dependencies import get_product_catalog


# ============================================================================
# DATA FIXTURES
# ============================================================================

@pytest.fixture
def categories() -> List[CategoryItem]:
    """Small category tree: one root with two children, one lone root."""
    return [
        CategoryItem(id="cat_light", name="Smart Lighting", icon_name="Lightbulb"),
        CategoryItem(id="cat_switch", name="Smart Switches", icon_name="ToggleRight", parent_id="cat_light"),
        CategoryItem(id="cat_lamp", name="Smart Lamps", icon_name="Lamp", parent_id="cat_light"),
        CategoryItem(id="cat_lock", name="Smart Locks", icon_name="Lock"),
    ]


@pytest.fixture
def products() -> List[Product]:
    """Two company products followed by two reference products."""
    return [
        Product(
            id="p1",
            name="Smart Dimmer Switch",
            brand="Aqara",
            model="D1 Single",
            category="Smart Switches",
            category_id="cat_switch",
            is_company_active=True,
            price=199,
            stock=50,
            skus=[
                ProductSKU(id="s1", name="White", sku_code="AQ-W", price=199, cost=120, stock=30),
                ProductSKU(id="s2", name="Grey", sku_code="AQ-G", price=219, cost=130, stock=20),
            ],
        ),
        Product(
            id="p2",
            name="Ceiling Lamp",
            brand="Yeelight",
            model="C2001",
            category="Smart Lamps",
            category_id="cat_lamp",
            is_company_active=True,
            price=499,
            stock=10,
            skus=[ProductSKU(id="s1", name="Standard", price=499, cost=300, stock=10)],
        ),
        Product(
            id="p3",
            name="Smart Gateway",
            brand="Xiaomi",
            model="Multi-mode v3",
            category="Smart Lighting",
            category_id="cat_light",
            is_company_active=False,
            price=399,
            stock=100,
            skus=[ProductSKU(id="s1", name="Standard", price=399, cost=200, stock=100)],
        ),
        Product(
            id="p4",
            name="Door Lock",
            brand="Aqara",
            model="A100",
            category="Smart Locks",
            category_id="cat_lock",
            is_company_active=False,
        ),
    ]


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Location of the catalog document for the test."""
    return tmp_path / "catalog.json"


@pytest.fixture
def catalog(
    catalog_file: Path,
    categories: List[CategoryItem],
    products: List[Product],
) -> ProductCatalog:
    """File-backed catalog seeded with the sample data."""
    store = CatalogStore(catalog_file)
    store.save(categories, products)
    return ProductCatalog(store, autosave=True)


@pytest.fixture
def client(catalog: ProductCatalog) -> Generator[TestClient, None, None]:
    """Create test client with the catalog dependency overridden."""
    app.dependency_overrides[get_product_catalog] = lambda: catalog

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
