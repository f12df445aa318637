"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog and common query parameters.

Dependency Hierarchy:
--------------------
                    ┌─────────────────────┐
                    │ get_product_catalog │
                    └──────────┬──────────┘
                               │
              ┌────────────────┼────────────────┐
              │                │                │
      ┌───────▼──────┐ ┌───────▼──────┐ ┌───────▼──────┐
      │   products   │ │   company    │ │  categories  │
      └──────────────┘ └──────────────┘ └──────────────┘

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)):
        ...

Tests override ``get_product_catalog`` through ``app.dependency_overrides``.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Query

from product_library.catalog.catalog import CatalogScope, ProductCatalog, get_catalog
from product_library.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_product_catalog() -> ProductCatalog:
    """
    FastAPI dependency returning the global catalog.

    Raises:
        AppException: If the catalog has not been initialized
    """
    catalog = get_catalog()
    if catalog is None:
        raise exceptions.catalog_not_loaded()
    return catalog


class ProductFilterParams:
    """
    Product browsing parameters.

    Attributes:
        q: Search term (name, brand, model)
        category_id: Category filter, "ALL" for any
        scope: Catalog partition to browse
    """

    def __init__(
        self,
        q: str = Query("", max_length=200, description="Search term"),
        category_id: Optional[str] = Query(None, description="Category filter"),
        scope: CatalogScope = Query(CatalogScope.all, description="Catalog partition"),
    ) -> None:
        self.q = q
        self.category_id = category_id
        self.scope = scope

    def __repr__(self) -> str:
        return (
            f"ProductFilterParams(q={self.q!r}, "
            f"category_id={self.category_id!r}, scope={self.scope.value!r})"
        )
