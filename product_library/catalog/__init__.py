"""
==============================================================================
Catalog Package - Product Library
==============================================================================

Product records, the company/master partition and its reconciliation,
save-time derivation of price and stock, and the catalog that owns the
authoritative product list.

Classes:
--------
- Product, ProductSKU, CategoryItem: Immutable pydantic records
- ProductPatch, SKUPatch, CategoryPatch: Partial updates
- ProductCatalog: Owner of the authoritative list
- CatalogStore: JSON persistence

==============================================================================
"""

from .models import (
    CategoryItem,
    CategoryPatch,
    Product,
    ProductPatch,
    ProductSKU,
    SKUPatch,
    apply_category_patch,
    apply_product_patch,
    apply_sku_patch,
)
from .reconcile import (
    CatalogPartition,
    delete_product,
    import_selected,
    partition,
    reconcile_scope,
    upsert_product,
)
from .derivation import prepare_for_save
from .store import CatalogStore
from .catalog import CatalogScope, ProductCatalog, get_catalog, init_catalog

__all__ = [
    "CategoryItem",
    "CategoryPatch",
    "Product",
    "ProductPatch",
    "ProductSKU",
    "SKUPatch",
    "apply_category_patch",
    "apply_product_patch",
    "apply_sku_patch",
    "CatalogPartition",
    "partition",
    "import_selected",
    "reconcile_scope",
    "delete_product",
    "upsert_product",
    "prepare_for_save",
    "CatalogStore",
    "CatalogScope",
    "ProductCatalog",
    "get_catalog",
    "init_catalog",
]
