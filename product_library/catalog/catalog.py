"""
==============================================================================
Product Catalog Module
==============================================================================

Owner of the authoritative product list and the category set.

The catalog keeps one snapshot of each. Every command computes a new
snapshot with the pure functions of this package, publishes it with a
single assignment and, with autosave on, writes it through the store.

Views:
------
- company_portfolio / master_list: the two partitions of the product list
- search / import_candidates: filtered views
- get_stats: counts and totals

Commands:
---------
- create_product / save_product / delete_product
- import_selected / reconcile_portfolio
- add_category / update_category / delete_category

==============================================================================
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from . import categories as category_ops
from . import reconcile
from .derivation import prepare_for_save
from .editing import edit_product, new_product
from .filters import filter_import_candidates, filter_products
from .models import CategoryItem, CategoryPatch, Product, ProductPatch, duplicate_ids
from .store import CatalogStore


# Module logger
logger = logging.getLogger(__name__)


class CatalogScope(str, Enum):
    """
    Which part of the product list a view covers.

    - all: every product
    - company: company portfolio (is_company_active)
    - reference: master reference list (not company-active)
    """

    all = "all"
    company = "company"
    reference = "reference"


class ProductCatalog:
    """
    Holder of the authoritative product list.

    Attributes:
        products: Current product snapshot
        categories: Current category snapshot

    Example:
        >>> catalog = ProductCatalog(CatalogStore(Path("data/catalog.json")))
        >>> catalog.import_selected({"p3"})
        >>> company = catalog.company_portfolio()
    """

    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        autosave: bool = True,
        products: Optional[Sequence[Product]] = None,
        categories: Optional[Sequence[CategoryItem]] = None,
    ) -> None:
        """
        Initialize the catalog.

        Args:
            store: Persistence backend; None keeps the catalog in memory
            autosave: Write every new snapshot through the store
            products: Initial products (loaded from the store when None)
            categories: Initial categories (loaded from the store when None)

        Raises:
            ValueError: If product ids repeat
        """
        self._store = store
        self._autosave = autosave and store is not None
        self._products: List[Product] = []
        self._categories: List[CategoryItem] = []

        if store is not None and products is None and categories is None:
            self._load()
        else:
            self._products = list(products or [])
            self._categories = list(categories or [])

        duplicates = duplicate_ids(self._products)
        if duplicates:
            raise ValueError(f"Duplicate product ids: {', '.join(duplicates)}")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return self._products.copy()

    @property
    def categories(self) -> List[CategoryItem]:
        """Get the category set."""
        return self._categories.copy()

    @property
    def store(self) -> Optional[CatalogStore]:
        return self._store

    # =========================================================================
    # LOADING / PUBLISHING
    # =========================================================================

    def _load(self) -> None:
        """Load snapshots from the store."""
        self._categories, self._products = self._store.load()

    def reload(self) -> None:
        """Reload catalog from the store."""
        if self._store is None:
            return
        logger.info("Reloading product catalog...")
        self._load()

    def _publish(
        self,
        products: Optional[List[Product]] = None,
        categories: Optional[List[CategoryItem]] = None,
    ) -> None:
        """Replace the current snapshots and persist them."""
        if products is not None:
            self._products = products
        if categories is not None:
            self._categories = categories
        if self._autosave:
            self._store.save(self._categories, self._products)

    def save(self) -> None:
        """Write the current snapshots through the store."""
        if self._store is not None:
            self._store.save(self._categories, self._products)

    # =========================================================================
    # VIEWS
    # =========================================================================

    def company_portfolio(self) -> List[Product]:
        """Products in the company catalog."""
        return reconcile.partition(self._products).company_portfolio

    def master_list(self) -> List[Product]:
        """Products in the reference library only."""
        return reconcile.partition(self._products).master_list

    def scoped(self, scope: CatalogScope = CatalogScope.all) -> List[Product]:
        """Products of one scope."""
        if scope == CatalogScope.company:
            return self.company_portfolio()
        if scope == CatalogScope.reference:
            return self.master_list()
        return self.products

    def get_product(self, product_id: str) -> Optional[Product]:
        """Find product by id."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def get_category(self, category_id: str) -> Optional[CategoryItem]:
        """Find category by id."""
        return category_ops.find_category(self._categories, category_id)

    def search(
        self,
        term: str = "",
        category_id: Optional[str] = None,
        scope: CatalogScope = CatalogScope.all,
    ) -> List[Product]:
        """
        Browse products of a scope.

        Args:
            term: Matched against name, brand and model
            category_id: Category filter ("ALL" or None for any)
            scope: Which partition to browse

        Returns:
            Matching products in catalog order
        """
        return filter_products(self.scoped(scope), term, category_id)

    def import_candidates(self, term: str = "") -> List[Product]:
        """Master-list products matching ``term`` by name, brand or category."""
        return filter_import_candidates(self.master_list(), term)

    def category_tree(self) -> List[Dict[str, Any]]:
        return category_ops.build_category_tree(self._categories)

    # =========================================================================
    # PRODUCT COMMANDS
    # =========================================================================

    def create_product(
        self,
        patch: Optional[ProductPatch] = None,
        company_active: bool = False,
    ) -> Optional[Product]:
        """
        Create and save a new product.

        The product gets a fresh id and is appended to the authoritative
        list directly.

        Args:
            patch: Initial field values
            company_active: Created from the company view

        Returns:
            Saved product, or None if it has no name
        """
        draft = new_product(
            self._categories,
            company_active=company_active,
            existing_ids={p.id for p in self._products},
        )
        if patch is not None:
            draft = edit_product(draft, patch)
        return self.save_product(draft)

    def save_product(self, edited: Product) -> Optional[Product]:
        """
        Commit an edited product.

        Derived fields are recomputed, then the record replaces the one
        with the same id or is appended.

        Returns:
            Saved product, or None if it has no name (nothing changes)
        """
        prepared = prepare_for_save(edited, self._categories)
        if prepared is None:
            logger.debug(f"Save rejected for product {edited.id}: name is empty")
            return None

        self._publish(products=reconcile.upsert_product(self._products, prepared))
        logger.info(f"Saved product {prepared.id} ({prepared.name})")
        return prepared

    def delete_product(self, product_id: str) -> bool:
        """
        Delete a product by id.

        Returns:
            True if a product was removed
        """
        remaining = reconcile.delete_product(self._products, product_id)
        if len(remaining) == len(self._products):
            return False

        self._publish(products=remaining)
        logger.info(f"Deleted product {product_id}")
        return True

    def import_selected(self, selected_ids: Iterable[str]) -> List[Product]:
        """
        Move selected master-list products into the company catalog.

        Returns:
            Products that are now company-active because of this call
        """
        selected = set(selected_ids)
        before = {p.id for p in self.company_portfolio()}

        self._publish(products=reconcile.import_selected(self._products, selected))

        imported = [p for p in self.company_portfolio() if p.id not in before]
        logger.info(f"Imported {len(imported)} product(s) into company catalog")
        return imported

    def reconcile_portfolio(self, edited_scope: Sequence[Product]) -> List[Product]:
        """
        Merge an edited company portfolio back into the product list.

        Returns:
            Products demoted out of the company catalog
        """
        kept = {p.id for p in edited_scope}
        demoted = [p for p in self.company_portfolio() if p.id not in kept]

        self._publish(products=reconcile.reconcile_scope(self._products, edited_scope))

        logger.info(f"Reconciled company portfolio: {len(demoted)} product(s) demoted")
        return [self.get_product(p.id) for p in demoted]

    # =========================================================================
    # CATEGORY COMMANDS
    # =========================================================================

    def add_category(
        self,
        name: str,
        parent_id: Optional[str] = None,
        icon_name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> CategoryItem:
        """Add a category and return it."""
        updated, created = category_ops.add_category(
            self._categories, name, parent_id, icon_name, description
        )
        self._publish(categories=updated)
        logger.info(f"Added category {created.id} ({created.name})")
        return created

    def update_category(self, category_id: str, patch: CategoryPatch) -> Optional[CategoryItem]:
        """
        Patch a category.

        Returns:
            Updated category, or None if the id is unknown
        """
        if self.get_category(category_id) is None:
            return None

        self._publish(categories=category_ops.update_category(self._categories, category_id, patch))
        return self.get_category(category_id)

    def delete_category(self, category_id: str) -> List[str]:
        """
        Delete a category and its direct children.

        Returns:
            Ids of removed categories
        """
        remaining = category_ops.delete_category(self._categories, category_id)
        kept = {c.id for c in remaining}
        removed = [c.id for c in self._categories if c.id not in kept]

        if removed:
            self._publish(categories=remaining)
            logger.info(f"Deleted categories: {removed}")
        return removed

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        company, master = reconcile.partition(self._products)

        stats: Dict[str, Any] = {
            "total_products": len(self._products),
            "company_products": len(company),
            "master_products": len(master),
            "total_skus": sum(len(p.skus) for p in self._products),
            "total_stock": sum(p.stock for p in self._products),
            "inventory_cost": round(
                sum(sku.cost * sku.stock for p in self._products for sku in p.skus), 2
            ),
            "categories": {},
        }

        for product in self._products:
            key = product.category_id or "uncategorized"
            entry = stats["categories"].setdefault(
                key, {"name": product.category, "products": 0, "company_products": 0}
            )
            entry["products"] += 1
            if product.is_company_active:
                entry["company_products"] += 1

        return stats


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the global catalog instance."""
    return _catalog_instance


def init_catalog(catalog_file: Path, autosave: bool = True) -> ProductCatalog:
    """
    Initialize the global catalog instance.

    Args:
        catalog_file: Path to catalog.json
        autosave: Persist every change

    Returns:
        ProductCatalog instance
    """
    global _catalog_instance
    _catalog_instance = ProductCatalog(CatalogStore(catalog_file), autosave=autosave)
    return _catalog_instance
