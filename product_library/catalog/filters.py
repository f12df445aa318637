"""
==============================================================================
Product Filters Module
==============================================================================

Case-insensitive substring filters used by the product browser and the
reference-library import picker. Input order is preserved.

==============================================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .models import Product


# Category filter value meaning "no category restriction"
ALL_CATEGORIES = "ALL"


def _matches(term: str, *fields: str) -> bool:
    return any(term in field.lower() for field in fields)


def filter_products(
    products: Sequence[Product],
    term: str = "",
    category_id: Optional[str] = None,
) -> List[Product]:
    """
    Filter products by search term and category.

    Args:
        products: Products to filter
        term: Matched against name, brand and model
        category_id: Exact category key; None or "ALL" matches everything

    Returns:
        Matching products
    """
    term = (term or "").lower()
    any_category = not category_id or category_id == ALL_CATEGORIES

    return [
        product
        for product in products
        if _matches(term, product.name, product.brand, product.model)
        and (any_category or product.category_id == category_id)
    ]


def filter_import_candidates(master_list: Sequence[Product], term: str = "") -> List[Product]:
    """Filter master-list products by name, brand or category name."""
    term = (term or "").lower()
    return [
        product
        for product in master_list
        if _matches(term, product.name, product.brand, product.category)
    ]
