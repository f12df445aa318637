"""
==============================================================================
Save-Time Derivation Module
==============================================================================

Computes the derived fields of a product when it is saved:

- price: price of the first SKU, 0 without SKUs
- stock: sum of SKU stock
- category: display name looked up from category_id

Derived values are not refreshed on read. A product keeps a stale
category name until it is saved again.

==============================================================================
"""

from __future__ import annotations

from typing import Optional, Sequence

from .models import CategoryItem, Product, ProductSKU


def derive_price(skus: Sequence[ProductSKU]) -> float:
    """Price of the first SKU, or 0."""
    return skus[0].price if skus else 0


def derive_stock(skus: Sequence[ProductSKU]) -> int:
    """Total stock over all SKUs."""
    return sum(sku.stock for sku in skus)


def resolve_category_name(
    category_id: str,
    categories: Sequence[CategoryItem],
    fallback: str,
) -> str:
    """Display name for ``category_id``, or ``fallback`` when not found or unnamed."""
    for category in categories:
        if category.id == category_id:
            return category.name or fallback
    return fallback


def prepare_for_save(
    edited: Product,
    categories: Sequence[CategoryItem],
) -> Optional[Product]:
    """
    Produce the record to commit for an edited product.

    Args:
        edited: Edit copy of the product
        categories: Category set at the moment of save

    Returns:
        Product with derived fields set, or None when the product has no
        name (save rejected).
    """
    if not edited.name:
        return None

    return edited.model_copy(update={
        "price": derive_price(edited.skus),
        "stock": derive_stock(edited.skus),
        "category": resolve_category_name(edited.category_id, categories, edited.category),
    })
