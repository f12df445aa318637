"""
==============================================================================
Product Editing Module
==============================================================================

Operations on the edit copy of a product, before it is saved.

A product is edited as a detached copy; nothing here touches the
authoritative list. Derived fields (price, stock, category name) are left
alone until ``prepare_for_save`` runs.

==============================================================================
"""

from __future__ import annotations

import secrets
import string
from typing import Collection, Optional, Sequence

from .models import (
    CategoryItem,
    Product,
    ProductPatch,
    ProductSKU,
    SKUPatch,
    apply_product_patch,
    apply_sku_patch,
)


ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9

# Placeholder picture for freshly created products
DEFAULT_IMAGE_URL = "https://picsum.photos/seed/newproduct/200/200"


def generate_id(prefix: str = "", existing: Collection[str] = ()) -> str:
    """
    Generate a short random identity.

    Args:
        prefix: Prepended to the random part (e.g., "cat_")
        existing: Ids already in use; a colliding id is regenerated

    Returns:
        New id such as "k3v9x0q2m"
    """
    while True:
        candidate = prefix + "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in existing:
            return candidate


def new_product(
    categories: Sequence[CategoryItem],
    company_active: bool = False,
    existing_ids: Collection[str] = (),
) -> Product:
    """
    Create a blank product draft.

    The draft defaults to the first category and has no SKUs. It is
    company-active when created from the company view.
    """
    first = categories[0] if categories else None
    return Product(
        id=generate_id(existing=existing_ids),
        category_id=first.id if first else "",
        category=first.name if first else "",
        image_url=DEFAULT_IMAGE_URL,
        is_company_active=company_active,
    )


def edit_product(product: Product, patch: ProductPatch) -> Product:
    """Apply a partial update to the edit copy."""
    return apply_product_patch(product, patch)


def new_sku(existing_ids: Collection[str] = ()) -> ProductSKU:
    """Create a blank SKU with a fresh id."""
    return ProductSKU(id=generate_id(existing=existing_ids))


def add_sku(product: Product, sku: Optional[ProductSKU] = None) -> Product:
    """
    Append a SKU to the edit copy.

    A blank SKU is created when none is given. A given SKU whose id is
    already taken gets a new id.
    """
    taken = set(product.sku_ids())
    if sku is None:
        sku = new_sku(taken)
    elif sku.id in taken:
        sku = sku.model_copy(update={"id": generate_id(existing=taken)})
    return product.model_copy(update={"skus": [*product.skus, sku]})


def update_sku(product: Product, sku_id: str, patch: SKUPatch) -> Product:
    """Patch one SKU of the edit copy; unknown ids are ignored."""
    skus = [
        apply_sku_patch(sku, patch) if sku.id == sku_id else sku
        for sku in product.skus
    ]
    return product.model_copy(update={"skus": skus})


def remove_sku(product: Product, sku_id: str) -> Product:
    """Drop one SKU from the edit copy; unknown ids are ignored."""
    skus = [sku for sku in product.skus if sku.id != sku_id]
    return product.model_copy(update={"skus": skus})
