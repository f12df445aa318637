"""
==============================================================================
Catalog Reconciliation Module
==============================================================================

Pure transformations over the authoritative product list.

Every function takes the current snapshot and returns a new list; inputs
are never mutated. Unchanged products are returned as the same objects.

Operations:
-----------
- partition: split into company portfolio / master reference list
- import_selected: move selected master products into the company scope
- reconcile_scope: merge an edited company view back into the full list
- delete_product: remove one product by id
- upsert_product: replace by id, or append a new identity

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Sequence

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class CatalogPartition(NamedTuple):
    """The two disjoint views derived from one product list."""

    company_portfolio: List[Product]
    master_list: List[Product]


def partition(products: Sequence[Product]) -> CatalogPartition:
    """
    Split products by their company membership flag.

    Relative order of the input is kept in both views, and every product
    lands in exactly one of them.

    Example:
        >>> company, master = partition(products)
    """
    company: List[Product] = []
    master: List[Product] = []
    for product in products:
        (company if product.is_company_active else master).append(product)
    return CatalogPartition(company, master)


def import_selected(products: Sequence[Product], selected_ids: Iterable[str]) -> List[Product]:
    """
    Mark the selected products as company-active.

    Ids that match no product are ignored. An empty selection returns an
    equal list.

    Args:
        products: Authoritative product list
        selected_ids: Ids picked from the master list

    Returns:
        New product list
    """
    selected = set(selected_ids)
    if not selected:
        return list(products)

    result = []
    for product in products:
        if product.id in selected and not product.is_company_active:
            product = product.model_copy(update={"is_company_active": True})
        result.append(product)
    return result


def reconcile_scope(products: Sequence[Product], edited_scope: Sequence[Product]) -> List[Product]:
    """
    Merge an edited company view back into the authoritative list.

    - Products whose id is in ``edited_scope`` are replaced by the edited
      record (last occurrence wins).
    - Company-active products missing from ``edited_scope`` are demoted
      to the master list, never deleted.
    - Everything else is left as is.

    Records in ``edited_scope`` with ids unknown to ``products`` are not
    added; new products go through ``upsert_product``.

    Args:
        products: Authoritative product list
        edited_scope: Current state of the edited company view

    Returns:
        New product list in the original order
    """
    edited = {product.id: product for product in edited_scope}

    result = []
    for product in products:
        replacement = edited.pop(product.id, None)
        if replacement is not None:
            result.append(replacement)
        elif product.is_company_active:
            result.append(product.model_copy(update={"is_company_active": False}))
        else:
            result.append(product)

    if edited:
        logger.debug(f"Ignoring {len(edited)} unknown product(s) in scope: {sorted(edited)}")

    return result


def delete_product(products: Sequence[Product], product_id: str) -> List[Product]:
    """Remove the product with ``product_id``; absent ids are a no-op."""
    return [product for product in products if product.id != product_id]


def upsert_product(products: Sequence[Product], product: Product) -> List[Product]:
    """
    Replace the product with the same id, or append it.

    Args:
        products: Authoritative product list
        product: Saved product record

    Returns:
        New product list
    """
    result = []
    replaced = False
    for existing in products:
        if existing.id == product.id:
            result.append(product)
            replaced = True
        else:
            result.append(existing)

    if not replaced:
        result.append(product)
    return result
