"""
==============================================================================
Product Endpoints
==============================================================================

Browsing and editing of the product library.

Every edit loads the stored product as an edit copy, applies the change
and saves it through the catalog, which recomputes price, stock and the
category name.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from product_library.catalog.catalog import CatalogScope, ProductCatalog
from product_library.catalog.editing import add_sku, edit_product, remove_sku, update_sku
from product_library.catalog.models import Product, ProductPatch, SKUPatch
from product_library.core import exceptions
from product_library.core.dependencies import ProductFilterParams, get_product_catalog
from product_library.schemas.common import to_json, to_json_list
from product_library.schemas.product import ProductReplace


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product operations."""

    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog

    def _get(self, product_id: str) -> Product:
        product = self._catalog.get_product(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)
        return product

    def _save(self, edited: Product) -> dict:
        saved = self._catalog.save_product(edited)
        if saved is None:
            raise exceptions.product_name_required(edited.id)
        return {"success": True, "product": to_json(saved)}

    def list_products(self, params: ProductFilterParams) -> dict:
        """List products of a scope with search and category filters."""
        products = self._catalog.search(params.q, params.category_id, params.scope)

        return {
            "success": True,
            "scope": params.scope.value,
            "total": len(products),
            "products": to_json_list(products),
        }

    def get_product(self, product_id: str) -> dict:
        return {"success": True, "product": to_json(self._get(product_id))}

    def create_product(self, patch: ProductPatch, scope: CatalogScope) -> dict:
        """Create a product in the company or reference scope."""
        saved = self._catalog.create_product(
            patch, company_active=scope == CatalogScope.company
        )
        if saved is None:
            raise exceptions.product_name_required()
        return {"success": True, "product": to_json(saved)}

    def replace_product(self, product_id: str, body: ProductReplace) -> dict:
        """Replace the whole record of an existing product."""
        self._get(product_id)
        return self._save(body.to_product(product_id))

    def patch_product(self, product_id: str, patch: ProductPatch) -> dict:
        return self._save(edit_product(self._get(product_id), patch))

    def delete_product(self, product_id: str) -> dict:
        """Delete a product; unknown ids are reported, not rejected."""
        deleted = self._catalog.delete_product(product_id)
        return {"success": True, "deleted": deleted, "product_id": product_id}

    def add_sku(self, product_id: str, patch: SKUPatch) -> dict:
        """Append a SKU initialized from ``patch``."""
        product = add_sku(self._get(product_id))
        created = product.skus[-1]
        return self._save(update_sku(product, created.id, patch))

    def update_sku(self, product_id: str, sku_id: str, patch: SKUPatch) -> dict:
        product = self._get(product_id)
        if product.find_sku(sku_id) is None:
            raise exceptions.sku_not_found(product_id, sku_id)
        return self._save(update_sku(product, sku_id, patch))

    def remove_sku(self, product_id: str, sku_id: str) -> dict:
        product = self._get(product_id)
        if product.find_sku(sku_id) is None:
            raise exceptions.sku_not_found(product_id, sku_id)
        return self._save(remove_sku(product, sku_id))

    def get_stats(self) -> dict:
        """Get catalog statistics."""
        return {"success": True, "stats": self._catalog.get_stats()}


@router.get("")
async def list_products(
    params: ProductFilterParams = Depends(),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """List products with optional scope, search and category filters."""
    return ProductController(catalog).list_products(params)


@router.get("/stats")
async def get_catalog_stats(catalog: ProductCatalog = Depends(get_product_catalog)):
    """Get catalog statistics."""
    return ProductController(catalog).get_stats()


@router.get("/{product_id}")
async def get_product(product_id: str, catalog: ProductCatalog = Depends(get_product_catalog)):
    """Get product by id."""
    return ProductController(catalog).get_product(product_id)


@router.post("")
async def create_product(
    patch: ProductPatch,
    scope: CatalogScope = Query(CatalogScope.reference, description="View the product is created in"),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Create a product; it joins the company catalog when created there."""
    return ProductController(catalog).create_product(patch, scope)


@router.put("/{product_id}")
async def replace_product(
    product_id: str,
    body: ProductReplace,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Save a full edited record."""
    return ProductController(catalog).replace_product(product_id, body)


@router.patch("/{product_id}")
async def patch_product(
    product_id: str,
    patch: ProductPatch,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Save a partial edit."""
    return ProductController(catalog).patch_product(product_id, patch)


@router.delete("/{product_id}")
async def delete_product(product_id: str, catalog: ProductCatalog = Depends(get_product_catalog)):
    """Delete a product from the library."""
    return ProductController(catalog).delete_product(product_id)


@router.post("/{product_id}/skus")
async def add_product_sku(
    product_id: str,
    patch: SKUPatch,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Add a variant."""
    return ProductController(catalog).add_sku(product_id, patch)


@router.patch("/{product_id}/skus/{sku_id}")
async def update_product_sku(
    product_id: str,
    sku_id: str,
    patch: SKUPatch,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Update a variant."""
    return ProductController(catalog).update_sku(product_id, sku_id, patch)


@router.delete("/{product_id}/skus/{sku_id}")
async def remove_product_sku(
    product_id: str,
    sku_id: str,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Remove a variant."""
    return ProductController(catalog).remove_sku(product_id, sku_id)
