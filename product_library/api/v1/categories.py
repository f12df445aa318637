"""
==============================================================================
Category Endpoints
==============================================================================

Management of the category tree.

==============================================================================
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from product_library.catalog.catalog import ProductCatalog
from product_library.catalog.models import CategoryPatch
from product_library.core import exceptions
from product_library.core.dependencies import get_product_catalog
from product_library.schemas.common import to_json, to_json_list
from product_library.schemas.product import CategoryCreate


router = APIRouter(prefix="/categories", tags=["Categories"])


def _tree_to_json(nodes: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {**to_json(node["category"]), "children": _tree_to_json(node["children"])}
        for node in nodes
    ]


class CategoryController:
    """Controller for category operations."""

    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog

    def list_categories(self) -> dict:
        categories = self._catalog.categories
        return {"success": True, "total": len(categories), "categories": to_json_list(categories)}

    def get_tree(self) -> dict:
        return {"success": True, "tree": _tree_to_json(self._catalog.category_tree())}

    def create_category(self, body: CategoryCreate) -> dict:
        """Create a category; the parent must exist when given."""
        if body.parent_id and self._catalog.get_category(body.parent_id) is None:
            raise exceptions.category_not_found(body.parent_id)

        created = self._catalog.add_category(
            body.name, body.parent_id, body.icon_name, body.description
        )
        return {"success": True, "category": to_json(created)}

    def update_category(self, category_id: str, patch: CategoryPatch) -> dict:
        updated = self._catalog.update_category(category_id, patch)
        if updated is None:
            raise exceptions.category_not_found(category_id)
        return {"success": True, "category": to_json(updated)}

    def delete_category(self, category_id: str) -> dict:
        """Delete a category and its direct children."""
        if self._catalog.get_category(category_id) is None:
            raise exceptions.category_not_found(category_id)
        removed = self._catalog.delete_category(category_id)
        return {"success": True, "deleted": removed}


@router.get("")
async def list_categories(catalog: ProductCatalog = Depends(get_product_catalog)):
    """Get the flat category set."""
    return CategoryController(catalog).list_categories()


@router.get("/tree")
async def get_category_tree(catalog: ProductCatalog = Depends(get_product_catalog)):
    """Get categories nested under their parents."""
    return CategoryController(catalog).get_tree()


@router.post("")
async def create_category(
    body: CategoryCreate,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Add a root category or a sub-category."""
    return CategoryController(catalog).create_category(body)


@router.patch("/{category_id}")
async def update_category(
    category_id: str,
    patch: CategoryPatch,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Rename or re-describe a category."""
    return CategoryController(catalog).update_category(category_id, patch)


@router.delete("/{category_id}")
async def delete_category(category_id: str, catalog: ProductCatalog = Depends(get_product_catalog)):
    """Delete a category and its direct children."""
    return CategoryController(catalog).delete_category(category_id)
