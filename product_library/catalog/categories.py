"""
==============================================================================
Category Set Module
==============================================================================

Transformations over the category tree. Categories form a forest through
``parent_id``; roots have no parent.

Products are not touched here. A product whose category is renamed or
deleted keeps its stored category name until it is saved again.

==============================================================================
"""

from __future__ import annotations

from typing import Any, Collection, Dict, List, Optional, Sequence, Tuple

from .editing import generate_id
from .models import CategoryItem, CategoryPatch, apply_category_patch


CATEGORY_ID_PREFIX = "cat_"
DEFAULT_CATEGORY_NAME = "New Category"
DEFAULT_ICON = "Folder"


def find_category(categories: Sequence[CategoryItem], category_id: str) -> Optional[CategoryItem]:
    """Get a category by id."""
    for category in categories:
        if category.id == category_id:
            return category
    return None


def child_categories(
    categories: Sequence[CategoryItem],
    parent_id: Optional[str] = None,
) -> List[CategoryItem]:
    """Direct children of ``parent_id``; roots when it is None."""
    return [c for c in categories if c.parent_id == parent_id]


def add_category(
    categories: Sequence[CategoryItem],
    name: str,
    parent_id: Optional[str] = None,
    icon_name: Optional[str] = None,
    description: Optional[str] = None,
) -> Tuple[List[CategoryItem], CategoryItem]:
    """
    Append a new category.

    Args:
        categories: Current category set
        name: Display name; blank falls back to "New Category"
        parent_id: Parent category, None for a root
        icon_name: Presentation hint
        description: Free text

    Returns:
        Tuple of (new category list, created category)
    """
    created = CategoryItem(
        id=generate_id(CATEGORY_ID_PREFIX, {c.id for c in categories}),
        name=name or DEFAULT_CATEGORY_NAME,
        parent_id=parent_id or None,
        icon_name=icon_name or DEFAULT_ICON,
        description=description or "",
    )
    return [*categories, created], created


def update_category(
    categories: Sequence[CategoryItem],
    category_id: str,
    patch: CategoryPatch,
) -> List[CategoryItem]:
    """Patch one category; unknown ids are a no-op."""
    return [
        apply_category_patch(c, patch) if c.id == category_id else c
        for c in categories
    ]


def delete_category(categories: Sequence[CategoryItem], category_id: str) -> List[CategoryItem]:
    """Remove a category together with its direct children."""
    return [
        c for c in categories
        if c.id != category_id and c.parent_id != category_id
    ]


def build_category_tree(categories: Sequence[CategoryItem]) -> List[Dict[str, Any]]:
    """
    Nest categories under their parents.

    Categories whose parent is missing from the set are not reachable and
    are left out, as in the tree browser.

    Returns:
        List of {"category": CategoryItem, "children": [...]} for roots
    """
    def build(parent_id: Optional[str], seen: Collection[str]) -> List[Dict[str, Any]]:
        nodes = []
        for category in child_categories(categories, parent_id):
            if category.id in seen:
                continue
            nodes.append({
                "category": category,
                "children": build(category.id, {*seen, category.id}),
            })
        return nodes

    return build(None, set())
