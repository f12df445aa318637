"""
==============================================================================
Catalog Store Module
==============================================================================

JSON persistence for the category set and the authoritative product list.

JSON Structure:
--------------
{
  "categories": [
    {"id": "cat_root_1", "name": "Smart Lighting", "iconName": "Lightbulb"},
    ...
  ],
  "products": [
    {"id": "p1", "name": "...", "isCompanyActive": true, "skus": [...]},
    ...
  ]
}

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from .models import CategoryItem, Product, duplicate_ids


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Reads and writes the catalog document.

    Attributes:
        path: Location of the JSON document

    Example:
        >>> store = CatalogStore(Path("data/catalog.json"))
        >>> categories, products = store.load()
        >>> store.save(categories, products)
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Tuple[List[CategoryItem], List[Product]]:
        """
        Load categories and products.

        Returns:
            Tuple of (categories, products); both empty if the file is missing

        Raises:
            json.JSONDecodeError: If the document is not valid JSON
            ValueError: If product ids repeat or a record is invalid
        """
        if not self.path.exists():
            logger.warning(f"Catalog file not found: {self.path}, starting empty")
            return [], []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {self.path}: {e}")
            raise

        if not isinstance(data, dict):
            logger.warning(f"Unexpected catalog format in {self.path}, starting empty")
            return [], []

        categories = [CategoryItem.model_validate(item) for item in data.get("categories", [])]
        products = [Product.model_validate(item) for item in data.get("products", [])]

        duplicates = duplicate_ids(products)
        if duplicates:
            logger.error(f"Duplicate product ids in {self.path}: {duplicates}")
            raise ValueError(f"Duplicate product ids: {', '.join(duplicates)}")

        logger.info(f"Loaded {len(products)} products and {len(categories)} categories from {self.path}")
        return categories, products

    def save(self, categories: Sequence[CategoryItem], products: Sequence[Product]) -> None:
        """Write the whole catalog document."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        document = {
            "categories": [c.model_dump(mode="json", by_alias=True) for c in categories],
            "products": [p.model_dump(mode="json", by_alias=True) for p in products],
        }
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)

        logger.debug(f"Saved {len(products)} products to {self.path}")
