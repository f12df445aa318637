"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Record serialization
- Product: Product, company-catalog and category request bodies

==============================================================================
"""

from .common import to_json, to_json_list
from .product import CategoryCreate, ImportRequest, PortfolioUpdate, ProductReplace

__all__ = [
    # Common
    "to_json",
    "to_json_list",
    # Product
    "ProductReplace",
    "ImportRequest",
    "PortfolioUpdate",
    "CategoryCreate",
]
