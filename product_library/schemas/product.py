"""
==============================================================================
Product Schemas Module
==============================================================================

Request schemas for product, company-catalog and category operations.

Partial updates reuse the catalog patches (ProductPatch, SKUPatch,
CategoryPatch). Field names are accepted in snake_case or camelCase.

==============================================================================
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from product_library.catalog.models import Product, ProductSKU, unique_skus


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# PRODUCT SCHEMAS
# =============================================================================

class ProductReplace(_Body):
    """Full product record for PUT; the id comes from the path."""
    name: str = Field(default="", max_length=255)
    brand: str = Field(default="")
    model: str = Field(default="")
    category: str = Field(default="")
    category_id: str = Field(default="")
    description: str = Field(default="")
    image_url: str = Field(default="")
    is_company_active: bool = Field(default=False)
    skus: List[ProductSKU] = Field(default_factory=list)

    @field_validator("skus")
    @classmethod
    def validate_unique_skus(cls, v: List[ProductSKU]) -> List[ProductSKU]:
        return unique_skus(v)

    def to_product(self, product_id: str) -> Product:
        """Build the edit copy for ``product_id``."""
        return Product.model_validate({"id": product_id, **self.model_dump()})


# =============================================================================
# COMPANY CATALOG SCHEMAS
# =============================================================================

class ImportRequest(_Body):
    """Master-list products to add to the company catalog."""
    ids: List[str] = Field(default_factory=list)

    @field_validator("ids")
    @classmethod
    def strip_ids(cls, v: List[str]) -> List[str]:
        return [i.strip() for i in v if i and i.strip()]


class PortfolioUpdate(_Body):
    """Edited state of the company portfolio view."""
    products: List[Product] = Field(default_factory=list)


# =============================================================================
# CATEGORY SCHEMAS
# =============================================================================

class CategoryCreate(_Body):
    """New category, optionally under a parent."""
    name: str = Field(default="", max_length=100)
    parent_id: Optional[str] = None
    icon_name: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()
