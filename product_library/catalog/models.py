"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for the product library.

Records are immutable: every edit produces a new record. Python attributes
are snake_case; the JSON form uses camelCase names (``isCompanyActive``,
``categoryId``, ``skuCode``...). Both spellings are accepted on input.

Patches carry optional fields and are merged field-by-field onto a record
with the ``apply_*_patch`` helpers.

==============================================================================
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


RecordT = TypeVar("RecordT", bound=BaseModel)


def _zero_if_unset(value: Any) -> Any:
    """Treat unset numeric inputs as 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0
    return value


def duplicate_ids(records: Iterable[Any]) -> List[str]:
    """Ids that occur more than once in ``records``, in first-seen order."""
    seen = set()
    duplicates: List[str] = []
    for record in records:
        if record.id in seen and record.id not in duplicates:
            duplicates.append(record.id)
        seen.add(record.id)
    return duplicates


def unique_skus(skus: List["ProductSKU"]) -> List["ProductSKU"]:
    """Validate that SKU ids are unique within one product."""
    duplicates = duplicate_ids(skus)
    if duplicates:
        raise ValueError(f"Duplicate SKU ids: {', '.join(duplicates)}")
    return skus


class _Record(BaseModel):
    """Base configuration shared by all catalog records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ProductSKU(_Record):
    """
    Sellable variant of a product.

    Attributes:
        id: Identity, unique within the owning product
        name: Variant label (e.g., "Single gang / White")
        sku_code: Free-text stock keeping code
        price: Selling price
        cost: Purchase cost
        stock: Units on hand
    """

    id: str = Field(..., min_length=1, description="Variant identity")
    name: str = Field(default="", description="Variant label")
    sku_code: str = Field(default="", description="Free-text SKU code")
    price: float = Field(default=0, description="Selling price")
    cost: float = Field(default=0, description="Purchase cost")
    stock: int = Field(default=0, description="Units on hand")

    @field_validator("price", "cost", "stock", mode="before")
    @classmethod
    def default_numbers(cls, value: Any) -> Any:
        return _zero_if_unset(value)

    @field_validator("sku_code", mode="before")
    @classmethod
    def default_code(cls, value: Any) -> Any:
        return "" if value is None else value


class Product(_Record):
    """
    Product in the reference library.

    ``price`` and ``stock`` are derived from ``skus`` when the product is
    saved, not on read. ``is_company_active`` places the product in the
    company portfolio; otherwise it belongs to the master reference list.

    Attributes:
        id: Unique identity across the product list
        name: Display name (required to save)
        brand: Brand name
        model: Model designation
        category: Category display name, resolved from category_id on save
        category_id: Key into the category set
        description: Free text
        image_url: Picture URL
        is_company_active: Member of the curated company catalog
        price: Price of the first SKU, or 0
        stock: Sum of SKU stock
        skus: Ordered variants
    """

    id: str = Field(..., min_length=1, description="Product identity")
    name: str = Field(default="", description="Product name")
    brand: str = Field(default="", description="Brand")
    model: str = Field(default="", description="Model")
    category: str = Field(default="", description="Category display name")
    category_id: str = Field(default="", description="Category key")
    description: str = Field(default="", description="Description")
    image_url: str = Field(default="", description="Image URL")
    is_company_active: bool = Field(default=False, description="In company catalog")
    price: float = Field(default=0, description="Derived price")
    stock: int = Field(default=0, description="Derived stock")
    skus: List[ProductSKU] = Field(default_factory=list, description="Variants")

    @field_validator("price", "stock", mode="before")
    @classmethod
    def default_numbers(cls, value: Any) -> Any:
        return _zero_if_unset(value)

    @field_validator("is_company_active", mode="before")
    @classmethod
    def default_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("skus")
    @classmethod
    def validate_unique_skus(cls, v: List[ProductSKU]) -> List[ProductSKU]:
        return unique_skus(v)

    def sku_ids(self) -> List[str]:
        """Ids of this product's SKUs, in order."""
        return [sku.id for sku in self.skus]

    def find_sku(self, sku_id: str) -> Optional[ProductSKU]:
        """Get a SKU by id."""
        for sku in self.skus:
            if sku.id == sku_id:
                return sku
        return None


class CategoryItem(_Record):
    """
    Node of the category tree.

    Attributes:
        id: Category identity
        name: Display name
        icon_name: Presentation hint
        parent_id: Parent category, None for roots
        description: Free text
    """

    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    icon_name: str = Field(default="Folder")
    parent_id: Optional[str] = Field(default=None)
    description: str = Field(default="")


# =============================================================================
# PATCHES
# =============================================================================

class _Patch(BaseModel):
    """Base for partial updates; only explicitly set fields are applied."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def changes(self) -> dict:
        """Fields set on this patch, by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class SKUPatch(_Patch):
    """Partial update for a ProductSKU."""

    name: Optional[str] = None
    sku_code: Optional[str] = None
    price: Optional[float] = None
    cost: Optional[float] = None
    stock: Optional[int] = None


class ProductPatch(_Patch):
    """Partial update for a Product."""

    name: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    category: Optional[str] = None
    category_id: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    is_company_active: Optional[bool] = None
    skus: Optional[List[ProductSKU]] = None

    @field_validator("skus")
    @classmethod
    def validate_unique_skus(cls, v: Optional[List[ProductSKU]]) -> Optional[List[ProductSKU]]:
        return v if v is None else unique_skus(v)


class CategoryPatch(_Patch):
    """Partial update for a CategoryItem."""

    name: Optional[str] = None
    icon_name: Optional[str] = None
    parent_id: Optional[str] = None
    description: Optional[str] = None


def _apply(record: RecordT, patch: _Patch) -> RecordT:
    changes = patch.changes()
    changes.pop("id", None)
    if not changes:
        return record
    data = record.model_dump()
    data.update(changes)
    return type(record).model_validate(data)


def apply_product_patch(product: Product, patch: ProductPatch) -> Product:
    """Merge the fields set on ``patch`` onto a copy of ``product``."""
    return _apply(product, patch)


def apply_sku_patch(sku: ProductSKU, patch: SKUPatch) -> ProductSKU:
    """Merge the fields set on ``patch`` onto a copy of ``sku``."""
    return _apply(sku, patch)


def apply_category_patch(category: CategoryItem, patch: CategoryPatch) -> CategoryItem:
    """Merge the fields set on ``patch`` onto a copy of ``category``."""
    return _apply(category, patch)
