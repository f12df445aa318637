"""
==============================================================================
Editing Tests
==============================================================================

Tests for drafts, SKU editing and id generation.

==============================================================================
"""

from product_library.catalog.editing import (
    ID_LENGTH,
    add_sku,
    generate_id,
    new_product,
    remove_sku,
    update_sku,
)
from product_library.catalog.models import Product, ProductSKU, SKUPatch


class TestGenerateId:
    """Tests for identity generation."""

    def test_shape(self):
        new_id = generate_id()
        assert len(new_id) == ID_LENGTH
        assert new_id.isalnum()
        assert new_id == new_id.lower()

    def test_prefix(self):
        assert generate_id("cat_").startswith("cat_")

    def test_unique_against_existing(self):
        """Generated ids never collide with the given set."""
        existing = {generate_id() for _ in range(50)}
        for _ in range(50):
            assert generate_id(existing=existing) not in existing


class TestNewProduct:
    """Tests for blank drafts."""

    def test_defaults_to_first_category(self, categories):
        draft = new_product(categories)
        assert draft.category_id == "cat_light"
        assert draft.category == "Smart Lighting"
        assert draft.skus == []
        assert draft.name == ""

    def test_company_flag_from_scope(self, categories):
        assert new_product(categories, company_active=True).is_company_active is True
        assert new_product(categories).is_company_active is False

    def test_no_categories(self):
        draft = new_product([])
        assert draft.category_id == ""
        assert draft.category == ""

    def test_fresh_id(self, categories, products):
        taken = {p.id for p in products}
        assert new_product(categories, existing_ids=taken).id not in taken


class TestSkuEditing:
    """Tests for SKU edits on the edit copy."""

    def test_add_blank_sku(self, products):
        product = add_sku(products[0])
        assert len(product.skus) == 3
        assert product.skus[-1].id not in {"s1", "s2"}
        assert len(products[0].skus) == 2

    def test_add_sku_renames_duplicate_id(self, products):
        product = add_sku(products[0], ProductSKU(id="s1", name="Black"))
        assert product.skus[-1].name == "Black"
        assert len(set(product.sku_ids())) == 3

    def test_update_sku(self, products):
        product = update_sku(products[0], "s2", SKUPatch(stock=7))
        assert product.find_sku("s2").stock == 7
        assert product.find_sku("s1").stock == 30

    def test_update_does_not_rederive(self, products):
        """Derived fields only change on save."""
        product = update_sku(products[0], "s1", SKUPatch(price=1))
        assert product.price == 199

    def test_update_unknown_sku(self, products):
        assert update_sku(products[0], "zz", SKUPatch(stock=1)) == products[0]

    def test_remove_sku(self, products):
        product = remove_sku(products[0], "s1")
        assert product.sku_ids() == ["s2"]

    def test_remove_unknown_sku(self):
        product = Product(id="p", skus=[ProductSKU(id="a")])
        assert remove_sku(product, "b").sku_ids() == ["a"]
