"""
==============================================================================
Save-Time Derivation Tests
==============================================================================

Tests for price, stock and category name derivation.

==============================================================================
"""

from product_library.catalog.derivation import (
    derive_price,
    derive_stock,
    prepare_for_save,
    resolve_category_name,
)
from product_library.catalog.models import CategoryItem, Product, ProductSKU


def make_skus(prices, stocks):
    return [
        ProductSKU(id=f"s{i}", price=price, stock=stock)
        for i, (price, stock) in enumerate(zip(prices, stocks))
    ]


class TestDerivedFields:
    """Tests for price and stock aggregation."""

    def test_three_skus(self, categories):
        """Price follows the first SKU, stock is the sum."""
        product = Product(id="x", name="Lamp", skus=make_skus([10, 20, 30], [1, 2, 3]))
        saved = prepare_for_save(product, categories)
        assert saved.price == 10
        assert saved.stock == 6

    def test_no_skus(self, categories):
        """Without SKUs both fields are 0."""
        product = Product(id="x", name="Lamp", price=99, stock=7)
        saved = prepare_for_save(product, categories)
        assert saved.price == 0
        assert saved.stock == 0

    def test_first_sku_not_cheapest(self):
        """The first SKU is used even if a later one is cheaper."""
        assert derive_price(make_skus([50, 5], [0, 0])) == 50

    def test_stock_of_empty(self):
        assert derive_stock([]) == 0

    def test_input_not_mutated(self, categories):
        """The edit copy keeps its old derived values."""
        product = Product(id="x", name="Lamp", price=1, stock=1, skus=make_skus([10], [4]))
        prepare_for_save(product, categories)
        assert product.price == 1
        assert product.stock == 1


class TestCategoryResolution:
    """Tests for the category display name."""

    def test_resolved_from_id(self, categories):
        """The name is looked up from category_id."""
        product = Product(id="x", name="Lamp", category="stale", category_id="cat_lamp")
        assert prepare_for_save(product, categories).category == "Smart Lamps"

    def test_unknown_id_keeps_previous(self, categories):
        """A dangling category id keeps the stored name."""
        product = Product(id="x", name="Lamp", category="Old Name", category_id="cat_gone")
        assert prepare_for_save(product, categories).category == "Old Name"

    def test_empty_category_set(self):
        assert resolve_category_name("cat_lamp", [], "Fallback") == "Fallback"

    def test_unnamed_category_keeps_previous(self):
        """A category with an empty name keeps the stored name."""
        product = Product(id="x", name="Lamp", category="Old", category_id="c")
        assert prepare_for_save(product, [CategoryItem(id="c", name="")]).category == "Old"


class TestSaveRejection:
    """Tests for rejected saves."""

    def test_empty_name_rejected(self, categories):
        """A product without a name is not saved."""
        product = Product(id="x", name="", skus=make_skus([10], [1]))
        assert prepare_for_save(product, categories) is None

    def test_default_name_rejected(self, categories):
        """An unset name counts as empty."""
        assert prepare_for_save(Product(id="x"), categories) is None

    def test_other_fields_optional(self, categories):
        """Only the name is required."""
        saved = prepare_for_save(Product(id="x", name="Bare"), categories)
        assert saved is not None
        assert saved.brand == ""
