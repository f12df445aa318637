"""
==============================================================================
Reconciliation Tests
==============================================================================

Tests for partition, import, scope reconciliation, delete and upsert.

==============================================================================
"""

import pytest

from product_library.catalog.models import Product
from product_library.catalog.reconcile import (
    delete_product,
    import_selected,
    partition,
    reconcile_scope,
    upsert_product,
)


def ids(products):
    return [p.id for p in products]


class TestPartition:
    """Tests for the company / master split."""

    def test_splits_by_flag(self, products):
        """Company-active products go left, the rest right."""
        company, master = partition(products)
        assert ids(company) == ["p1", "p2"]
        assert ids(master) == ["p3", "p4"]

    def test_views_cover_list_exactly(self, products):
        """Every product is in exactly one view."""
        result = partition(products)
        combined = ids(result.company_portfolio) + ids(result.master_list)
        assert sorted(combined) == sorted(ids(products))
        assert len(combined) == len(set(combined))

    def test_preserves_relative_order(self):
        """Interleaved flags keep input order within each view."""
        products = [
            Product(id=str(i), name=f"n{i}", is_company_active=i % 2 == 0)
            for i in range(6)
        ]
        company, master = partition(products)
        assert ids(company) == ["0", "2", "4"]
        assert ids(master) == ["1", "3", "5"]

    def test_empty_list(self):
        """Empty input gives two empty views."""
        assert partition([]) == ([], [])

    def test_scenario(self):
        """Two-product scenario from the catalog walkthrough."""
        a = Product(id="a", is_company_active=True)
        b = Product(id="b", is_company_active=False)
        company, master = partition([a, b])
        assert company == [a]
        assert master == [b]


class TestImportSelected:
    """Tests for moving master products into the company catalog."""

    def test_selected_become_active(self, products):
        """Selected ids are flagged, others untouched."""
        result = import_selected(products, {"p3"})
        flags = {p.id: p.is_company_active for p in result}
        assert flags == {"p1": True, "p2": True, "p3": True, "p4": False}

    def test_unselected_keep_identity(self, products):
        """Unchanged products are the same objects."""
        result = import_selected(products, {"p3"})
        assert result[0] is products[0]
        assert result[3] is products[3]
        assert result[2] is not products[2]

    def test_empty_selection_is_identity(self, products):
        """No selection returns an equal list."""
        result = import_selected(products, set())
        assert result == products
        assert result is not products

    def test_unknown_ids_ignored(self, products):
        """Ids not in the list do nothing."""
        assert import_selected(products, {"nope"}) == products

    def test_input_not_mutated(self, products):
        """The original records keep their flags."""
        import_selected(products, {"p3", "p4"})
        assert products[2].is_company_active is False
        assert products[3].is_company_active is False

    def test_scenario(self):
        """Importing b activates both products."""
        p = [Product(id="a", is_company_active=True), Product(id="b", is_company_active=False)]
        result = import_selected(p, {"b"})
        assert [(x.id, x.is_company_active) for x in result] == [("a", True), ("b", True)]


class TestReconcileScope:
    """Tests for merging an edited company view back."""

    def test_removed_product_is_demoted(self, products):
        """A product dropped from the view moves to the master list."""
        company, _ = partition(products)
        edited = [p for p in company if p.id != "p2"]

        result = reconcile_scope(products, edited)

        assert ids(result) == ids(products)
        demoted = next(p for p in result if p.id == "p2")
        assert demoted.is_company_active is False

    def test_edited_records_replace_originals(self, products):
        """Edited versions win on every field."""
        company, _ = partition(products)
        renamed = company[0].model_copy(update={"name": "Renamed", "price": 1})

        result = reconcile_scope(products, [renamed, company[1]])

        assert result[0] is renamed
        assert result[1] is company[1]

    def test_master_products_untouched(self, products):
        """Products outside the scope are returned as is."""
        company, _ = partition(products)
        result = reconcile_scope(products, company)
        assert result[2] is products[2]
        assert result[3] is products[3]

    def test_empty_scope_demotes_all(self, products):
        """Clearing the view demotes every company product."""
        result = reconcile_scope(products, [])
        assert all(not p.is_company_active for p in result)
        assert len(result) == len(products)

    def test_unknown_ids_not_added(self, products):
        """New ids in the scope are not appended."""
        company, _ = partition(products)
        stranger = Product(id="new", name="New", is_company_active=True)

        result = reconcile_scope(products, [*company, stranger])

        assert "new" not in ids(result)
        assert len(result) == len(products)

    def test_last_duplicate_wins(self, products):
        """When an id repeats, the last record is used."""
        first = products[0].model_copy(update={"name": "First"})
        last = products[0].model_copy(update={"name": "Last"})
        result = reconcile_scope(products, [first, products[1], last])
        assert result[0].name == "Last"


class TestDeleteProduct:
    """Tests for deleting by id."""

    def test_removes_only_match(self):
        """Deleting keeps the other four in order."""
        products = [Product(id=c, name=c) for c in "abcde"]
        result = delete_product(products, "c")
        assert ids(result) == ["a", "b", "d", "e"]

    def test_missing_id_is_noop(self, products):
        """Unknown ids return an equal list."""
        assert delete_product(products, "zzz") == products


class TestUpsertProduct:
    """Tests for replace-or-append."""

    def test_replaces_in_place(self, products):
        """An existing id is replaced at its position."""
        updated = products[2].model_copy(update={"name": "Gateway V4"})
        result = upsert_product(products, updated)
        assert ids(result) == ids(products)
        assert result[2].name == "Gateway V4"

    @pytest.mark.parametrize("active", [True, False])
    def test_appends_new(self, products, active):
        """A new id is appended at the end."""
        created = Product(id="p9", name="New", is_company_active=active)
        result = upsert_product(products, created)
        assert ids(result) == ["p1", "p2", "p3", "p4", "p9"]
        assert result[-1].is_company_active is active
