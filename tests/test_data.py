"""Tests for demo data conversion and catalog search."""

from dataclasses import replace

from billdesk.data import (
    category_slug,
    default_bills,
    default_products,
    default_purchases,
    default_suppliers,
    display_name,
    search_customers,
    search_products,
    search_purchases,
    search_suppliers,
)


class TestDemoData:
    def test_bill_items_are_cart_lines(self):
        bill = default_bills()[0]
        assert bill.items[0].product_id == "P001"
        assert bill.items[1].total == 141.75

    def test_each_call_returns_fresh_lists(self):
        first = default_products()
        first.clear()
        assert len(default_products()) == 12

    def test_category_slug(self):
        assert category_slug("Personal Care") == "personal-care"
        assert category_slug("Ready to Cook") == "ready-to-cook"


class TestSearch:
    """Test product and customer search."""

    def test_search_by_name_is_case_insensitive(self, products):
        results = search_products(products.values(), "BASMATI")
        assert [p.id for p in results] == ["P001"]

    def test_search_by_barcode_and_tamil(self, products):
        assert [p.id for p in search_products(products.values(), "8901234567893")] == ["P004"]
        assert [p.id for p in search_products(products.values(), "தயிர்")] == ["P012"]

    def test_search_by_category(self, products):
        results = search_products(products.values(), category="dairy")
        assert [p.id for p in results] == ["P006", "P012"]

    def test_inactive_products_hidden(self, products):
        catalog = [replace(products["P001"], is_active=False), products["P002"]]
        assert search_products(catalog) == [products["P002"]]

    def test_display_name(self, products):
        assert display_name(products["P012"], "ta") == "தயிர் (500ml)"
        assert display_name(products["P012"]) == "Curd (500ml)"

    def test_search_customers(self, customers):
        assert [c.id for c in search_customers(customers.values(), "anbu")] == ["C004"]
        assert [c.id for c in search_customers(customers.values(), "9876543211")] == ["C002"]
        assert len(search_customers(customers.values())) == 5


class TestPurchaseSearch:
    """Test supplier and purchase search."""

    def test_purchase_items_are_converted(self):
        purchase = default_purchases()[0]
        assert purchase.items[1].name == "Toor Dal (25kg)"
        assert purchase.items[1].quantity == 5
        assert purchase.status == "partial"

    def test_search_by_supplier_name(self):
        results = search_purchases(default_purchases(), "dairy")
        assert [p.id for p in results] == ["PUR003"]

    def test_search_by_invoice_number(self):
        results = search_purchases(default_purchases(), "ma-2026")
        assert [p.id for p in results] == ["PUR002"]

    def test_empty_query_returns_all(self):
        assert len(search_purchases(default_purchases())) == 3

    def test_search_suppliers_by_contact(self):
        results = search_suppliers(default_suppliers(), "senthil")
        assert [s.id for s in results] == ["SUP001"]
