"""
Tests for the cart and bill arithmetic.

Covers line recomputation, CGST/SGST splitting, discount and round-off
handling, bill number generation and the cart-to-bill transition.
"""

import re
from dataclasses import FrozenInstanceError, replace
from datetime import date

import pytest

from billdesk.billing import (
    BillBook,
    BillNumberExhausted,
    Cart,
    EmptyCartError,
    build_purchase,
    calculate_gst,
    compute_totals,
    generate_bill_number,
    parse_discount,
    recompute_line,
    round_off,
)
from billdesk.models import CartLine, PurchaseItem, Supplier

EPS = 0.01


class TestLineArithmetic:
    """Test per-line totals and GST helpers."""

    def test_recompute_line_includes_gst(self):
        line = CartLine("P001", "Basmati Rice (1kg)", 2, 120, 5)
        assert recompute_line(line).total == pytest.approx(252)

    def test_recompute_line_subtracts_discount(self):
        line = CartLine("P005", "Aashirvaad Atta (5kg)", 10, 280, 5, discount=100)
        assert recompute_line(line).total == pytest.approx(2840)

    def test_recompute_line_returns_new_value(self):
        line = CartLine("P001", "Basmati Rice (1kg)", 2, 120, 5)
        recomputed = recompute_line(line)
        assert line.total == 0
        assert recomputed is not line

    def test_calculate_gst_splits_in_half(self):
        cgst, sgst, total = calculate_gst(1000, 18)
        assert cgst == sgst == 90
        assert total == 180

    @pytest.mark.parametrize(
        "amount,mode,expected",
        [
            (393.75, "nearest", 394),
            (393.5, "nearest", 394),
            (393.49, "nearest", 393),
            (392.5, "nearest", 393),
            (393.2, "up", 394),
            (393.8, "down", 393),
        ],
    )
    def test_round_off_modes(self, amount, mode, expected):
        rounded, delta = round_off(amount, mode)
        assert rounded == expected
        assert delta == pytest.approx(expected - amount)

    def test_round_off_none_keeps_amount(self):
        assert round_off(393.75, "none") == (393.75, 0.0)

    def test_round_off_just_below_half_rounds_down(self):
        rounded, delta = round_off(0.49999999999999994)
        assert rounded == 0
        assert delta == pytest.approx(-0.5)

    def test_round_off_half_rounds_up_not_to_even(self):
        assert round_off(0.5)[0] == 1
        assert round_off(2.5)[0] == 3


class TestComputeTotals:
    """Test aggregate totals over cart lines."""

    def test_sample_bill_scenario(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.add_item(products["P003"], 1)

        totals = compute_totals(cart.lines, 0)

        assert totals.subtotal == pytest.approx(375)
        assert totals.cgst == pytest.approx(9.375)
        assert totals.sgst == pytest.approx(9.375)
        assert totals.pre_round_total == pytest.approx(393.75)
        assert totals.total == 394
        assert totals.round_off == pytest.approx(0.25)

    def test_cgst_equals_sgst_across_rates(self, cart, products):
        for product_id, qty in [("P004", 3), ("P006", 1), ("P007", 7), ("P010", 2)]:
            cart.add_item(products[product_id], qty)

        totals = compute_totals(cart.lines)

        assert totals.cgst == totals.sgst
        expected_subtotal = sum(line.price * line.quantity for line in cart.lines)
        assert abs(totals.subtotal - expected_subtotal) < EPS

    def test_bill_discount_is_subtracted_before_rounding(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.add_item(products["P003"], 1)

        totals = compute_totals(cart.lines, 10.5)

        assert totals.pre_round_total == pytest.approx(383.25)
        assert totals.total == 383
        assert totals.round_off == pytest.approx(-0.25)
        assert totals.discount == 10.5

    def test_round_off_is_less_than_one_rupee(self, cart, products):
        for product_id in products:
            cart.add_item(products[product_id], 3)
        for discount in (0, 0.3, 7.77, 49.5):
            totals = compute_totals(cart.lines, discount)
            assert abs(totals.round_off) < 1
            assert totals.round_off == pytest.approx(totals.total - totals.pre_round_total)

    def test_gst_disabled(self, cart, products):
        cart.add_item(products["P004"], 2)
        totals = compute_totals(cart.lines, gst_enabled=False)
        assert totals.cgst == totals.sgst == 0
        assert totals.total == 104

    def test_bill_discount_never_makes_total_negative(self, cart, products):
        cart.add_item(products["P007"], 1)

        totals = compute_totals(cart.lines, 500)

        assert totals.discount == pytest.approx(11.8)
        assert totals.pre_round_total == 0
        assert totals.total == 0

    def test_empty_lines(self):
        totals = compute_totals([], 0)
        assert (totals.subtotal, totals.cgst, totals.sgst, totals.total) == (0, 0, 0, 0)


class TestParseDiscount:
    """Test coercion of discount input."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("25", 25.0),
            (" 12.5 ", 12.5),
            (40, 40.0),
            ("", 0.0),
            ("abc", 0.0),
            ("-5", 0.0),
            (None, 0.0),
            ("nan", 0.0),
            ("inf", 0.0),
        ],
    )
    def test_parse_discount(self, raw, expected):
        assert parse_discount(raw) == expected


class TestGenerateBillNumber:
    """Test bill number format and collision handling."""

    def test_format(self):
        number = generate_bill_number("INV", year=2026)
        assert re.fullmatch(r"INV-2026-\d{4}", number)

    def test_defaults_to_current_year(self):
        number = generate_bill_number()
        assert number.startswith(f"INV-{date.today().year}-")

    def test_redraws_on_collision(self, scripted_rng):
        rng = scripted_rng([1, 1, 42])
        taken = {"INV-2026-0001"}
        assert generate_bill_number("INV", year=2026, taken=taken, rng=rng) == "INV-2026-0042"

    def test_other_years_do_not_count_as_collisions(self, scripted_rng):
        rng = scripted_rng([7])
        number = generate_bill_number("INV", year=2027, taken={"INV-2026-0007"}, rng=rng)
        assert number == "INV-2027-0007"

    def test_exhausted_suffix_space(self):
        taken = {f"INV-2026-{n:04d}" for n in range(10000)}
        with pytest.raises(BillNumberExhausted):
            generate_bill_number("INV", year=2026, taken=taken)


class TestCartMutations:
    """Test add, update, remove and clear on the open cart."""

    def test_first_add_moves_to_building(self, cart, products):
        assert cart.state == "empty"
        cart.add_item(products["P001"], 1)
        assert cart.state == "building"

    def test_add_appends_in_insertion_order(self, cart, products):
        cart.add_item(products["P003"], 1)
        cart.add_item(products["P001"], 1)
        assert [line.product_id for line in cart.lines] == ["P003", "P001"]

    def test_add_existing_product_merges_quantity(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.add_item(products["P001"], 3)

        assert len(cart) == 1
        line = cart.line_for("P001")
        assert line.quantity == 5
        assert line.total == pytest.approx(5 * 120 * 1.05)

    def test_merge_uses_snapshot_price_not_catalog(self, cart, products):
        cart.add_item(products["P001"], 1)
        repriced = replace(products["P001"], price=999, gst_percent=28)

        cart.add_item(repriced, 1)

        line = cart.line_for("P001")
        assert line.price == 120
        assert line.gst_percent == 5
        assert line.total == pytest.approx(252)

    def test_add_inactive_product_is_rejected(self, cart, products):
        inactive = replace(products["P001"], is_active=False)
        with pytest.raises(ValueError):
            cart.add_item(inactive, 1)
        assert len(cart) == 0

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, True])
    def test_add_rejects_non_positive_integer_quantity(self, cart, products, quantity):
        with pytest.raises(ValueError):
            cart.add_item(products["P001"], quantity)

    def test_add_does_not_touch_stock(self, cart, products):
        product = products["P001"]
        cart.add_item(product, 10)
        assert product.stock == 150

    def test_update_quantity_recomputes_total(self, cart, products):
        cart.add_item(products["P004"], 1)
        line = cart.update_quantity("P004", 4)
        assert line.quantity == 4
        assert line.total == pytest.approx(4 * 52 * 1.18)

    def test_update_quantity_keeps_line_discount(self, cart, products):
        cart.add_item(products["P005"], 1)
        cart.lines[0] = replace(cart.lines[0], discount=100)

        line = cart.update_quantity("P005", 10)

        assert line.total == pytest.approx(2840)

    def test_update_quantity_zero_removes_line(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.add_item(products["P003"], 1)

        result = cart.update_quantity("P001", 0)

        assert result is None
        assert len(cart) == 1
        assert cart.line_for("P001") is None

    def test_update_quantity_negative_removes_line(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.update_quantity("P001", -3)
        assert cart.state == "empty"

    @pytest.mark.parametrize("quantity", [0.5, 2.0, True, "3"])
    def test_update_quantity_rejects_non_integer(self, cart, products, quantity):
        cart.add_item(products["P001"], 2)

        with pytest.raises(ValueError):
            cart.update_quantity("P001", quantity)

        line = cart.line_for("P001")
        assert line.quantity == 2
        assert line.total == pytest.approx(252)

    def test_removing_last_line_drops_bill_discount(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.apply_discount(100)

        cart.update_quantity("P001", 0)

        assert cart.discount == 0
        assert cart.totals().total == 0

    def test_update_unknown_product_is_noop(self, cart, products):
        cart.add_item(products["P001"], 2)
        assert cart.update_quantity("P999", 5) is None
        assert cart.line_for("P001").quantity == 2

    def test_remove_item_is_idempotent(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.remove_item("P001")
        cart.remove_item("P001")
        assert len(cart) == 0

    def test_subtotal_tracks_mutation_sequence(self, cart, products):
        cart.add_item(products["P001"], 2)
        cart.add_item(products["P002"], 1)
        cart.add_item(products["P007"], 12)
        cart.update_quantity("P002", 3)
        cart.remove_item("P007")
        cart.add_item(products["P001"], 1)

        totals = cart.totals()

        assert abs(totals.subtotal - (3 * 120 + 3 * 145)) < EPS

    def test_clear_resets_lines_and_discount_but_keeps_customer(self, cart, products, customers):
        cart.add_item(products["P001"], 2)
        cart.apply_discount(20)
        cart.select_customer(customers["C001"])

        cart.clear()
        totals = cart.totals()

        assert cart.state == "empty"
        assert cart.discount == 0
        assert cart.customer == customers["C001"]
        assert (totals.subtotal, totals.cgst, totals.sgst, totals.total) == (0, 0, 0, 0)

    def test_apply_discount_is_absolute(self, cart):
        cart.apply_discount("30")
        cart.apply_discount("10")
        assert cart.discount == 10

    def test_apply_discount_coerces_bad_input(self, cart):
        cart.apply_discount("ten")
        assert cart.discount == 0

    def test_lines_are_immutable(self, cart, products):
        line = cart.add_item(products["P001"], 1)
        with pytest.raises(FrozenInstanceError):
            line.quantity = 5


class TestCompleteSale:
    """Test finalizing a cart into a bill."""

    def test_empty_cart_cannot_be_sold(self, cart, bills):
        with pytest.raises(EmptyCartError):
            cart.complete_sale("Cash", bills)
        assert len(bills) == 0

    def test_bill_snapshot(self, cart, bills, products, customers, scripted_rng):
        cart.add_item(products["P001"], 2)
        cart.add_item(products["P003"], 1)
        cart.select_customer(customers["C003"])

        bill = cart.complete_sale("Cash", bills, today=date(2026, 1, 10), rng=scripted_rng([17]))

        assert bill.bill_number == "INV-2026-0017"
        assert bill.date == "2026-01-10"
        assert bill.customer_id == "C003"
        assert bill.customer_name == "Selvam (Walk-in)"
        assert [line.product_id for line in bill.items] == ["P001", "P003"]
        assert bill.subtotal == pytest.approx(375)
        assert bill.cgst == pytest.approx(9.375)
        assert bill.round_off == pytest.approx(0.25)
        assert bill.total == 394
        assert bill.status == "paid"
        assert bill.paid_amount == bill.total
        assert bill.payment_mode == "Cash"

    def test_walk_in_sale(self, cart, bills, products):
        cart.add_item(products["P007"], 1)
        bill = cart.complete_sale("UPI", bills)
        assert bill.customer_id == "WALK-IN"
        assert bill.customer_name == "Walk-in Customer"

    def test_sale_resets_cart_and_customer(self, cart, bills, products, customers):
        cart.add_item(products["P001"], 1)
        cart.apply_discount(5)
        cart.select_customer(customers["C001"])

        cart.complete_sale("Cash", bills)

        assert cart.state == "empty"
        assert cart.discount == 0
        assert cart.customer is None

    def test_bills_are_prepended(self, cart, bills, products):
        cart.add_item(products["P001"], 1)
        first = cart.complete_sale("Cash", bills)
        cart.add_item(products["P002"], 1)
        second = cart.complete_sale("Cash", bills)

        assert list(bills) == [second, first]
        assert first.bill_number != second.bill_number
        assert first.id != second.id
        assert bills.find(first.bill_number) is first

    def test_bill_is_isolated_from_later_cart_changes(self, cart, bills, products):
        cart.add_item(products["P001"], 2)
        bill = cart.complete_sale("Cash", bills)
        items_before = bill.items

        cart.add_item(products["P001"], 5)
        cart.update_quantity("P001", 9)

        assert bill.items == items_before
        assert bill.items[0].quantity == 2
        with pytest.raises(FrozenInstanceError):
            bill.total = 0

    def test_bill_number_avoids_existing_bills(self, cart, products, scripted_rng):
        book = BillBook()
        cart.add_item(products["P001"], 1)
        first = cart.complete_sale("Cash", book, today=date(2026, 3, 1), rng=scripted_rng([5]))
        cart.add_item(products["P001"], 1)
        second = cart.complete_sale("Cash", book, today=date(2026, 3, 1), rng=scripted_rng([5, 6]))

        assert first.bill_number == "INV-2026-0005"
        assert second.bill_number == "INV-2026-0006"


class TestBuildPurchase:
    """Test totalling supplier invoices."""

    @pytest.fixture
    def supplier(self):
        return Supplier("SUP002", "Murugan Agencies", "9876543101")

    def test_partial_payment(self, supplier):
        purchase = build_purchase(
            "PUR004", "2026-01-11", "MA-2026-0101", supplier, [PurchaseItem("Sunflower Oil (15L)", 20, 1800, 5)], paid=30000
        )

        assert purchase.subtotal == 36000
        assert purchase.gst == pytest.approx(1800)
        assert purchase.total == pytest.approx(37800)
        assert purchase.items[0].total == pytest.approx(37800)
        assert purchase.balance == pytest.approx(7800)
        assert purchase.status == "partial"
        assert purchase.supplier_name == "Murugan Agencies"

    def test_overpayment_is_capped(self, supplier):
        purchase = build_purchase("PUR004", "2026-01-11", "MA-1", supplier, [PurchaseItem("Curd", 2, 100, 5)], paid=1000)

        assert purchase.paid == pytest.approx(210)
        assert purchase.balance == 0
        assert purchase.status == "paid"

    def test_mixed_rates(self, supplier):
        items = [PurchaseItem("Butter", 5, 6600, 12), PurchaseItem("Curd", 3, 1440, 5)]
        purchase = build_purchase("PUR004", "2026-01-11", "CDP-1", supplier, items)

        assert purchase.subtotal == 37320
        assert purchase.gst == pytest.approx(3960 + 216)
        assert purchase.balance == pytest.approx(purchase.total)
        assert purchase.status == "partial"

    def test_invoice_number_required(self, supplier):
        with pytest.raises(ValueError):
            build_purchase("PUR004", "2026-01-11", "  ", supplier, [PurchaseItem("Curd", 1, 10, 5)])

    def test_items_required(self, supplier):
        with pytest.raises(ValueError):
            build_purchase("PUR004", "2026-01-11", "MA-1", supplier, [])

    def test_item_quantity_must_be_positive_integer(self, supplier):
        with pytest.raises(ValueError):
            build_purchase("PUR004", "2026-01-11", "MA-1", supplier, [PurchaseItem("Curd", 0, 10, 5)])
