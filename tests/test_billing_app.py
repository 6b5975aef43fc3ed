"""
Tests for the Textual billing counter, driven through the app pilot.

Each test builds its own session so printer output stays off and state
does not leak between runs.
"""

import pytest

from billdesk.billing_app import BillingApp
from billdesk.session import ShopSession


@pytest.fixture
def app():
    session = ShopSession()
    session.customization.update_section("billing", print_after_sale=False)
    return BillingApp(session=session)


async def _add_basmati(pilot):
    await pilot.press("s", "b", "a", "s", "m")
    await pilot.press("enter")
    await pilot.press("escape")


class TestSearchAndCart:
    """Test product search and cart editing keys."""

    @pytest.mark.asyncio
    async def test_search_adds_product(self, app):
        async with app.run_test() as pilot:
            await pilot.press("s", "b", "a", "s", "m")
            assert app.input_state == "active"
            assert app.search_query == "basm"

            await pilot.press("enter")
            await pilot.press("escape")

            assert app.input_state == "normal"
            assert app.search_query == ""
            line = app.session.cart.line_for("P001")
            assert line.quantity == 1
            assert app.line_selected_index == 0

    @pytest.mark.asyncio
    async def test_quantity_keys(self, app):
        async with app.run_test() as pilot:
            await _add_basmati(pilot)

            await pilot.press("+", "+")
            assert app.session.cart.line_for("P001").quantity == 3

            await pilot.press("-")
            assert app.session.cart.line_for("P001").quantity == 2

            await pilot.press("d")
            assert app.session.cart.state == "empty"
            assert app.line_selected_index is None

    @pytest.mark.asyncio
    async def test_pick_customer(self, app):
        async with app.run_test() as pilot:
            await pilot.press("c", "a", "n", "b", "u", "down", "enter")
            await pilot.pause()

            assert app.session.cart.customer.id == "C004"

    @pytest.mark.asyncio
    async def test_clear_cart(self, app):
        async with app.run_test() as pilot:
            await _add_basmati(pilot)
            await pilot.press("ctrl+x")

            assert app.session.cart.state == "empty"
            assert app.system_status == "Cart cleared"


class TestCheckout:
    """Test payment and discount modals."""

    @pytest.mark.asyncio
    async def test_checkout_with_default_mode(self, app):
        async with app.run_test() as pilot:
            await _add_basmati(pilot)

            await pilot.press("ctrl+s")
            await pilot.press("enter")
            await pilot.pause()

            bill = app.session.bills[0]
            assert len(app.session.bills) == 4
            assert bill.payment_mode == "Cash"
            assert bill.total == 126
            assert app.session.cart.state == "empty"
            assert app.system_status.startswith(f"Bill {bill.bill_number} saved")

    @pytest.mark.asyncio
    async def test_checkout_cancelled(self, app):
        async with app.run_test() as pilot:
            await _add_basmati(pilot)

            await pilot.press("ctrl+s")
            await pilot.press("escape")
            await pilot.pause()

            assert len(app.session.bills) == 3
            assert app.session.cart.line_for("P001") is not None
            assert app.system_status == "Payment cancelled"

    @pytest.mark.asyncio
    async def test_checkout_empty_cart(self, app):
        async with app.run_test() as pilot:
            await pilot.press("ctrl+s")

            assert len(app.session.bills) == 3
            assert app.system_status == "Nothing to bill"

    @pytest.mark.asyncio
    async def test_discount_entry(self, app):
        async with app.run_test() as pilot:
            await _add_basmati(pilot)

            await pilot.press("x", "1", "0", "enter")
            await pilot.pause()

            assert app.session.cart.discount == 10
            assert app.session.cart_totals().total == 116

    @pytest.mark.asyncio
    async def test_discount_disabled(self, app):
        app.session.customization.update_section("billing", enable_discount=False)
        async with app.run_test() as pilot:
            await _add_basmati(pilot)
            await pilot.press("x")

            assert app.system_status == "Discounts are disabled in settings"
            assert app.session.cart.discount == 0

    @pytest.mark.asyncio
    async def test_payment_prompt_uses_currency_settings(self, app):
        app.session.customization.update_section("appearance", currency_symbol="Rs.", currency_position="after")
        async with app.run_test() as pilot:
            await _add_basmati(pilot)
            await pilot.press("ctrl+s")
            await pilot.pause()

            assert app.screen.collect_prompt() == "Collect 126.00 Rs."
