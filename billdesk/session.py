"""Explicit shop session state passed to every screen."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Literal

from billdesk.billing import BillBook, Cart, compute_totals
from billdesk.config import BILL_NUMBER_PREFIX
from billdesk.customization import CustomizationStore
from billdesk.data import (
    default_bills,
    default_business_profile,
    default_customers,
    default_expenses,
    default_products,
    default_purchases,
    default_staff,
    default_suppliers,
    find_customer,
    find_product,
    find_supplier,
)
from billdesk.models import Bill, CartTotals, Customer, Expense, Product, Purchase, Staff, Supplier

logger = logging.getLogger(__name__)

Language = Literal["en", "ta"]
Theme = Literal["light", "dark"]


class ShopSession:
    """In-memory state for one running billing client.

    Nothing here is persisted; a new session starts from the demo data.
    """

    def __init__(self) -> None:
        self.products: list[Product] = default_products()
        self.customers: list[Customer] = default_customers()
        self.bills = BillBook(default_bills())
        self.expenses: list[Expense] = default_expenses()
        self.staff: list[Staff] = default_staff()
        self.suppliers: list[Supplier] = default_suppliers()
        self.purchases: list[Purchase] = default_purchases()
        self.business_profile = default_business_profile()
        self.cart = Cart()
        self.customization = CustomizationStore()
        self.language: Language = "en"
        self.theme: Theme = "light"
        self.current_user: Staff | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def login(self, email: str, password: str) -> bool:
        """Demo login: any password works, unknown emails sign in as the first staff member."""
        user = next((member for member in self.staff if member.email == email), None)
        self.current_user = user or self.staff[0]
        logger.info("login user=%s", self.current_user.id)
        return True

    def demo_login(self) -> None:
        self.current_user = self.staff[0]

    def logout(self) -> None:
        self.current_user = None
        self.cart.clear()
        self.cart.select_customer(None)

    def product(self, product_id: str) -> Product | None:
        return find_product(self.products, product_id)

    def customer(self, customer_id: str) -> Customer | None:
        return find_customer(self.customers, customer_id)

    def add_product(self, product: Product) -> None:
        self.products.append(product)

    def update_product(self, product_id: str, **changes: Any) -> Product | None:
        """Replace a catalog entry; open cart lines keep their copied price."""
        for idx, product in enumerate(self.products):
            if product.id == product_id:
                self.products[idx] = replace(product, **changes)
                return self.products[idx]
        return None

    def delete_product(self, product_id: str) -> None:
        self.products = [product for product in self.products if product.id != product_id]

    def add_customer(self, customer: Customer) -> None:
        self.customers.append(customer)

    def update_customer(self, customer_id: str, **changes: Any) -> Customer | None:
        for idx, customer in enumerate(self.customers):
            if customer.id == customer_id:
                self.customers[idx] = replace(customer, **changes)
                return self.customers[idx]
        return None

    def add_bill(self, bill: Bill) -> None:
        self.bills.prepend(bill)

    def add_expense(self, expense: Expense) -> None:
        self.expenses.insert(0, expense)

    def supplier(self, supplier_id: str) -> Supplier | None:
        return find_supplier(self.suppliers, supplier_id)

    def add_supplier(self, supplier: Supplier) -> None:
        if not supplier.name.strip() or not supplier.mobile.strip():
            raise ValueError("supplier name and mobile are required")
        self.suppliers.append(supplier)

    def add_purchase(self, purchase: Purchase) -> None:
        """Record a purchase entry, most recent first."""
        if self.supplier(purchase.supplier_id) is None:
            raise ValueError(f"Unknown supplier {purchase.supplier_id}")
        self.purchases.insert(0, purchase)
        logger.info("purchase recorded invoice=%s total=%.2f", purchase.invoice_no, purchase.total)

    def update_business_profile(self, **changes: Any) -> None:
        self.business_profile = replace(self.business_profile, **changes)

    def _gst_enabled(self) -> bool:
        settings = self.customization.settings
        return settings.billing.enable_gst and settings.tax.enable_gst

    def _bill_discount(self) -> float:
        return self.cart.discount if self.customization.settings.billing.enable_discount else 0.0

    def _round_mode(self) -> str:
        billing = self.customization.settings.billing
        return billing.round_off_to if billing.enable_round_off else "none"

    def cart_totals(self) -> CartTotals:
        return compute_totals(
            self.cart.lines,
            self._bill_discount(),
            gst_enabled=self._gst_enabled(),
            round_mode=self._round_mode(),  # type: ignore[arg-type]
        )

    def complete_sale(self, payment_mode: str | None = None, today: date | None = None) -> Bill:
        """Finalize the open cart using the configured GST and round-off settings."""
        if payment_mode is None:
            default_mode = self.customization.default_payment_mode
            payment_mode = default_mode.name if default_mode else "Cash"
        self.cart.discount = self._bill_discount()
        return self.cart.complete_sale(
            payment_mode,
            self.bills,
            prefix=BILL_NUMBER_PREFIX,
            today=today,
            gst_enabled=self._gst_enabled(),
            round_mode=self._round_mode(),  # type: ignore[arg-type]
        )
