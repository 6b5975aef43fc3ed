"""Typed demo data and catalog lookup helpers."""

from __future__ import annotations

from typing import Iterable

from billdesk.constant import (
    BILLS as _BILLS_RAW,
    BUSINESS_PROFILE as _BUSINESS_PROFILE_RAW,
    CUSTOMERS as _CUSTOMERS_RAW,
    EXPENSES as _EXPENSES_RAW,
    PRODUCTS as _PRODUCTS_RAW,
    PURCHASES as _PURCHASES_RAW,
    STAFF as _STAFF_RAW,
    SUPPLIERS as _SUPPLIERS_RAW,
)
from billdesk.models import (
    Bill,
    BusinessProfile,
    CartLine,
    Customer,
    Expense,
    Product,
    Purchase,
    PurchaseItem,
    Staff,
    Supplier,
)


def _bill_from_raw(raw: dict[str, object]) -> Bill:
    items = tuple(
        CartLine(
            product_id=product_id,
            product_name=name,
            quantity=quantity,
            price=price,
            gst_percent=gst,
            discount=discount,
            total=total,
        )
        for product_id, name, quantity, price, gst, discount, total in raw["items"]  # type: ignore[union-attr]
    )
    fields = {key: value for key, value in raw.items() if key != "items"}
    return Bill(items=items, **fields)  # type: ignore[arg-type]


def default_products() -> list[Product]:
    """Fresh copy of the demo catalog."""
    return [Product(**raw) for raw in _PRODUCTS_RAW]  # type: ignore[arg-type]


def default_customers() -> list[Customer]:
    return [Customer(**raw) for raw in _CUSTOMERS_RAW]  # type: ignore[arg-type]


def default_bills() -> list[Bill]:
    """Demo bills, most recent first."""
    return [_bill_from_raw(raw) for raw in _BILLS_RAW]


def default_expenses() -> list[Expense]:
    return [Expense(*row) for row in _EXPENSES_RAW]


def default_suppliers() -> list[Supplier]:
    return [Supplier(**raw) for raw in _SUPPLIERS_RAW]  # type: ignore[arg-type]


def default_purchases() -> list[Purchase]:
    """Demo purchase entries, most recent first."""
    purchases = []
    for raw in _PURCHASES_RAW:
        items = tuple(PurchaseItem(*row) for row in raw["items"])  # type: ignore[union-attr]
        fields = {key: value for key, value in raw.items() if key != "items"}
        purchases.append(Purchase(items=items, **fields))  # type: ignore[arg-type]
    return purchases


def default_staff() -> list[Staff]:
    return [Staff(**raw) for raw in _STAFF_RAW]  # type: ignore[arg-type]


def default_business_profile() -> BusinessProfile:
    return BusinessProfile(**_BUSINESS_PROFILE_RAW)


def category_slug(name: str) -> str:
    """Turn a category display name into its id ("Personal Care" -> "personal-care")."""
    return "-".join(name.lower().split())


def display_name(product: Product, language: str = "en") -> str:
    """Return the product name for the active UI language."""
    if language == "ta" and product.name_tamil:
        return product.name_tamil
    return product.name


def find_product(products: Iterable[Product], product_id: str) -> Product | None:
    for product in products:
        if product.id == product_id:
            return product
    return None


def find_supplier(suppliers: Iterable[Supplier], supplier_id: str) -> Supplier | None:
    for supplier in suppliers:
        if supplier.id == supplier_id:
            return supplier
    return None


def find_customer(customers: Iterable[Customer], customer_id: str) -> Customer | None:
    for customer in customers:
        if customer.id == customer_id:
            return customer
    return None


def search_products(products: Iterable[Product], query: str = "", category: str | None = None) -> list[Product]:
    """Active products matching name, Tamil name or barcode, optionally within a category slug."""
    q = query.strip().lower()
    results = []
    for product in products:
        if not product.is_active:
            continue
        if category and category_slug(product.category) != category:
            continue
        if q and not (q in product.name.lower() or q in product.name_tamil or q in product.barcode):
            continue
        results.append(product)
    return results


def search_customers(customers: Iterable[Customer], query: str = "") -> list[Customer]:
    """Customers matching name or mobile number."""
    q = query.strip().lower()
    if not q:
        return list(customers)
    return [customer for customer in customers if q in customer.name.lower() or q in customer.mobile]


def search_suppliers(suppliers: Iterable[Supplier], query: str = "") -> list[Supplier]:
    """Suppliers matching name or contact person."""
    q = query.strip().lower()
    return [supplier for supplier in suppliers if q in supplier.name.lower() or q in supplier.contact.lower()]


def search_purchases(purchases: Iterable[Purchase], query: str = "") -> list[Purchase]:
    """Purchases matching supplier name or supplier invoice number."""
    q = query.strip().lower()
    return [purchase for purchase in purchases if q in purchase.supplier_name.lower() or q in purchase.invoice_no.lower()]
