"""Sales, GST, stock and expense summaries computed from session data."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from billdesk.models import Bill, Customer, Expense, Product, Purchase, Supplier


@dataclass(frozen=True)
class GstSummary:
    cgst_collected: float
    sgst_collected: float
    total_gst: float


@dataclass(frozen=True)
class Gstr1Row:
    invoice_no: str
    date: str
    customer_name: str
    gstin: str
    taxable: float
    cgst: float
    sgst: float
    total: float


@dataclass(frozen=True)
class HsnRow:
    hsn: str
    description: str
    gst_rate: float
    quantity: int
    taxable: float
    cgst: float
    sgst: float
    total: float


@dataclass(frozen=True)
class CategoryStock:
    category: str
    count: int
    stock: int
    value: float


@dataclass(frozen=True)
class StockSummary:
    low_stock: list[Product]
    out_of_stock: list[Product]
    healthy: list[Product]
    total_value: float
    by_category: list[CategoryStock] = field(default_factory=list)


@dataclass(frozen=True)
class SalesSummary:
    total_sales: float
    bill_count: int
    paid_count: int
    pending_amount: float


@dataclass(frozen=True)
class ExpenseSummary:
    today: float
    this_month: float
    total: float
    by_category: dict[str, float]


@dataclass(frozen=True)
class PurchaseSummary:
    total_purchases: float
    total_paid: float
    total_balance: float
    supplier_count: int


def gst_summary(bills: Iterable[Bill]) -> GstSummary:
    cgst = 0.0
    sgst = 0.0
    for bill in bills:
        cgst += bill.cgst
        sgst += bill.sgst
    return GstSummary(cgst_collected=cgst, sgst_collected=sgst, total_gst=cgst + sgst)


def gstr1_rows(bills: Iterable[Bill], customers: Iterable[Customer]) -> list[Gstr1Row]:
    """Outward supplies register, one row per bill."""
    gstin_by_customer = {customer.id: customer.gstin for customer in customers}
    return [
        Gstr1Row(
            invoice_no=bill.bill_number,
            date=bill.date,
            customer_name=bill.customer_name,
            gstin=gstin_by_customer.get(bill.customer_id) or "-",
            taxable=bill.subtotal,
            cgst=bill.cgst,
            sgst=bill.sgst,
            total=bill.total,
        )
        for bill in bills
    ]


def hsn_summary(bills: Iterable[Bill], products: Iterable[Product]) -> list[HsnRow]:
    """Taxable value and tax per (HSN code, GST rate), ordered by HSN code.

    Lines whose product is no longer in the catalog are grouped under ``-``.
    """
    product_by_id = {product.id: product for product in products}
    buckets: dict[tuple[str, float], dict[str, object]] = {}
    for bill in bills:
        for line in bill.items:
            product = product_by_id.get(line.product_id)
            hsn = product.hsn_code if product else "-"
            key = (hsn, line.gst_percent)
            bucket = buckets.setdefault(
                key,
                {"description": product.category if product else line.product_name, "quantity": 0, "taxable": 0.0},
            )
            bucket["quantity"] += line.quantity  # type: ignore[operator]
            bucket["taxable"] += line.price * line.quantity  # type: ignore[operator]

    rows = []
    for (hsn, rate), bucket in sorted(buckets.items()):
        taxable = float(bucket["taxable"])  # type: ignore[arg-type]
        half = taxable * rate / 200
        rows.append(
            HsnRow(
                hsn=hsn,
                description=str(bucket["description"]),
                gst_rate=rate,
                quantity=int(bucket["quantity"]),  # type: ignore[arg-type]
                taxable=taxable,
                cgst=half,
                sgst=half,
                total=taxable + 2 * half,
            )
        )
    return rows


def low_stock_products(products: Iterable[Product]) -> list[Product]:
    """Products still in stock but at or under their own threshold."""
    return [p for p in products if 0 < p.stock <= p.low_stock_threshold]


def stock_summary(products: Iterable[Product]) -> StockSummary:
    products = list(products)
    per_category: dict[str, list[Product]] = defaultdict(list)
    for product in products:
        per_category[product.category].append(product)

    by_category = [
        CategoryStock(
            category=category,
            count=len(items),
            stock=sum(p.stock for p in items),
            value=sum(p.stock * p.price for p in items),
        )
        for category, items in per_category.items()
    ]
    return StockSummary(
        low_stock=low_stock_products(products),
        out_of_stock=[p for p in products if p.stock == 0],
        healthy=[p for p in products if p.stock > p.low_stock_threshold],
        total_value=sum(p.stock * p.price for p in products),
        by_category=by_category,
    )


def sales_summary(bills: Iterable[Bill]) -> SalesSummary:
    bills = list(bills)
    return SalesSummary(
        total_sales=sum(bill.total for bill in bills),
        bill_count=len(bills),
        paid_count=sum(1 for bill in bills if bill.status == "paid"),
        pending_amount=sum(bill.total for bill in bills if bill.status == "pending"),
    )


def top_selling(bills: Iterable[Bill], limit: int = 5) -> list[tuple[str, int, float]]:
    """(product name, quantity, revenue) sorted by quantity sold."""
    quantity: dict[str, int] = defaultdict(int)
    revenue: dict[str, float] = defaultdict(float)
    for bill in bills:
        for line in bill.items:
            quantity[line.product_name] += line.quantity
            revenue[line.product_name] += line.price * line.quantity
    ranked = sorted(quantity, key=lambda name: (-quantity[name], name))
    return [(name, quantity[name], revenue[name]) for name in ranked[:limit]]


def expense_summary(expenses: Iterable[Expense], today: date | None = None) -> ExpenseSummary:
    today = today or date.today()
    today_iso = today.isoformat()
    month_prefix = today_iso[:7]
    expenses = list(expenses)
    by_category: dict[str, float] = defaultdict(float)
    for expense in expenses:
        by_category[expense.category] += expense.amount
    return ExpenseSummary(
        today=sum(e.amount for e in expenses if e.date == today_iso),
        this_month=sum(e.amount for e in expenses if e.date.startswith(month_prefix)),
        total=sum(e.amount for e in expenses),
        by_category=dict(by_category),
    )


def customer_summary(customers: Iterable[Customer]) -> dict[str, float]:
    counts: dict[str, float] = {"retail": 0, "wholesale": 0, "credit": 0, "total_outstanding": 0.0}
    for customer in customers:
        counts[customer.type] += 1
        counts["total_outstanding"] += customer.outstanding_balance
    return counts


def purchase_summary(purchases: Iterable[Purchase], suppliers: Iterable[Supplier]) -> PurchaseSummary:
    purchases = list(purchases)
    return PurchaseSummary(
        total_purchases=sum(p.total for p in purchases),
        total_paid=sum(p.paid for p in purchases),
        total_balance=sum(p.balance for p in purchases),
        supplier_count=len(list(suppliers)),
    )
