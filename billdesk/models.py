"""Domain models for billdesk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CustomerType = Literal["retail", "wholesale", "credit"]
BillStatus = Literal["paid", "pending", "partial"]
StaffRole = Literal["owner", "manager", "cashier", "accountant"]
PurchaseStatus = Literal["paid", "partial"]


@dataclass(frozen=True)
class Product:
    """A catalog entry. Edits replace the whole entry."""

    id: str
    name: str
    name_tamil: str
    category: str
    price: float
    mrp: float
    gst_percent: float
    hsn_code: str
    stock: int
    unit: str
    barcode: str
    low_stock_threshold: int
    is_active: bool = True


@dataclass(frozen=True)
class Customer:
    """A customer directory record."""

    id: str
    name: str
    mobile: str
    type: CustomerType = "retail"
    email: str | None = None
    address: str | None = None
    gstin: str | None = None
    credit_limit: float = 0
    outstanding_balance: float = 0
    total_purchases: float = 0
    last_purchase_date: str = ""


@dataclass(frozen=True)
class CartLine:
    """A cart row with price, name and GST copied from the product at add time."""

    product_id: str
    product_name: str
    quantity: int
    price: float
    gst_percent: float
    discount: float = 0
    total: float = 0


@dataclass(frozen=True)
class CartTotals:
    """Aggregate amounts for a set of cart lines."""

    subtotal: float = 0
    cgst: float = 0
    sgst: float = 0
    discount: float = 0
    pre_round_total: float = 0
    round_off: float = 0
    total: float = 0


@dataclass(frozen=True)
class Bill:
    """A finalized sale."""

    id: str
    bill_number: str
    date: str
    customer_id: str
    customer_name: str
    items: tuple[CartLine, ...]
    subtotal: float
    cgst: float
    sgst: float
    discount: float
    round_off: float
    total: float
    payment_mode: str
    status: BillStatus = "paid"
    paid_amount: float = 0


@dataclass(frozen=True)
class Expense:
    id: str
    date: str
    category: str
    description: str
    amount: float
    payment_mode: str


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
    mobile: str
    contact: str = ""
    email: str = ""
    address: str = ""
    gstin: str = ""
    total_purchases: float = 0
    balance: float = 0


@dataclass(frozen=True)
class PurchaseItem:
    name: str
    quantity: int
    rate: float
    gst_percent: float
    total: float = 0


@dataclass(frozen=True)
class Purchase:
    """A stock purchase entered against a supplier invoice."""

    id: str
    date: str
    invoice_no: str
    supplier_id: str
    supplier_name: str
    items: tuple[PurchaseItem, ...]
    subtotal: float
    gst: float
    total: float
    paid: float
    balance: float
    status: PurchaseStatus = "paid"


@dataclass(frozen=True)
class Staff:
    id: str
    name: str
    mobile: str
    role: StaffRole
    email: str
    is_active: bool = True
    sales_count: int = 0
    total_sales: float = 0


@dataclass
class BusinessProfile:
    """Shop identity printed on invoices."""

    business_name: str
    owner_name: str
    mobile: str
    email: str
    category: str
    gstin: str
    address: str
    state: str
    district: str
    pincode: str
    invoice_footer: str
    financial_year: str
    logo: str | None = None
