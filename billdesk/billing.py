"""Cart state and bill arithmetic.

Amounts are plain floats in rupees. Line totals always come from
``recompute_line`` so the add and update paths share one formula:

    total = quantity * price * (1 + gst_percent / 100) - discount

Bill level GST is split exactly in half into CGST and SGST, and the grand
total is rounded to whole rupees with the signed difference kept as the
round-off.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Iterator, Literal
from uuid import uuid4

from billdesk.config import BILL_NUMBER_PREFIX, WALK_IN_CUSTOMER_ID, WALK_IN_CUSTOMER_NAME
from billdesk.models import Bill, CartLine, CartTotals, Customer, Product, Purchase, PurchaseItem, Supplier

logger = logging.getLogger(__name__)

RoundMode = Literal["none", "nearest", "up", "down"]

_BILL_SUFFIX_SPACE = 10000


class EmptyCartError(ValueError):
    """Raised when a sale is completed with no lines in the cart."""


class BillNumberExhausted(RuntimeError):
    """Raised when every suffix for a prefix/year pair is already used."""


def recompute_line(line: CartLine) -> CartLine:
    """Return the line with its total recomputed from quantity, price, GST and discount."""
    total = line.quantity * line.price * (1 + line.gst_percent / 100) - line.discount
    return replace(line, total=total)


def calculate_gst(amount: float, gst_percent: float) -> tuple[float, float, float]:
    """Split GST on ``amount`` into (cgst, sgst, total)."""
    total_gst = amount * gst_percent / 100
    return (total_gst / 2, total_gst / 2, total_gst)


def round_off(amount: float, mode: RoundMode = "nearest") -> tuple[float, float]:
    """Round to whole rupees and return (rounded, rounded - amount).

    ``nearest`` rounds halves up like a cash register, not to even.
    """
    if mode == "none":
        return (amount, 0.0)
    if mode == "up":
        rounded = math.ceil(amount)
    elif mode == "down":
        rounded = math.floor(amount)
    else:
        rounded = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return (float(rounded), rounded - amount)


def compute_totals(
    lines: Iterable[CartLine],
    bill_discount: float = 0,
    *,
    gst_enabled: bool = True,
    round_mode: RoundMode = "nearest",
) -> CartTotals:
    """Aggregate subtotal, tax, discount and round-off for ``lines``."""
    subtotal = 0.0
    cgst = 0.0
    sgst = 0.0
    for line in lines:
        taxable = line.price * line.quantity
        subtotal += taxable
        if gst_enabled:
            line_cgst, line_sgst, _ = calculate_gst(taxable, line.gst_percent)
            cgst += line_cgst
            sgst += line_sgst

    # A bill discount never takes the total below zero.
    bill_discount = min(bill_discount, subtotal + cgst + sgst)
    pre_round_total = subtotal + cgst + sgst - bill_discount
    total, delta = round_off(pre_round_total, round_mode)
    return CartTotals(
        subtotal=subtotal,
        cgst=cgst,
        sgst=sgst,
        discount=bill_discount,
        pre_round_total=pre_round_total,
        round_off=delta,
        total=total,
    )


def parse_discount(value: object) -> float:
    """Coerce user input to a non-negative amount, falling back to 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def generate_bill_number(
    prefix: str = BILL_NUMBER_PREFIX,
    *,
    year: int | None = None,
    taken: Iterable[str] = (),
    rng: random.Random | None = None,
) -> str:
    """Return ``<PREFIX>-<year>-<4 digits>`` not already present in ``taken``."""
    year = year if year is not None else date.today().year
    rng = rng or random.Random()
    stem = f"{prefix}-{year}-"
    used = {number for number in taken if number.startswith(stem)}
    if len(used) >= _BILL_SUFFIX_SPACE:
        raise BillNumberExhausted(f"All bill numbers for {stem}XXXX are used")

    while True:
        candidate = f"{stem}{rng.randrange(_BILL_SUFFIX_SPACE):04d}"
        if candidate not in used:
            return candidate
        logger.debug("bill number collision on %s, drawing again", candidate)



def build_purchase(
    purchase_id: str,
    purchase_date: str,
    invoice_no: str,
    supplier: Supplier,
    items: Iterable[PurchaseItem],
    paid: float = 0,
) -> Purchase:
    """Total a supplier invoice and mark it paid or partial from the amount paid."""
    if not invoice_no.strip():
        raise ValueError("invoice number is required")
    lines = []
    for item in items:
        if isinstance(item.quantity, bool) or not isinstance(item.quantity, int) or item.quantity < 1:
            raise ValueError(f"quantity for {item.name!r} must be a positive integer")
        taxable = item.quantity * item.rate
        lines.append(replace(item, total=taxable * (1 + item.gst_percent / 100)))
    if not lines:
        raise ValueError("a purchase needs at least one item")

    subtotal = sum(item.quantity * item.rate for item in lines)
    gst = sum(item.quantity * item.rate * item.gst_percent / 100 for item in lines)
    total = subtotal + gst
    paid = min(parse_discount(paid), total)
    balance = total - paid
    return Purchase(
        id=purchase_id,
        date=purchase_date,
        invoice_no=invoice_no,
        supplier_id=supplier.id,
        supplier_name=supplier.name,
        items=tuple(lines),
        subtotal=subtotal,
        gst=gst,
        total=total,
        paid=paid,
        balance=balance,
        status="partial" if balance > 0 else "paid",
    )

class BillBook:
    """Finalized bills, most recent first."""

    def __init__(self, bills: Iterable[Bill] = ()) -> None:
        self._bills: list[Bill] = list(bills)

    def prepend(self, bill: Bill) -> None:
        self._bills.insert(0, bill)

    def numbers(self) -> set[str]:
        return {bill.bill_number for bill in self._bills}

    def find(self, bill_number: str) -> Bill | None:
        for bill in self._bills:
            if bill.bill_number == bill_number:
                return bill
        return None

    def __iter__(self) -> Iterator[Bill]:
        return iter(self._bills)

    def __len__(self) -> int:
        return len(self._bills)

    def __getitem__(self, index: int) -> Bill:
        return self._bills[index]


class Cart:
    """The single open cart of a billing session.

    Lines keep insertion order. ``customer`` is None for a walk-in sale and
    ``discount`` is an absolute bill-level amount.
    """

    def __init__(self) -> None:
        self.lines: list[CartLine] = []
        self.customer: Customer | None = None
        self.discount: float = 0.0

    @property
    def state(self) -> str:
        return "building" if self.lines else "empty"

    def __len__(self) -> int:
        return len(self.lines)

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _index_of(self, product_id: str) -> int | None:
        for idx, line in enumerate(self.lines):
            if line.product_id == product_id:
                return idx
        return None

    def add_item(self, product: Product, quantity: int = 1) -> CartLine:
        """Add ``quantity`` units of ``product``, merging into an existing line."""
        if not product.is_active:
            raise ValueError(f"Product {product.id} is inactive")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError("quantity must be a positive integer")

        idx = self._index_of(product.id)
        if idx is not None:
            current = self.lines[idx]
            line = recompute_line(replace(current, quantity=current.quantity + quantity))
            self.lines[idx] = line
            return line

        line = recompute_line(
            CartLine(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                price=product.price,
                gst_percent=product.gst_percent,
            )
        )
        self.lines.append(line)
        return line

    def update_quantity(self, product_id: str, quantity: int) -> CartLine | None:
        """Set a line's quantity; zero or less removes the line."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError("quantity must be an integer")
        if quantity <= 0:
            self.remove_item(product_id)
            return None

        idx = self._index_of(product_id)
        if idx is None:
            return None
        line = recompute_line(replace(self.lines[idx], quantity=quantity))
        self.lines[idx] = line
        return line

    def remove_item(self, product_id: str) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]
        if not self.lines:
            self.discount = 0.0

    def clear(self) -> None:
        """Drop all lines and the bill discount; the selected customer stays."""
        self.lines = []
        self.discount = 0.0

    def apply_discount(self, amount: object) -> float:
        self.discount = parse_discount(amount)
        return self.discount

    def select_customer(self, customer: Customer | None) -> None:
        self.customer = customer

    def totals(self, *, gst_enabled: bool = True, round_mode: RoundMode = "nearest") -> CartTotals:
        return compute_totals(self.lines, self.discount, gst_enabled=gst_enabled, round_mode=round_mode)

    def complete_sale(
        self,
        payment_mode: str,
        bills: BillBook,
        *,
        prefix: str = BILL_NUMBER_PREFIX,
        today: date | None = None,
        gst_enabled: bool = True,
        round_mode: RoundMode = "nearest",
        rng: random.Random | None = None,
    ) -> Bill:
        """Finalize the cart into a paid bill, prepend it to ``bills`` and reset the cart."""
        if not self.lines:
            raise EmptyCartError("Cannot complete a sale with an empty cart")

        today = today or date.today()
        totals = self.totals(gst_enabled=gst_enabled, round_mode=round_mode)
        customer = self.customer
        bill = Bill(
            id=f"B{uuid4().hex[:12]}",
            bill_number=generate_bill_number(prefix, year=today.year, taken=bills.numbers(), rng=rng),
            date=today.isoformat(),
            customer_id=customer.id if customer else WALK_IN_CUSTOMER_ID,
            customer_name=customer.name if customer else WALK_IN_CUSTOMER_NAME,
            items=tuple(self.lines),
            subtotal=totals.subtotal,
            cgst=totals.cgst,
            sgst=totals.sgst,
            discount=totals.discount,
            round_off=totals.round_off,
            total=totals.total,
            payment_mode=payment_mode,
            status="paid",
            paid_amount=totals.total,
        )
        bills.prepend(bill)
        logger.info("sale completed bill=%s lines=%d total=%.2f", bill.bill_number, len(bill.items), bill.total)

        self.clear()
        self.customer = None
        return bill
