"""Indian number, currency, date and contact formatting."""

from __future__ import annotations

import re
from datetime import date, datetime

from billdesk.config import CURRENCY_SYMBOL

_GSTIN_RE = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")


def group_indian(digits: str) -> str:
    """Group an integer digit string lakh-style: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_number(num: float, decimals: int = 0) -> str:
    """Format a number with Indian digit grouping."""
    sign = "-" if num < 0 else ""
    whole, _, fraction = f"{abs(num):.{decimals}f}".partition(".")
    grouped = group_indian(whole)
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_currency(amount: float, show_symbol: bool = True, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format rupees as ₹1,23,456.00."""
    formatted = format_number(amount, decimals=2)
    if not show_symbol:
        return formatted
    if formatted.startswith("-"):
        return f"-{symbol}{formatted[1:]}"
    return f"{symbol}{formatted}"


def _as_datetime(value: str | date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value)


def format_date(value: str | date | datetime) -> str:
    """10 Jan 2026"""
    return _as_datetime(value).strftime("%d %b %Y")


def format_date_time(value: str | date | datetime) -> str:
    """10 Jan 2026, 02:30 PM"""
    return _as_datetime(value).strftime("%d %b %Y, %I:%M %p")


def format_mobile(mobile: str) -> str:
    """Split a 10-digit mobile number as 98765 43210; other input is returned unchanged."""
    cleaned = re.sub(r"\D", "", mobile)
    if len(cleaned) == 10:
        return f"{cleaned[:5]} {cleaned[5:]}"
    return mobile


def is_valid_gstin(gstin: str) -> bool:
    return bool(_GSTIN_RE.match(gstin))
