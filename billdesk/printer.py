"""Thermal invoice printing over ESC/POS USB."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from billdesk.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from billdesk.customization import InvoiceSettings
from billdesk.formatting import format_currency, format_date, format_mobile
from billdesk.models import Bill, BusinessProfile, Product

logger = logging.getLogger(__name__)

TITLE = "title"
TEXT = "text"
SEPARATOR = "separator"

_SEPARATOR_HEIGHT_PX = 12
_SEPARATOR_THICKNESS_PX = 2
_TITLE_SCALE = 1.4
_FONT_OVERRIDE_ENV = "BILLDESK_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)


def _amount_row(label: str, amount: float) -> str:
    return f"{label}: {format_currency(amount, show_symbol=False)}"


def invoice_lines(
    bill: Bill,
    profile: BusinessProfile,
    settings: InvoiceSettings,
    products: Iterable[Product] = (),
) -> list[tuple[str, str]]:
    """Lay out a bill as (kind, text) rows, honouring the invoice visibility flags."""
    hsn_by_product = {product.id: product.hsn_code for product in products}
    rows: list[tuple[str, str]] = [(TITLE, profile.business_name)]

    if settings.show_address and profile.address:
        rows.append((TEXT, f"{profile.address}, {profile.district} - {profile.pincode}"))
    if settings.show_mobile and profile.mobile:
        rows.append((TEXT, f"Ph: {format_mobile(profile.mobile)}"))
    if settings.show_email and profile.email:
        rows.append((TEXT, profile.email))
    if settings.show_gstin and profile.gstin:
        rows.append((TEXT, f"GSTIN: {profile.gstin}"))

    rows.append((SEPARATOR, ""))
    rows.append((TITLE, settings.invoice_title))
    rows.append((TEXT, f"Bill: {bill.bill_number}"))
    rows.append((TEXT, f"Date: {format_date(bill.date)}"))
    rows.append((TEXT, f"Customer: {bill.customer_name}"))
    rows.append((SEPARATOR, ""))

    for line in bill.items:
        rows.append((TEXT, line.product_name))
        detail = f"  {line.quantity} x {format_currency(line.price, show_symbol=False)} @{line.gst_percent:g}%"
        hsn = hsn_by_product.get(line.product_id)
        if settings.show_hsn_code and hsn:
            detail += f" HSN {hsn}"
        rows.append((TEXT, f"{detail} = {format_currency(line.total, show_symbol=False)}"))
        if settings.show_discount and line.discount:
            rows.append((TEXT, f"  less {format_currency(line.discount, show_symbol=False)}"))

    rows.append((SEPARATOR, ""))
    rows.append((TEXT, _amount_row("Subtotal", bill.subtotal)))
    rows.append((TEXT, _amount_row("CGST", bill.cgst)))
    rows.append((TEXT, _amount_row("SGST", bill.sgst)))
    if settings.show_discount and bill.discount:
        rows.append((TEXT, _amount_row("Discount", -bill.discount)))
    if settings.show_round_off and bill.round_off:
        rows.append((TEXT, _amount_row("Round off", bill.round_off)))
    rows.append((TITLE, f"TOTAL {format_currency(bill.total, show_symbol=False)}"))
    if settings.show_payment_mode:
        rows.append((TEXT, f"Paid by {bill.payment_mode}"))

    if settings.show_terms and settings.terms_text:
        rows.append((SEPARATOR, ""))
        rows.append((TEXT, settings.terms_text))
    if settings.show_footer and profile.invoice_footer:
        rows.append((TEXT, profile.invoice_footer))
    return rows


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. BILLDESK_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _fit_text_to_px(text: str, font: object, max_width_px: int) -> list[str]:
    """Word-wrap ``text`` into lines no wider than ``max_width_px``."""
    from PIL import Image, ImageDraw

    draw = ImageDraw.Draw(Image.new("1", (1, 1), color=1))
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and draw.textbbox((0, 0), candidate, font=font)[2] > max_width_px:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current or not lines:
        lines.append(current)
    return lines


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = ImageDraw.Draw(Image.new("1", (1, 1), color=1))
    bbox = probe.textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(12, text_height + 8)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_separator() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _SEPARATOR_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = (_SEPARATOR_HEIGHT_PX - _SEPARATOR_THICKNESS_PX) // 2
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, top + _SEPARATOR_THICKNESS_PX - 1), fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def print_bill(
    bill: Bill,
    profile: BusinessProfile,
    settings: InvoiceSettings,
    products: Iterable[Product] = (),
) -> None:
    """Print one invoice and cut the paper."""
    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    font_path = resolve_printer_font_path()
    font = ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    title_font = ImageFont.truetype(font_path, int(PRINTER_FONT_SIZE * _TITLE_SCALE))
    max_width = PRINTER_WIDTH_PX - (PRINTER_LEFT_INDENT_PX * 2)

    for kind, text in invoice_lines(bill, profile, settings, products):
        if kind == SEPARATOR:
            printer.image(_render_separator())
            continue
        line_font = title_font if kind == TITLE else font
        for wrapped in _fit_text_to_px(text, line_font, max_width):
            printer.image(_render_line(wrapped, line_font))

    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
    logger.info("printed bill=%s", bill.bill_number)
