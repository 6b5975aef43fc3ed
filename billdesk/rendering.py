"""Rendering helpers for search results, cart lines and totals."""

from __future__ import annotations

from rich.text import Text

from billdesk.customization import AppearanceSettings
from billdesk.formatting import format_currency
from billdesk.models import CartLine, CartTotals, Product


def money(amount: float, appearance: AppearanceSettings | None = None) -> str:
    """Currency text honouring the appearance symbol and position."""
    if appearance is None:
        return format_currency(amount)
    plain = format_currency(amount, show_symbol=False)
    if appearance.currency_position == "after":
        return f"{plain} {appearance.currency_symbol}"
    return f"{appearance.currency_symbol}{plain}"


def format_product_label(
    product: Product,
    name: str,
    show_mrp: bool = True,
    show_stock: bool = True,
    appearance: AppearanceSettings | None = None,
) -> Text:
    text = Text()
    text.append(name)
    text.append(f"  {money(product.price, appearance)}", style="bold")
    if show_mrp and product.mrp > product.price:
        text.append(f"  MRP {money(product.mrp, appearance)}", style="dim strike")
    if show_stock:
        stock_style = "#b23a48" if product.stock <= product.low_stock_threshold else "dim"
        text.append(f"  [{product.stock} {product.unit}]", style=stock_style)
    return text


def format_cart_line(line: CartLine, appearance: AppearanceSettings | None = None) -> Text:
    """``2 x Basmati Rice (1kg) @ ₹120.00 (5%)  ₹252.00``"""
    text = Text()
    text.append(f"{line.quantity} x ", style="bold")
    text.append(line.product_name)
    text.append(f" @ {money(line.price, appearance)} ({line.gst_percent:g}%)", style="dim")
    text.append(f"  {money(line.total, appearance)}", style="bold")
    return text


def format_totals(
    totals: CartTotals,
    appearance: AppearanceSettings | None = None,
    show_gst_breakup: bool = True,
    show_round_off: bool = True,
) -> Text:
    rows: list[tuple[str, float]] = [("Subtotal", totals.subtotal)]
    if show_gst_breakup:
        rows.append(("CGST", totals.cgst))
        rows.append(("SGST", totals.sgst))
    else:
        rows.append(("GST", totals.cgst + totals.sgst))
    if totals.discount:
        rows.append(("Discount", -totals.discount))
    if show_round_off and totals.round_off:
        rows.append(("Round off", totals.round_off))

    text = Text()
    for label, amount in rows:
        text.append(f"{label:<10} {money(amount, appearance):>14}\n")
    text.append(f"{'TOTAL':<10} {money(totals.total, appearance):>14}", style="bold")
    return text
