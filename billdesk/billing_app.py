"""Main Textual billing counter app."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from billdesk.billing import BillNumberExhausted, EmptyCartError
from billdesk.config import WALK_IN_CUSTOMER_NAME
from billdesk.customer_modal import CustomerModal
from billdesk.customization import PaymentMode
from billdesk.data import display_name, search_products
from billdesk.discount_modal import DiscountModal
from billdesk.models import Customer, Product
from billdesk.payment_modal import PaymentModal
from billdesk.printer import check_printer_dependencies, print_bill
from billdesk.rendering import format_cart_line, format_product_label, format_totals, money
from billdesk.session import ShopSession

logger = logging.getLogger(__name__)


class BillingApp(App):
    """A Textual app for searching products, building a cart and billing it."""

    TITLE = "Billdesk"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #cart-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #search-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-totals {
        height: auto;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    search_query = reactive("")
    selected_index = reactive(0)
    line_selected_index = reactive(None)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next result"),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "add_selected", "Add item"),
        ("backspace", "backspace_query", "Delete query char"),
        Binding("ctrl+s", "checkout", "Pay", priority=True),
        Binding("ctrl+x", "clear_cart", "Clear cart"),
        ("escape", "cancel_active_mode", "Exit search"),
        ("ctrl+c", "cancel_active_mode", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: ShopSession | None = None) -> None:
        super().__init__()
        self.session = session or ShopSession()
        self.system_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="cart-pane"):
                yield Static(id="cart-title", classes="pane-title")
                yield Static("(cart is empty)", id="cart-list")
                yield Static(id="cart-totals")
            with Vertical(id="search-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        if not self.session.is_authenticated:
            self.session.demo_login()
        user = self.session.current_user
        self.sub_title = f"{self.session.business_profile.business_name} · {user.name if user else ''}"
        _, msg = check_printer_dependencies()
        self.system_status = msg
        logger.debug("on_mount printer_status=%r", msg)
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        char = event.character
        if self.input_state == "normal":
            handled = self._handle_normal_key(char.lower())
            if handled:
                event.stop()
            return

        if not (char.isalnum() or char in " -()"):
            return
        self.search_query += char
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def _handle_normal_key(self, key: str) -> bool:
        if key == "s":
            self.input_state = "active"
            self.search_query = ""
            self.selected_index = 0
            self._refresh_search()
            return True
        if key == "j":
            self._move_line_selection(1)
            return True
        if key == "k":
            self._move_line_selection(-1)
            return True
        if key in {"+", "="}:
            self._change_selected_quantity(1)
            return True
        if key == "-":
            self._change_selected_quantity(-1)
            return True
        if key == "d":
            self._delete_selected_line()
            return True
        if key == "c":
            self.push_screen(
                CustomerModal(self.session.customers, on_select=self._on_customer_selected, selected=self.session.cart.customer)
            )
            return True
        if key == "x":
            self._open_discount()
            return True
        return False

    def action_cancel_active_mode(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_add_selected(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            return

        product = results[self.selected_index]
        self.session.cart.add_item(product, 1)
        self.line_selected_index = self._line_index(product.id)
        self._refresh_cart()

    def action_backspace_query(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        if not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_clear_cart(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.session.cart.clear()
        self.line_selected_index = None
        self.system_status = "Cart cleared"
        self._refresh_all()

    def action_checkout(self) -> None:
        logger.debug("checkout_enter state=%r lines=%d", self.input_state, len(self.session.cart))
        if isinstance(self.screen, ModalScreen):
            return
        if not self.session.cart.lines:
            self.system_status = "Nothing to bill"
            self._refresh_search()
            return

        customization = self.session.customization
        self.push_screen(
            PaymentModal(
                customization.enabled_payment_modes,
                self.session.cart_totals(),
                default=customization.default_payment_mode,
                appearance=customization.settings.appearance,
            ),
            self._on_payment_chosen,
        )

    def _on_payment_chosen(self, mode: PaymentMode | None) -> None:
        if mode is None:
            self.system_status = "Payment cancelled"
            self._refresh_search()
            return

        try:
            bill = self.session.complete_sale(mode.name)
        except (EmptyCartError, BillNumberExhausted) as exc:
            self.system_status = f"Sale failed: {exc}"
            self._refresh_search()
            logger.warning("sale_failed error=%r", exc)
            return

        self.line_selected_index = None
        self.system_status = f"Bill {bill.bill_number} saved: {money(bill.total, self.session.customization.settings.appearance)} by {bill.payment_mode}"
        if self.session.customization.settings.billing.print_after_sale:
            try:
                print_bill(
                    bill,
                    self.session.business_profile,
                    self.session.customization.settings.invoice,
                    self.session.products,
                )
            except Exception as exc:
                self.system_status = f"Bill {bill.bill_number} saved but print failed: {exc}"
                logger.warning("print_failed bill=%s error=%r", bill.bill_number, exc)
        self._refresh_all()

    def _on_customer_selected(self, customer: Customer | None) -> None:
        self.session.cart.select_customer(customer)
        self._refresh_cart()

    def _open_discount(self) -> None:
        if not self.session.customization.settings.billing.enable_discount:
            self.system_status = "Discounts are disabled in settings"
            self._refresh_search()
            return
        totals = self.session.cart_totals()
        self.push_screen(
            DiscountModal(self.session.cart.discount, max_amount=totals.subtotal + totals.cgst + totals.sgst),
            self._on_discount_entered,
        )

    def _on_discount_entered(self, amount: float | None) -> None:
        if amount is None:
            return
        self.session.cart.apply_discount(amount)
        self.system_status = f"Discount applied: {money(self.session.cart.discount, self.session.customization.settings.appearance)}"
        self._refresh_all()

    def _filtered_results(self) -> list[Product]:
        return search_products(self.session.products, self.search_query)

    def _line_index(self, product_id: str) -> int | None:
        for idx, line in enumerate(self.session.cart.lines):
            if line.product_id == product_id:
                return idx
        return None

    def _refresh_all(self) -> None:
        self._refresh_cart()
        self._refresh_search()

    def _move_line_selection(self, delta: int) -> None:
        lines = self.session.cart.lines
        if not lines:
            return

        if self.line_selected_index is None:
            self.line_selected_index = 0 if delta > 0 else len(lines) - 1
        else:
            self.line_selected_index = (self.line_selected_index + delta) % len(lines)
        self._refresh_cart()

    def _selected_product_id(self) -> str | None:
        lines = self.session.cart.lines
        if self.line_selected_index is None or not (0 <= self.line_selected_index < len(lines)):
            return None
        return lines[self.line_selected_index].product_id

    def _change_selected_quantity(self, delta: int) -> None:
        product_id = self._selected_product_id()
        if product_id is None:
            return
        line = self.session.cart.line_for(product_id)
        if line is None:
            return
        self.session.cart.update_quantity(product_id, line.quantity + delta)
        self._clamp_line_selection()
        self._refresh_cart()

    def _delete_selected_line(self) -> None:
        product_id = self._selected_product_id()
        if product_id is None:
            return
        self.session.cart.remove_item(product_id)
        self._clamp_line_selection()
        self._refresh_cart()

    def _clamp_line_selection(self) -> None:
        count = len(self.session.cart.lines)
        if count == 0:
            self.line_selected_index = None
        elif self.line_selected_index is not None:
            self.line_selected_index = min(self.line_selected_index, count - 1)

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            title_widget = self.query_one("#cart-title", Static)
            totals_widget = self.query_one("#cart-totals", Static)
        except NoMatches:
            return

        cart = self.session.cart
        settings = self.session.customization.settings
        customer = cart.customer.name if cart.customer else WALK_IN_CUSTOMER_NAME
        title_widget.update(f"Cart · {customer}")
        totals_widget.update(
            format_totals(
                self.session.cart_totals(),
                settings.appearance,
                show_gst_breakup=settings.tax.show_gst_breakup,
                show_round_off=settings.invoice.show_round_off,
            )
        )

        if not cart.lines:
            self.line_selected_index = None
            cart_widget.update("(cart is empty)")
            return

        self._clamp_line_selection()
        visible_rows = self._visible_rows(cart_widget)
        start, end = self._window_bounds(len(cart.lines), visible_rows, self.line_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.line_selected_index else "  "
            lines.append(pointer)
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_cart_line(cart.lines[idx], settings.appearance))

        if end < len(cart.lines):
            lines.append("\n⋮", style="dim")

        cart_widget.update(lines)

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(f"S search · J/K select · +/- qty · D delete · C customer · X discount · Ctrl+S pay\n{status}")
            return

        text = Text()
        text.append("Search", style="bold #ffffff on #2f6db5")
        text.append(f": {self.search_query}")
        bar.update(text)

    def _refresh_results(self, results: list[Product]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return

        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        billing = self.session.customization.settings.billing
        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            product = results[idx]
            lines.append_text(
                format_product_label(
                    product,
                    display_name(product, self.session.language),
                    show_mrp=billing.show_mrp,
                    show_stock=billing.show_stock,
                    appearance=self.session.customization.settings.appearance,
                )
            )

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)
