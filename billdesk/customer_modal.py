"""Customer picker modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from billdesk.config import WALK_IN_CUSTOMER_NAME
from billdesk.data import search_customers
from billdesk.formatting import format_mobile
from billdesk.models import Customer


class CustomerModal(ModalScreen[None]):
    """Search customers by name or mobile and attach one to the cart.

    The first row is always "Walk-in Customer", which clears the selection.
    """

    CSS = """
    CustomerModal {
        align: center middle;
        background: $background 60%;
    }

    #customer-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #customer-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #customer-query {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #customer-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        customers: list[Customer],
        on_select: Callable[[Customer | None], None],
        selected: Customer | None = None,
    ) -> None:
        super().__init__()
        self.customers = customers
        self.on_select = on_select
        self.selected = selected
        self.query_text = ""

    def compose(self) -> ComposeResult:
        with Container(id="customer-dialog"):
            yield Static("Select Customer", id="customer-title")
            yield Static(id="customer-query")
            yield Static(id="customer-body")
            yield Static("Type to search. ↑/↓ move, Enter select, Esc cancel", id="customer-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss()
            event.stop()
            return

        if event.key in {"up", "down"}:
            rows = self._rows()
            delta = -1 if event.key == "up" else 1
            self.cursor_index = (self.cursor_index + delta) % len(rows)
            self._refresh_content()
            event.stop()
            return

        if event.key == "enter":
            rows = self._rows()
            self.on_select(rows[self.cursor_index])
            self.dismiss()
            event.stop()
            return

        if event.key == "backspace":
            self.query_text = self.query_text[:-1]
            self.cursor_index = 0
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.query_text += event.character
            self.cursor_index = 0
            self._refresh_content()
            event.stop()

    def _rows(self) -> list[Customer | None]:
        return [None, *search_customers(self.customers, self.query_text)]

    def _refresh_content(self) -> None:
        self.query_one("#customer-query", Static).update(f"Search: {self.query_text}")
        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = 0

        content = Text(style="white")
        for idx, customer in enumerate(rows):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            if customer is None:
                content.append(f"{pointer}{WALK_IN_CUSTOMER_NAME}", style="italic white")
                continue
            marker = "● " if self.selected is not None and customer.id == self.selected.id else ""
            content.append(f"{pointer}{marker}{customer.name}", style="bold white" if marker else "white")
            content.append(f"  {format_mobile(customer.mobile)}", style="dim")
            if customer.gstin:
                content.append(f"  {customer.gstin}", style="dim")
        self.query_one("#customer-body", Static).update(content)
