"""Bill discount entry modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from billdesk.billing import parse_discount


class DiscountModal(ModalScreen[float | None]):
    """Prompt for an absolute bill discount in rupees."""

    CSS = """
    DiscountModal {
        align: center middle;
        background: $background 60%;
    }

    #discount-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #discount-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #discount-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #discount-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #discount-help {
        color: #dddddd;
    }
    """

    def __init__(self, current: float = 0, max_amount: float | None = None) -> None:
        super().__init__()
        self.value = f"{current:g}" if current else ""
        self.max_amount = max_amount
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="discount-dialog"):
            yield Static("Bill Discount", id="discount-title")
            yield Static(id="discount-value")
            yield Static(id="discount-error")
            yield Static("Digits and '.'. Enter apply. Backspace delete. Esc/q cancel.", id="discount-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character and (event.character.isdigit() or event.character == "."):
            if event.character == "." and "." in self.value:
                event.stop()
                return
            if len(self.value) < 10:
                self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        amount = parse_discount(self.value)
        if self.max_amount is not None and amount > self.max_amount:
            self.error = "Discount cannot exceed the bill amount."
            self._refresh_content()
            return
        self.dismiss(amount)

    def _refresh_content(self) -> None:
        self.query_one("#discount-value", Static).update(f"₹ {self.value}")
        self.query_one("#discount-error", Static).update(self.error or "")
