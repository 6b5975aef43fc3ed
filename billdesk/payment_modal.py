"""Payment mode picker shown before a sale is completed."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from billdesk.customization import AppearanceSettings, PaymentMode
from billdesk.models import CartTotals
from billdesk.rendering import money


class PaymentModal(ModalScreen[PaymentMode | None]):
    """Centered modal listing enabled payment modes for the open bill."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "choose", "Pay"),
    ]

    CSS = """
    PaymentModal {
        align: center middle;
        background: $background 60%;
    }

    #payment-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #payment-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #payment-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        modes: list[PaymentMode],
        totals: CartTotals,
        default: PaymentMode | None = None,
        appearance: AppearanceSettings | None = None,
    ) -> None:
        super().__init__()
        self.appearance = appearance
        self.modes = modes
        self.totals = totals
        if default is not None and default in modes:
            self.set_reactive(PaymentModal.cursor_index, modes.index(default))

    def compose(self) -> ComposeResult:
        with Container(id="payment-dialog"):
            yield Static(self.collect_prompt(), id="payment-title")
            yield Static(id="payment-body")
            yield Static("J/K/↑/↓ move, Enter complete sale, Esc/q cancel", id="payment-help")

    def collect_prompt(self) -> str:
        return f"Collect {money(self.totals.total, self.appearance)}"

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if not self.modes:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.modes)
        self._refresh_content()

    def action_choose(self) -> None:
        if not self.modes:
            self.dismiss(None)
            return
        self.dismiss(self.modes[self.cursor_index])

    def _refresh_content(self) -> None:
        body = self.query_one("#payment-body", Static)
        if not self.modes:
            body.update("No payment modes enabled")
            return

        content = Text(style="white")
        for idx, mode in enumerate(self.modes):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            style = "bold white" if idx == self.cursor_index else "white"
            content.append(f"{pointer}{mode.icon} {mode.name}", style=style)
        body.update(content)
