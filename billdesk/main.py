"""Entry point for the billdesk Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from billdesk.billing_app import BillingApp
from billdesk.config import DEBUG_LOG_PATH


def setup_logging(path: str = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> None:
    """Send billdesk logs to a timestamped debug file.

    The terminal belongs to the TUI, so nothing is written to stderr.
    """
    root = logging.getLogger("billdesk")
    root.setLevel(level)
    try:
        log_file = Path(path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        root.addHandler(logging.NullHandler())
        return
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    BillingApp().run()


if __name__ == "__main__":
    main()
