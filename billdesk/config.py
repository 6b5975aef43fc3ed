"""Runtime configuration defaults for billing and printing."""

from __future__ import annotations

BILL_NUMBER_PREFIX = "INV"
WALK_IN_CUSTOMER_ID = "WALK-IN"
WALK_IN_CUSTOMER_NAME = "Walk-in Customer"
CURRENCY_SYMBOL = "₹"

DEBUG_LOG_PATH = "/tmp/billdesk-debug.log"

# 58mm ESC/POS thermal printer.
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 22
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8
PRINTER_TAIL_SPACER_PX = 70
