"""Runtime configuration defaults for the POS session, reports and printing."""

from __future__ import annotations

RESTAURANT_NAME = "SizzleSync"
CURRENCY_LABEL = "PHP"

FIRST_ORDER_NUMBER = 1001
MIN_QUANTITY = 1
MAX_QUANTITY = 100

# A submission made while no order is active is dequeued straight into the tab.
AUTO_ACTIVATE_FIRST_ORDER = True
# Offer the next queued order right after a completion.
AUTO_ADVANCE_AFTER_COMPLETE = False

# "compact" or "board"
MENU_DISPLAY_STYLE = "compact"

REPORT_DIR = "."
REPORT_FILENAME_TEMPLATE = "SizzleSync_Sales_{date:%Y%m%d}.txt"

DEBUG_LOG_PATH = "/tmp/sizzle-pos-debug.log"
LOG_LEVEL = "DEBUG"

PRINT_RECEIPTS = False
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 24
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8
PRINTER_TAIL_SPACER_PX = 70
