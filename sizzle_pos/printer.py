"""Thermal receipt printing over ESC/POS USB."""

from __future__ import annotations

import logging
from pathlib import Path

from sizzle_pos.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from sizzle_pos.models import CompletedOrder
from sizzle_pos.rendering import receipt_lines

logger = logging.getLogger(__name__)

_LINE_EXTRA_PX = 8
_RULE_HEIGHT_PX = 12
_RULE_THICKNESS_PX = 3
_RULE_AFTER_LINE_PREFIXES = ("Date/Time:", "TOTAL AMOUNT:")
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
)


def resolve_printer_font_path() -> str:
    """Return the configured font path, falling back to known Linux fonts."""
    candidates = [PRINTER_FONT_PATH, *_LINUX_FONT_FALLBACKS]
    for candidate in candidates:
        if candidate and Path(candidate).is_file():
            return candidate
    raise RuntimeError(f"No usable printer font found. Tried: {', '.join(candidates)}")


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies and a font are available."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _load_font() -> object:
    from PIL import ImageFont

    return ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = ImageDraw.Draw(Image.new("1", (1, 1), color=1))
    bbox = probe.textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(12, text_height + _LINE_EXTRA_PX)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_rule() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _RULE_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = (_RULE_HEIGHT_PX - _RULE_THICKNESS_PX) // 2
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, top + _RULE_THICKNESS_PX - 1), fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _open_printer() -> object:
    try:
        from escpos.printer import Usb
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc
    return Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)


def print_receipt(order: CompletedOrder, printer: object | None = None, font: object | None = None) -> int:
    """Print a completed order's receipt, cut the paper and return the image count sent."""
    if printer is None:
        printer = _open_printer()
    if font is None:
        font = _load_font()

    sent = 0
    for line in receipt_lines(order):
        printer.image(_render_line(line, font))
        sent += 1
        if line.startswith(_RULE_AFTER_LINE_PREFIXES):
            printer.image(_render_rule())
            sent += 1

    # Extra tail for easier tearing.
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    sent += 1
    printer.cut()
    logger.info("receipt_printed order=%s images=%s", order.order_number, sent)
    return sent
