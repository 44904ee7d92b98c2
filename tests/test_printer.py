from datetime import datetime
from decimal import Decimal

from PIL import ImageFont

from sizzle_pos.config import PRINTER_WIDTH_PX
from sizzle_pos.ledger import CompletedOrderLedger
from sizzle_pos.models import LineItem
from sizzle_pos.printer import check_printer_dependencies, print_receipt
from sizzle_pos.rendering import receipt_lines


class FakePrinter:
    def __init__(self):
        self.images = []
        self.cuts = 0

    def image(self, img):
        self.images.append(img)

    def cut(self):
        self.cuts += 1


def _completed():
    return CompletedOrderLedger().record(
        1001,
        "Alice",
        "T1",
        [LineItem("Fries", Decimal("90.00"), 2), LineItem("Coffee w/ Iced", Decimal("65.00"), 1)],
        Decimal("245.00"),
        datetime(2026, 10, 18, 12, 0, 0),
    )


def test_print_receipt_sends_lines_rules_and_cuts():
    printer = FakePrinter()
    order = _completed()
    sent = print_receipt(order, printer=printer, font=ImageFont.load_default())

    # one image per line, two rules, one tail spacer
    assert sent == len(receipt_lines(order)) + 3
    assert len(printer.images) == sent
    assert printer.cuts == 1
    assert all(img.width == PRINTER_WIDTH_PX for img in printer.images)


def test_check_printer_dependencies_reports_status():
    ok, message = check_printer_dependencies()
    assert isinstance(ok, bool)
    assert message
