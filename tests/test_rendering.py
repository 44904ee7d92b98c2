from datetime import datetime
from decimal import Decimal

import pytest
from rich.table import Table
from rich.text import Text

from sizzle_pos.ledger import CompletedOrderLedger
from sizzle_pos.menu import MenuCatalog
from sizzle_pos.models import LineItem, OrderStatus, PendingOrder, SalesSummary
from sizzle_pos.rendering import (
    format_money,
    format_queue,
    format_receipt,
    format_summary,
    format_tab,
    receipt_lines,
    render_menu,
)
from sizzle_pos.tab import ActiveOrderTab


def _completed():
    ledger = CompletedOrderLedger()
    return ledger.record(
        1001,
        "Alice",
        "T1",
        [LineItem("Fries", Decimal("90.00"), 2)],
        Decimal("180.00"),
        datetime(2026, 10, 18, 12, 0, 0),
    )


def test_format_money():
    assert format_money(Decimal("180")) == "PHP 180.00"


def test_compact_menu_lists_entries_and_variants():
    text = render_menu(MenuCatalog.default(), "compact")
    assert isinstance(text, Text)
    plain = text.plain
    assert "APPETIZERS" in plain
    assert "[ 1] Spring Rolls" in plain
    assert "w/ Honey Garlic" in plain
    assert plain.index("APPETIZERS") < plain.index("BEVERAGES")


def test_board_menu_is_table():
    table = render_menu(MenuCatalog.default(), "board")
    assert isinstance(table, Table)
    assert table.row_count == 4


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        render_menu(MenuCatalog.default(), "poster")


def test_format_tab():
    assert "no active order" in format_tab(None).plain
    tab = ActiveOrderTab(1001, "Alice", "T1")
    assert "no items yet" in format_tab(tab).plain
    tab.add_item("Fries", "90.00", 2)
    plain = format_tab(tab).plain
    assert "Order #1001" in plain
    assert "Fries x2" in plain
    assert "Items: 1  Qty: 2  Total: PHP 180.00" in plain


def test_format_queue_marks_next():
    orders = [
        PendingOrder(1001, "Alice", "T1", datetime(2026, 10, 18, 9, 0, 0)),
        PendingOrder(1002, "Bob", "T2", datetime(2026, 10, 18, 9, 5, 0), OrderStatus.PENDING),
    ]
    plain = format_queue(orders).plain
    assert "1. #1001 Alice (Table T1) 09:00:00 (Next)" in plain
    assert "(Next)" not in plain.split("\n")[2]
    assert "No pending orders" in format_queue([]).plain


def test_receipt_lines():
    lines = receipt_lines(_completed())
    assert lines[1] == "Order #: 1001"
    assert "Customer: ALICE" in lines
    assert "     PHP 90.00 each = PHP 180.00" in lines
    assert "TOTAL AMOUNT: PHP 180.00" in lines
    assert format_receipt(_completed()).plain == "\n".join(lines)


def test_format_summary():
    assert "No completed orders yet" in format_summary(SalesSummary()).plain
    summary = SalesSummary(2, Decimal("300.00"), Decimal("150.00"), 3)
    plain = format_summary(summary).plain
    assert "TOTAL SALES: PHP 300.00" in plain
    assert "AVERAGE ORDER: PHP 150.00" in plain
    assert "TOTAL ITEMS SOLD: 3" in plain
