from datetime import datetime
from decimal import Decimal

from sizzle_pos.ledger import CompletedOrderLedger
from sizzle_pos.models import SalesSummary
from sizzle_pos.tab import ActiveOrderTab

NOW = datetime(2026, 10, 18, 12, 30)


def test_empty_summary_has_zero_average():
    summary = CompletedOrderLedger().summary()
    assert summary == SalesSummary()
    assert summary.order_count == 0
    assert summary.total_sales == 0
    assert summary.average_order_value == 0
    assert summary.total_items_sold == 0


def test_record_is_append_only():
    ledger = CompletedOrderLedger()
    ledger.record(1001, "Alice", "T1", [], Decimal("10.00"), NOW)
    ledger.record(1002, "Bob", "T2", [], Decimal("20.00"), NOW)
    before = ledger.all()

    ledger.record(1003, "Cara", "T3", [], Decimal("30.00"), NOW)

    after = ledger.all()
    assert len(after) == 3
    assert after[:2] == before
    assert [order.order_number for order in after] == [1001, 1002, 1003]


def test_record_snapshots_items():
    tab = ActiveOrderTab(1001, "Alice", "T1")
    tab.add_item("Fries", "90.00", 2)
    ledger = CompletedOrderLedger()
    completed = ledger.record(1001, "Alice", "T1", tab.all_items(), tab.total(), NOW)

    tab.clear()
    tab.add_item("Cake", "110.00", 1)

    assert [item.name for item in completed.items] == ["Fries"]
    assert ledger.all()[0].items[0].quantity == 2
    assert completed.item_count == 1


def test_summary_totals_and_average():
    ledger = CompletedOrderLedger()
    tab = ActiveOrderTab(1001)
    tab.add_item("A", "10.00", 1)
    tab.add_item("B", "5.00", 3)
    ledger.record(1001, "Alice", "T1", tab.all_items(), tab.total(), NOW)
    ledger.record(1002, "Bob", "T2", tab.all_items()[:1], Decimal("10.00"), NOW)
    ledger.record(1003, "Cara", "T3", tab.all_items()[:1], Decimal("10.00"), NOW)

    summary = ledger.summary()
    assert summary.order_count == 3
    assert summary.total_sales == Decimal("45.00")
    assert summary.average_order_value == Decimal("15.00")
    assert summary.total_items_sold == 4


def test_average_keeps_exact_quotient():
    ledger = CompletedOrderLedger()
    for number, total in ((1, "10.00"), (2, "10.00"), (3, "10.01")):
        ledger.record(number, "X", "T", [], Decimal(total), NOW)
    summary = ledger.summary()
    assert summary.average_order_value == Decimal("30.01") / 3
    assert f"{summary.average_order_value:.2f}" == "10.00"


def test_all_returns_copy():
    ledger = CompletedOrderLedger()
    ledger.record(1001, "Alice", "T1", [], Decimal("1.00"), NOW)
    ledger.all().clear()
    assert len(ledger) == 1
