from decimal import Decimal

import pytest

from sizzle_pos.errors import SessionError, ValidationError
from sizzle_pos.session import PosSession


def test_walkthrough(session):
    first = session.submit_order("Alice", "T1")
    second = session.submit_order("Bob", "T2")

    assert (first.order_number, first.activated) == (1001, True)
    assert (second.order_number, second.activated, second.queue_position) == (1002, False, 1)
    assert session.active.order_number == 1001
    assert session.active.customer_name == "Alice"

    session.active.add_item("Fries", Decimal("90.00"), 2)
    assert session.active.total() == Decimal("180.00")
    session.remove_last_item()
    assert session.active.total() == 0
    assert session.active.item_count() == 0
    session.active.add_item("Fries", Decimal("90.00"), 2)

    completed = session.complete_order()
    assert completed.order_number == 1001
    assert completed.table == "T1"
    assert session.active is None

    summary = session.summary()
    assert summary.order_count == 1
    assert summary.total_sales == Decimal("180.00")
    assert summary.average_order_value == Decimal("180.00")


def test_add_menu_item_copies_price_and_variant(session):
    session.submit_order("Alice", "T1")
    item = session.add_menu_item(2, 3, "BBQ")
    assert item.name == "Chicken Wings w/ BBQ"
    assert item.unit_price == Decimal("150.00")
    assert session.active.total() == Decimal("450.00")


def test_add_menu_item_rejects_unknown_number(session):
    session.submit_order("Alice", "T1")
    with pytest.raises(ValidationError):
        session.add_menu_item(21, 1)
    with pytest.raises(ValidationError):
        session.add_menu_item(1, 101)
    assert session.active.item_count() == 0


def test_item_actions_require_active_order(session):
    with pytest.raises(SessionError):
        session.add_menu_item(1, 1)
    with pytest.raises(SessionError):
        session.remove_last_item()
    with pytest.raises(SessionError):
        session.complete_order()


def test_activate_next_refuses_when_order_active(session):
    session.submit_order("Alice", "T1")
    session.submit_order("Bob", "T2")
    with pytest.raises(SessionError):
        session.activate_next()
    assert session.queue.size() == 1


def test_activate_next_on_empty_queue(session):
    assert session.activate_next() is None
    assert not session.has_active_order


def test_complete_rejects_empty_order(session):
    session.submit_order("Alice", "T1")
    with pytest.raises(SessionError):
        session.complete_order()
    assert session.has_active_order
    assert len(session.ledger) == 0


def test_complete_with_auto_advance(session):
    session.submit_order("Alice", "T1")
    session.submit_order("Bob", "T2")
    session.add_menu_item(16, 1)
    session.complete_order(auto_advance=True)
    assert session.active.order_number == 1002
    assert session.queue.is_empty()


def test_complete_without_auto_advance_leaves_queue(session):
    session.submit_order("Alice", "T1")
    session.submit_order("Bob", "T2")
    session.add_menu_item(16, 1)
    session.complete_order(auto_advance=False)
    assert session.active is None
    assert session.activate_next().customer_name == "Bob"


def test_submit_without_auto_activate_queues_everything(clock, tmp_path):
    session = PosSession(clock=clock, auto_activate=False, report_dir=tmp_path)
    result = session.submit_order("Alice", "T1")
    assert not result.activated
    assert result.queue_position == 1
    assert session.activate_next().order_number == 1001


def test_submission_after_abandon_serves_queue_head_first(session):
    session.submit_order("Alice", "T1")
    session.submit_order("Bob", "T2")
    abandoned = session.abandon_order()
    assert abandoned.order_number == 1001
    assert session.abandon_order() is None

    result = session.submit_order("Cara", "T3")
    assert not result.activated
    assert session.active.customer_name == "Bob"
    assert [o.customer_name for o in session.queue.list_all()] == ["Cara"]


def test_submit_validation_error_leaves_state(session):
    with pytest.raises(ValidationError):
        session.submit_order("", "T1")
    assert not session.has_active_order
    assert session.submit_order("Alice", "T1").order_number == 1001


def test_save_report_requires_sales(session):
    with pytest.raises(SessionError):
        session.save_report()


def test_save_report_writes_file(session, tmp_path):
    session.submit_order("Alice", "T1")
    session.add_menu_item(5, 2)
    session.complete_order()
    path = session.save_report()
    assert path.parent == tmp_path
    assert path.name.startswith("SizzleSync_Sales_")
    assert "ORDER #1001" in path.read_text(encoding="utf-8")
