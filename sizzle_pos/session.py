"""Session controller: owns the core collections and the active order slot."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from sizzle_pos import config
from sizzle_pos.errors import SessionError
from sizzle_pos.ledger import CompletedOrderLedger
from sizzle_pos.menu import MenuCatalog
from sizzle_pos.models import CompletedOrder, LineItem, PendingOrder, SalesSummary, SubmitResult
from sizzle_pos.order_queue import PendingOrderQueue
from sizzle_pos.report import write_sales_report
from sizzle_pos.tab import ActiveOrderTab

logger = logging.getLogger(__name__)


class PosSession:
    """Application state for one console run.

    At most one ``ActiveOrderTab`` is open at a time. New submissions wait in the
    queue while an order is active; with ``auto_activate`` a submission made while
    nothing is active is dequeued straight into a new tab.
    """

    def __init__(
        self,
        catalog: MenuCatalog | None = None,
        clock: Callable[[], datetime] = datetime.now,
        auto_activate: bool = config.AUTO_ACTIVATE_FIRST_ORDER,
        report_dir: str | Path = config.REPORT_DIR,
    ) -> None:
        self.catalog = catalog if catalog is not None else MenuCatalog.default()
        self.clock = clock
        self.queue = PendingOrderQueue(clock=clock)
        self.ledger = CompletedOrderLedger()
        self.auto_activate = auto_activate
        self.report_dir = Path(report_dir)
        self._active: ActiveOrderTab | None = None

    @property
    def active(self) -> ActiveOrderTab | None:
        return self._active

    @property
    def has_active_order(self) -> bool:
        return self._active is not None

    def submit_order(self, customer_name: str, table: str) -> SubmitResult:
        order_number = self.queue.submit(customer_name, table)
        if self._active is None and self.auto_activate:
            tab = self.activate_next()
            if tab is not None and tab.order_number == order_number:
                return SubmitResult(order_number=order_number, activated=True)
        return SubmitResult(order_number=order_number, activated=False, queue_position=self.queue.size())

    def activate_next(self) -> ActiveOrderTab | None:
        """Move the head of the queue into the active slot."""
        if self._active is not None:
            raise SessionError("Complete current order before processing next one.")
        pending = self.queue.process_next()
        if pending is None:
            return None
        self._active = self._open_tab(pending)
        logger.info("order_activated number=%s", pending.order_number)
        return self._active

    def _open_tab(self, pending: PendingOrder) -> ActiveOrderTab:
        return ActiveOrderTab(pending.order_number, customer_name=pending.customer_name, table=pending.table)

    def _require_active(self) -> ActiveOrderTab:
        if self._active is None:
            raise SessionError("No active order. Please create a new order first.")
        return self._active

    def add_menu_item(self, number: int, quantity: int, variant: str | None = None) -> LineItem:
        tab = self._require_active()
        name = self.catalog.line_item_name(number, variant)
        entry = self.catalog.lookup(number)
        assert entry is not None
        return tab.add_item(name, entry.price, quantity)

    def remove_last_item(self) -> LineItem | None:
        return self._require_active().remove_last()

    def complete_order(self, auto_advance: bool = config.AUTO_ADVANCE_AFTER_COMPLETE) -> CompletedOrder:
        """Record the active order in the ledger and free the active slot."""
        tab = self._require_active()
        if tab.is_empty():
            raise SessionError("Order is empty. Add items before completing.")

        completed = self.ledger.record(
            order_number=tab.order_number,
            customer_name=tab.customer_name,
            table=tab.table,
            items=tab.all_items(),
            total=tab.total(),
            completed_at=self.clock(),
        )
        self._active = None
        if auto_advance and not self.queue.is_empty():
            self.activate_next()
        return completed

    def abandon_order(self) -> ActiveOrderTab | None:
        """Drop the active order without recording it."""
        tab = self._active
        if tab is None:
            return None
        self._active = None
        logger.warning("order_abandoned number=%s items=%s", tab.order_number, tab.item_count())
        return tab

    def summary(self) -> SalesSummary:
        return self.ledger.summary()

    def save_report(self, directory: str | Path | None = None) -> Path:
        if len(self.ledger) == 0:
            raise SessionError("No sales data to save.")
        target_dir = Path(directory) if directory is not None else self.report_dir
        return write_sales_report(self.ledger, target_dir, now=self.clock())
