"""Append-only record of completed orders and the daily sales summary."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from sizzle_pos.models import ZERO, CompletedOrder, LineItem, SalesSummary, to_money

logger = logging.getLogger(__name__)


class CompletedOrderLedger:
    def __init__(self) -> None:
        self._orders: list[CompletedOrder] = []

    def record(
        self,
        order_number: int,
        customer_name: str,
        table: str,
        items: Iterable[LineItem],
        total: Decimal,
        completed_at: datetime,
    ) -> CompletedOrder:
        """Append a snapshot of a finished order; ``items`` is copied."""
        copied_items = tuple(
            LineItem(name=item.name, unit_price=item.unit_price, quantity=item.quantity) for item in items
        )
        completed = CompletedOrder(
            order_number=order_number,
            customer_name=customer_name,
            table=table,
            items=copied_items,
            total=to_money(total),
            completed_at=completed_at,
        )
        self._orders.append(completed)
        logger.info(
            "order_recorded number=%s items=%s total=%s ledger_size=%s",
            order_number,
            len(copied_items),
            completed.total,
            len(self._orders),
        )
        return completed

    def all(self) -> list[CompletedOrder]:
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def summary(self) -> SalesSummary:
        order_count = len(self._orders)
        if order_count == 0:
            return SalesSummary()
        total_sales = sum((order.total for order in self._orders), ZERO)
        average = total_sales / order_count
        return SalesSummary(
            order_count=order_count,
            total_sales=total_sales,
            average_order_value=average,
            total_items_sold=sum(order.item_count for order in self._orders),
        )
