"""FIFO queue of submitted orders waiting to be worked."""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from typing import Callable, Deque

from sizzle_pos.config import FIRST_ORDER_NUMBER
from sizzle_pos.errors import ValidationError
from sizzle_pos.models import OrderStatus, PendingOrder

logger = logging.getLogger(__name__)


class PendingOrderQueue:
    """Pending orders in strict submission order.

    Order numbers start at ``first_order_number`` and are never reused, even after
    ``clear()``. ``process_next()`` is the only way an order leaves the queue.
    """

    def __init__(
        self,
        first_order_number: int = FIRST_ORDER_NUMBER,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._orders: Deque[PendingOrder] = deque()
        self._next_order_number = first_order_number
        self._clock = clock

    def submit(self, customer_name: str, table: str) -> int:
        """Append a new pending order and return its number."""
        customer = (customer_name or "").strip()
        table_id = (table or "").strip()
        if not customer:
            raise ValidationError("Customer name cannot be empty.")
        if not table_id:
            raise ValidationError("Table number cannot be empty.")

        order = PendingOrder(
            order_number=self._next_order_number,
            customer_name=customer,
            table=table_id,
            submitted_at=self._clock(),
        )
        self._orders.append(order)
        self._next_order_number += 1
        logger.info(
            "order_submitted number=%s customer=%r table=%r position=%s",
            order.order_number,
            customer,
            table_id,
            len(self._orders),
        )
        return order.order_number

    def process_next(self) -> PendingOrder | None:
        """Remove the head of the queue and mark it in progress."""
        if not self._orders:
            return None
        order = self._orders.popleft()
        order.status = OrderStatus.IN_PROGRESS
        logger.info("order_dequeued number=%s remaining=%s", order.order_number, len(self._orders))
        return order

    def peek_next(self) -> PendingOrder | None:
        if not self._orders:
            return None
        return self._orders[0]

    def size(self) -> int:
        return len(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def is_empty(self) -> bool:
        return not self._orders

    def clear(self) -> int:
        """Discard every pending order and return how many were removed."""
        count = len(self._orders)
        self._orders.clear()
        logger.info("queue_cleared removed=%s", count)
        return count

    def list_all(self) -> list[PendingOrder]:
        """Snapshot of the queue, next-to-process first."""
        return list(self._orders)
