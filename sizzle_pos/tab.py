"""The active order tab: line items with undo-last correction."""

from __future__ import annotations

import logging
from decimal import Decimal

from sizzle_pos.config import MAX_QUANTITY, MIN_QUANTITY
from sizzle_pos.errors import ValidationError
from sizzle_pos.models import ZERO, LineItem, to_money

logger = logging.getLogger(__name__)


def validate_quantity(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Please enter a valid number for quantity.")
    if quantity < MIN_QUANTITY:
        raise ValidationError("Quantity must be greater than zero.")
    if quantity > MAX_QUANTITY:
        raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}.")
    return quantity


class ActiveOrderTab:
    """Line items for the order being built; the last item added is removed first."""

    def __init__(self, order_number: int, customer_name: str = "", table: str = "") -> None:
        self.order_number = order_number
        self.customer_name = customer_name
        self.table = table
        self._items: list[LineItem] = []

    def add_item(self, name: str, unit_price: Decimal | int | float | str, quantity: int) -> LineItem:
        item_name = (name or "").strip()
        if not item_name:
            raise ValidationError("Item name cannot be empty.")
        qty = validate_quantity(quantity)
        price = to_money(unit_price)

        item = LineItem(name=item_name, unit_price=price, quantity=qty)
        self._items.append(item)
        logger.debug("item_added order=%s name=%r qty=%s price=%s", self.order_number, item_name, qty, price)
        return item

    def remove_last(self) -> LineItem | None:
        if not self._items:
            return None
        item = self._items.pop()
        logger.debug("item_removed order=%s name=%r qty=%s", self.order_number, item.name, item.quantity)
        return item

    def peek_last(self) -> LineItem | None:
        if not self._items:
            return None
        return self._items[-1]

    def total(self) -> Decimal:
        return sum((item.subtotal for item in self._items), ZERO)

    def item_count(self) -> int:
        return len(self._items)

    def quantity_total(self) -> int:
        return sum(item.quantity for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def all_items(self) -> list[LineItem]:
        """Items oldest-first, as they appear on a receipt."""
        return list(self._items)

    def clear(self) -> int:
        count = len(self._items)
        self._items.clear()
        return count
