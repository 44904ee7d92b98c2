"""Domain models for the POS core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from sizzle_pos.errors import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


class Category(str, Enum):
    APPETIZERS = "Appetizers"
    MAIN_COURSE = "Main Course"
    DESSERTS = "Desserts"
    BEVERAGES = "Beverages"


class OrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a price-like value to a non-negative two-decimal Decimal."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid price: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid price: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid price: {value!r}")
    if amount < 0:
        raise ValidationError("Price cannot be negative.")
    if amount != amount.quantize(CENT):
        raise ValidationError(f"Price has more than two decimal places: {value!r}")
    return amount.quantize(CENT)


@dataclass(frozen=True)
class MenuEntry:
    """One numbered catalog item."""

    number: int
    name: str
    price: Decimal
    category: Category
    variants: tuple[str, ...] = ()


@dataclass
class PendingOrder:
    """A submitted order waiting in (or just taken from) the queue."""

    order_number: int
    customer_name: str
    table: str
    submitted_at: datetime
    status: OrderStatus = OrderStatus.PENDING


@dataclass(frozen=True)
class LineItem:
    """An ordered item with the price captured when it was added."""

    name: str
    unit_price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CompletedOrder:
    """Immutable snapshot of a finished order."""

    order_number: int
    customer_name: str
    table: str
    items: tuple[LineItem, ...]
    total: Decimal
    completed_at: datetime

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SalesSummary:
    order_count: int = 0
    total_sales: Decimal = ZERO
    average_order_value: Decimal = ZERO
    total_items_sold: int = 0


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of a session submission."""

    order_number: int
    activated: bool
    queue_position: int = 0
