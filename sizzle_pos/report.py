"""Plain-text daily sales report writer."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from sizzle_pos.config import REPORT_FILENAME_TEMPLATE, RESTAURANT_NAME
from sizzle_pos.errors import ReportError
from sizzle_pos.ledger import CompletedOrderLedger
from sizzle_pos.rendering import format_money

logger = logging.getLogger(__name__)

_RULE = "─" * 60
_DOUBLE_RULE = "═" * 60


def report_filename(day: datetime) -> str:
    return REPORT_FILENAME_TEMPLATE.format(date=day)


def render_sales_report(ledger: CompletedOrderLedger, now: datetime) -> str:
    """Render the report body for every completed order plus the totals trailer."""
    orders = ledger.all()
    summary = ledger.summary()
    title = f"{RESTAURANT_NAME.upper()} DAILY SALES REPORT"
    lines = [
        _DOUBLE_RULE,
        title.center(60).rstrip(),
        _DOUBLE_RULE,
        f"Report Date: {now:%Y-%m-%d %H:%M:%S}",
        f"Total Orders: {len(orders)}",
        _DOUBLE_RULE,
        "",
    ]
    for order in orders:
        lines.append(f"ORDER #{order.order_number}")
        lines.append(f"Customer: {order.customer_name} | Table: {order.table}")
        lines.append(f"Completed: {order.completed_at:%Y-%m-%d %H:%M:%S}")
        lines.append("Items:")
        for item in order.items:
            lines.append(
                f"  - {item.name} x{item.quantity} @ {format_money(item.unit_price)} = {format_money(item.subtotal)}"
            )
        lines.append(f"Order Total: {format_money(order.total)}")
        lines.append(_RULE)

    lines.append("")
    lines.append(f"TOTAL DAILY SALES: {format_money(summary.total_sales)}")
    lines.append(f"AVERAGE ORDER VALUE: {format_money(summary.average_order_value)}")
    return "\n".join(lines) + "\n"


def write_sales_report(ledger: CompletedOrderLedger, directory: str | Path, now: datetime) -> Path:
    """Write the report into ``directory`` (created if missing) and return its path."""
    target = Path(directory) / report_filename(now)
    body = render_sales_report(ledger, now)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")
    except PermissionError as exc:
        logger.warning("report_write_denied path=%s error=%r", target, exc)
        raise ReportError("Access denied. Please check file permissions.") from exc
    except FileNotFoundError as exc:
        logger.warning("report_dir_missing path=%s error=%r", target, exc)
        raise ReportError("Directory not found. Please check the path.") from exc
    except OSError as exc:
        logger.warning("report_write_failed path=%s error=%r", target, exc)
        raise ReportError(f"Unable to write file - {exc}") from exc

    logger.info("report_written path=%s orders=%s", target, len(ledger))
    return target
