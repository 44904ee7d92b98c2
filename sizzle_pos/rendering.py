"""Rendering helpers for menu, order, queue, receipt and summary panes."""

from __future__ import annotations

from decimal import Decimal

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from sizzle_pos.config import CURRENCY_LABEL, RESTAURANT_NAME
from sizzle_pos.constant import VARIANT_JOINER
from sizzle_pos.menu import MenuCatalog
from sizzle_pos.models import Category, CompletedOrder, MenuEntry, PendingOrder, SalesSummary
from sizzle_pos.tab import ActiveOrderTab

DISPLAY_STYLES = ("compact", "board")


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_LABEL} {amount:.2f}"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    if category == Category.APPETIZERS:
        return "bold #0b1f0f on #5fbf72"
    if category == Category.MAIN_COURSE:
        return "bold #ffffff on #b23a48"
    if category == Category.DESSERTS:
        return "bold #ffffff on #8e5bb5"
    return "bold #ffffff on #2f6db5"


def format_category_badge(category: Category) -> Text:
    text = Text()
    text.append(f" {category.value.upper()} ", style=badge_style(category))
    return text


def format_menu_entry(entry: MenuEntry, show_variants: bool = False) -> Text:
    text = Text()
    text.append(f"[{entry.number:>2}] ")
    text.append(f"{entry.name:<24}")
    text.append(format_money(entry.price), style="bold")
    if show_variants:
        for variant in entry.variants:
            text.append(f"\n      {VARIANT_JOINER.strip()} {variant}", style="dim")
    return text


def render_menu(catalog: MenuCatalog, style: str = "compact") -> RenderableType:
    """Render the whole menu as a categorized list or as a board table."""
    if style not in DISPLAY_STYLES:
        raise ValueError(f"style must be one of {DISPLAY_STYLES}")
    if style == "board":
        return _render_menu_board(catalog)

    text = Text()
    for idx, category in enumerate(catalog.categories()):
        if idx > 0:
            text.append("\n\n")
        text.append_text(format_category_badge(category))
        for entry in catalog.by_category(category):
            text.append("\n")
            text.append_text(format_menu_entry(entry, show_variants=True))
    return text


def _render_menu_board(catalog: MenuCatalog) -> Table:
    rows = catalog.board()
    width = max((len(row) for row in rows), default=0)
    table = Table(title=f"{RESTAURANT_NAME} Menu Board", show_header=False, expand=True)
    table.add_column("Category", style="bold", no_wrap=True)
    for _ in range(width):
        table.add_column()
    for row in rows:
        cells: list[RenderableType] = [format_category_badge(row[0].category)]
        cells.extend(Text(f"[{entry.number}] {entry.name}\n{format_money(entry.price)}") for entry in row)
        cells.extend("" for _ in range(width - len(row)))
        table.add_row(*cells)
    return table


def format_tab(tab: ActiveOrderTab | None) -> Text:
    """Render the active order with oldest item first and the running total."""
    if tab is None:
        return Text("(no active order)", style="dim")

    text = Text()
    text.append(f"Order #{tab.order_number}", style="bold")
    text.append(f"  {tab.customer_name} | Table {tab.table}")
    items = tab.all_items()
    if not items:
        text.append("\n\n(no items yet)", style="dim")
    for idx, item in enumerate(items, start=1):
        pointer = "➤ " if idx == len(items) else "  "
        text.append(f"\n{pointer}{idx}. {item.name} x{item.quantity}")
        text.append(f"  {format_money(item.subtotal)}", style="bold")
    text.append(f"\n\nItems: {tab.item_count()}  Qty: {tab.quantity_total()}  Total: ")
    text.append(format_money(tab.total()), style="bold")
    return text


def format_queue(orders: list[PendingOrder]) -> Text:
    if not orders:
        return Text("No pending orders in queue.", style="dim")

    text = Text()
    text.append(f"Pending: {len(orders)}", style="bold")
    for position, order in enumerate(orders, start=1):
        text.append(f"\n{position}. #{order.order_number} {order.customer_name} (Table {order.table})")
        text.append(f" {order.submitted_at:%H:%M:%S}", style="dim")
        if position == 1:
            text.append(" (Next)", style="bold")
    return text


def receipt_lines(order: CompletedOrder) -> list[str]:
    """Plain receipt lines shared by the on-screen receipt and the printer."""
    lines = [
        f"{RESTAURANT_NAME.upper()} RECEIPT",
        f"Order #: {order.order_number}",
        f"Customer: {order.customer_name.upper()}",
        f"Table: {order.table}",
        f"Date/Time: {order.completed_at:%Y-%m-%d %H:%M:%S}",
        "ITEMS ORDERED:",
    ]
    for idx, item in enumerate(order.items, start=1):
        lines.append(f"  {idx}. {item.name} x{item.quantity}")
        lines.append(f"     {format_money(item.unit_price)} each = {format_money(item.subtotal)}")
    lines.append(f"TOTAL ITEMS: {order.item_count}")
    lines.append(f"TOTAL AMOUNT: {format_money(order.total)}")
    lines.append("THANK YOU FOR DINING WITH US!")
    return lines


def format_receipt(order: CompletedOrder) -> Text:
    text = Text()
    for idx, line in enumerate(receipt_lines(order)):
        if idx > 0:
            text.append("\n")
        style = "bold" if idx == 0 or line.startswith("TOTAL") else ""
        text.append(line, style=style)
    return text


def format_summary(summary: SalesSummary) -> Text:
    text = Text()
    text.append("DAILY SALES SUMMARY", style="bold")
    text.append(f"\nTotal Orders Completed: {summary.order_count}")
    if summary.order_count == 0:
        text.append("\nNo completed orders yet today.", style="dim")
    text.append(f"\nTOTAL SALES: {format_money(summary.total_sales)}")
    text.append(f"\nAVERAGE ORDER: {format_money(summary.average_order_value)}")
    text.append(f"\nTOTAL ITEMS SOLD: {summary.total_items_sold}")
    return text
