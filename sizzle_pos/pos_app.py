"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.console import RenderableType
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from sizzle_pos import config
from sizzle_pos.constant import CATEGORY_KEYS
from sizzle_pos.errors import PosError
from sizzle_pos.item_modal import ItemModal
from sizzle_pos.models import Category, MenuEntry
from sizzle_pos.order_modal import NewOrderModal
from sizzle_pos.printer import check_printer_dependencies, print_receipt
from sizzle_pos.rendering import (
    DISPLAY_STYLES,
    badge_style,
    format_money,
    format_queue,
    format_receipt,
    format_summary,
    format_tab,
    render_menu,
)
from sizzle_pos.session import PosSession

logger = logging.getLogger(__name__)


class PosApp(App):
    """A Textual point-of-sale console for taking and completing restaurant orders."""

    TITLE = f"{config.RESTAURANT_NAME} POS"
    SUB_TITLE = "Orders / Menu / Sales"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #orders-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #search-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
        overflow-y: auto;
    }

    #order-view {
        height: 2fr;
        border: tall $surface;
        padding: 0 1;
    }

    #queue-view {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    category = reactive(Category.APPETIZERS)
    search_query = reactive("")
    selected_index = reactive(0)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next result"),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "register_selected", "Add item"),
        ("backspace", "backspace_query", "Delete query char"),
        Binding("ctrl+s", "complete_order", "Complete order", priority=True),
        ("ctrl+c", "cancel_active_mode", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: PosSession | None = None,
        display_style: str = config.MENU_DISPLAY_STYLE,
        print_receipts: bool = config.PRINT_RECEIPTS,
    ) -> None:
        super().__init__()
        self.session = session if session is not None else PosSession()
        self.display_style = display_style if display_style in DISPLAY_STYLES else DISPLAY_STYLES[0]
        self.print_receipts = print_receipts
        self.system_status = ""
        self.detail: RenderableType | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="orders-pane"):
                yield Static("Current Order", classes="pane-title")
                yield Static(id="order-view")
                yield Static(id="queue-view")
            with Vertical(id="search-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        if self.print_receipts:
            _, msg = check_printer_dependencies()
            self.system_status = msg
            logger.info("printer_status %s", msg)
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        if self.input_state == "active":
            if event.character.isalnum() or event.character == " ":
                self.search_query += event.character
                self.selected_index = 0
                self._refresh_search()
                event.stop()
            return

        key = event.character.lower()
        handlers = {
            "o": self._open_new_order,
            "u": self._undo_last_item,
            "x": self._abandon_order,
            "p": self._process_next_order,
            "r": self._save_report,
            "l": self._toggle_menu_layout,
            "s": self._show_summary,
        }
        if key in handlers:
            handlers[key]()
            event.stop()
            return

        if key not in CATEGORY_KEYS:
            return

        self.category = Category(CATEGORY_KEYS[key])
        self.input_state = "active"
        self.search_query = ""
        self.selected_index = 0
        self.detail = None
        self._refresh_search()
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if self._modal_open():
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_register_selected(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return
        if not self.session.has_active_order:
            self._set_status("No active order. Press O to create a new order first.")
            return

        results = self._filtered_results()
        if not results:
            return
        entry = results[self.selected_index]
        self.push_screen(ItemModal(entry), callback=lambda choice: self._add_item(entry, choice))

    def action_backspace_query(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        if not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_complete_order(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "normal":
            self._set_status("Complete only in NORMAL mode (Ctrl+C to exit search)")
            return

        try:
            completed = self.session.complete_order(auto_advance=config.AUTO_ADVANCE_AFTER_COMPLETE)
        except PosError as exc:
            self._set_status(str(exc))
            return

        self.detail = format_receipt(completed)
        status = f"Order #{completed.order_number} completed and saved!"
        if self.print_receipts:
            try:
                print_receipt(completed)
            except Exception as exc:
                status = f"Order #{completed.order_number} saved but print failed: {exc}"
                logger.warning("receipt_print_failed order=%s error=%r", completed.order_number, exc)

        if self.session.has_active_order:
            status += f" Now serving #{self.session.active.order_number}."
        elif not self.session.queue.is_empty():
            status += " Press P to process the next order."
        self._set_status(status)
        self._refresh_all()

    def _open_new_order(self) -> None:
        self.push_screen(NewOrderModal(), callback=self._submit_new_order)

    def _submit_new_order(self, result: tuple[str, str] | None) -> None:
        if result is None:
            return
        customer, table = result
        try:
            outcome = self.session.submit_order(customer, table)
        except PosError as exc:
            self._set_status(str(exc))
            return

        if outcome.activated:
            self._set_status(f"Order #{outcome.order_number} is now active. Ready to add items!")
        else:
            self._set_status(
                f"Order #{outcome.order_number} added to queue (position {outcome.queue_position}). "
                "Complete current order first."
            )
        self._refresh_all()

    def _add_item(self, entry: MenuEntry, choice: tuple[str | None, int] | None) -> None:
        if choice is None:
            return
        variant, quantity = choice
        try:
            item = self.session.add_menu_item(entry.number, quantity, variant)
        except PosError as exc:
            self._set_status(str(exc))
            return
        self._set_status(f"'{item.name}' x{item.quantity} added to order.")
        self._refresh_orders()

    def _undo_last_item(self) -> None:
        try:
            item = self.session.remove_last_item()
        except PosError as exc:
            self._set_status(str(exc))
            return
        if item is None:
            self._set_status("Order is empty. Nothing to remove.")
            return
        self._set_status(f"'{item.name}' x{item.quantity} removed from order.")
        self._refresh_orders()

    def _abandon_order(self) -> None:
        tab = self.session.abandon_order()
        if tab is None:
            self._set_status("No active order.")
            return
        self._set_status(f"Order #{tab.order_number} abandoned.")
        self._refresh_orders()

    def _process_next_order(self) -> None:
        try:
            tab = self.session.activate_next()
        except PosError as exc:
            self._set_status(str(exc))
            return
        if tab is None:
            self._set_status("No pending orders to process.")
            return
        self._set_status(f"Order #{tab.order_number} is now active. Ready to add items!")
        self._refresh_orders()

    def _save_report(self) -> None:
        try:
            path = self.session.save_report()
        except PosError as exc:
            self._set_status(str(exc))
            return
        self._set_status(f"Sales records saved to: {path}")

    def _toggle_menu_layout(self) -> None:
        idx = DISPLAY_STYLES.index(self.display_style)
        self.display_style = DISPLAY_STYLES[(idx + 1) % len(DISPLAY_STYLES)]
        self.detail = None
        self._refresh_search()

    def _show_summary(self) -> None:
        self.detail = format_summary(self.session.summary())
        self._refresh_search()

    def _set_status(self, message: str) -> None:
        self.system_status = message
        logger.debug("status %s", message)
        self._refresh_search_bar()

    def _filtered_results(self) -> list[MenuEntry]:
        return self.session.catalog.search(self.search_query, self.category)

    def _refresh_all(self) -> None:
        self._refresh_orders()
        self._refresh_search()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_orders(self) -> None:
        try:
            order_widget = self.query_one("#order-view", Static)
            queue_widget = self.query_one("#queue-view", Static)
        except NoMatches:
            return
        order_widget.update(format_tab(self.session.active))
        queue_widget.update(format_queue(self.session.queue.list_all()))

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(
                "O new order | A/M/D/B search menu | U undo | P next | X abandon\n"
                f"Ctrl+S complete | S summary | R report | L layout\n{status}"
            )
            return

        text = Text()
        text.append(f" {self.category.value} ", style=badge_style(self.category))
        text.append(f": {self.search_query}")
        text.append(f"\n{self.system_status}", style="dim")
        bar.update(text)

    def _refresh_results(self, results: list[MenuEntry]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            if self.detail is not None:
                results_widget.update(self.detail)
            else:
                results_widget.update(render_menu(self.session.catalog, self.display_style))
            return

        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            entry = results[idx]
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(f"{pointer}[{entry.number:>2}] {entry.name}  ")
            lines.append(format_money(entry.price), style="bold")

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)
