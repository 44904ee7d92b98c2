"""Variation and quantity modal for adding a menu item."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from sizzle_pos.constant import VARIANT_JOINER
from sizzle_pos.errors import ValidationError
from sizzle_pos.models import MenuEntry
from sizzle_pos.rendering import format_menu_entry
from sizzle_pos.tab import validate_quantity


class ItemModal(ModalScreen[tuple[str | None, int] | None]):
    """Pick an optional variation and type a quantity for one menu entry."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
    ]

    CSS = """
    ItemModal {
        align: center middle;
        background: $background 60%;
    }

    #item-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #item-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #item-body {
        margin-bottom: 1;
        color: white;
    }

    #item-error {
        color: #ffb3b3;
    }

    #item-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, entry: MenuEntry) -> None:
        super().__init__()
        self.entry = entry
        self.quantity_value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="item-dialog"):
            yield Static("Add Item", id="item-title")
            yield Static(id="item-body")
            yield Static(id="item-error")
            yield Static(
                "J/K/↑/↓ pick variation, digits quantity, Enter add, Esc/Ctrl+C cancel",
                id="item-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.quantity_value:
                self.quantity_value = self.quantity_value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character and event.character.isdigit():
            if len(self.quantity_value) < 3:
                self.quantity_value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def selected_variant(self) -> str | None:
        if self.cursor_index == 0:
            return None
        return self.entry.variants[self.cursor_index - 1]

    def _rows(self) -> list[str]:
        return ["No variation (plain)", *(f"{VARIANT_JOINER.strip()} {variant}" for variant in self.entry.variants)]

    def _confirm(self) -> None:
        if not self.quantity_value:
            self.error = "Quantity cannot be empty."
            self._refresh_content()
            return
        try:
            quantity = validate_quantity(int(self.quantity_value))
        except ValidationError as exc:
            self.error = str(exc)
            self._refresh_content()
            return

        self.dismiss((self.selected_variant(), quantity))

    def _refresh_content(self) -> None:
        content = Text(style="white")
        content.append_text(format_menu_entry(self.entry))
        content.append("\n")
        for idx, label in enumerate(self._rows()):
            pointer = "➤ " if idx == self.cursor_index else "  "
            checked = "(x)" if idx == self.cursor_index else "( )"
            style = "bold white" if idx == self.cursor_index else "white"
            content.append(f"\n{pointer}{checked} {label}", style=style)
        content.append(f"\n\nQuantity: {self.quantity_value}|", style="bold white")

        self.query_one("#item-body", Static).update(content)
        self.query_one("#item-error", Static).update(self.error or "")
