"""New order entry modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

_MAX_FIELD_LENGTH = 40


class NewOrderModal(ModalScreen[tuple[str, str] | None]):
    """Prompt for customer name and table before submitting an order."""

    CSS = """
    NewOrderModal {
        align: center middle;
        background: $background 60%;
    }

    #new-order-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #new-order-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #new-order-fields {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #new-order-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #new-order-help {
        color: #dddddd;
    }
    """

    FIELD_LABELS = ("Customer name", "Table number")

    def __init__(self) -> None:
        super().__init__()
        self.values = ["", ""]
        self.field_index = 0
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="new-order-dialog"):
            yield Static("Create New Order", id="new-order-title")
            yield Static(id="new-order-fields")
            yield Static(id="new-order-error")
            yield Static("Tab/↑/↓ switch field. Enter next/confirm. Esc/Ctrl+C cancel.", id="new-order-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key in {"tab", "down", "up", "shift+tab"}:
            self.field_index = 1 - self.field_index
            self._refresh_content()
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            current = self.values[self.field_index]
            if current:
                self.values[self.field_index] = current[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.values[self.field_index]) < _MAX_FIELD_LENGTH:
                self.values[self.field_index] += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        customer, table = (value.strip() for value in self.values)
        if self.field_index == 0 and customer and not table:
            self.field_index = 1
            self._refresh_content()
            return
        if not customer:
            self.error = "Customer name cannot be empty."
            self.field_index = 0
            self._refresh_content()
            return
        if not table:
            self.error = "Table number cannot be empty."
            self.field_index = 1
            self._refresh_content()
            return

        self.dismiss((customer, table))

    def _refresh_content(self) -> None:
        fields = Text(style="white")
        for idx, label in enumerate(self.FIELD_LABELS):
            if idx > 0:
                fields.append("\n")
            pointer = "➤ " if idx == self.field_index else "  "
            cursor = "|" if idx == self.field_index else ""
            style = "bold white" if idx == self.field_index else "white"
            fields.append(f"{pointer}{label}: {self.values[idx]}{cursor}", style=style)
        self.query_one("#new-order-fields", Static).update(fields)
        self.query_one("#new-order-error", Static).update(self.error or "")
