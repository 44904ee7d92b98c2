"""Numbered menu catalog built from the static constant data."""

from __future__ import annotations

from typing import Iterable

from sizzle_pos.constant import MENU_CATALOG, VARIANT_JOINER
from sizzle_pos.errors import ValidationError
from sizzle_pos.models import Category, MenuEntry, to_money


class MenuCatalog:
    """Read-only lookup of menu entries by 1-based item number."""

    def __init__(self, entries: Iterable[MenuEntry]) -> None:
        self._entries: tuple[MenuEntry, ...] = tuple(entries)
        for idx, entry in enumerate(self._entries, start=1):
            if entry.number != idx:
                raise ValidationError(f"Menu numbers must be dense from 1; got {entry.number} at position {idx}")
            if not entry.name.strip():
                raise ValidationError(f"Menu item {idx} has an empty name")
            if entry.price < 0:
                raise ValidationError(f"Menu item {idx} has a negative price")

    @classmethod
    def default(cls) -> MenuCatalog:
        """Build the catalog from the static menu data."""
        return cls.from_rows(MENU_CATALOG)

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, str, str, tuple[str, ...]]]) -> MenuCatalog:
        return cls(
            MenuEntry(
                number=idx,
                name=name,
                price=to_money(price),
                category=Category(category),
                variants=tuple(variants),
            )
            for idx, (name, price, category, variants) in enumerate(rows, start=1)
        )

    def lookup(self, number: int) -> MenuEntry | None:
        """Return the entry for a 1-based number, or None when out of range."""
        if isinstance(number, bool) or not isinstance(number, int):
            return None
        if not (1 <= number <= len(self._entries)):
            return None
        return self._entries[number - 1]

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def variants_of(self, number: int) -> tuple[str, ...]:
        entry = self.lookup(number)
        if entry is None:
            return ()
        return entry.variants

    def entries(self) -> list[MenuEntry]:
        return list(self._entries)

    def categories(self) -> list[Category]:
        """Categories in display order, limited to those with at least one entry."""
        present = {entry.category for entry in self._entries}
        return [category for category in Category if category in present]

    def by_category(self, category: Category | str) -> list[MenuEntry]:
        wanted = Category(category)
        return [entry for entry in self._entries if entry.category == wanted]

    def board(self) -> list[list[MenuEntry]]:
        """Menu board layout: one row of entries per category."""
        return [self.by_category(category) for category in self.categories()]

    def search(self, query: str, category: Category | str | None = None) -> list[MenuEntry]:
        """Filter entries by case-insensitive name substring or exact item number."""
        source = self.by_category(category) if category is not None else list(self._entries)
        q = query.strip().lower()
        if not q:
            return source
        if q.isdigit():
            return [entry for entry in source if str(entry.number) == q or q in entry.name.lower()]
        return [entry for entry in source if q in entry.name.lower()]

    def line_item_name(self, number: int, variant: str | None = None) -> str:
        """Compose the name stored on a line item, e.g. "Chicken Wings w/ BBQ"."""
        entry = self.lookup(number)
        if entry is None:
            raise ValidationError(f"Please enter a number between 1 and {self.count()}.")
        if variant is None or not variant.strip():
            return entry.name
        if variant not in entry.variants:
            raise ValidationError(f"{entry.name} has no variation {variant!r}")
        return f"{entry.name}{VARIANT_JOINER}{variant}"
