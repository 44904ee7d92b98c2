from decimal import Decimal

import pytest

from sizzle_pos.errors import ValidationError
from sizzle_pos.menu import MenuCatalog
from sizzle_pos.models import Category, MenuEntry


def test_lookup_bounds():
    catalog = MenuCatalog.default()
    assert catalog.lookup(0) is None
    assert catalog.lookup(catalog.count() + 1) is None
    assert catalog.lookup(-3) is None
    first = catalog.lookup(1)
    assert first is not None
    assert first.number == 1
    assert first.name == "Spring Rolls"
    assert first.price == Decimal("120.00")
    assert first.category == Category.APPETIZERS


def test_lookup_rejects_non_int():
    catalog = MenuCatalog.default()
    assert catalog.lookup("1") is None
    assert catalog.lookup(True) is None


def test_numbers_are_dense():
    catalog = MenuCatalog.default()
    assert catalog.count() == 20
    assert [entry.number for entry in catalog.entries()] == list(range(1, 21))


def test_variants_of():
    catalog = MenuCatalog.default()
    assert catalog.variants_of(2) == ("Buffalo", "BBQ", "Honey Garlic")
    assert catalog.variants_of(99) == ()


def test_board_groups_by_category():
    catalog = MenuCatalog.default()
    board = catalog.board()
    assert len(board) == 4
    assert [len(row) for row in board] == [5, 5, 5, 5]
    assert board[3][0].name == "Iced Tea"
    assert catalog.categories() == list(Category)


def test_search_by_name_and_number():
    catalog = MenuCatalog.default()
    assert [e.name for e in catalog.search("garlic")] == ["Garlic Bread"]
    assert [e.number for e in catalog.search("12")] == [12]
    assert [e.name for e in catalog.search("ice", Category.DESSERTS)] == ["Ice Cream"]
    assert len(catalog.search("", Category.BEVERAGES)) == 5


def test_line_item_name_with_variant():
    catalog = MenuCatalog.default()
    assert catalog.line_item_name(2, "BBQ") == "Chicken Wings w/ BBQ"
    assert catalog.line_item_name(2) == "Chicken Wings"
    with pytest.raises(ValidationError):
        catalog.line_item_name(2, "Ketchup")
    with pytest.raises(ValidationError):
        catalog.line_item_name(0)


def test_catalog_rejects_gaps():
    entries = [
        MenuEntry(1, "A", Decimal("1.00"), Category.APPETIZERS),
        MenuEntry(3, "B", Decimal("1.00"), Category.APPETIZERS),
    ]
    with pytest.raises(ValidationError):
        MenuCatalog(entries)
