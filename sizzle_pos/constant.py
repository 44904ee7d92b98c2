"""Editable static menu catalog."""

from __future__ import annotations

# (name, price, category, variants) in display order; item numbers follow list position.
MENU_CATALOG: list[tuple[str, str, str, tuple[str, ...]]] = [
    ("Spring Rolls", "120.00", "Appetizers", ("Sweet Chili Sauce", "Garlic Mayo")),
    ("Chicken Wings", "150.00", "Appetizers", ("Buffalo", "BBQ", "Honey Garlic")),
    ("Calamari", "180.00", "Appetizers", ("Mayonnaise", "Vinegar")),
    ("Nachos", "160.00", "Appetizers", ("Extra Cheese", "Jalapeños", "Sour Cream")),
    ("Garlic Bread", "90.00", "Appetizers", ("Extra Butter", "Parmesan")),
    ("Grilled Chicken", "220.00", "Main Course", ("Garlic Rice", "Plain Rice")),
    ("Beef Steak", "350.00", "Main Course", ("Mushroom Sauce", "Pepper Sauce", "Garlic Rice")),
    ("Pork Chop", "280.00", "Main Course", ("Gravy", "Steamed Veggies")),
    ("Fish Fillet", "260.00", "Main Course", ("Lemon Butter", "Rice")),
    ("Pasta Carbonara", "240.00", "Main Course", ("Extra Cheese", "Garlic Bread")),
    ("Chocolate Cake", "110.00", "Desserts", ("Extra Frosting", "Sprinkles")),
    ("Ice Cream", "80.00", "Desserts", ("Chocolate", "Vanilla", "Ube", "Mango")),
    ("Halo-Halo", "120.00", "Desserts", ("Extra Leche Flan", "Extra Ice Cream")),
    ("Leche Flan", "95.00", "Desserts", ("Caramel Drizzle",)),
    ("Fruit Salad", "100.00", "Desserts", ("Extra Cream",)),
    ("Iced Tea", "50.00", "Beverages", ("Lemon", "Extra Ice")),
    ("Soft Drinks", "45.00", "Beverages", ("Coke", "Sprite", "Royal")),
    ("Fresh Juice", "70.00", "Beverages", ("Orange", "Mango", "Pineapple", "Watermelon")),
    ("Coffee", "65.00", "Beverages", ("Black", "With Cream", "Iced")),
    ("Milkshake", "85.00", "Beverages", ("Chocolate", "Strawberry", "Vanilla", "Mango")),
]

# Normal-mode key that opens a category-filtered menu search.
CATEGORY_KEYS: dict[str, str] = {
    "a": "Appetizers",
    "m": "Main Course",
    "d": "Desserts",
    "b": "Beverages",
}

VARIANT_JOINER = " w/ "
