"""Static catalog data."""

from __future__ import annotations

from nevorento.constant import CATEGORIES, MENU_ROWS
from nevorento.models import MenuItem


def _build_menu_item(row: dict[str, str | int]) -> MenuItem:
    price = int(row["price"])
    if price < 0:
        raise ValueError(f"Menu item {row['item_id']!r} has a negative price")
    category = str(row["category"])
    if category not in CATEGORIES:
        raise ValueError(f"Menu item {row['item_id']!r} has unknown category {category!r}")
    return MenuItem(
        item_id=str(row["item_id"]),
        name=str(row["name"]),
        description=str(row["description"]),
        price=price,
        image=str(row["image"]),
        category=category,  # type: ignore[arg-type]
    )


def build_catalog(rows: list[dict[str, str | int]]) -> tuple[MenuItem, ...]:
    """Wrap raw catalog rows into MenuItem instances, rejecting duplicate ids."""
    items = tuple(_build_menu_item(row) for row in rows)
    seen: set[str] = set()
    for item in items:
        if item.item_id in seen:
            raise ValueError(f"Duplicate menu item id {item.item_id!r}")
        seen.add(item.item_id)
    return items


CATALOG: tuple[MenuItem, ...] = build_catalog(MENU_ROWS)


def items_in_category(category: str, catalog: tuple[MenuItem, ...] = CATALOG) -> list[MenuItem]:
    return [item for item in catalog if item.category == category]
