from __future__ import annotations

from datetime import date

import pytest

from nevorento.data import CATALOG, build_catalog, items_in_category
from nevorento.models import CartLine, MenuItem
from nevorento.rendering import (
    badge_style,
    format_cart_badge,
    format_cart_line,
    format_day_label,
    format_day_long,
    format_menu_by_category,
    format_menu_item,
    format_price,
)
from nevorento.session import Session


def test_catalog_matches_static_menu() -> None:
    assert [item.item_id for item in CATALOG] == ["1", "2", "3", "4"]
    assert [item.price for item in CATALOG] == [68, 74, 89, 32]
    assert [item.name for item in items_in_category("dessert")] == ["Tiramisù Classico"]
    assert items_in_category("drink") == []
    assert [item.name for item in items_in_category("pizza")][1] == "Diavola"


def test_build_catalog_rejects_bad_rows() -> None:
    row = {"item_id": "a", "name": "A", "description": "", "price": 5, "image": "", "category": "pizza"}

    with pytest.raises(ValueError):
        build_catalog([row, dict(row)])
    with pytest.raises(ValueError):
        build_catalog([{**row, "price": -1}])
    with pytest.raises(ValueError):
        build_catalog([{**row, "category": "pasta"}])


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(0, "R$ 0,00"), (68, "R$ 68,00"), (146, "R$ 146,00"), (1250, "R$ 1.250,00")],
)
def test_format_price(amount: int, expected: str) -> None:
    assert format_price(amount) == expected


def test_day_labels_use_portuguese_weekdays() -> None:
    assert format_day_label(date(2026, 10, 19)) == "seg 19"
    assert format_day_label(date(2026, 10, 24)) == "sáb 24"
    assert format_day_long(date(2026, 11, 1)) == "dom 01/11/2026"


def test_badge_styles_differ_per_category() -> None:
    assert len({badge_style("pizza"), badge_style("drink"), badge_style("dessert")}) == 3


def test_menu_item_row_shows_name_price_and_cart_count(margherita: MenuItem) -> None:
    plain = format_menu_item(margherita, in_cart=2).plain

    assert "Margherita D.O.P" in plain
    assert "R$ 68,00" in plain
    assert "x2" in plain
    assert "x0" not in format_menu_item(margherita).plain


def test_cart_line_shows_line_total(margherita: MenuItem) -> None:
    plain = format_cart_line(CartLine(item=margherita, quantity=3)).plain

    assert "- 3 +" in plain
    assert "R$ 204,00" in plain


def test_cart_badge_counts_distinct_lines(margherita: MenuItem, tiramisu: MenuItem) -> None:
    session = Session()
    assert format_cart_badge(session.snapshot()) == ""

    session.add_item(margherita)
    session.add_item(margherita)
    snapshot = session.add_item(tiramisu)

    assert format_cart_badge(snapshot) == "Sacola (2)"


def test_menu_is_grouped_by_category() -> None:
    plain = format_menu_by_category(CATALOG, {"4": 1}).plain

    assert plain.startswith("PIZZA\n")
    assert plain.index("Nevorento Speciale") < plain.index("SOBREMESA") < plain.index("Tiramisù Classico")
    assert "BEBIDA" not in plain
    assert "x1" in plain
