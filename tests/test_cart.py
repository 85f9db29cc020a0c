from __future__ import annotations

from nevorento.cart import Cart
from nevorento.constant import DELIVERY_FEE
from nevorento.models import MenuItem


def test_repeated_adds_grow_a_single_line(margherita: MenuItem) -> None:
    cart = Cart()
    for _ in range(5):
        cart.add_item(margherita)

    assert len(cart) == 1
    assert cart.lines[0].item == margherita
    assert cart.lines[0].quantity == 5
    assert cart.item_count() == 5


def test_adding_margherita_twice_gives_subtotal_136(margherita: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)
    cart.add_item(margherita)

    assert [(line.item.item_id, line.quantity) for line in cart.lines] == [("1", 2)]
    assert cart.subtotal() == 136


def test_lines_keep_first_add_order(margherita: MenuItem, diavola: MenuItem, tiramisu: MenuItem) -> None:
    cart = Cart()
    cart.add_item(tiramisu)
    cart.add_item(margherita)
    cart.add_item(diavola)
    cart.add_item(tiramisu)
    cart.update_quantity(margherita.item_id, 3)

    assert [line.item.item_id for line in cart.lines] == ["4", "1", "2"]


def test_update_quantity_is_clamped_at_one(margherita: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)

    changed = cart.update_quantity(margherita.item_id, -5)

    assert changed is False
    assert cart.get_line(margherita.item_id).quantity == 1

    cart.update_quantity(margherita.item_id, 3)
    cart.update_quantity(margherita.item_id, -100)
    assert cart.get_line(margherita.item_id).quantity == 1


def test_update_quantity_for_missing_item_is_a_noop(margherita: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)

    assert cart.update_quantity("missing", 2) is False
    assert cart.lines[0].quantity == 1


def test_remove_item_drops_the_whole_line_and_keeps_order(
    margherita: MenuItem, diavola: MenuItem, tiramisu: MenuItem
) -> None:
    cart = Cart()
    cart.add_item(margherita)
    cart.add_item(margherita)
    cart.add_item(diavola)
    cart.add_item(tiramisu)

    assert cart.remove_item(margherita.item_id) is True

    assert cart.get_line(margherita.item_id) is None
    assert [line.item.item_id for line in cart.lines] == ["2", "4"]


def test_remove_missing_item_leaves_cart_unchanged(margherita: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)
    before = cart.lines

    assert cart.remove_item("does-not-exist") is False
    assert cart.lines == before


def test_totals_add_the_delivery_fee(margherita: MenuItem, tiramisu: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)
    cart.add_item(tiramisu)
    cart.add_item(tiramisu)

    assert cart.subtotal() == 68 + 2 * 32
    assert cart.total() == cart.subtotal() + DELIVERY_FEE


def test_subtotal_does_not_depend_on_insertion_order(margherita: MenuItem, diavola: MenuItem) -> None:
    first = Cart()
    first.add_item(margherita)
    first.add_item(diavola)
    second = Cart()
    second.add_item(diavola)
    second.add_item(margherita)

    assert first.subtotal() == second.subtotal() == 142


def test_lines_are_copies(margherita: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)
    lines = cart.lines

    cart.add_item(margherita)

    assert lines[0].quantity == 1
    assert cart.lines[0].quantity == 2


def test_custom_delivery_fee() -> None:
    item = MenuItem("x", "Acqua", "Água com gás", 8, "", "drink")
    cart = Cart(delivery_fee=0)
    cart.add_item(item)

    assert cart.total() == 8


def test_get_line_returns_a_copy(margherita: MenuItem) -> None:
    cart = Cart()
    cart.add_item(margherita)

    line = cart.get_line(margherita.item_id)
    line.quantity = 0

    assert cart.get_line(margherita.item_id).quantity == 1
    assert cart.subtotal() == 68
    assert cart.get_line("missing") is None
