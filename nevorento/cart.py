"""In-memory cart of menu items for one session."""

from __future__ import annotations

from nevorento.constant import DELIVERY_FEE
from nevorento.models import CartLine, MenuItem


class Cart:
    """Ordered cart lines, one per distinct menu item.

    Lines keep the order in which their item was first added. Quantities only
    move through ``add_item`` and ``update_quantity`` and never drop below 1;
    removing a line is always explicit.
    """

    def __init__(self, delivery_fee: int = DELIVERY_FEE) -> None:
        self.delivery_fee = delivery_fee
        self._lines: list[CartLine] = []

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[CartLine, ...]:
        """Copies of the current lines in insertion order."""
        return tuple(CartLine(item=line.item, quantity=line.quantity) for line in self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def _find_line(self, item_id: str) -> CartLine | None:
        for line in self._lines:
            if line.item.item_id == item_id:
                return line
        return None

    def get_line(self, item_id: str) -> CartLine | None:
        """Copy of the line for ``item_id``, if present."""
        line = self._find_line(item_id)
        if line is None:
            return None
        return CartLine(item=line.item, quantity=line.quantity)

    def add_item(self, item: MenuItem) -> None:
        line = self._find_line(item.item_id)
        if line is not None:
            line.quantity += 1
            return
        self._lines.append(CartLine(item=item, quantity=1))

    def remove_item(self, item_id: str) -> bool:
        """Drop the whole line for ``item_id``. Returns False when it was absent."""
        remaining = [line for line in self._lines if line.item.item_id != item_id]
        if len(remaining) == len(self._lines):
            return False
        self._lines = remaining
        return True

    def update_quantity(self, item_id: str, delta: int) -> bool:
        """Shift a line's quantity by ``delta``, clamped at 1."""
        line = self._find_line(item_id)
        if line is None:
            return False
        new_quantity = max(1, line.quantity + delta)
        if new_quantity == line.quantity:
            return False
        line.quantity = new_quantity
        return True

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def subtotal(self) -> int:
        return sum(line.item.price * line.quantity for line in self._lines)

    def total(self) -> int:
        return self.subtotal() + self.delivery_fee
