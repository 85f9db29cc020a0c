"""Domain models for the Nevorento booking core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

Category = Literal["pizza", "drink", "dessert"]
Tab = Literal["reserve", "order"]
OrderStep = Literal["selection", "summary", "success"]


@dataclass(frozen=True)
class MenuItem:
    """An orderable catalog entry."""

    item_id: str
    name: str
    description: str
    price: int
    image: str
    category: Category


@dataclass
class CartLine:
    """One item in the cart together with how many were added."""

    item: MenuItem
    quantity: int = 1

    @property
    def line_total(self) -> int:
        return self.item.price * self.quantity


@dataclass(frozen=True)
class ReservationConfirmation:
    """Emitted once a day and a time slot have been confirmed."""

    day: date
    time_slot: str
    confirmed_at: datetime


@dataclass(frozen=True)
class OrderReceipt:
    """Frozen copy of a finalized cart handed to the order sink."""

    lines: tuple[CartLine, ...]
    subtotal: int
    delivery_fee: int
    total: int
    finalized_at: datetime


@dataclass(frozen=True)
class SessionSnapshot:
    """Consistent read-only view of the whole session after an intent."""

    active_tab: Tab
    overlay_open: bool
    lines: tuple[CartLine, ...]
    item_count: int
    subtotal: int
    delivery_fee: int
    total: int
    order_step: OrderStep
    can_advance: bool
    can_finalize: bool
    selected_day: date | None
    selected_time: str | None
    is_confirmable: bool
    last_reservation: ReservationConfirmation | None = None
    last_receipt: OrderReceipt | None = None

    @property
    def line_count(self) -> int:
        return len(self.lines)
