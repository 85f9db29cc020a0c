"""Session aggregate composing cart, checkout flow and reservation state."""

from __future__ import annotations

from datetime import date
from typing import Callable

from nevorento.cart import Cart
from nevorento.constant import DELIVERY_FEE, STEP_SUCCESS, TAB_RESERVE, TABS
from nevorento.data import CATALOG
from nevorento.models import MenuItem, SessionSnapshot, Tab
from nevorento.order_flow import OrderFlow, OrderSink
from nevorento.reservation import ReservationSelector, ReservationSink

SnapshotListener = Callable[[SessionSnapshot], None]


def _check_tab(tab: str) -> None:
    if tab not in TABS:
        raise ValueError(f"Unknown tab {tab!r}; expected one of {', '.join(TABS)}")


class Session:
    """The single owner of all mutable booking state for one interactive session.

    Every intent applies its change completely and then publishes exactly one
    snapshot to subscribers. Intents whose guard does not hold change nothing
    and publish nothing; they still return the current snapshot so callers
    can re-render unconditionally.
    """

    def __init__(
        self,
        catalog: tuple[MenuItem, ...] = CATALOG,
        today: Callable[[], date] = date.today,
        order_sink: OrderSink | None = None,
        reservation_sink: ReservationSink | None = None,
        delivery_fee: int = DELIVERY_FEE,
    ) -> None:
        self.catalog = catalog
        self._order_sink = order_sink
        self._delivery_fee = delivery_fee
        self._cart = Cart(delivery_fee=delivery_fee)
        self._flow = OrderFlow(sink=order_sink)
        self._reservation = ReservationSelector(today=today, sink=reservation_sink)
        self.active_tab: Tab = TAB_RESERVE
        self.overlay_open = False
        self._listeners: list[SnapshotListener] = []

    # Queries

    def snapshot(self) -> SessionSnapshot:
        cart = self._cart
        flow = self._flow
        reservation = self._reservation
        return SessionSnapshot(
            active_tab=self.active_tab,
            overlay_open=self.overlay_open,
            lines=cart.lines,
            item_count=cart.item_count(),
            subtotal=cart.subtotal(),
            delivery_fee=cart.delivery_fee,
            total=cart.total(),
            order_step=flow.step,
            can_advance=flow.can_advance(cart),
            can_finalize=flow.can_finalize(cart),
            selected_day=reservation.selected_day,
            selected_time=reservation.selected_time,
            is_confirmable=reservation.is_confirmable(),
            last_reservation=reservation.last_confirmation,
            last_receipt=flow.last_receipt,
        )

    def available_days(self) -> tuple[date, ...]:
        return self._reservation.available_days()

    def time_slots(self) -> tuple[str, ...]:
        return self._reservation.time_slots()

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a snapshot listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, changed: bool) -> SessionSnapshot:
        snapshot = self.snapshot()
        if changed:
            for listener in list(self._listeners):
                listener(snapshot)
        return snapshot

    # Cart intents

    def add_item(self, item: MenuItem) -> SessionSnapshot:
        self._cart.add_item(item)
        return self._publish(True)

    def remove_item(self, item_id: str) -> SessionSnapshot:
        return self._publish(self._cart.remove_item(item_id))

    def update_quantity(self, item_id: str, delta: int) -> SessionSnapshot:
        return self._publish(self._cart.update_quantity(item_id, delta))

    # Reservation intents

    def select_day(self, day: date) -> SessionSnapshot:
        return self._publish(self._reservation.select_day(day))

    def select_time(self, slot: str) -> SessionSnapshot:
        return self._publish(self._reservation.select_time(slot))

    def confirm_reservation(self) -> SessionSnapshot:
        return self._publish(self._reservation.confirm() is not None)

    # Checkout intents

    def advance_to_summary(self) -> SessionSnapshot:
        return self._publish(self._flow.advance_to_summary(self._cart))

    def return_to_selection(self) -> SessionSnapshot:
        return self._publish(self._flow.return_to_selection())

    def finalize_order(self) -> SessionSnapshot:
        return self._publish(self._flow.finalize(self._cart) is not None)

    def acknowledge_success_and_reset(self) -> SessionSnapshot:
        """Leave the success step: empty cart, fresh flow and closed overlay in one change."""
        if self._flow.step != STEP_SUCCESS:
            return self._publish(False)
        self._cart, self._flow, self.overlay_open = (
            Cart(delivery_fee=self._delivery_fee),
            OrderFlow(sink=self._order_sink),
            False,
        )
        return self._publish(True)

    # Overlay intents

    def open_overlay(self, tab: Tab | None = None) -> SessionSnapshot:
        """Open the overlay, switching to ``tab`` in the same change when given."""
        if tab is not None:
            _check_tab(tab)
        changed = not self.overlay_open or (tab is not None and tab != self.active_tab)
        if tab is not None:
            self.active_tab = tab
        self.overlay_open = True
        return self._publish(changed)

    def close_overlay(self) -> SessionSnapshot:
        if not self.overlay_open:
            return self._publish(False)
        self.overlay_open = False
        return self._publish(True)

    def set_active_tab(self, tab: Tab) -> SessionSnapshot:
        _check_tab(tab)
        if tab == self.active_tab:
            return self._publish(False)
        self.active_tab = tab
        return self._publish(True)
