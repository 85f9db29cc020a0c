"""Checkout step machine: selection -> summary -> success."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from nevorento.cart import Cart
from nevorento.constant import STEP_SELECTION, STEP_SUCCESS, STEP_SUMMARY
from nevorento.models import OrderReceipt, OrderStep

OrderSink = Callable[[OrderReceipt], None]


def build_receipt(cart: Cart) -> OrderReceipt:
    """Freeze the cart's current lines and totals."""
    return OrderReceipt(
        lines=cart.lines,
        subtotal=cart.subtotal(),
        delivery_fee=cart.delivery_fee,
        total=cart.total(),
        finalized_at=datetime.now(timezone.utc),
    )


class OrderFlow:
    """Tracks the checkout step and gates transitions on the cart.

    ``success`` is terminal here; leaving it is a session-level reset, see
    ``Session.acknowledge_success_and_reset``.
    """

    def __init__(self, sink: OrderSink | None = None) -> None:
        self._sink = sink
        self.step: OrderStep = STEP_SELECTION
        self.last_receipt: OrderReceipt | None = None

    def can_advance(self, cart: Cart) -> bool:
        return self.step == STEP_SELECTION and not cart.is_empty()

    def can_finalize(self, cart: Cart) -> bool:
        return self.step == STEP_SUMMARY and not cart.is_empty()

    def advance_to_summary(self, cart: Cart) -> bool:
        if not self.can_advance(cart):
            return False
        self.step = STEP_SUMMARY
        return True

    def return_to_selection(self) -> bool:
        if self.step != STEP_SUMMARY:
            return False
        self.step = STEP_SELECTION
        return True

    def finalize(self, cart: Cart) -> OrderReceipt | None:
        """Hand the order to the sink and move to success.

        A sink that raises leaves the step untouched.
        """
        if not self.can_finalize(cart):
            return None
        receipt = build_receipt(cart)
        if self._sink is not None:
            self._sink(receipt)
        self.step = STEP_SUCCESS
        self.last_receipt = receipt
        return receipt
