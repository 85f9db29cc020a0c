"""Table reservation day/slot selection."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterator

from nevorento.constant import RESERVATION_WINDOW_DAYS, TIME_SLOTS
from nevorento.models import ReservationConfirmation

ReservationSink = Callable[[ReservationConfirmation], None]


def iter_days(start: date, count: int = RESERVATION_WINDOW_DAYS) -> Iterator[date]:
    """Yield ``count`` consecutive dates beginning with ``start``."""
    for offset in range(count):
        yield start + timedelta(days=offset)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReservationSelector:
    """Holds an optional day and an optional time slot for a table booking.

    The two fields are independent; there is no availability model behind
    them. A reservation can only be confirmed once both are set.
    """

    def __init__(
        self,
        today: Callable[[], date] = date.today,
        sink: ReservationSink | None = None,
    ) -> None:
        self._today = today
        self._sink = sink
        self.selected_day: date | None = None
        self.selected_time: str | None = None
        self.last_confirmation: ReservationConfirmation | None = None

    def available_days(self) -> tuple[date, ...]:
        """The reservation window, recomputed from the clock on every call."""
        return tuple(iter_days(self._today()))

    @staticmethod
    def time_slots() -> tuple[str, ...]:
        return TIME_SLOTS

    def select_day(self, day: date) -> bool:
        if day not in self.available_days():
            raise ValueError(f"{day.isoformat()} is outside the {RESERVATION_WINDOW_DAYS}-day reservation window")
        if day == self.selected_day:
            return False
        self.selected_day = day
        self.last_confirmation = None
        return True

    def select_time(self, slot: str) -> bool:
        if slot not in TIME_SLOTS:
            raise ValueError(f"Unknown time slot {slot!r}")
        if slot == self.selected_time:
            return False
        self.selected_time = slot
        self.last_confirmation = None
        return True

    def is_confirmable(self) -> bool:
        """Both fields set and the day still inside today's window."""
        if self.selected_day is None or self.selected_time is None:
            return False
        return self.selected_day in self.available_days()

    def confirm(self) -> ReservationConfirmation | None:
        """Confirm the current selection, or return None when it is incomplete or stale."""
        day = self.selected_day
        slot = self.selected_time
        if day is None or slot is None or not self.is_confirmable():
            return None
        confirmation = ReservationConfirmation(
            day=day,
            time_slot=slot,
            confirmed_at=_utc_now(),
        )
        if self._sink is not None:
            self._sink(confirmation)
        self.last_confirmation = confirmation
        return confirmation
