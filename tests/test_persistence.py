from __future__ import annotations

import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from nevorento import persistence
from nevorento.models import CartLine, MenuItem, OrderReceipt, ReservationConfirmation
from nevorento.persistence import (
    bootstrap_schema,
    count_reservations,
    load_order_lines,
    save_order,
    save_reservation,
)


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "journal" / "nevorento.db"
    bootstrap_schema(path)
    return path


def _receipt(*lines: CartLine) -> OrderReceipt:
    subtotal = sum(line.line_total for line in lines)
    return OrderReceipt(
        lines=tuple(lines),
        subtotal=subtotal,
        delivery_fee=10,
        total=subtotal + 10,
        finalized_at=datetime(2026, 10, 19, 21, 0, tzinfo=timezone.utc),
    )


def test_bootstrap_is_idempotent(db_path: Path) -> None:
    bootstrap_schema(db_path)

    with sqlite3.connect(db_path) as conn:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {"orders", "order_items", "reservations"} <= tables


def test_save_order_keeps_line_order(db_path: Path, margherita: MenuItem, tiramisu: MenuItem) -> None:
    receipt = _receipt(CartLine(tiramisu, 2), CartLine(margherita, 1))

    saved = save_order(receipt, db_path)

    assert saved.receipt is receipt
    assert load_order_lines(saved.order_id, db_path) == [
        ("4", "Tiramisù Classico", 32, 2),
        ("1", "Margherita D.O.P", 68, 1),
    ]
    with sqlite3.connect(db_path) as conn:
        row = conn.execute("SELECT subtotal, delivery_fee, total FROM orders WHERE id = ?", (saved.order_id,)).fetchone()
    assert row == (132, 10, 142)


def test_save_order_rejects_empty_receipt(db_path: Path) -> None:
    with pytest.raises(ValueError):
        save_order(_receipt(), db_path)


def test_save_reservation(db_path: Path) -> None:
    confirmation = ReservationConfirmation(
        day=date(2026, 10, 23),
        time_slot="19:00",
        confirmed_at=datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc),
    )

    saved = save_reservation(confirmation, db_path)

    assert saved.confirmation == confirmation
    assert count_reservations(db_path) == 1
    with sqlite3.connect(db_path) as conn:
        row = conn.execute("SELECT reservation_day, time_slot FROM reservations").fetchone()
    assert row == ("2026-10-23", "19:00")


def test_every_connection_is_closed(
    db_path: Path, monkeypatch: pytest.MonkeyPatch, margherita: MenuItem
) -> None:
    opened: list[sqlite3.Connection] = []
    real_connect = persistence._connect

    def tracking_connect(path: str | Path) -> sqlite3.Connection:
        conn = real_connect(path)
        opened.append(conn)
        return conn

    monkeypatch.setattr(persistence, "_connect", tracking_connect)

    bootstrap_schema(db_path)
    saved = save_order(_receipt(CartLine(margherita, 1)), db_path)
    load_order_lines(saved.order_id, db_path)
    count_reservations(db_path)

    assert len(opened) == 4
    for conn in opened:
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
