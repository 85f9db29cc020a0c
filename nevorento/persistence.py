"""SQLite journal for finalized orders and confirmed reservations."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from nevorento.config import DB_PATH
from nevorento.models import OrderReceipt, ReservationConfirmation


@dataclass(frozen=True)
class SavedOrder:
    """Saved order metadata and the receipt it was built from."""

    order_id: str
    created_at: str
    receipt: OrderReceipt


@dataclass(frozen=True)
class SavedReservation:
    reservation_id: str
    created_at: str
    confirmation: ReservationConfirmation


def _connect(db_path: str | Path = DB_PATH) -> sqlite3.Connection:
    db_file = Path(db_path)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def bootstrap_schema(db_path: str | Path = DB_PATH) -> None:
    """Create journal schema if it does not already exist."""
    with closing(_connect(db_path)) as conn, conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS orders (
                id TEXT PRIMARY KEY,
                created_at TEXT NOT NULL,
                subtotal INTEGER NOT NULL,
                delivery_fee INTEGER NOT NULL,
                total INTEGER NOT NULL,
                source TEXT NOT NULL DEFAULT 'tui'
            );

            CREATE TABLE IF NOT EXISTS order_items (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT NOT NULL,
                line_index INTEGER NOT NULL,
                item_id TEXT NOT NULL,
                item_name TEXT NOT NULL,
                unit_price INTEGER NOT NULL,
                quantity INTEGER NOT NULL,
                FOREIGN KEY(order_id) REFERENCES orders(id) ON DELETE CASCADE
            );

            CREATE TABLE IF NOT EXISTS reservations (
                id TEXT PRIMARY KEY,
                created_at TEXT NOT NULL,
                reservation_day TEXT NOT NULL,
                time_slot TEXT NOT NULL,
                source TEXT NOT NULL DEFAULT 'tui'
            );

            CREATE INDEX IF NOT EXISTS idx_order_items_order_id_line
                ON order_items(order_id, line_index);
            """
        )


def save_order(receipt: OrderReceipt, db_path: str | Path = DB_PATH) -> SavedOrder:
    """Persist a finalized order and its lines in one transaction."""
    if not receipt.lines:
        raise ValueError("Cannot save an order without lines")

    order_id = uuid4().hex
    created_at = receipt.finalized_at.isoformat()

    with closing(_connect(db_path)) as conn:
        with conn:
            conn.execute(
                """
                INSERT INTO orders (id, created_at, subtotal, delivery_fee, total, source)
                VALUES (?, ?, ?, ?, ?, 'tui')
                """,
                (order_id, created_at, receipt.subtotal, receipt.delivery_fee, receipt.total),
            )
            for idx, line in enumerate(receipt.lines):
                conn.execute(
                    """
                    INSERT INTO order_items (order_id, line_index, item_id, item_name, unit_price, quantity)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (order_id, idx, line.item.item_id, line.item.name, line.item.price, line.quantity),
                )

    return SavedOrder(order_id=order_id, created_at=created_at, receipt=receipt)


def save_reservation(confirmation: ReservationConfirmation, db_path: str | Path = DB_PATH) -> SavedReservation:
    reservation_id = uuid4().hex
    created_at = confirmation.confirmed_at.isoformat()

    with closing(_connect(db_path)) as conn:
        with conn:
            conn.execute(
                """
                INSERT INTO reservations (id, created_at, reservation_day, time_slot, source)
                VALUES (?, ?, ?, ?, 'tui')
                """,
                (reservation_id, created_at, confirmation.day.isoformat(), confirmation.time_slot),
            )

    return SavedReservation(reservation_id=reservation_id, created_at=created_at, confirmation=confirmation)


def load_order_lines(order_id: str, db_path: str | Path = DB_PATH) -> list[tuple[str, str, int, int]]:
    """Return ``(item_id, item_name, unit_price, quantity)`` rows in line order."""
    with closing(_connect(db_path)) as conn:
        rows = conn.execute(
            """
            SELECT item_id, item_name, unit_price, quantity
            FROM order_items
            WHERE order_id = ?
            ORDER BY line_index
            """,
            (order_id,),
        ).fetchall()
    return [(str(r[0]), str(r[1]), int(r[2]), int(r[3])) for r in rows]


def count_reservations(db_path: str | Path = DB_PATH) -> int:
    with closing(_connect(db_path)) as conn:
        (count,) = conn.execute("SELECT COUNT(*) FROM reservations").fetchone()
    return int(count)
