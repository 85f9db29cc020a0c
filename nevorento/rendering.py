"""Rendering helpers: pure formatting over the booking model."""

from __future__ import annotations

from datetime import date

from rich.text import Text

from nevorento.constant import CATEGORIES, CATEGORY_LABELS, CURRENCY_SYMBOL, WEEKDAY_SHORT_LABELS
from nevorento.data import items_in_category
from nevorento.models import CartLine, MenuItem, ReservationConfirmation, SessionSnapshot

GOLD = "#d4af37"


def format_price(amount: int) -> str:
    """Format whole reais the way the menu prints them, e.g. ``R$ 68,00``."""
    whole = f"{amount:,}".replace(",", ".")
    return f"{CURRENCY_SYMBOL} {whole},00"


def weekday_label(day: date) -> str:
    return WEEKDAY_SHORT_LABELS[day.weekday()]


def format_day_label(day: date) -> str:
    """Short picker label, e.g. ``ter 20``."""
    return f"{weekday_label(day)} {day.day}"


def format_day_long(day: date) -> str:
    return f"{weekday_label(day)} {day.day:02d}/{day.month:02d}/{day.year}"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == "pizza":
        return "bold #1a1a1a on #d4af37"
    if category == "drink":
        return "bold #ffffff on #2f6db5"
    return "bold #ffffff on #b23a48"


def format_category_badge(category: str) -> Text:
    text = Text()
    text.append(f" {CATEGORY_LABELS.get(category, category)} ", style=badge_style(category))
    return text


def format_menu_item(item: MenuItem, in_cart: int = 0) -> Text:
    """Menu row: badge, name, price and how many are already in the cart."""
    text = Text()
    text.append_text(format_category_badge(item.category))
    text.append(f" {item.name}", style="bold")
    text.append(f"  {format_price(item.price)}", style=GOLD)
    if in_cart:
        text.append(f"  x{in_cart}", style="dim")
    text.append(f"\n    {item.description}", style="dim")
    return text


def format_menu_by_category(catalog: tuple[MenuItem, ...], quantities: dict[str, int] | None = None) -> Text:
    """Menu grouped under category headings, skipping empty categories."""
    quantities = quantities or {}
    text = Text()
    for category in CATEGORIES:
        items = items_in_category(category, catalog)
        if not items:
            continue
        if text.plain:
            text.append("\n\n")
        text.append(CATEGORY_LABELS[category].upper(), style=f"bold {GOLD}")
        for item in items:
            text.append("\n")
            text.append_text(format_menu_item(item, quantities.get(item.item_id, 0)))
    return text


def format_cart_line(line: CartLine) -> Text:
    text = Text()
    text.append(line.item.name, style="bold")
    text.append(f"  {format_price(line.item.price)}", style=GOLD)
    text.append(f"  - {line.quantity} +")
    text.append(f"  = {format_price(line.line_total)}", style="dim")
    return text


def format_totals(snapshot: SessionSnapshot) -> Text:
    text = Text()
    text.append(f"Subtotal         {format_price(snapshot.subtotal)}\n", style="dim")
    text.append(f"Taxa de Entrega  {format_price(snapshot.delivery_fee)}\n", style="dim")
    text.append("TOTAL            ", style="bold")
    text.append(format_price(snapshot.total), style=f"bold {GOLD}")
    return text


def format_cart_badge(snapshot: SessionSnapshot) -> str:
    """Header badge text; empty when there is nothing in the cart."""
    if not snapshot.lines:
        return ""
    return f"Sacola ({snapshot.line_count})"


def format_reservation_confirmation(confirmation: ReservationConfirmation) -> str:
    return f"Reserva confirmada: {format_day_long(confirmation.day)} às {confirmation.time_slot}"
