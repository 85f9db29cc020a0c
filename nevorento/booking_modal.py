"""Reserve / order overlay modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from nevorento.constant import (
    BRAND_NAME,
    OPENING_HOURS_LABEL,
    STEP_SELECTION,
    STEP_SUCCESS,
    STEP_SUMMARY,
    TAB_ORDER,
    TAB_RESERVE,
)
from nevorento.models import CartLine, SessionSnapshot
from nevorento.rendering import (
    GOLD,
    format_cart_line,
    format_day_label,
    format_day_long,
    format_menu_item,
    format_price,
    format_reservation_confirmation,
    format_totals,
)
from nevorento.session import Session


class BookingModal(ModalScreen[None]):
    """Overlay with a reservation tab and a three-step ordering tab.

    Every key maps to one session intent. Keys whose guard does not hold are
    left out of the help line and do nothing when pressed.
    """

    BINDINGS = [
        ("escape", "close", "Fechar"),
        ("t", "toggle_tab", "Trocar aba"),
        ("up", "move_cursor(-1)", "Anterior"),
        ("down", "move_cursor(1)", "Próximo"),
        ("k", "move_cursor(-1)", "Anterior"),
        ("j", "move_cursor(1)", "Próximo"),
        ("left", "move_day(-1)", "Dia anterior"),
        ("right", "move_day(1)", "Próximo dia"),
        ("enter", "primary", "Selecionar"),
        ("d", "pick_day", "Escolher dia"),
        ("plus", "change_quantity(1)", "Mais"),
        ("minus", "change_quantity(-1)", "Menos"),
        ("x", "remove_line", "Remover"),
        ("n", "advance", "Finalizar pedido"),
        ("m", "back_to_menu", "Voltar ao menu"),
        ("f", "finalize", "Finalizar e pagar"),
        ("c", "confirm_reservation", "Confirmar reserva"),
    ]

    CSS = """
    BookingModal {
        align: center middle;
        background: $background 80%;
    }

    #booking-dialog {
        width: 84;
        height: auto;
        max-height: 90%;
        border: round #d4af37;
        background: $panel;
        padding: 1 2;
    }

    #booking-tabs {
        margin-bottom: 1;
    }

    #booking-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #booking-body {
        color: white;
    }

    #booking-footer {
        margin-top: 1;
        color: white;
    }

    #booking-status {
        margin-top: 1;
        color: #ffb3b3;
    }

    #booking-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    menu_cursor = reactive(0)
    line_cursor = reactive(0)
    day_cursor = reactive(0)
    slot_cursor = reactive(0)

    def __init__(self, session: Session, log: Callable[[str], None] | None = None) -> None:
        super().__init__()
        self.session = session
        self._log_debug = log or (lambda message: None)
        self.status_message = ""

    def compose(self) -> ComposeResult:
        with Container(id="booking-dialog"):
            yield Static(id="booking-tabs")
            yield Static(id="booking-title")
            yield Static(id="booking-body")
            yield Static(id="booking-footer")
            yield Static(id="booking-status")
            yield Static(id="booking-help")

    def on_mount(self) -> None:
        self.render_snapshot(self.session.snapshot())

    # Actions

    def action_close(self) -> None:
        self._log_debug("modal close")
        self.session.close_overlay()

    def action_toggle_tab(self) -> None:
        snapshot = self.session.snapshot()
        tab = TAB_ORDER if snapshot.active_tab == TAB_RESERVE else TAB_RESERVE
        self.session.set_active_tab(tab)

    def action_move_cursor(self, delta: int) -> None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab == TAB_RESERVE:
            self.slot_cursor = (self.slot_cursor + delta) % len(self.session.time_slots())
        elif snapshot.order_step == STEP_SELECTION and self.session.catalog:
            self.menu_cursor = (self.menu_cursor + delta) % len(self.session.catalog)
        elif snapshot.order_step == STEP_SUMMARY and snapshot.lines:
            self.line_cursor = (self.line_cursor + delta) % len(snapshot.lines)
        self.render_snapshot(snapshot)

    def action_move_day(self, delta: int) -> None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab != TAB_RESERVE:
            return
        self.day_cursor = (self.day_cursor + delta) % len(self.session.available_days())
        self.render_snapshot(snapshot)

    def action_primary(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab == TAB_RESERVE:
            slot = self.session.time_slots()[self.slot_cursor]
            self.session.select_time(slot)
            return
        if snapshot.order_step == STEP_SELECTION:
            if not self.session.catalog:
                return
            item = self.session.catalog[self.menu_cursor]
            self._log_debug(f"add_item item_id={item.item_id}")
            self.session.add_item(item)
            return
        if snapshot.order_step == STEP_SUCCESS:
            self._log_debug("acknowledge_success")
            self.session.acknowledge_success_and_reset()

    def action_pick_day(self) -> None:
        if self.session.snapshot().active_tab != TAB_RESERVE:
            return
        days = self.session.available_days()
        self.session.select_day(days[min(self.day_cursor, len(days) - 1)])

    def action_change_quantity(self, delta: int) -> None:
        line = self._current_line()
        if line is None:
            return
        self.session.update_quantity(line.item.item_id, delta)

    def action_remove_line(self) -> None:
        line = self._current_line()
        if line is None:
            return
        self._log_debug(f"remove_item item_id={line.item.item_id}")
        self.session.remove_item(line.item.item_id)

    def action_advance(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab != TAB_ORDER or not snapshot.can_advance:
            self._log_debug("advance_blocked")
            return
        self.line_cursor = 0
        self.session.advance_to_summary()

    def action_back_to_menu(self) -> None:
        if self.session.snapshot().active_tab != TAB_ORDER:
            return
        self.session.return_to_selection()

    def action_finalize(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab != TAB_ORDER or not snapshot.can_finalize:
            self._log_debug("finalize_blocked")
            return
        try:
            self.session.finalize_order()
        except Exception as exc:
            self.status_message = f"Não foi possível finalizar o pedido: {exc}"
            self._log_debug(f"finalize_failed error={exc!r}")
            self.render_snapshot(self.session.snapshot())
            return
        self._log_debug(f"finalize_ok total={snapshot.total}")

    def action_confirm_reservation(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab != TAB_RESERVE or not snapshot.is_confirmable:
            self._log_debug("confirm_blocked")
            return
        try:
            self.session.confirm_reservation()
        except Exception as exc:
            self.status_message = f"Não foi possível confirmar a reserva: {exc}"
            self._log_debug(f"confirm_failed error={exc!r}")
            self.render_snapshot(self.session.snapshot())
            return
        self._log_debug(f"confirm_ok day={snapshot.selected_day} time={snapshot.selected_time}")

    def _current_line(self) -> CartLine | None:
        snapshot = self.session.snapshot()
        if snapshot.active_tab != TAB_ORDER or snapshot.order_step != STEP_SUMMARY:
            return None
        if not snapshot.lines:
            return None
        return snapshot.lines[min(self.line_cursor, len(snapshot.lines) - 1)]

    # Rendering

    def on_session_change(self, snapshot: SessionSnapshot) -> None:
        """Called by the app after every applied intent."""
        self.status_message = ""
        self.render_snapshot(snapshot)

    def render_snapshot(self, snapshot: SessionSnapshot) -> None:
        self.query_one("#booking-tabs", Static).update(self._tabs_text(snapshot))
        if snapshot.active_tab == TAB_RESERVE:
            self._render_reserve(snapshot)
        elif snapshot.order_step == STEP_SELECTION:
            self._render_selection(snapshot)
        elif snapshot.order_step == STEP_SUMMARY:
            self._render_summary(snapshot)
        else:
            self._render_success(snapshot)
        self.query_one("#booking-status", Static).update(self.status_message)

    def _tabs_text(self, snapshot: SessionSnapshot) -> Text:
        text = Text()
        for tab, label in ((TAB_RESERVE, "RESERVAR MESA"), (TAB_ORDER, "PEDIR ONLINE")):
            style = f"bold #1a1a1a on {GOLD}" if snapshot.active_tab == tab else "dim"
            text.append(f" {label} ", style=style)
            text.append("  ")
        text.append(f"{BRAND_NAME} · {OPENING_HOURS_LABEL}", style="dim")
        return text

    def _update(self, title: str, body: Text | str, footer: Text | str, help_text: str) -> None:
        self.query_one("#booking-title", Static).update(title)
        self.query_one("#booking-body", Static).update(body)
        self.query_one("#booking-footer", Static).update(footer)
        self.query_one("#booking-help", Static).update(help_text)

    def _render_reserve(self, snapshot: SessionSnapshot) -> None:
        days = self.session.available_days()
        slots = self.session.time_slots()
        self.day_cursor = min(self.day_cursor, len(days) - 1)

        body = Text()
        body.append("1. Selecione a Data\n", style="dim")
        for idx, day in enumerate(days):
            label = f"[{format_day_label(day)}]" if day == snapshot.selected_day else f" {format_day_label(day)} "
            style = f"bold {GOLD}" if day == snapshot.selected_day else "white"
            if idx == self.day_cursor:
                style += " reverse"
            body.append(label, style=style)
            body.append("\n" if idx == 6 else " ")

        body.append("\n\n2. Selecione o Horário\n", style="dim")
        for idx, slot in enumerate(slots):
            pointer = "➤ " if idx == self.slot_cursor else "  "
            checked = "(x)" if slot == snapshot.selected_time else "( )"
            style = f"bold {GOLD}" if slot == snapshot.selected_time else "white"
            body.append(f"{pointer}{checked} {slot}\n", style=style)

        footer = Text()
        if snapshot.last_reservation is not None:
            footer.append(format_reservation_confirmation(snapshot.last_reservation), style=f"bold {GOLD}")
        elif snapshot.selected_day is not None:
            footer.append(f"Data: {format_day_long(snapshot.selected_day)}", style="dim")

        help_text = "←/→ dia, D escolher dia, ↑/↓ horário, Enter escolher horário, T trocar aba, Esc fechar"
        if snapshot.is_confirmable:
            help_text = "C confirmar reserva, " + help_text
        self._update("RESERVE SUA EXPERIÊNCIA", body, footer, help_text)

    def _render_selection(self, snapshot: SessionSnapshot) -> None:
        quantities = {line.item.item_id: line.quantity for line in snapshot.lines}
        body = Text()
        for idx, item in enumerate(self.session.catalog):
            if idx > 0:
                body.append("\n")
            body.append("➤ " if idx == self.menu_cursor else "  ")
            body.append_text(format_menu_item(item, quantities.get(item.item_id, 0)))

        footer = Text()
        if snapshot.lines:
            footer.append(f"Sacola: {snapshot.item_count} itens · {format_price(snapshot.subtotal)}", style=GOLD)

        help_text = "↑/↓ mover, Enter adicionar, T trocar aba, Esc fechar"
        if snapshot.can_advance:
            help_text = "N finalizar pedido, " + help_text
        self._update("NOSSO MENU", body, footer, help_text)

    def _render_summary(self, snapshot: SessionSnapshot) -> None:
        body = Text()
        if snapshot.lines:
            self.line_cursor = min(self.line_cursor, len(snapshot.lines) - 1)
        for idx, line in enumerate(snapshot.lines):
            if idx > 0:
                body.append("\n")
            body.append("➤ " if idx == self.line_cursor else "  ")
            body.append_text(format_cart_line(line))
        if not snapshot.lines:
            body.append("(sacola vazia)", style="dim")

        help_text = "↑/↓ mover, +/- quantidade, X remover, M voltar ao menu, Esc fechar"
        if snapshot.can_finalize:
            help_text = "F finalizar e pagar, " + help_text
        self._update("RESUMO DO PEDIDO", body, format_totals(snapshot), help_text)

    def _render_success(self, snapshot: SessionSnapshot) -> None:
        body = Text()
        body.append("PEDIDO CONFIRMADO!\n\n", style=f"bold {GOLD}")
        body.append("Seu pedido já está sendo preparado com todo carinho. Em breve ele chegará até você.")
        footer: Text | str = ""
        if snapshot.last_receipt is not None:
            footer = Text(f"Total pago: {format_price(snapshot.last_receipt.total)}", style="dim")
        self._update("", body, footer, "Enter voltar ao site")
