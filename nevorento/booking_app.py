"""Main Textual app class."""

from __future__ import annotations

from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Header, Static

from nevorento.booking_modal import BookingModal
from nevorento.config import DB_PATH
from nevorento.constant import BRAND_NAME, OPENING_HOURS_LABEL, TAB_ORDER, TAB_RESERVE
from nevorento.debuglog import log_debug
from nevorento.models import OrderReceipt, ReservationConfirmation, SessionSnapshot
from nevorento.persistence import bootstrap_schema, save_order, save_reservation
from nevorento.rendering import GOLD, format_cart_badge, format_menu_by_category, format_reservation_confirmation
from nevorento.session import Session


class BookingApp(App):
    """A Textual front for the Nevorento reservation and delivery overlay."""

    TITLE = BRAND_NAME
    SUB_TITLE = "Reservas / Delivery"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #hero-pane {
        width: 2fr;
        border: round #d4af37;
        padding: 1;
    }

    #menu-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-badge {
        height: 1;
        margin-bottom: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("o", "open_overlay('order')", "Pedir delivery"),
        ("r", "open_overlay('reserve')", "Reservar mesa"),
        ("b", "open_overlay", "Reservar / Pedir"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: Session | None = None, db_path: str | Path = DB_PATH) -> None:
        super().__init__()
        self.db_path = db_path
        self._uses_journal = session is None
        if session is None:
            session = Session(order_sink=self._journal_order, reservation_sink=self._journal_reservation)
        self.session = session
        self.system_status = ""
        self._unsubscribe = self.session.subscribe(self._on_session_change)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        log_debug(message)

    def _journal_order(self, receipt: OrderReceipt) -> None:
        saved = save_order(receipt, self.db_path)
        self.system_status = f"Pedido {saved.order_id[:8]} confirmado"
        self._log_debug(f"order_saved order_id={saved.order_id} total={receipt.total}")

    def _journal_reservation(self, confirmation: ReservationConfirmation) -> None:
        saved = save_reservation(confirmation, self.db_path)
        self.system_status = format_reservation_confirmation(confirmation)
        self._log_debug(f"reservation_saved reservation_id={saved.reservation_id}")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="hero-pane"):
                yield Static(BRAND_NAME, classes="pane-title")
                yield Static(id="hero-body")
            with Vertical(id="menu-pane"):
                yield Static(id="cart-badge")
                yield Static("Nosso Menu", classes="pane-title")
                yield Static(id="menu-list")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        if self._uses_journal:
            bootstrap_schema(self.db_path)
        self._log_debug(f"on_mount journal={self._uses_journal}")
        self._refresh_main(self.session.snapshot())

    def on_unmount(self) -> None:
        self._unsubscribe()

    def action_open_overlay(self, tab: str | None = None) -> None:
        if isinstance(self.screen, BookingModal):
            return
        self._log_debug(f"open_overlay tab={tab!r}")
        if tab not in {None, TAB_ORDER, TAB_RESERVE}:
            return
        self.session.open_overlay(tab)  # type: ignore[arg-type]

    def _on_session_change(self, snapshot: SessionSnapshot) -> None:
        modal = self.screen if isinstance(self.screen, BookingModal) else None
        if snapshot.overlay_open and modal is None:
            self.push_screen(BookingModal(self.session, log=self._log_debug))
        elif not snapshot.overlay_open and modal is not None:
            self.pop_screen()
        elif modal is not None:
            modal.on_session_change(snapshot)
        self._refresh_main(snapshot)

    def _refresh_main(self, snapshot: SessionSnapshot) -> None:
        try:
            hero = self.query_one("#hero-body", Static)
            badge = self.query_one("#cart-badge", Static)
            menu_list = self.query_one("#menu-list", Static)
            status_bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        hero_text = Text()
        hero_text.append("O DESPERTAR DOS ", style="bold")
        hero_text.append("SENTIDOS\n\n", style=f"bold italic {GOLD}")
        hero_text.append("Tradição napolitana elevada pelo fogo e pelo tempo.\n\n", style="dim")
        hero_text.append(OPENING_HOURS_LABEL, style="dim")
        hero.update(hero_text)

        badge.update(Text(format_cart_badge(snapshot), style=f"bold {GOLD}"))

        quantities = {line.item.item_id: line.quantity for line in snapshot.lines}
        menu_list.update(format_menu_by_category(self.session.catalog, quantities))

        status = self.system_status or "Pronto"
        status_bar.update(f"O pedir delivery · R reservar mesa · B reservar/pedir · Ctrl+Q sair\n{status}")
