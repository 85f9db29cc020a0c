"""Editable static menu, slot and pricing configuration."""

from __future__ import annotations

BRAND_NAME = "NEVORENTO"
CURRENCY_SYMBOL = "R$"

# Flat fee added to every finalized delivery order, in whole reais.
DELIVERY_FEE = 10

RESERVATION_WINDOW_DAYS = 14

TIME_SLOTS: tuple[str, ...] = (
    "18:30",
    "19:00",
    "19:30",
    "20:00",
    "20:30",
    "21:00",
    "21:30",
    "22:00",
)

TAB_RESERVE = "reserve"
TAB_ORDER = "order"
TABS: tuple[str, ...] = (TAB_RESERVE, TAB_ORDER)

STEP_SELECTION = "selection"
STEP_SUMMARY = "summary"
STEP_SUCCESS = "success"

CATEGORIES: tuple[str, ...] = ("pizza", "drink", "dessert")

CATEGORY_LABELS: dict[str, str] = {
    "pizza": "Pizza",
    "drink": "Bebida",
    "dessert": "Sobremesa",
}

# date.weekday() index -> pt-BR short weekday.
WEEKDAY_SHORT_LABELS: tuple[str, ...] = ("seg", "ter", "qua", "qui", "sex", "sáb", "dom")

# Canonical catalog rows consumed by nevorento.data (which wraps these into MenuItem instances).
MENU_ROWS: list[dict[str, str | int]] = [
    {
        "item_id": "1",
        "name": "Margherita D.O.P",
        "description": "Tomate San Marzano, Mozzarella di Bufala, Manjericão fresco e Azeite Extra Virgem.",
        "price": 68,
        "image": "https://images.unsplash.com/photo-1574071318508-1cdbad80ad38?auto=format&fit=crop&q=80&w=600",
        "category": "pizza",
    },
    {
        "item_id": "2",
        "name": "Diavola",
        "description": "Tomate, Mozzarella, Salame Picante Italiano e Cebola Roxa.",
        "price": 74,
        "image": "https://images.unsplash.com/photo-1534308983496-4fabb1a015ee?auto=format&fit=crop&q=80&w=600",
        "category": "pizza",
    },
    {
        "item_id": "3",
        "name": "Nevorento Speciale",
        "description": "Creme de Pistache, Mortadella Bologna, Stracciatella e Raspas de Limão Siciliano.",
        "price": 89,
        "image": "https://images.unsplash.com/photo-1513104890138-7c749659a591?auto=format&fit=crop&q=80&w=600",
        "category": "pizza",
    },
    {
        "item_id": "4",
        "name": "Tiramisù Classico",
        "description": "Receita original com Mascarpone italiano e café selecionado.",
        "price": 32,
        "image": "https://images.unsplash.com/photo-1571877227200-a0d98ea607e9?auto=format&fit=crop&q=80&w=600",
        "category": "dessert",
    },
]

OPENING_HOURS_LABEL = "Terça a Domingo, 18:30 às 23:00"
