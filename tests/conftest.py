from __future__ import annotations

from datetime import date

import pytest

from nevorento.data import CATALOG
from nevorento.models import MenuItem
from nevorento.session import Session

TODAY = date(2026, 10, 19)


def _catalog_item(item_id: str) -> MenuItem:
    return next(item for item in CATALOG if item.item_id == item_id)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def margherita() -> MenuItem:
    return _catalog_item("1")


@pytest.fixture()
def diavola() -> MenuItem:
    return _catalog_item("2")


@pytest.fixture()
def tiramisu() -> MenuItem:
    return _catalog_item("4")


@pytest.fixture()
def session() -> Session:
    return Session(catalog=CATALOG, today=lambda: TODAY)
