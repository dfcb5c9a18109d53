"""Shared fixtures: an in-memory Northwind database with a small catalog."""

from decimal import Decimal

import pytest

from db.connection import close_engine, get_session, init_engine
from db.init_db import create_tables
from models import Category, Product

CATEGORIES = [
    (1, "Beverages"),
    (2, "Condiments"),
    (3, "Seafood"),  # no products
    (6, "Meat/Poultry"),
]

PRODUCTS = [
    # (id, name, cost, stock, discontinued, category id)
    (1, "Chai", Decimal("18.00"), 39, False, 1),
    (2, "Chang", Decimal("19.00"), 17, False, 1),
    (3, "Aniseed Syrup", Decimal("10.00"), 13, False, 2),
    (4, "masoud classic", Decimal("25.00"), 5, False, 6),
    (5, "masoud deluxe", Decimal("40.00"), 2, False, 6),
    (6, "Mystery Box", None, 1, True, 2),
]


@pytest.fixture
def database():
    """Fresh in-memory database per test, loaded with CATEGORIES and PRODUCTS."""
    close_engine()
    init_engine("sqlite://", echo=False)
    create_tables()

    session = get_session()
    session.add_all(Category(id=cid, name=name) for cid, name in CATEGORIES)
    session.add_all(
        Product(id=pid, name=name, cost=cost, stock=stock, discontinued=disc, category_id=cat)
        for pid, name, cost, stock, disc, cat in PRODUCTS
    )
    session.commit()
    session.close()

    yield

    close_engine()


@pytest.fixture
def empty_database():
    """Fresh in-memory database with the schema but no rows."""
    close_engine()
    init_engine("sqlite://", echo=False)
    create_tables()
    yield
    close_engine()
