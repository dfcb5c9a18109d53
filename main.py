"""
main.py
-------
Entry point for the Northwind query walkthrough.

Responsibilities:
    - Initialize the database engine and schema.
    - Load the sample catalog into an empty database.
    - Run the one demonstration routine selected below.
"""

from decimal import Decimal

from config import SEED_SAMPLE_DATA
from db.connection import close_engine, init_engine
from db.init_db import create_tables, seed_sample_data
from handlers.console_handler import (
    add_product,
    delete_products,
    group_join_categories_and_products,
    increase_product_price,
    join_categories_and_products,
    list_products,
    query_categories,
    query_products,
    query_with_like,
)
from utils.logger import get_logger

logger = get_logger(__name__)

ROUTINES = {
    "query_categories": query_categories,
    "query_products": query_products,
    "query_with_like": query_with_like,
    "list_products": list_products,
    "add_product": lambda: add_product(6, "masoud shayan", Decimal("500")),
    "increase_product_price": lambda: increase_product_price("maso", Decimal("10")),
    "delete_products": lambda: delete_products("maso"),
    "join_categories_and_products": join_categories_and_products,
    "group_join_categories_and_products": group_join_categories_and_products,
}

# Chosen here rather than on the command line; change the key to run another one.
DEMO_ROUTINE = ROUTINES["group_join_categories_and_products"]


def main() -> None:
    """Initialize the database and run the demonstration routine."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_engine()
    try:
        create_tables()
        if SEED_SAMPLE_DATA:
            seed_sample_data()

        # ── 2. Run the demonstration ──────────────────────
        DEMO_ROUTINE()
    finally:
        close_engine()


if __name__ == "__main__":
    main()
