"""
handlers/console_handler.py
---------------------------
Console routines. Each one reads what it needs from the terminal, delegates
to a service, and prints the result. No query logic lives here.
"""

import sys
from decimal import Decimal
from typing import Callable, Optional, TextIO

from services.catalog_service import CatalogService
from services.join_service import JoinService
from services.product_service import ProductService
from utils.console import prompt_decimal

catalog_service = CatalogService()
product_service = ProductService()
join_service = JoinService()


def _emit(text: str, out: Optional[TextIO]) -> None:
    if text:
        print(text, file=out or sys.stdout)


# ── select / where ────────────────────────────────────────

def query_categories(out: Optional[TextIO] = None) -> None:
    """Print every category with its number of products."""
    _emit(catalog_service.categories_with_product_counts(), out)


def query_products(read_line: Callable[[], str] = input, out: Optional[TextIO] = None) -> None:
    """Ask for a price, then print the products that cost more, highest first."""
    out = out or sys.stdout
    print("Products that cost more than a price, highest at top.", file=out)
    price = prompt_decimal("Enter a product price :", read_line, out)
    print(price, file=out)
    _emit(catalog_service.products_above_price(price), out)


def query_with_like(read_line: Callable[[], str] = input, out: Optional[TextIO] = None) -> None:
    """Ask for part of a name, then print the products whose name contains it."""
    out = out or sys.stdout
    print("Enter part of a product name: ", file=out)
    fragment = read_line()
    _emit(catalog_service.products_matching(fragment), out)


def list_products(out: Optional[TextIO] = None) -> None:
    _emit(catalog_service.product_table(), out)


# ── insert / update / delete ──────────────────────────────

def add_product(category_id: int, name: str, price: Optional[Decimal], out: Optional[TextIO] = None) -> None:
    _emit(product_service.add_product(category_id, name, price), out)


def increase_product_price(prefix: str, amount: Decimal, out: Optional[TextIO] = None) -> None:
    _emit(product_service.increase_product_price(prefix, amount), out)


def delete_products(prefix: str, out: Optional[TextIO] = None) -> None:
    _emit(product_service.delete_products(prefix), out)


# ── joins ─────────────────────────────────────────────────

def join_categories_and_products(out: Optional[TextIO] = None) -> None:
    """Inner join: one line per product, categories without products are absent."""
    _emit(join_service.join_categories_and_products(), out)


def group_join_categories_and_products(out: Optional[TextIO] = None) -> None:
    """Group join: every category, its product count, then its products by name."""
    _emit(join_service.group_join_categories_and_products(), out)
