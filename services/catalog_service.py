"""
services/catalog_service.py
---------------------------
Read-only catalog queries: categories with their product counts, price
filters, name pattern matching, and the full product table.
"""

from decimal import Decimal
from typing import Callable

from db.context import NorthwindContext
from models.category import Category
from models.product import Product
from utils.console import dollars, whole_dollars
from utils.logger import get_logger

logger = get_logger(__name__)

PRODUCT_TABLE_HEADER = f"{'ID':<3} {'Product Name':<35} {'Cost':>8} {'Stock':>5} Disc."


def format_product_row(product: Product) -> str:
    """One fixed-width row of the product table."""
    return (
        f"{product.id:03d} {product.name:<35} {dollars(product.cost):>8} "
        f"{product.stock:>5} {product.discontinued}"
    )


class CatalogService:
    """
    Builds and runs the listing and filtering queries.
    Every method works inside its own NorthwindContext.
    """

    def __init__(self, context_factory: Callable[[], NorthwindContext] = NorthwindContext):
        self.context_factory = context_factory

    def categories_with_product_counts(self) -> str:
        """Every category and how many products it has."""
        with self.context_factory() as db:
            categories = db.categories.include(Category.products)
            lines = ["Categories and how many products they have:"]
            for category in categories:
                lines.append(f"{category.name} has {len(category.products)} products.")
        return "\n".join(lines)

    def products_above(self, price: Decimal) -> list[Product]:
        """Products costing more than ``price``, most expensive first."""
        with self.context_factory() as db:
            query = (
                db.products
                .where(Product.cost > price)
                .order_by_descending(Product.cost)
            )
            return query.to_list()

    def products_above_price(self, price: Decimal) -> str:
        lines = []
        for product in self.products_above(price):
            lines.append(
                f"pId : {product.id} - pName : {product.name} - "
                f"pCost : {whole_dollars(product.cost)} - PUnit : {product.stock} in Stock"
            )
        return "\n".join(lines)

    def products_like(self, fragment: str) -> list[Product]:
        """Products whose name matches the LIKE pattern ``%fragment%``."""
        with self.context_factory() as db:
            return db.products.where(Product.name.like(f"%{fragment}%")).to_list()

    def products_matching(self, fragment: str) -> str:
        lines = [
            f"name : {p.name} - stock : {p.stock} - discounted : {p.discontinued}"
            for p in self.products_like(fragment)
        ]
        logger.info(f"{len(lines)} product(s) matched '{fragment}'.")
        return "\n".join(lines)

    def product_table(self) -> str:
        """All products as a fixed-width table, highest cost first."""
        with self.context_factory() as db:
            products = db.products.order_by_descending(Product.cost)
            lines = [PRODUCT_TABLE_HEADER]
            lines.extend(format_product_row(p) for p in products)
        return "\n".join(lines)
