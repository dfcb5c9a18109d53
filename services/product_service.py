"""
services/product_service.py
---------------------------
Insert, update and delete operations on products.

A mutation is reported as successful by the number of rows it affected:
adds and price changes must touch exactly one row, deletes at least one.
Anything else is reported with FAILED_MESSAGE. Database errors are not
caught here; they propagate after the context rolls back.
"""

from decimal import Decimal
from typing import Callable, Optional

from db.context import NorthwindContext
from models.product import Product
from services.catalog_service import CatalogService
from utils.logger import get_logger

logger = get_logger(__name__)

FAILED_MESSAGE = "the last transaction did not execute"


class ProductService:
    """Handles the product mutations and their console messages."""

    def __init__(self, context_factory: Callable[[], NorthwindContext] = NorthwindContext):
        self.context_factory = context_factory
        self.catalog = CatalogService(context_factory)

    # ── INSERT ────────────────────────────────────────────

    def add_product(self, category_id: int, name: str, price: Optional[Decimal]) -> str:
        """
        Insert a new product.

        Args:
            category_id: Existing category the product belongs to.
            name: Product name.
            price: Unit price, or None if unknown.

        Returns:
            The product table on success, FAILED_MESSAGE otherwise.
        """
        with self.context_factory() as db:
            product = Product(
                category_id=category_id,
                name=name,
                cost=Decimal(price) if price is not None else None,
            )
            db.products.add(product)
            affected = db.save_changes()

        if affected == 1:
            logger.info(f"Added product '{name}' #{product.id}.")
            return self.catalog.product_table()
        logger.warning(f"Adding product '{name}' affected {affected} rows.")
        return FAILED_MESSAGE

    # ── UPDATE ────────────────────────────────────────────

    def increase_product_price(self, prefix: str, amount: Decimal) -> str:
        """
        Raise the price of the first product whose name starts with ``prefix``.
        An unknown price stays unknown.

        Raises:
            sqlalchemy.exc.NoResultFound: If no product name has that prefix.
        """
        with self.context_factory() as db:
            product = db.products.first(Product.name.startswith(prefix, autoescape=True))
            if product.cost is not None:
                product.cost += Decimal(amount)
            affected = db.save_changes()

        if affected == 1:
            logger.info(f"Price of '{product.name}' is now {product.cost}.")
            return self.catalog.product_table()
        logger.warning(f"Price change for '{prefix}' affected {affected} rows.")
        return FAILED_MESSAGE

    # ── DELETE ────────────────────────────────────────────

    def delete_products(self, prefix: str) -> str:
        """Delete every product whose name starts with ``prefix``."""
        with self.context_factory() as db:
            doomed = db.products.where(Product.name.startswith(prefix, autoescape=True))
            db.products.remove_range(doomed)
            deleted = db.save_changes()

        if deleted > 0:
            logger.info(f"Deleted {deleted} product(s) starting with '{prefix}'.")
            return f"{deleted} product(s) were deleted.\n{self.catalog.product_table()}"
        logger.warning(f"No products start with '{prefix}'.")
        return FAILED_MESSAGE
