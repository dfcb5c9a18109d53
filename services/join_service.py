"""
services/join_service.py
------------------------
Joins between categories and products.

The inner join runs in the database and drops categories that have no
products. The group join keeps every category, attaching its products
(sorted by name, ignoring case) or an empty list.
"""

from typing import Callable, NamedTuple

from sqlalchemy import func

from db.context import NorthwindContext
from models.category import Category
from models.product import Product


class ProductInCategory(NamedTuple):
    category_name: str
    product_name: str
    product_id: int


class CategoryProducts(NamedTuple):
    category_name: str
    product_names: list[str]


class JoinService:
    """Runs the join queries and formats their results."""

    def __init__(self, context_factory: Callable[[], NorthwindContext] = NorthwindContext):
        self.context_factory = context_factory

    def inner_join(self) -> list[ProductInCategory]:
        with self.context_factory() as db:
            query = db.categories.join(db.products, Category.id, Product.category_id)
            return [
                ProductInCategory(category.name, product.name, product.id)
                for category, product in query
            ]

    def group_join(self) -> list[CategoryProducts]:
        with self.context_factory() as db:
            groups = db.categories.group_join(
                db.products.order_by(func.lower(Product.name), Product.name),
                Category.id,
                Product.category_id,
            )
            return [
                CategoryProducts(category.name, [p.name for p in products])
                for category, products in groups
            ]

    def join_categories_and_products(self) -> str:
        return "\n".join(
            f"{row.product_id}: {row.product_name} is in {row.category_name}."
            for row in self.inner_join()
        )

    def group_join_categories_and_products(self) -> str:
        lines = []
        for group in self.group_join():
            lines.append(f"{group.category_name} has {len(group.product_names)} products.")
            lines.extend(f" {name}" for name in group.product_names)
        return "\n".join(lines)
