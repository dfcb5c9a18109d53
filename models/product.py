"""
models/product.py
-----------------
Domain model for products.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.category import Category


class Product(Base):
    """
    A sellable product, mapped onto the Northwind ``Products`` table.

    Attributes:
        id: Primary key (``ProductID``).
        name: Product name (``ProductName``).
        cost: Unit price; None when unknown (``UnitPrice``).
        stock: Units in stock (``UnitsInStock``).
        discontinued: Whether the product is no longer sold.
        category_id: Foreign key to ``Categories.CategoryID``.
    """
    __tablename__ = "Products"

    id: Mapped[int] = mapped_column("ProductID", primary_key=True)
    name: Mapped[str] = mapped_column("ProductName", String(40), nullable=False)
    cost: Mapped[Optional[Decimal]] = mapped_column("UnitPrice", Numeric(10, 2))
    stock: Mapped[int] = mapped_column("UnitsInStock", Integer, default=0)
    discontinued: Mapped[bool] = mapped_column("Discontinued", Boolean, default=False)
    category_id: Mapped[Optional[int]] = mapped_column(
        "CategoryID", ForeignKey("Categories.CategoryID")
    )

    category: Mapped[Optional["Category"]] = relationship(back_populates="products")

    def __str__(self) -> str:
        cost = f"{self.cost:.2f}" if self.cost is not None else "?"
        return f"#{self.id} {self.name} ({cost})"
