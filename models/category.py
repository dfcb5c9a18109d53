"""
models/category.py
------------------
Domain model for product categories.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.product import Product


class Category(Base):
    """
    A product category, mapped onto the Northwind ``Categories`` table.

    Attributes:
        id: Primary key (``CategoryID``).
        name: Display name (``CategoryName``).
        description: Optional free text.
        products: Every product that belongs to this category.
    """
    __tablename__ = "Categories"

    id: Mapped[int] = mapped_column("CategoryID", primary_key=True)
    name: Mapped[str] = mapped_column("CategoryName", String(15), nullable=False)
    description: Mapped[Optional[str]] = mapped_column("Description", Text)

    products: Mapped[list["Product"]] = relationship(back_populates="category")

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"
