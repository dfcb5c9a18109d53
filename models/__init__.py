"""
models/ - Domain Models
=======================
Entity definitions. Category and Product are mapped to the Northwind
tables; Person is a plain in-memory record.
"""

from models.base import Base
from models.category import Category
from models.person import Person
from models.product import Product

__all__ = ["Base", "Category", "Person", "Product"]
