"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist and loads
a sample Northwind catalog into an empty database.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from db.connection import get_engine, get_session, release_session
from models import Base, Category, Product
from utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_CATEGORIES = [
    (1, "Beverages", "Soft drinks, coffees, teas, beers, and ales"),
    (2, "Condiments", "Sweet and savory sauces, relishes, spreads, and seasonings"),
    (3, "Confections", "Desserts, candies, and sweet breads"),
    (4, "Dairy Products", "Cheeses"),
    (5, "Grains/Cereals", "Breads, crackers, pasta, and cereal"),
    (6, "Meat/Poultry", "Prepared meats"),
    (7, "Produce", "Dried fruit and bean curd"),
    (8, "Seafood", "Seaweed and fish"),
]

# (id, name, unit price, units in stock, discontinued, category id)
SAMPLE_PRODUCTS = [
    (1, "Chai", "18.00", 39, False, 1),
    (2, "Chang", "19.00", 17, False, 1),
    (24, "Guaraná Fantástica", "4.50", 20, True, 1),
    (38, "Côte de Blaye", "263.50", 17, False, 1),
    (3, "Aniseed Syrup", "10.00", 13, False, 2),
    (4, "Chef Anton's Cajun Seasoning", "22.00", 53, False, 2),
    (8, "Northwoods Cranberry Sauce", "40.00", 6, False, 2),
    (16, "Pavlova", "17.45", 29, False, 3),
    (20, "Sir Rodney's Marmalade", "81.00", 40, False, 3),
    (62, "Tarte au sucre", "49.30", 17, False, 3),
    (11, "Queso Cabrales", "21.00", 22, False, 4),
    (59, "Raclette Courdavault", "55.00", 79, False, 4),
    (22, "Gustaf's Knäckebröd", "21.00", 104, False, 5),
    (42, "Singaporean Hokkien Fried Mee", "14.00", 26, True, 5),
    (9, "Mishi Kobe Niku", "97.00", 29, True, 6),
    (17, "Alice Mutton", "39.00", 0, True, 6),
    (29, "Thüringer Rostbratwurst", "123.79", 0, True, 6),
    (7, "Uncle Bob's Organic Dried Pears", "30.00", 15, False, 7),
    (14, "Tofu", "23.25", 35, False, 7),
    (10, "Ikura", "31.00", 31, False, 8),
    (18, "Carnarvon Tigers", "62.50", 42, False, 8),
]


def create_tables() -> None:
    """
    Create every mapped table.
    Safe to call multiple times (existing tables are left alone).
    """
    try:
        Base.metadata.create_all(get_engine())
        logger.info("Database schema initialized successfully.")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


def seed_sample_data() -> int:
    """
    Load the sample catalog if the database has no categories yet.

    Returns:
        Number of products inserted (0 when the database was not empty).
    """
    session = get_session()
    try:
        if session.scalar(select(func.count()).select_from(Category)):
            logger.info("Sample data skipped: database already has categories.")
            return 0
        session.add_all(
            Category(id=cid, name=name, description=description)
            for cid, name, description in SAMPLE_CATEGORIES
        )
        session.add_all(
            Product(
                id=pid, name=name, cost=Decimal(cost), stock=stock,
                discontinued=discontinued, category_id=category_id,
            )
            for pid, name, cost, stock, discontinued, category_id in SAMPLE_PRODUCTS
        )
        session.commit()
        logger.info(f"Loaded {len(SAMPLE_PRODUCTS)} sample products in {len(SAMPLE_CATEGORIES)} categories.")
        return len(SAMPLE_PRODUCTS)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Failed to load sample data: {e}")
        raise
    finally:
        release_session(session)


if __name__ == "__main__":
    from db.connection import init_engine
    init_engine()
    create_tables()
    seed_sample_data()
    print("Database schema created successfully.")
