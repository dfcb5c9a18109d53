"""Tests for the NorthwindContext façade and its query builder."""

import warnings
from decimal import Decimal

import pytest
from sqlalchemy.exc import NoResultFound, SADeprecationWarning

from db.context import EntitySet, Grouping, NorthwindContext, Query
from models import Category, Product


class TestContextScope:
    def test_collections(self, database):
        with NorthwindContext() as db:
            assert isinstance(db.categories, EntitySet)
            assert isinstance(db.products, EntitySet)
            assert db.categories.count() == 4
            assert db.products.count() == 6

    def test_closed_context_has_no_session(self, database):
        context = NorthwindContext()
        with pytest.raises(RuntimeError):
            context.products
        with context:
            assert context.session is not None
        with pytest.raises(RuntimeError):
            context.session

    def test_session_released_when_body_raises(self, database):
        context = NorthwindContext()
        with pytest.raises(ValueError):
            with context as db:
                db.products.add(Product(name="Half done", category_id=1))
                raise ValueError("boom")
        with pytest.raises(RuntimeError):
            context.session

        with NorthwindContext() as db:
            assert db.products.first_or_none(Product.name == "Half done") is None

    def test_unsaved_changes_are_discarded(self, database):
        with NorthwindContext() as db:
            db.products.first(Product.id == 1).cost = Decimal("99.00")

        with NorthwindContext() as db:
            assert db.products.first(Product.id == 1).cost == Decimal("18.00")


class TestQueryComposition:
    def test_builder_returns_new_queries(self, database):
        with NorthwindContext() as db:
            everything = db.products
            cheap = everything.where(Product.cost < 15)
            assert isinstance(cheap, Query)
            assert cheap is not everything
            assert everything.count() == 6
            assert [p.name for p in cheap] == ["Aniseed Syrup"]

    def test_where_criteria_accumulate(self, database):
        with NorthwindContext() as db:
            query = db.products.where(Product.cost > 15).where(Product.category_id == 1)
            assert [p.name for p in query] == ["Chai", "Chang"]

    def test_query_runs_on_enumeration(self, database):
        with NorthwindContext() as db:
            beverages = db.products.where(Product.category_id == 1)
            db.products.add(Product(name="Lemonade", cost=Decimal("3.00"), category_id=1))
            db.save_changes()
            assert "Lemonade" in [p.name for p in beverages]

    def test_default_order_is_primary_key(self, database):
        with NorthwindContext() as db:
            assert [p.id for p in db.products] == [1, 2, 3, 4, 5, 6]

    def test_order_by_descending_puts_unknown_last(self, database):
        with NorthwindContext() as db:
            names = [p.name for p in db.products.order_by_descending(Product.cost)]
        assert names == ["masoud deluxe", "masoud classic", "Chang", "Chai",
                         "Aniseed Syrup", "Mystery Box"]

    def test_include_loads_relationship(self, database):
        with NorthwindContext() as db:
            categories = db.categories.include(Category.products).to_list()
        counts = {c.name: len(c.products) for c in categories}
        assert counts == {"Beverages": 2, "Condiments": 2, "Seafood": 0, "Meat/Poultry": 2}

    def test_first(self, database):
        with NorthwindContext() as db:
            assert db.products.first(Product.name.startswith("masoud")).id == 4
            with pytest.raises(NoResultFound):
                db.products.first(Product.name == "Nope")
            assert db.products.first_or_none(Product.name == "Nope") is None


class TestJoins:
    def test_inner_join_skips_unmatched(self, database):
        with NorthwindContext() as db:
            pairs = list(db.categories.join(db.products, Category.id, Product.category_id))
        assert len(pairs) == 6
        assert "Seafood" not in {category.name for category, _ in pairs}
        assert all(category.id == product.category_id for category, product in pairs)

    def test_inner_join_uses_no_deprecated_api(self, database):
        with warnings.catch_warnings():
            warnings.simplefilter("error", SADeprecationWarning)
            with NorthwindContext() as db:
                pairs = list(db.categories.join(db.products, Category.id, Product.category_id))
        assert [(c.id, p.id) for c, p in pairs][:2] == [(1, 1), (1, 2)]

    def test_inner_join_respects_criteria(self, database):
        with NorthwindContext() as db:
            query = db.categories.where(Category.id == 1).join(
                db.products.where(Product.cost > Decimal("18.50")), Category.id, Product.category_id
            )
            assert [(c.name, p.name) for c, p in query] == [("Beverages", "Chang")]

    def test_group_join_keeps_every_outer_row(self, database):
        with NorthwindContext() as db:
            groups = db.categories.group_join(
                db.products.order_by(Product.name.desc()), Category.id, Product.category_id
            )
        assert all(isinstance(g, Grouping) for g in groups)
        summary = [(g.outer.name, [p.name for p in g.items]) for g in groups]
        assert summary == [
            ("Beverages", ["Chang", "Chai"]),
            ("Condiments", ["Mystery Box", "Aniseed Syrup"]),
            ("Seafood", []),
            ("Meat/Poultry", ["masoud deluxe", "masoud classic"]),
        ]


class TestSaveChanges:
    def test_counts_added_modified_deleted(self, database):
        with NorthwindContext() as db:
            db.products.add(Product(name="Lemonade", category_id=1))
            db.products.first(Product.id == 1).cost = Decimal("20.00")
            db.products.remove(db.products.first(Product.id == 3))
            assert db.save_changes() == 3

    def test_nothing_staged(self, database):
        with NorthwindContext() as db:
            list(db.products)
            assert db.save_changes() == 0

    def test_remove_range(self, database):
        with NorthwindContext() as db:
            db.products.remove_range(db.products.where(Product.category_id == 1))
            assert db.save_changes() == 2
            assert db.products.where(Product.category_id == 1).count() == 0
