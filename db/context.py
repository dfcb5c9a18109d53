"""
db/context.py
-------------
The NorthwindContext façade.

A context owns one session for the duration of a ``with`` block and exposes
the two Northwind collections as EntitySets. Queries are composed with
``where`` / ``order_by`` / ``include`` / ``join`` and only hit the database
when they are enumerated. Adds and removes are buffered in the session until
``save_changes()`` commits them.

Usage:
    with NorthwindContext() as db:
        cheap = db.products.where(Product.cost < 10).order_by(Product.name)
        for product in cheap:
            ...
"""

from collections import defaultdict
from operator import attrgetter
from typing import Any, Iterable, Iterator, NamedTuple, Optional

from sqlalchemy import Select, event, func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from db.connection import get_session, release_session
from models.category import Category
from models.product import Product
from utils.logger import get_logger

logger = get_logger(__name__)


class Grouping(NamedTuple):
    """One outer element of a group join and its (possibly empty) matches."""
    outer: Any
    items: list


class Query:
    """
    Immutable description of a SELECT over one mapped entity.

    Every builder method returns a new Query; the receiver is never changed.
    Without an explicit ordering, rows come back in primary-key order.
    """

    def __init__(self, session: Session, entity: type, criteria=(), ordering=(), options=()):
        self._session = session
        self.entity = entity
        self._criteria = tuple(criteria)
        self._ordering = tuple(ordering)
        self._options = tuple(options)

    def _derive(self, **changes) -> "Query":
        params = {
            "criteria": self._criteria,
            "ordering": self._ordering,
            "options": self._options,
        }
        params.update(changes)
        return Query(self._session, self.entity, **params)

    # ── Composition ───────────────────────────────────────

    def where(self, *criteria) -> "Query":
        """Add filter predicates; all of them must hold."""
        return self._derive(criteria=self._criteria + criteria)

    def order_by(self, *keys) -> "Query":
        """Append ascending (or explicitly directed) ordering keys."""
        return self._derive(ordering=self._ordering + keys)

    def order_by_descending(self, key) -> "Query":
        """Append a descending ordering key. Unknown values sort last."""
        return self._derive(ordering=self._ordering + (key.desc().nulls_last(),))

    def include(self, relationship) -> "Query":
        """Eager-load a relationship together with the main rows."""
        return self._derive(options=self._options + (selectinload(relationship),))

    def join(self, inner: "Query", outer_key, inner_key) -> "JoinQuery":
        """Inner join with another query on ``outer_key == inner_key``."""
        return JoinQuery(self, inner, outer_key == inner_key)

    def statement(self) -> Select:
        stmt = select(self.entity)
        if self._criteria:
            stmt = stmt.where(*self._criteria)
        stmt = stmt.order_by(*(self._ordering or self._default_ordering()))
        if self._options:
            stmt = stmt.options(*self._options)
        return stmt

    def _default_ordering(self) -> tuple:
        return tuple(inspect(self.entity).primary_key)

    # ── Execution ─────────────────────────────────────────

    def __iter__(self) -> Iterator:
        return iter(self.to_list())

    def to_list(self) -> list:
        return list(self._session.scalars(self.statement()).all())

    def first(self, *criteria):
        """
        Return the first matching row.

        Raises:
            sqlalchemy.exc.NoResultFound: If no row matches.
        """
        query = self.where(*criteria) if criteria else self
        return self._session.scalars(query.statement().limit(1)).one()

    def first_or_none(self, *criteria):
        query = self.where(*criteria) if criteria else self
        return self._session.scalars(query.statement().limit(1)).first()

    def count(self) -> int:
        inner = self.statement().order_by(None).subquery()
        return self._session.scalar(select(func.count()).select_from(inner))

    def group_join(self, inner: "Query", outer_key, inner_key) -> list[Grouping]:
        """
        Left outer join: pair every outer row with all matching inner rows.

        Both sides are loaded, then the inner rows are indexed by key. Inner
        rows keep the order of the inner query, and outer rows without any
        match are kept with an empty list.

        Args:
            inner: Query for the "many" side (ordering is preserved).
            outer_key: Mapped attribute of the outer entity, e.g. ``Category.id``.
            inner_key: Mapped attribute of the inner entity, e.g. ``Product.category_id``.
        """
        get_outer_key = attrgetter(outer_key.key)
        get_inner_key = attrgetter(inner_key.key)

        index: dict[Any, list] = defaultdict(list)
        for item in inner:
            index[get_inner_key(item)].append(item)

        return [Grouping(row, list(index.get(get_outer_key(row), ()))) for row in self]


class JoinQuery:
    """Inner join of two queries, enumerated as ``(outer, inner)`` pairs."""

    def __init__(self, outer: Query, inner: Query, on_clause):
        self.outer = outer
        self.inner = inner
        self.on_clause = on_clause

    def statement(self) -> Select:
        outer, inner = self.outer, self.inner
        stmt = select(outer.entity, inner.entity).join(inner.entity, self.on_clause)
        criteria = outer._criteria + inner._criteria
        if criteria:
            stmt = stmt.where(*criteria)
        ordering = (outer._ordering or outer._default_ordering()) + (
            inner._ordering or inner._default_ordering()
        )
        return stmt.order_by(*ordering)

    def __iter__(self) -> Iterator[tuple]:
        return iter(self.outer._session.execute(self.statement()).all())


class EntitySet(Query):
    """The root query of one table, plus staging of adds and removes."""

    def add(self, entity) -> None:
        self._session.add(entity)

    def remove(self, entity) -> None:
        self._session.delete(entity)

    def remove_range(self, entities: Iterable) -> None:
        for entity in list(entities):
            self._session.delete(entity)


class NorthwindContext:
    """
    Unit of work over the Northwind database.

    The session is acquired on ``__enter__`` and always released on
    ``__exit__``; anything not saved by then is discarded.
    """

    def __init__(self, session: Optional[Session] = None):
        self._session = session
        self._written = 0
        self._on_flush = self._count_flushed

    def __enter__(self) -> "NorthwindContext":
        if self._session is None:
            self._session = get_session()
        self._written = 0
        event.listen(self._session, "after_flush", self._on_flush)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._session is not None:
            event.remove(self._session, "after_flush", self._on_flush)
            release_session(self._session)
            self._session = None
        return False

    def _count_flushed(self, session: Session, flush_context) -> None:
        # new/dirty/deleted and attribute history still hold their pre-flush state here
        modified = sum(1 for obj in session.dirty if session.is_modified(obj))
        self._written += len(session.new) + modified + len(session.deleted)

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("NorthwindContext is not open. Use it in a 'with' block.")
        return self._session

    @property
    def categories(self) -> EntitySet:
        return EntitySet(self.session, Category)

    @property
    def products(self) -> EntitySet:
        return EntitySet(self.session, Product)

    def save_changes(self) -> int:
        """
        Commit all staged changes.

        Returns:
            Number of entities written since the last save: added + modified
            + deleted, including anything autoflushed by earlier queries.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: After rolling back, if the commit fails.
        """
        session = self.session
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            self._written = 0
            logger.error(f"Failed to save changes: {e}")
            raise
        affected, self._written = self._written, 0
        logger.info(f"Saved changes: {affected} entities written.")
        return affected
