from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from sqlalchemy import Connection, Engine, Row, Table, func, inspect, select
from sqlalchemy.orm import Session

from catalog.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class UnknownTableError(LookupError):
    """Raised when a table name is not part of the catalog schema."""


class UnknownColumnError(LookupError):
    """Raised when a column is not present on a catalog table."""


def _catalog_table(table_name: str) -> Table:
    table = Base.metadata.tables.get(table_name)
    if table is None:
        raise UnknownTableError(f"Unknown catalog table: {table_name}")
    return table


def save_products(db: Session, products: Iterable[ModelT]) -> list[ModelT]:
    """Persist products in one transaction and return them with ids assigned."""

    saved = list(products)
    db.add_all(saved)
    db.commit()
    for product in saved:
        db.refresh(product)
        logger.info("Saved %s id: %s", type(product).__name__, product.id)
    return saved


def list_polymorphic(db: Session, model: type[ModelT]) -> Sequence[ModelT]:
    """Load every row of ``model``, each as its most specific mapped subtype."""

    products = db.scalars(select(model)).all()
    logger.info("Found %d %s rows.", len(products), model.__name__)
    return products


def count_rows(connection: Connection | Session, table_name: str) -> int:
    """Count rows in a physical catalog table, bypassing the ORM mapping."""

    table = _catalog_table(table_name)
    return connection.execute(select(func.count()).select_from(table)).scalar_one()


def fetch_rows(connection: Connection | Session, table_name: str, columns: Sequence[str]) -> list[Row[Any]]:
    """Return the raw values of ``columns`` for every row of a catalog table."""

    table = _catalog_table(table_name)
    missing = [column for column in columns if column not in table.c]
    if missing:
        raise UnknownColumnError(f"Unknown columns on {table.name}: {', '.join(missing)}")

    statement = select(*(table.c[column] for column in columns)).order_by(*table.primary_key.columns)
    return list(connection.execute(statement))


def describe_schema(bind: Engine | Connection) -> dict[str, list[str]]:
    """Report the tables and columns the database actually holds."""

    inspector = inspect(bind)
    return {
        table_name: [column["name"] for column in inspector.get_columns(table_name)]
        for table_name in sorted(inspector.get_table_names())
    }
