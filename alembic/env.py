from __future__ import annotations

import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import Connection, create_engine, pool

from catalog.core.config import get_settings
from catalog.db.base import Base

# Interpret the config file for Python logging.
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

logger = logging.getLogger("alembic.env")

settings = get_settings()
database_url = config.get_main_option("sqlalchemy.url") or settings.database_url

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit the catalog DDL as SQL script output."""

    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations to a live database.

    A connection handed over through ``config.attributes`` is reused, which is
    the only way to migrate an in-memory SQLite database.
    """

    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return

    logger.info("Migrating %s", database_url)
    connectable = create_engine(database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        _run_with_connection(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
