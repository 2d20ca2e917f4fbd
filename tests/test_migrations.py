from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import Engine, inspect

from catalog.db.base import Base
from catalog.db.session import build_engine

ROOT = Path(__file__).resolve().parents[1]


def _alembic_config() -> Config:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    return config


def _migrated_engine() -> Engine:
    engine = build_engine("sqlite+pysqlite:///:memory:")
    config = _alembic_config()
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
    return engine


def test_upgrade_creates_catalog_tables() -> None:
    engine = _migrated_engine()

    tables = set(inspect(engine).get_table_names())

    assert set(Base.metadata.tables) <= tables
    assert "furniture_product" not in tables
    engine.dispose()


def test_migration_matches_model_columns() -> None:
    engine = _migrated_engine()
    inspector = inspect(engine)

    for table in Base.metadata.sorted_tables:
        migrated = {column["name"] for column in inspector.get_columns(table.name)}
        assert migrated == set(table.columns.keys()), table.name
    engine.dispose()


def test_downgrade_drops_catalog_tables() -> None:
    engine = build_engine("sqlite+pysqlite:///:memory:")
    config = _alembic_config()
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
        command.downgrade(config, "base")

    assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    engine.dispose()
