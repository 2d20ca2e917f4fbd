from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.core.config import get_settings


def _is_in_memory(database_url: str) -> bool:
    return database_url.startswith("sqlite") and (":memory:" in database_url or database_url.endswith("://"))


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine, sharing a single connection for in-memory SQLite."""

    engine_kwargs: dict[str, Any] = {"pool_pre_ping": True, "echo": echo}
    if database_url.startswith("sqlite"):
        engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
    if _is_in_memory(database_url):
        # every connection must see the same in-memory database
        engine_kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **engine_kwargs)


settings = get_settings()

engine = build_engine(settings.database_url, echo=settings.echo_sql)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session per request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
