from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from catalog.db.init_db import drop_db, init_db
from catalog.db.session import build_engine

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory catalog database per test."""

    engine = build_engine(IN_MEMORY_URL)
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> Generator[TestClient, None, None]:
    from catalog.api.deps import get_db
    from catalog.main import app

    def override_get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
