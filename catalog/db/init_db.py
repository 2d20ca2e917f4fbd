"""Create or drop the catalog schema directly from the model metadata."""

import logging

from sqlalchemy import Engine

from catalog.db.base import Base
from catalog.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(bind: Engine | None = None) -> None:
    """Create all catalog tables that do not exist yet."""

    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.debug("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_db(bind: Engine | None = None) -> None:
    """Drop every catalog table."""

    bind = bind or default_engine
    Base.metadata.drop_all(bind=bind)


if __name__ == "__main__":
    init_db()
