"""Utility script to print the catalog schema of the configured database."""

from catalog.db.init_db import init_db
from catalog.db.session import engine
from catalog.services.catalog import describe_schema


def main() -> None:
    """Create any missing catalog tables and list what the database holds."""

    init_db(engine)
    for table_name, columns in describe_schema(engine).items():
        print(f"{table_name}: {', '.join(columns)}")


if __name__ == "__main__":
    main()
