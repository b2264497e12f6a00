"""
Create the bed manager schema and report what is in it.

Usage:
    python scripts/setup_db.py [DATABASE_URL]
"""
import sys
import logging

from sqlalchemy import inspect, select, func

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("setup_db")


def setup_database(database_url: str = None) -> bool:
    """Create every table and log the row count of each."""
    from bedmanager.core.config import Config
    from bedmanager.db.connection import Base, get_db, init_db

    db_url = database_url or Config.DATABASE_URL
    try:
        engine = init_db(db_url)
    except Exception:
        logger.exception(f"Could not create schema at {db_url}")
        return False

    existing = set(inspect(engine).get_table_names())
    with get_db() as session:
        for name, table in Base.metadata.tables.items():
            if name not in existing:
                logger.error(f"Table {name} is missing after create_all")
                return False
            rows = session.scalar(select(func.count()).select_from(table))
            logger.info(f"{name}: {rows} rows")

    logger.info(f"Bed manager schema ready ({len(existing)} tables) at {db_url}")
    return True


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(0 if setup_database(url) else 1)
