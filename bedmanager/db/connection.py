"""
Database connection and session management for the bed manager.

Uses SQLAlchemy with SQLite for development; any SQLAlchemy URL works in
production.
"""
import logging
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool

from bedmanager.core.config import Config

logger = logging.getLogger(__name__)

# Create declarative base for ORM models
Base = declarative_base()

# Database engine
engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None


def _is_memory_sqlite(db_url: str) -> bool:
    return db_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in db_url


def init_db(database_url: str = None) -> Engine:
    """Initialize database connection and create tables."""
    global engine, SessionLocal

    # Registers the table classes on Base.metadata
    from bedmanager.db import tables  # noqa: F401

    db_url = database_url or Config.DATABASE_URL

    logger.info(f"Initializing database: {db_url}")

    if db_url.startswith("sqlite"):
        engine_kwargs = {
            "connect_args": {"check_same_thread": False},
            "echo": Config.DEBUG,
        }
        # An in-memory database lives on a single connection
        if _is_memory_sqlite(db_url):
            engine_kwargs["poolclass"] = StaticPool
        engine = create_engine(db_url, **engine_kwargs)

        # Enable foreign keys for SQLite
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    else:
        engine = create_engine(
            db_url,
            pool_pre_ping=True,
            echo=Config.DEBUG
        )

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Create all tables
    Base.metadata.create_all(bind=engine)

    logger.info("Database initialized successfully")
    return engine


def get_db_session() -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Each request runs in one transaction: it commits when the handler
    returns and rolls back when it raises.

    Usage in FastAPI:
        @router.get("/bedGet")
        def bed_get(db: Session = Depends(get_db_session)):
            return beds.list_wards(db)
    """
    if SessionLocal is None:
        init_db()

    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db() -> Session:
    """Get a database session (non-generator version)."""
    if SessionLocal is None:
        init_db()
    return SessionLocal()
