"""
Database package: engine, sessions and ORM tables.
"""

from .connection import Base, init_db, get_db, get_db_session

__all__ = ["Base", "init_db", "get_db", "get_db_session"]
