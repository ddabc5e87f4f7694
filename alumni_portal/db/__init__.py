"""
Database module - SQLAlchemy engine, sessions and the generic repository.
"""
from alumni_portal.db.session import Base, get_db, init_db, test_database_connection

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "test_database_connection",
]
