from tablewatch.db.base import Base
from tablewatch.db.session import get_db, engine, SessionLocal
from tablewatch.db.tables import ALL_TABLE_NAMES

__all__ = ["get_db", "engine", "SessionLocal", "Base", "ALL_TABLE_NAMES"]
