"""Database package: async engine (SQLite FK pragma on), session factory, Base, get_db."""
from app.db.base import Base, async_session_factory, engine, get_db

__all__ = ["Base", "async_session_factory", "engine", "get_db"]
