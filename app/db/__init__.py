"""Database package: async engine and per-request sessions."""

from app.db.session import async_session_maker, engine, get_db

__all__ = ["async_session_maker", "engine", "get_db"]
