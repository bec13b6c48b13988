"""
Database module for the catalog backend
"""

from .connection import get_async_session, get_db_session, init_database

__all__ = ["get_async_session", "get_db_session", "init_database"]
