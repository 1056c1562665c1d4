"""
Persistence of users and their crypto holdings.
"""

from .database import Base, create_db_engine, create_session_factory
from .holding_store import HoldingStore

__all__ = ["Base", "HoldingStore", "create_db_engine", "create_session_factory"]
