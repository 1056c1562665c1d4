"""
Database Configuration
SQLAlchemy setup for the SQLite holdings database
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def create_db_engine(database_url: str) -> Engine:
    """Create an engine and make sure all tables exist."""
    engine = create_engine(database_url, future=True)

    # Import models so they are registered on Base before create_all
    from storage import db_models  # noqa: F401

    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
