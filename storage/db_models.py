"""
Database Models (SQLAlchemy ORM)
Users, the cryptos they hold, and the balances linking the two
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.schema import UniqueConstraint

from storage.database import Base


class UserModel(Base):
    """A registered user"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True, index=True)


class CryptoModel(Base):
    """A crypto symbol that has been held by at least one user"""
    __tablename__ = "cryptos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String, nullable=False, unique=True, index=True)


class HoldingModel(Base):
    """Balance of one crypto held by one user"""
    __tablename__ = "holdings"
    __table_args__ = (UniqueConstraint("user_id", "crypto_id", name="_user_crypto_uc"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    crypto_id = Column(Integer, ForeignKey("cryptos.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
