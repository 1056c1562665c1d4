"""
Holding Store
CRUD operations for users and their crypto balances
"""

import logging
from typing import Iterable, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from models.exceptions import UserExistsError, UserNotFoundError
from models.portfolio_models import Holding, UserHolding
from storage.db_models import CryptoModel, HoldingModel, UserModel

logger = logging.getLogger(__name__)


class HoldingStore:
    """Repository for users, cryptos and holdings"""

    def __init__(self, session_factory: sessionmaker):
        """Initialize with a session factory"""
        self.session_factory = session_factory

    def add_user(self, name: str) -> int:
        """
        Register a new user

        Returns:
            ID of created user

        Raises:
            UserExistsError: if the name is already taken
        """
        with self.session_factory.begin() as session:
            if self._find_user(session, name) is not None:
                raise UserExistsError(f"Couldn't add {name}: user already exists")

            user = UserModel(name=name)
            session.add(user)
            session.flush()
            logger.info("Added user %s", name)
            return user.id

    def update_holding(self, name: str, symbol: str, amount: float) -> None:
        """
        Set a user's balance for a crypto

        A positive amount inserts or replaces the balance; zero or a negative
        amount removes the holding.

        Raises:
            UserNotFoundError: if the user does not exist
        """
        symbol = symbol.upper()
        with self.session_factory.begin() as session:
            user = self._require_user(session, name)
            crypto = self._find_or_create_crypto(session, symbol)

            holding = session.execute(
                select(HoldingModel)
                .where(HoldingModel.user_id == user.id)
                .where(HoldingModel.crypto_id == crypto.id)
            ).scalar_one_or_none()

            if amount > 0:
                if holding is None:
                    session.add(
                        HoldingModel(user_id=user.id, crypto_id=crypto.id, amount=amount)
                    )
                else:
                    holding.amount = amount
                logger.info("Set %s balance of %s to %s", name, symbol, amount)
            elif holding is not None:
                session.delete(holding)
                logger.info("Removed %s holding of %s", name, symbol)

    def get_user_holdings(self, name: str) -> List[Holding]:
        """
        Get a user's holdings in insertion order

        Raises:
            UserNotFoundError: if the user does not exist
        """
        with self.session_factory() as session:
            user = self._require_user(session, name)
            rows = session.execute(
                select(CryptoModel.symbol, HoldingModel.amount)
                .select_from(HoldingModel)
                .join(CryptoModel, CryptoModel.id == HoldingModel.crypto_id)
                .where(HoldingModel.user_id == user.id)
                .where(HoldingModel.amount > 0)
                .order_by(HoldingModel.id)
            ).all()
        return [Holding(symbol, amount) for symbol, amount in rows]

    def count_users(self) -> int:
        with self.session_factory() as session:
            return session.execute(select(func.count(UserModel.id))).scalar_one()

    def list_symbols(self) -> List[str]:
        """Every crypto symbol known to the store"""
        with self.session_factory() as session:
            return list(
                session.execute(
                    select(CryptoModel.symbol).order_by(CryptoModel.id)
                ).scalars()
            )

    def get_holdings_for_symbols(self, symbols: Iterable[str]) -> List[UserHolding]:
        """Get every user's holdings restricted to the given symbols"""
        symbols = [symbol.upper() for symbol in symbols]
        if not symbols:
            return []

        with self.session_factory() as session:
            rows = session.execute(
                select(UserModel.name, CryptoModel.symbol, HoldingModel.amount)
                .select_from(HoldingModel)
                .join(UserModel, UserModel.id == HoldingModel.user_id)
                .join(CryptoModel, CryptoModel.id == HoldingModel.crypto_id)
                .where(CryptoModel.symbol.in_(symbols))
                .where(HoldingModel.amount > 0)
                .order_by(HoldingModel.id)
            ).all()
        return [UserHolding(name, symbol, amount) for name, symbol, amount in rows]

    def _find_user(self, session: Session, name: str):
        return session.execute(
            select(UserModel).where(UserModel.name == name)
        ).scalar_one_or_none()

    def _require_user(self, session: Session, name: str) -> UserModel:
        user = self._find_user(session, name)
        if user is None:
            raise UserNotFoundError(f"User {name} doesn't exist")
        return user

    def _find_or_create_crypto(self, session: Session, symbol: str) -> CryptoModel:
        crypto = session.execute(
            select(CryptoModel).where(CryptoModel.symbol == symbol)
        ).scalar_one_or_none()
        if crypto is None:
            crypto = CryptoModel(symbol=symbol)
            session.add(crypto)
            session.flush()
        return crypto
