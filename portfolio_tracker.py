"""
Portfolio Tracker for per-user crypto holdings

This is the main entry point for the valuation engine. The tracker wires the
holdings store, the CryptoCompare adapter and the services together and exposes
one method per command.
"""

from adapters.cryptocompare import CryptoCompareAdapter
from config import Settings, load_settings
from models.portfolio_models import Duration, Leaderboard, PortfolioReport
from services.portfolio_service import PortfolioService
from services.pricing_service import PricingService
from services.validation import parse_amount, validate_symbol, validate_username
from storage.database import create_db_engine, create_session_factory
from storage.holding_store import HoldingStore


class PortfolioTracker:
    """Main tracker coordinating storage, pricing and valuation."""

    def __init__(self, settings: Settings = None, quote_adapter=None, holding_store=None):
        """Initialize from settings; adapter and store can be supplied directly."""
        self.settings = settings or load_settings()

        self.quote_adapter = quote_adapter or CryptoCompareAdapter(
            api_key=self.settings.api_key,
            base_url=self.settings.api_root,
            timeout=self.settings.request_timeout,
        )

        if holding_store is None:
            engine = create_db_engine(self.settings.database_url)
            holding_store = HoldingStore(create_session_factory(engine))
        self.holding_store = holding_store

        # Initialize services
        self.pricing_service = PricingService(self.quote_adapter)
        self.portfolio_service = PortfolioService(
            self.holding_store, self.pricing_service
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        close = getattr(self.quote_adapter, "close", None)
        if close is not None:
            close()

    def add_user(self, name: str) -> None:
        self.holding_store.add_user(validate_username(name))

    def update_balance(self, name: str, symbol: str, amount) -> None:
        """Set a user's balance; a zero or negative amount removes the holding."""
        self.holding_store.update_holding(
            validate_username(name), validate_symbol(symbol), parse_amount(amount)
        )

    def portfolio(
        self, name: str, currency: str = None, duration=Duration.DAY
    ) -> PortfolioReport:
        return self.portfolio_service.portfolio_report(
            name, currency or self.settings.default_currency, duration
        )

    def leaderboard(self, currency: str = None, duration=Duration.DAY) -> Leaderboard:
        return self.portfolio_service.leaderboard(
            currency or self.settings.default_currency, duration
        )
