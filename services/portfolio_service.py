"""
Portfolio service for valuing user portfolios and the leaderboard.

This service loads holdings from the store, resolves conversion rates through
the pricing service, values the holdings and ranks the result for display.
"""

import logging

from models.exceptions import EmptyDomainError
from models.portfolio_models import Duration, Leaderboard, PortfolioReport
from reports.ranker import rank_by_value, with_ranks
from services.pricing_service import PricingService
from services.validation import parse_duration, validate_currency, validate_username
from services.valuation_service import value_portfolio, value_users

logger = logging.getLogger(__name__)


class PortfolioService:
    """Service for valuing portfolios and ranking users."""

    def __init__(self, holding_store, pricing_service: PricingService):
        """Initialize with a HoldingStore and a PricingService."""
        self.holding_store = holding_store
        self.pricing_service = pricing_service

    def portfolio_report(
        self, user: str, currency: str, duration=Duration.DAY
    ) -> PortfolioReport:
        """
        Value one user's portfolio and rank its lines by current value.

        Holdings without a historical rate are dropped from the lines and the
        totals.

        Raises:
            InvalidInputError: on a malformed user name
            ConfigurationError: on an invalid currency or duration
            UserNotFoundError: if the user does not exist
            EmptyDomainError: if the user holds nothing
            QuoteFetchError: if any quote request fails
        """
        validate_username(user)
        currency = validate_currency(currency)
        duration = parse_duration(duration)

        holdings = self.holding_store.get_user_holdings(user)
        if not holdings:
            raise EmptyDomainError(
                f"Couldn't display portfolio: {user} has no holdings. "
                f"Try running: gainz -u {user} CRYPTO AMOUNT"
            )

        current, historical = self.pricing_service.resolve(
            [holding.symbol for holding in holdings], currency, duration
        )
        valuation = value_portfolio(holdings, current, historical)
        logger.info(
            "Valued %d of %d holdings for %s",
            len(valuation.lines),
            len(holdings),
            user,
        )

        return PortfolioReport(
            user=user,
            currency=currency,
            duration=duration,
            lines=rank_by_value(valuation.lines, lambda line: line.current_value),
            current_total=valuation.current_total,
            historical_total=valuation.historical_total,
            percent_change=valuation.percent_change,
        )

    def leaderboard(self, currency: str, duration=Duration.DAY) -> Leaderboard:
        """
        Total every user's holdings and rank users by current value.

        Symbols with no historical rate are excluded from every user's totals.

        Raises:
            ConfigurationError: on an invalid currency or duration
            EmptyDomainError: if there are no users, no cryptos, or no crypto
                with a historical rate
            QuoteFetchError: if any quote request fails
        """
        currency = validate_currency(currency)
        duration = parse_duration(duration)

        if self.holding_store.count_users() == 0:
            raise EmptyDomainError(
                "Couldn't display leaderboard: no user data. Try running: gainz -a USER"
            )

        symbols = self.holding_store.list_symbols()
        if not symbols:
            raise EmptyDomainError(
                "Couldn't display leaderboard: no crypto data. "
                "Try running: gainz -u USER CRYPTO AMOUNT"
            )

        current, historical = self.pricing_service.resolve(
            symbols, currency, duration, filter_missing=True
        )
        if not current:
            raise EmptyDomainError(
                "Couldn't display leaderboard: no historical price data for "
                f"{', '.join(symbols)} in {currency}"
            )

        rows = self.holding_store.get_holdings_for_symbols(current.keys())
        totals = value_users(rows, current, historical)

        return Leaderboard(
            currency=currency,
            duration=duration,
            entries=with_ranks(rank_by_value(totals, lambda total: total.current_total)),
        )
