"""
Data models for portfolio valuation.
"""

from .exceptions import (
    ConfigurationError,
    EmptyDomainError,
    GainzError,
    InvalidInputError,
    QuoteFetchError,
    UserExistsError,
    UserNotFoundError,
)
from .portfolio_models import (
    ConversionMap,
    ConversionRates,
    Duration,
    Holding,
    Leaderboard,
    PortfolioLine,
    PortfolioReport,
    PortfolioValuation,
    Ranked,
    UserHolding,
    UserTotal,
)

__all__ = [
    "ConfigurationError",
    "ConversionMap",
    "ConversionRates",
    "Duration",
    "EmptyDomainError",
    "GainzError",
    "Holding",
    "InvalidInputError",
    "Leaderboard",
    "PortfolioLine",
    "PortfolioReport",
    "PortfolioValuation",
    "QuoteFetchError",
    "Ranked",
    "UserExistsError",
    "UserHolding",
    "UserNotFoundError",
    "UserTotal",
]
