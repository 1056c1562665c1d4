"""
Services for portfolio valuation.
"""

from .portfolio_service import PortfolioService
from .pricing_service import PricingService
from .symbol_batcher import batch_symbols
from .valuation_service import percent_change, value_portfolio, value_users

__all__ = [
    "PortfolioService",
    "PricingService",
    "batch_symbols",
    "percent_change",
    "value_portfolio",
    "value_users",
]
