"""
Ranking and rendering of valuation results.
"""

from .formatter import format_leaderboard, format_percent, format_portfolio, format_price
from .ranker import rank_by_value, with_ranks

__all__ = [
    "format_leaderboard",
    "format_percent",
    "format_portfolio",
    "format_price",
    "rank_by_value",
    "with_ranks",
]
