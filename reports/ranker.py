"""
Ordering of portfolio lines and leaderboard entries.
"""

from typing import Callable, Iterable, List, TypeVar

from models.portfolio_models import Ranked

T = TypeVar("T")


def rank_by_value(items: Iterable[T], value_of: Callable[[T], float]) -> List[T]:
    """Sort items by value, highest first; equal values keep their input order."""
    return sorted(items, key=value_of, reverse=True)


def with_ranks(items: Iterable[T]) -> List[Ranked[T]]:
    """Pair already-ordered items with their 1-based rank."""
    return [Ranked(rank, item) for rank, item in enumerate(items, 1)]
