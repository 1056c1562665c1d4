"""
Data models for portfolio valuation.

This module contains the core data structures used throughout the valuation
engine: holdings coming out of the store, conversion rates coming back from the
quote service, and the derived lines and totals handed to the report layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, NamedTuple, TypeVar

T = TypeVar("T")

# Rate maps: symbol -> price of one unit in the target currency. 0.0 means unknown.
ConversionMap = Dict[str, float]

SECONDS_HOUR = 60 * 60
SECONDS_DAY = SECONDS_HOUR * 24
SECONDS_WEEK = SECONDS_DAY * 7
SECONDS_MONTH = SECONDS_DAY * 30
SECONDS_YEAR = SECONDS_DAY * 365


class Duration(str, Enum):
    """Lookback window for the historical comparison point."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def seconds(self) -> int:
        """Fixed offset in seconds (calendar-naive)."""
        return _DURATION_SECONDS[self]


_DURATION_SECONDS = {
    Duration.HOUR: SECONDS_HOUR,
    Duration.DAY: SECONDS_DAY,
    Duration.WEEK: SECONDS_WEEK,
    Duration.MONTH: SECONDS_MONTH,
    Duration.YEAR: SECONDS_YEAR,
}


@dataclass(frozen=True)
class Holding:
    """A single crypto balance belonging to one user."""

    symbol: str
    amount: float

    def __post_init__(self):
        object.__setattr__(self, "symbol", self.symbol.upper())
        if self.amount < 0:
            raise ValueError(f"Holding amount must be non-negative: {self.amount}")


@dataclass(frozen=True)
class UserHolding:
    """A holding row tagged with its owner, as used for leaderboards."""

    user: str
    symbol: str
    amount: float

    def __post_init__(self):
        object.__setattr__(self, "symbol", self.symbol.upper())
        if self.amount < 0:
            raise ValueError(f"Holding amount must be non-negative: {self.amount}")


class ConversionRates(NamedTuple):
    """Current and historical rate maps resolved for one invocation."""

    current: ConversionMap
    historical: ConversionMap


@dataclass
class PortfolioLine:
    """Valuation of one holding at the current and historical rates."""

    symbol: str
    amount: float
    current_value: float
    historical_value: float
    percent_change: float

    @property
    def price(self) -> float:
        """Current price of one unit."""
        if self.amount > 0:
            return self.current_value / self.amount
        return 0.0

    def share_of(self, total: float) -> int:
        """Whole-number percent this line contributes to the given total."""
        if total > 0:
            return int(self.current_value / total * 100)
        return 0


@dataclass
class PortfolioValuation:
    lines: List[PortfolioLine]
    current_total: float
    historical_total: float
    percent_change: float


@dataclass
class UserTotal:
    """Aggregated value of everything one user holds."""

    user: str
    current_total: float
    historical_total: float
    percent_change: float


@dataclass
class Ranked(Generic[T]):
    """An item paired with its 1-based position in a ranking."""

    rank: int
    item: T


@dataclass
class PortfolioReport:
    """Everything needed to render one user's portfolio."""

    user: str
    currency: str
    duration: Duration
    lines: List[PortfolioLine]
    current_total: float
    historical_total: float
    percent_change: float


@dataclass
class Leaderboard:
    """Users ranked by the current value of their holdings."""

    currency: str
    duration: Duration
    entries: List[Ranked[UserTotal]] = field(default_factory=list)
