"""
Valuation of holdings against resolved conversion rates.

Portfolio and leaderboard totals apply different policies to holdings whose
historical rate is unknown: a portfolio drops such lines entirely, while a
leaderboard keeps whatever each user's resolvable holdings add up to.
"""

from typing import Dict, Iterable, List, Sequence

from models.portfolio_models import (
    ConversionMap,
    Holding,
    PortfolioLine,
    PortfolioValuation,
    UserHolding,
    UserTotal,
)


def percent_change(current: float, past: float) -> float:
    """Signed percent change from past to current, rounded to 2 places; 0.0 if past is 0."""
    if past == 0:
        return 0.0
    ratio = (current - past) / past
    return round(ratio * 100, 2)


def value_portfolio(
    holdings: Sequence[Holding], current: ConversionMap, historical: ConversionMap
) -> PortfolioValuation:
    """
    Value each holding at the current and historical rates.

    Lines without a historical baseline (historical value of zero) are left
    out of both the returned lines and the totals.
    """
    lines = []
    for holding in holdings:
        current_rate = current.get(holding.symbol, 0.0)
        historical_rate = historical.get(holding.symbol, 0.0)
        historical_value = historical_rate * holding.amount
        if historical_value == 0:
            continue

        lines.append(
            PortfolioLine(
                symbol=holding.symbol,
                amount=holding.amount,
                current_value=current_rate * holding.amount,
                historical_value=historical_value,
                percent_change=percent_change(current_rate, historical_rate),
            )
        )

    current_total = sum(line.current_value for line in lines)
    historical_total = sum(line.historical_value for line in lines)

    return PortfolioValuation(
        lines=lines,
        current_total=current_total,
        historical_total=historical_total,
        percent_change=percent_change(current_total, historical_total),
    )


def group_by_user(rows: Iterable[UserHolding]) -> Dict[str, List[Holding]]:
    """Group holding rows by owner, keeping users in first-appearance order."""
    grouped: Dict[str, List[Holding]] = {}
    for row in rows:
        grouped.setdefault(row.user, []).append(Holding(row.symbol, row.amount))
    return grouped


def value_users(
    rows: Iterable[UserHolding], current: ConversionMap, historical: ConversionMap
) -> List[UserTotal]:
    """Total every user's holdings; unresolvable holdings simply contribute 0."""
    totals = []
    for user, holdings in group_by_user(rows).items():
        current_total = sum(
            current.get(holding.symbol, 0.0) * holding.amount for holding in holdings
        )
        historical_total = sum(
            historical.get(holding.symbol, 0.0) * holding.amount
            for holding in holdings
        )
        totals.append(
            UserTotal(
                user=user,
                current_total=current_total,
                historical_total=historical_total,
                percent_change=percent_change(current_total, historical_total),
            )
        )
    return totals
