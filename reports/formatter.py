"""
Plain-text rendering of portfolio reports and leaderboards.

Each column is left-aligned and padded to its header's width plus a fixed
margin, so values longer than the margin allows push later columns right.
"""

from typing import List, Sequence

from models.portfolio_models import Leaderboard, PortfolioReport

NUM_HEADER_PADDING_CHARS = 5
NO_CHANGE = "-------"


def format_price(price: float) -> str:
    return f"{round(price, 2):.2f}"


def format_percent(percent: float) -> str:
    """Render a percent change as "(+1.23%)", or dashes when there is no change."""
    if percent == 0:
        return NO_CHANGE
    sign = "+" if percent > 0 else ""
    return f"({sign}{percent:.2f}%)"


def _row_format(headers: Sequence[str]) -> str:
    return " ".join(
        f"%-{len(header) + NUM_HEADER_PADDING_CHARS}s" for header in headers
    )


def format_portfolio(report: PortfolioReport) -> str:
    """Format a user's portfolio, largest holding first."""
    output: List[str] = []
    output.append(f"USER: {report.user}")
    output.append(
        f"TOTAL: {format_price(report.current_total)} "
        f"{format_percent(report.percent_change)}"
    )
    output.append("")

    headers = [
        "Percent",
        "Currency",
        "Price",
        "Change",
        "Holdings",
        f"Value ({report.currency})",
    ]
    row_format = _row_format(headers)
    output.append(row_format % tuple(headers))

    for line in report.lines:
        output.append(
            row_format
            % (
                f"{line.share_of(report.current_total)}%",
                line.symbol,
                format_price(line.price),
                format_percent(line.percent_change),
                format_price(line.amount),
                format_price(line.current_value),
            )
        )

    return "\n".join(row.rstrip() for row in output)


def format_leaderboard(leaderboard: Leaderboard) -> str:
    """Format the leaderboard, highest total first."""
    output: List[str] = ["LEADERBOARD", ""]

    headers = ["Ranking", "User", f"Total ({leaderboard.currency})", "Change"]
    row_format = _row_format(headers)
    output.append(row_format % tuple(headers))

    for entry in leaderboard.entries:
        total = entry.item
        output.append(
            row_format
            % (
                entry.rank,
                total.user,
                format_price(total.current_total),
                format_percent(total.percent_change),
            )
        )

    return "\n".join(row.rstrip() for row in output)
