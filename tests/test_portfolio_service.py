from __future__ import annotations

import pytest

from models.exceptions import ConfigurationError, EmptyDomainError, InvalidInputError, UserNotFoundError
from models.portfolio_models import Duration
from services.portfolio_service import PortfolioService
from services.pricing_service import PricingService


def _service(holding_store, adapter) -> PortfolioService:
    return PortfolioService(holding_store, PricingService(adapter, clock=lambda: 1_700_000_000))


def test_portfolio_report_ranks_lines_and_drops_unresolvable(holding_store, fake_adapter) -> None:
    holding_store.add_user("alice")
    holding_store.update_holding("alice", "ETH", 3)
    holding_store.update_holding("alice", "XYZ", 1)
    holding_store.update_holding("alice", "BTC", 1)

    report = _service(holding_store, fake_adapter).portfolio_report("alice", "usd", "day")

    assert report.currency == "USD"
    assert report.duration is Duration.DAY
    assert [line.symbol for line in report.lines] == ["BTC", "ETH"]
    assert report.current_total == 130.0
    assert report.historical_total == 140.0
    assert report.percent_change == -7.14


def test_portfolio_report_without_holdings_sends_no_request(holding_store, fake_adapter) -> None:
    holding_store.add_user("alice")

    with pytest.raises(EmptyDomainError):
        _service(holding_store, fake_adapter).portfolio_report("alice", "USD")

    assert fake_adapter.current_calls == []
    assert fake_adapter.historical_calls == []


def test_portfolio_report_validates_before_loading(holding_store, fake_adapter) -> None:
    service = _service(holding_store, fake_adapter)

    with pytest.raises(InvalidInputError):
        service.portfolio_report("bad name", "USD")
    with pytest.raises(ConfigurationError):
        service.portfolio_report("alice", "TOOLONGCUR")
    with pytest.raises(ConfigurationError):
        service.portfolio_report("alice", "USD", "decade")
    with pytest.raises(UserNotFoundError):
        service.portfolio_report("alice", "USD")


def test_leaderboard_excludes_symbols_without_history(holding_store, fake_adapter) -> None:
    for name in ("alice", "bob", "carol"):
        holding_store.add_user(name)
    holding_store.update_holding("alice", "ETH", 1)
    holding_store.update_holding("bob", "BTC", 1)
    holding_store.update_holding("bob", "XYZ", 100)
    holding_store.update_holding("carol", "XYZ", 1000)

    board = _service(holding_store, fake_adapter).leaderboard("USD", Duration.WEEK)

    assert [(entry.rank, entry.item.user) for entry in board.entries] == [(1, "bob"), (2, "alice")]
    bob = board.entries[0].item
    assert bob.current_total == 100.0
    assert bob.historical_total == 80.0
    assert bob.percent_change == 25.0
    assert board.entries[1].item.percent_change == -50.0


def test_leaderboard_ties_keep_store_order(holding_store, adapter_factory) -> None:
    adapter = adapter_factory(current={"BTC": 10.0}, historical={"BTC": 10.0})
    for name in ("zed", "amy"):
        holding_store.add_user(name)
        holding_store.update_holding(name, "BTC", 1)

    board = _service(holding_store, adapter).leaderboard("USD")

    assert [entry.item.user for entry in board.entries] == ["zed", "amy"]


def test_leaderboard_requires_users_and_cryptos(holding_store, fake_adapter) -> None:
    service = _service(holding_store, fake_adapter)

    with pytest.raises(EmptyDomainError, match="no user data"):
        service.leaderboard("USD")

    holding_store.add_user("alice")
    with pytest.raises(EmptyDomainError, match="no crypto data"):
        service.leaderboard("USD")

    assert fake_adapter.current_calls == []
    assert fake_adapter.historical_calls == []


def test_leaderboard_without_any_historical_rate_is_empty_domain(holding_store, adapter_factory) -> None:
    adapter = adapter_factory(current={"XYZ": 5.0}, historical={"XYZ": 0.0})
    holding_store.add_user("alice")
    holding_store.update_holding("alice", "XYZ", 10)

    with pytest.raises(EmptyDomainError, match="no historical price data"):
        _service(holding_store, adapter).leaderboard("USD")
