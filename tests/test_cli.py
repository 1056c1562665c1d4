from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import main as cli
from adapters.cryptocompare import CryptoCompareAdapter
from portfolio_tracker import PortfolioTracker


class _HtmlResponse:
    def raise_for_status(self) -> None:
        pass

    def json(self):
        raise json.JSONDecodeError("Expecting value", "<html>", 0)


@pytest.fixture
def run_cli(monkeypatch, tmp_path: Path, fake_adapter):
    monkeypatch.setenv("GAINZ_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("GAINZ_DEFAULT_CURRENCY", "USD")
    monkeypatch.setattr(
        cli,
        "PortfolioTracker",
        lambda settings: PortfolioTracker(settings, quote_adapter=fake_adapter),
    )
    return cli.main


def test_no_arguments_prints_help(run_cli, capsys) -> None:
    assert run_cli([]) == 0
    assert "usage: gainz" in capsys.readouterr().out


def test_add_update_and_portfolio(run_cli, capsys, fake_adapter) -> None:
    assert run_cli(["-a", "alice"]) == 0
    assert run_cli(["-u", "alice", "btc", "2"]) == 0
    assert run_cli(["--update", "alice", "XYZ", "1"]) == 0
    capsys.readouterr()

    assert run_cli(["-p", "alice", "-d", "hour"]) == 0

    out = capsys.readouterr().out
    assert "USER: alice" in out
    assert "TOTAL: 200.00 (+25.00%)" in out
    assert "XYZ" not in out
    assert fake_adapter.current_calls[-1] == (["BTC", "XYZ"], "USD")


def test_leaderboard_output(run_cli, capsys) -> None:
    run_cli(["-a", "alice"])
    run_cli(["-a", "bob"])
    run_cli(["-u", "alice", "ETH", "1"])
    run_cli(["-u", "bob", "BTC", "1"])
    capsys.readouterr()

    assert run_cli(["-l", "-c", "usd"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "LEADERBOARD"
    assert lines[3].split()[:2] == ["1", "bob"]
    assert lines[4].split()[:2] == ["2", "alice"]


def test_errors_abort_with_one_line_message(run_cli, capsys) -> None:
    assert run_cli(["-a", "alice"]) == 0
    assert run_cli(["-a", "alice"]) == 1
    assert capsys.readouterr().err.strip() == "Couldn't add alice: user already exists"

    assert run_cli(["-p", "alice", "-d", "decade"]) == 1
    assert "Invalid duration" in capsys.readouterr().err

    assert run_cli(["-u", "alice", "BTC", "lots"]) == 1
    assert "Invalid amount" in capsys.readouterr().err

    assert run_cli(["-l"]) == 1
    assert "no crypto data" in capsys.readouterr().err


def test_portfolio_for_unknown_user(run_cli, capsys) -> None:
    assert run_cli(["-p", "ghost"]) == 1
    assert "ghost doesn't exist" in capsys.readouterr().err


def test_bad_log_level_aborts_with_one_line(run_cli, monkeypatch, capsys) -> None:
    monkeypatch.setenv("GAINZ_LOG_LEVEL", "verbose")

    assert run_cli(["-a", "alice"]) == 1

    err = capsys.readouterr().err
    assert len(err.splitlines()) == 1
    assert "GAINZ_LOG_LEVEL" in err


def test_quote_fetch_failure_is_reported_once(monkeypatch, tmp_path: Path, capsys, caplog) -> None:
    monkeypatch.setenv("GAINZ_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    adapter = CryptoCompareAdapter(base_url="https://example.test/data")
    monkeypatch.setattr(adapter.session, "get", lambda url, params=None, timeout=None: _HtmlResponse())
    monkeypatch.setattr(
        cli,
        "PortfolioTracker",
        lambda settings: PortfolioTracker(settings, quote_adapter=adapter),
    )
    assert cli.main(["-a", "alice"]) == 0
    assert cli.main(["-u", "alice", "BTC", "1"]) == 0
    capsys.readouterr()

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        assert cli.main(["-p", "alice"]) == 1

    err = capsys.readouterr().err
    assert len(err.splitlines()) == 1
    assert "Error parsing JSON response" in err
    assert caplog.records == []
