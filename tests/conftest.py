from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest

from storage.database import create_db_engine, create_session_factory
from storage.holding_store import HoldingStore


class FakeQuoteAdapter:
    """Stands in for CryptoCompareAdapter, serving already-inverted rates."""

    def __init__(self, current: Dict[str, float], historical: Dict[str, float]) -> None:
        self.current = current
        self.historical = historical
        self.current_calls: List[Tuple[List[str], str]] = []
        self.historical_calls: List[Tuple[List[str], str, int]] = []

    def fetch_current(self, symbols: Sequence[str], currency: str) -> Dict[str, float]:
        self.current_calls.append((list(symbols), currency))
        return {s: self.current[s] for s in symbols if s in self.current}

    def fetch_historical(
        self, symbols: Sequence[str], currency: str, as_of: int
    ) -> Dict[str, float]:
        self.historical_calls.append((list(symbols), currency, as_of))
        return {s: self.historical[s] for s in symbols if s in self.historical}


@pytest.fixture
def holding_store(tmp_path: Path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'gainz.db'}")
    yield HoldingStore(create_session_factory(engine))
    engine.dispose()


@pytest.fixture
def fake_adapter() -> FakeQuoteAdapter:
    return FakeQuoteAdapter(
        current={"BTC": 100.0, "ETH": 10.0, "XYZ": 5.0},
        historical={"BTC": 80.0, "ETH": 20.0, "XYZ": 0.0},
    )


@pytest.fixture
def adapter_factory():
    return FakeQuoteAdapter

