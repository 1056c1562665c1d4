"""
Pricing service for resolving current and historical conversion rates.

This service drives the quote adapter: it batches symbols for the historical
endpoint, merges the batched results, and optionally discards symbols whose
historical rate is unusable.
"""

import logging
import time
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from models.portfolio_models import ConversionMap, ConversionRates, Duration
from services.symbol_batcher import HISTORICAL_SYMBOLS_MAX_LENGTH, batch_symbols
from services.validation import parse_duration, validate_currency

logger = logging.getLogger(__name__)


def normalize_symbols(symbols: Iterable[str]) -> List[str]:
    """Upper-case symbols and drop duplicates, keeping first occurrence order."""
    seen: Dict[str, None] = {}
    for symbol in symbols:
        seen.setdefault(symbol.upper(), None)
    return list(seen)


def merge_rates(merged: ConversionMap, batch: ConversionMap) -> ConversionMap:
    """
    Union a batch of rates into merged, in place.

    Batches are built from disjoint symbol sets, so a repeated symbol means the
    batching is broken rather than something to overwrite.

    Raises:
        ValueError: if a symbol from batch is already present in merged
    """
    overlap = merged.keys() & batch.keys()
    if overlap:
        raise ValueError(f"Duplicate symbols across batches: {sorted(overlap)}")
    merged.update(batch)
    return merged


def filter_missing_rates(
    current: ConversionMap, historical: ConversionMap
) -> Tuple[ConversionMap, ConversionMap]:
    """
    Drop symbols whose historical rate is zero from both maps.

    CryptoCompare returns 0 for coins it did not track at the requested time
    (or that did not exist yet), which makes a percent change meaningless.
    The current map is restricted to exactly the surviving historical symbols.
    """
    non_zero_historical = {
        symbol: rate for symbol, rate in historical.items() if rate != 0
    }
    non_zero_current = {
        symbol: rate
        for symbol, rate in current.items()
        if symbol in non_zero_historical
    }
    dropped = sorted(set(historical) - set(non_zero_historical))
    if dropped:
        logger.info("Ignoring symbols without historical data: %s", ", ".join(dropped))
    return non_zero_current, non_zero_historical


class PricingService:
    """Service for resolving conversion rates into a target currency."""

    def __init__(self, quote_adapter, clock: Callable[[], float] = time.time):
        """Initialize with a quote adapter and an optional clock for timestamps."""
        self.quote_adapter = quote_adapter
        self.clock = clock

    def historical_timestamp(self, duration: Duration) -> int:
        """Unix timestamp of the comparison point, now minus the duration."""
        return int(self.clock()) - duration.seconds

    def resolve(
        self,
        symbols: Sequence[str],
        currency: str,
        duration=Duration.DAY,
        filter_missing: bool = False,
    ) -> ConversionRates:
        """
        Resolve current and historical conversion rates for the given symbols.

        Args:
            symbols: Crypto symbols to price
            currency: Target currency code
            duration: Lookback window (Duration or its token)
            filter_missing: Drop symbols whose historical rate is zero from
                both maps

        Returns:
            ConversionRates(current, historical)
        """
        currency = validate_currency(currency)
        duration = parse_duration(duration)
        symbols = normalize_symbols(symbols)

        if not symbols:
            return ConversionRates({}, {})

        historical = self._fetch_historical(symbols, currency, duration)
        current = self.quote_adapter.fetch_current(symbols, currency)

        if filter_missing:
            current, historical = filter_missing_rates(current, historical)

        return ConversionRates(current, historical)

    def _fetch_historical(
        self, symbols: List[str], currency: str, duration: Duration
    ) -> ConversionMap:
        as_of = self.historical_timestamp(duration)
        batches = [
            batch
            for batch in batch_symbols(symbols, HISTORICAL_SYMBOLS_MAX_LENGTH)
            if batch
        ]
        logger.debug(
            "Fetching historical %s rates at %d in %d batch(es)",
            currency,
            as_of,
            len(batches),
        )

        historical: ConversionMap = {}
        for batch in batches:
            rates = self.quote_adapter.fetch_historical(batch, currency, as_of)
            merge_rates(historical, rates)
        return historical
