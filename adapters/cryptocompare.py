#!/usr/bin/env python3
"""
CryptoCompare API Adapter
Specific adapter for fetching current and historical prices from the
CryptoCompare min-api.
Documentation: https://min-api.cryptocompare.com/documentation
"""

import logging
from numbers import Real
from typing import Any, Dict, Sequence

from models.exceptions import QuoteFetchError
from models.portfolio_models import ConversionMap

from .base import BaseAdapter

logger = logging.getLogger(__name__)

API_ROOT = "https://min-api.cryptocompare.com/data/"
API_PATH_CURRENT = "price"
API_PATH_HISTORICAL = "pricehistorical"


def invert_rate(raw: Any) -> float:
    """
    Convert a raw quote into the price of one crypto unit in the target currency.

    The service quotes how many crypto units one unit of the target currency
    buys, so the usable rate is the reciprocal. Non-positive quotes map to 0.0.

    Raises:
        QuoteFetchError: if the raw value is not a number
    """
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise QuoteFetchError(f"Malformed quote value: {raw!r}")
    return 1 / float(raw) if raw > 0 else 0.0


class CryptoCompareAdapter(BaseAdapter):
    """Adapter for the CryptoCompare price endpoints."""

    def __init__(self, api_key: str = None, base_url: str = None, timeout: int = 30):
        """
        Initialize CryptoCompare adapter.

        Args:
            api_key: Optional API key sent in the Authorization header
            base_url: API root, defaults to the public min-api
            timeout: Request timeout in seconds
        """
        self.api_key = api_key

        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Apikey {self.api_key}"

        super().__init__(base_url=base_url or API_ROOT, headers=headers, timeout=timeout)

    def validate_response(self, response: Any) -> bool:
        """
        Validate CryptoCompare response format.

        Errors come back with HTTP 200 and a body of the form
        {"Response": "Error", "Message": "..."}.
        """
        if not isinstance(response, dict):
            return False
        return response.get("Response") != "Error"

    def describe_error(self, response: Any) -> str:
        if isinstance(response, dict) and response.get("Message"):
            return str(response["Message"])
        return super().describe_error(response)

    def fetch_current(self, symbols: Sequence[str], currency: str) -> ConversionMap:
        """
        Get current conversion rates for the given symbols.

        Args:
            symbols: Crypto symbols to price (sent unbatched)
            currency: Target currency code

        Returns:
            Mapping of symbol to price of one unit in the target currency
        """
        if not symbols:
            return {}

        params = {"fsym": currency, "tsyms": ",".join(symbols)}
        response = self.get(API_PATH_CURRENT, params=params)
        return self._parse_rates(response)

    def fetch_historical(
        self, symbols: Sequence[str], currency: str, as_of: int
    ) -> ConversionMap:
        """
        Get conversion rates at a point in time for one batch of symbols.

        Args:
            symbols: Crypto symbols to price; the joined list must fit the
                endpoint's length limit
            currency: Target currency code
            as_of: Unix timestamp in seconds

        Returns:
            Mapping of symbol to price of one unit in the target currency
        """
        if not symbols:
            return {}

        params = {"fsym": currency, "tsyms": ",".join(symbols), "ts": as_of}
        response = self.get(API_PATH_HISTORICAL, params=params)

        # The service wraps the rates in the requested "from" currency.
        data = response.get(currency, {})
        if not isinstance(data, dict):
            raise QuoteFetchError(f"Malformed historical response for {currency}")
        return self._parse_rates(data)

    def _parse_rates(self, data: Dict[str, Any]) -> ConversionMap:
        rates = {}
        for symbol, raw in data.items():
            rates[symbol.upper()] = invert_rate(raw)
        logger.debug("Parsed %d rates", len(rates))
        return rates
