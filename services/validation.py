"""
Validation of raw strings coming from the command line.
"""

import math
import re
from typing import Union

from models.exceptions import ConfigurationError, InvalidInputError
from models.portfolio_models import Duration

VALID_USERNAME_REGEX = re.compile(r"\w+", re.ASCII)
VALID_CURRENCY_REGEX = re.compile(r"\w{3,5}", re.ASCII)
VALID_DURATIONS = [duration.value for duration in Duration]


def validate_username(name: str) -> str:
    if not name or not VALID_USERNAME_REGEX.fullmatch(name):
        raise InvalidInputError(f"Invalid user name: {name!r}")
    return name


def validate_symbol(symbol: str) -> str:
    """Return the canonical upper-case form of a crypto symbol."""
    if not symbol or not VALID_CURRENCY_REGEX.fullmatch(symbol):
        raise InvalidInputError(f"Invalid symbol: {symbol!r}")
    return symbol.upper()


def validate_currency(currency: str) -> str:
    """Return the canonical upper-case form of a target currency code."""
    if not currency or not VALID_CURRENCY_REGEX.fullmatch(currency):
        raise ConfigurationError(f"Invalid exchange currency: {currency!r}")
    return currency.upper()


def parse_amount(raw: Union[str, float]) -> float:
    try:
        amount = float(raw)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid amount: {raw!r}") from e
    if not math.isfinite(amount):
        raise InvalidInputError(f"Invalid amount: {raw!r}")
    return amount


def parse_duration(token: Union[str, Duration, None]) -> Duration:
    """Map a duration token to a Duration, defaulting to a day."""
    if token is None:
        return Duration.DAY
    if isinstance(token, Duration):
        return token
    try:
        return Duration(token.lower())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid duration, expected one of: {', '.join(VALID_DURATIONS)}"
        ) from e
