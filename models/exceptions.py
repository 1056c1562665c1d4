"""
Exceptions raised by the gainz valuation engine and its collaborators.

Every failure that should abort a command derives from GainzError so the CLI
can report it as a single line.
"""


class GainzError(Exception):
    """Base class for all gainz errors."""


class ConfigurationError(GainzError):
    """Invalid duration or currency, detected before any network call."""


class InvalidInputError(GainzError):
    """Malformed user name, symbol or amount."""


class QuoteFetchError(GainzError):
    """Network error, non-2xx response or malformed quote payload."""


class EmptyDomainError(GainzError):
    """Nothing to value: no users, no cryptos or no holdings."""


class UserNotFoundError(GainzError):
    """Requested user does not exist in the holdings store."""


class UserExistsError(GainzError):
    """Attempted to add a user that is already registered."""
