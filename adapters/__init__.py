"""
API Adapters Package
Contains base adapter and the quote service adapter.
"""

from .base import BaseAdapter
from .cryptocompare import CryptoCompareAdapter, invert_rate

__all__ = [
    'BaseAdapter',
    'CryptoCompareAdapter',
    'invert_rate'
]
