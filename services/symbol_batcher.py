"""
Splitting of symbol lists into request-sized batches.

CryptoCompare limits the length of the comma-joined symbol list accepted by the
historical price endpoint, so symbols are packed greedily into as few requests
as possible.
"""

from typing import List, Sequence

HISTORICAL_SYMBOLS_MAX_LENGTH = 30


def batch_symbols(
    symbols: Sequence[str], max_length: int = HISTORICAL_SYMBOLS_MAX_LENGTH
) -> List[List[str]]:
    """
    Pack symbols into batches whose comma-joined length is at most max_length.

    Order is preserved both within and across batches. An empty input yields a
    single empty batch, which callers must skip rather than request.

    Raises:
        ValueError: if a single symbol is longer than max_length
    """
    batches = []
    current_batch: List[str] = []
    current_length = 0

    for symbol in symbols:
        if len(symbol) > max_length:
            raise ValueError(
                f"Symbol {symbol!r} exceeds the maximum batch length of {max_length}"
            )
        if current_batch and current_length + len(symbol) > max_length:
            batches.append(current_batch)
            current_batch = []
            current_length = 0
        current_batch.append(symbol)
        # account for the comma
        current_length += len(symbol) + 1

    batches.append(current_batch)
    return batches
