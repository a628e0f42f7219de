from collections import Counter
from typing import Dict


def count_frequencies(data: bytes) -> Dict[int, int]:
    """
    Count how often each byte value occurs in `data`.

    The result only holds bytes that actually occur and iterates in
    ascending byte order, so the header written from it is stable.
    """
    counts = Counter(data)
    return {symbol: counts[symbol] for symbol in sorted(counts)}
