"""
frequency.py  –  symbol normalisation and frequency analysis
"""

from __future__ import annotations

import collections
from typing import Iterable, List, Tuple, Union

from .errors import SymbolRangeError

ALPHABET_SIZE = 256

Data = Union[bytes, bytearray, memoryview, str, Iterable[int]]


def to_symbols(data: Data) -> List[int]:
    """Turn any accepted input into a list of ints in range(ALPHABET_SIZE)."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return list(bytes(data))
    if isinstance(data, str):
        symbols = [ord(ch) for ch in data]
    else:
        symbols = list(data)
    for i, s in enumerate(symbols):
        if isinstance(s, bool) or not isinstance(s, int):
            raise SymbolRangeError(f"symbol {s!r} at position {i} is not an int")
        if not 0 <= s < ALPHABET_SIZE:
            raise SymbolRangeError(f"symbol {s} at position {i} is outside 0..{ALPHABET_SIZE - 1}")
    return symbols


def build_frequency_table(data: Data) -> Tuple[int, ...]:
    counts = collections.Counter(to_symbols(data))
    return tuple(counts.get(s, 0) for s in range(ALPHABET_SIZE))
