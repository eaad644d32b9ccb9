"""
stats.py  –  entropy, average code length and the per-symbol code report

Dependencies:  pandas (code report dataframe)
"""

from __future__ import annotations

import math
from typing import Dict, Sequence

import pandas as pd

from .frequency import Data, build_frequency_table
from .tree import build_code_table, build_tree

COLUMNS = ["Symbol", "Count", "Probability", "Code", "Code Length"]


def _probabilities(freq: Sequence[int]) -> Dict[int, float]:
    total = sum(freq)
    if not total:
        return {}
    return {s: c / total for s, c in enumerate(freq) if c}


def entropy(freq: Sequence[int]) -> float:
    return -sum(p * math.log2(p) for p in _probabilities(freq).values())


def average_code_length(freq: Sequence[int], table: Dict[int, str]) -> float:
    return sum(p * len(table[s]) for s, p in _probabilities(freq).items())


def compression_ratio(original_bits: int, encoded_bits: int) -> float:
    return original_bits / encoded_bits if encoded_bits > 0 else 1.0


def code_table_frame(data: Data) -> pd.DataFrame:
    """One row per distinct symbol, most frequent first."""
    freq = build_frequency_table(data)
    probs = _probabilities(freq)
    if not probs:
        return pd.DataFrame(columns=COLUMNS)

    codes = build_code_table(build_tree(freq))
    rows = []
    for sym, p in sorted(probs.items(), key=lambda x: (-freq[x[0]], x[0])):
        rows.append({
            "Symbol": repr(chr(sym)),
            "Count":  freq[sym],
            "Probability": round(p, 4),
            "Code":   codes[sym],
            "Code Length": len(codes[sym]),
        })
    return pd.DataFrame(rows, columns=COLUMNS)
