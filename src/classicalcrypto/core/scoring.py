from __future__ import annotations

from collections import Counter
from typing import Iterable

from .alphabet import LATIN

# ----------------------------
# English letter frequencies
# ----------------------------

_ENGLISH_FREQ = {
    "e": 0.1270, "t": 0.0906, "a": 0.0817, "o": 0.0751, "i": 0.0697, "n": 0.0675,
    "s": 0.0633, "h": 0.0609, "r": 0.0599, "d": 0.0425, "l": 0.0403, "c": 0.0278,
    "u": 0.0276, "m": 0.0241, "w": 0.0236, "f": 0.0223, "g": 0.0202, "y": 0.0197,
    "p": 0.0193, "b": 0.0149, "v": 0.0098, "k": 0.0077, "j": 0.0015, "x": 0.0015,
    "q": 0.0010, "z": 0.0007,
}


def chi_squared_english(symbols: Iterable[str]) -> float:
    """Lower is better. Empty input scores +inf."""
    counts = Counter(symbols)
    n = sum(counts.values())
    if n == 0:
        return float("inf")

    chi2 = 0.0
    for ch, expected_freq in _ENGLISH_FREQ.items():
        observed = counts.get(ch, 0)
        expected = expected_freq * n
        chi2 += (observed - expected) ** 2 / expected
    return chi2


def letter_frequencies(symbols: Iterable[str]) -> dict[str, float]:
    """Relative frequency of every alphabet symbol (zeros included)."""
    counts = Counter(symbols)
    n = sum(counts.values())
    return {ch: (counts.get(ch, 0) / n if n else 0.0) for ch in LATIN.symbols}
