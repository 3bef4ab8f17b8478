from __future__ import annotations

from collections import Counter

from .utils import normalize_az

_ENGLISH_FREQ = {
    "E": 0.1270, "T": 0.0906, "A": 0.0817, "O": 0.0751, "I": 0.0697, "N": 0.0675,
    "S": 0.0633, "H": 0.0609, "R": 0.0599, "D": 0.0425, "L": 0.0403, "C": 0.0278,
    "U": 0.0276, "M": 0.0241, "W": 0.0236, "F": 0.0223, "G": 0.0202, "Y": 0.0197,
    "P": 0.0193, "B": 0.0149, "V": 0.0098, "K": 0.0077, "J": 0.0015, "X": 0.0015,
    "Q": 0.0010, "Z": 0.0007,
}


def chi_squared_english(text: str) -> float:
    """Distance of the letter counts from English; ``crack`` ranks brute-force candidates by it. Lower is better."""
    s = normalize_az(text)
    n = len(s)
    if n == 0:
        return float("inf")

    counts = Counter(s)
    chi2 = 0.0
    for ch, expected_freq in _ENGLISH_FREQ.items():
        observed = counts.get(ch, 0)
        expected = expected_freq * n
        chi2 += (observed - expected) ** 2 / expected
    return chi2
