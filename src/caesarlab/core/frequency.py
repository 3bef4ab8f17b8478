from __future__ import annotations

from collections import Counter

from caesarlab.classical.common import A_ORD, normalize_shift

from .results import FrequencyEntry, FrequencyTable
from .utils import normalize_az


def frequency_analysis(text: str) -> FrequencyTable:
    """
    Count A-Z letters case-insensitively.

    Non-letters (and non-ASCII letters) are skipped and do not count towards
    the total. Letters that never occur are omitted. Entries are sorted by
    descending count, then alphabetically.
    """
    counts = Counter(normalize_az(text))
    total = sum(counts.values())

    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    entries = tuple(
        FrequencyEntry(letter=letter, count=count, percentage=percentage(count, total))
        for letter, count in ordered
    )
    return FrequencyTable(entries=entries, total=total)


def percentage(count: int, total: int) -> float:
    # An empty or letter-free text has nothing to divide by
    if total == 0:
        return 0.0
    return 100.0 * count / total


def guess_shift(text: str, reference: str = "E") -> int | None:
    """
    Assume the most frequent ciphertext letter encrypts ``reference`` and
    return the shift that implies, or None if ``text`` has no letters.
    """
    ref = normalize_az(reference)
    if len(ref) != 1 or len(reference) != 1:
        raise ValueError(f"Reference must be a single letter A-Z, got {reference!r}.")

    table = frequency_analysis(text)
    if not table.entries:
        return None
    top = table.entries[0].letter
    return normalize_shift((ord(top) - A_ORD) - (ord(ref) - A_ORD))
