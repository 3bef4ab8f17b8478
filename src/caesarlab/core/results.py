from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(frozen=True, order=True)
class SolveResult:
    # sort_index comes first so dataclass ordering uses it automatically
    sort_index: tuple[float, int] = field(init=False, repr=False)

    cipher_name: str
    plaintext: str
    key: Optional[int] = None

    # Higher is better
    score: float = 0.0

    # For transparency / debugging (why this was chosen)
    notes: str = ""

    def __post_init__(self) -> None:
        # dataclass(order=True) sorts ascending; we want score descending,
        # so we negate it. The key is a stable tie-break.
        key = self.key if self.key is not None else -1
        object.__setattr__(self, "sort_index", (-self.score, key))

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "plaintext": self.plaintext,
            "key": self.key,
            "score": self.score,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class FrequencyEntry:
    letter: str
    count: int
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {"letter": self.letter, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True)
class FrequencyTable:
    """Letter counts sorted by descending count, ties alphabetical."""

    entries: tuple[FrequencyEntry, ...] = ()
    total: int = 0  # letters counted, the denominator of every percentage

    def __iter__(self) -> Iterator[FrequencyEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, letter: str) -> FrequencyEntry:
        for entry in self.entries:
            if entry.letter == letter.upper():
                return entry
        raise KeyError(letter)

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and any(e.letter == letter.upper() for e in self.entries)

    def most_common(self, n: int | None = None) -> list[FrequencyEntry]:
        if n is None:
            return list(self.entries)
        return list(self.entries[:n])

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "entries": [e.to_dict() for e in self.entries]}
