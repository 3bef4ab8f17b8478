from __future__ import annotations

import re

_AZ_ONLY_RE = re.compile(r"[^A-Z]+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if not s:
        return ""
    # Fold ASCII only: "ß".upper() == "SS" must not invent letters
    s = "".join(ch.upper() if ch.isascii() else ch for ch in s)
    return _AZ_ONLY_RE.sub("", s)
