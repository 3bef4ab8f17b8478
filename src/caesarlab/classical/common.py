from __future__ import annotations

A_ORD = ord("A")
Z_ORD = ord("Z")
LOWER_A_ORD = ord("a")
LOWER_Z_ORD = ord("z")


def is_az(ch: str) -> bool:
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def is_lower_az(ch: str) -> bool:
    o = ord(ch)
    return LOWER_A_ORD <= o <= LOWER_Z_ORD


def normalize_shift(shift: int) -> int:
    """Reduce any integer shift to its rotation in 0..25."""
    # Python's % already yields a non-negative remainder for a positive modulus
    return shift % 26


def shift_char(ch: str, shift: int) -> str:
    """Rotate one ASCII letter by an already-normalized shift; anything else is returned as is."""
    if is_az(ch):
        return chr(A_ORD + (ord(ch) - A_ORD + shift) % 26)
    if is_lower_az(ch):
        return chr(LOWER_A_ORD + (ord(ch) - LOWER_A_ORD + shift) % 26)
    return ch


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; preserves non-letters; preserves case."""
    k = normalize_shift(shift)
    if k == 0:
        return text
    return "".join(shift_char(ch, k) for ch in text)
