from __future__ import annotations

from caesarlab.classical.common import normalize_shift, shift_text
from caesarlab.core.results import SolveResult
from caesarlab.core.scoring import chi_squared_english
from caesarlab.core.utils import normalize_az


def encode(text: str, shift: int) -> str:
    """Rotate every ASCII letter of ``text`` forward by ``shift`` positions."""
    return shift_text(text, shift)


def decode(text: str, shift: int) -> str:
    # Decrypt means shift backwards by the key
    return encode(text, -shift)


def brute_force(ciphertext: str) -> list[tuple[int, str]]:
    """Every non-trivial key (1..25) paired with its decryption, in key order."""
    return [(k, decode(ciphertext, k)) for k in range(1, 26)]


def _fitness(text: str) -> float:
    if not normalize_az(text):
        return 0.0
    return -chi_squared_english(text)


def crack(ciphertext: str) -> list[SolveResult]:
    """
    Brute force, then rank candidates by English letter statistics.
    Best candidate first; equal scores keep key order.
    """
    out = [
        SolveResult(
            cipher_name=CaesarCipher.name,
            plaintext=pt,
            key=k,
            score=_fitness(pt),
            notes=f"Caesar shift {k}",
        )
        for k, pt in brute_force(ciphertext)
    ]
    return sorted(out)


class CaesarCipher:
    name = "caesar"

    def __init__(self, shift: int) -> None:
        self.shift = normalize_shift(shift)

    def encrypt(self, plaintext: str) -> str:
        return encode(plaintext, self.shift)

    def decrypt(self, ciphertext: str) -> str:
        return decode(ciphertext, self.shift)

    def __repr__(self) -> str:
        return f"CaesarCipher(shift={self.shift})"
