from .caesar import CaesarCipher, brute_force, crack, decode, encode
from .common import normalize_shift

__all__ = [
    "CaesarCipher",
    "brute_force",
    "crack",
    "decode",
    "encode",
    "normalize_shift",
]
