from .classical import CaesarCipher, brute_force, crack, decode, encode, normalize_shift
from .core import FrequencyEntry, FrequencyTable, SolveResult, frequency_analysis, guess_shift

__all__ = [
    "CaesarCipher",
    "FrequencyEntry",
    "FrequencyTable",
    "SolveResult",
    "brute_force",
    "crack",
    "decode",
    "encode",
    "frequency_analysis",
    "guess_shift",
    "normalize_shift",
]
