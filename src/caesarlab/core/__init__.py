from .frequency import frequency_analysis, guess_shift
from .results import FrequencyEntry, FrequencyTable, SolveResult
from .scoring import chi_squared_english

__all__ = [
    "FrequencyEntry",
    "FrequencyTable",
    "SolveResult",
    "chi_squared_english",
    "frequency_analysis",
    "guess_shift",
]
