from .config import CrackConfig, DEFAULT_CONFIG
from .errors import CrackError, DegenerateKeyLengthError, EmptyInputError, NoRepeatsFoundError
from .frequencies import ENGLISH, LanguageModel, frequency_profile
from .results import CrackResult, KasiskiReport

__all__ = [
    "CrackConfig",
    "DEFAULT_CONFIG",
    "CrackError",
    "DegenerateKeyLengthError",
    "EmptyInputError",
    "NoRepeatsFoundError",
    "ENGLISH",
    "LanguageModel",
    "frequency_profile",
    "CrackResult",
    "KasiskiReport",
]
