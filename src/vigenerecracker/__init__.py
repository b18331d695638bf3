from .classical.vigenere import VigenereCracker, crack, crack_text
from .classical.vigenere import vigenere_decrypt as decrypt
from .classical.vigenere import vigenere_encrypt as encrypt
from .core import (
    CrackConfig,
    CrackError,
    CrackResult,
    DegenerateKeyLengthError,
    EmptyInputError,
    KasiskiReport,
    LanguageModel,
    NoRepeatsFoundError,
)

__all__ = [
    "VigenereCracker",
    "crack",
    "crack_text",
    "decrypt",
    "encrypt",
    "CrackConfig",
    "CrackError",
    "CrackResult",
    "DegenerateKeyLengthError",
    "EmptyInputError",
    "KasiskiReport",
    "LanguageModel",
    "NoRepeatsFoundError",
]
