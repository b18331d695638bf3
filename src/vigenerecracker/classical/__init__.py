from __future__ import annotations

from .kasiski import estimate_key_length, find_gaps, find_repeated_sequences, kasiski_examination
from .vigenere import VigenereCracker, crack, crack_text, vigenere_decrypt, vigenere_encrypt

__all__ = [
    "estimate_key_length",
    "find_gaps",
    "find_repeated_sequences",
    "kasiski_examination",
    "VigenereCracker",
    "crack",
    "crack_text",
    "vigenere_decrypt",
    "vigenere_encrypt",
]
