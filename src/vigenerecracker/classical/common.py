from __future__ import annotations

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
A_ORD = ord("a")
Z_ORD = ord("z")


def is_az(ch: str) -> bool:
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def letter_index(ch: str) -> int:
    """0..25 for a lowercase a-z character."""
    return ord(ch) - A_ORD


def shift_char(ch: str, shift: int) -> str:
    """Shift one a-z character by 'shift' (can be negative)."""
    idx = (ord(ch) - A_ORD + shift) % 26
    return chr(A_ORD + idx)


def norm_key_alpha(key: str) -> str:
    """Lowercase and keep only a-z."""
    return "".join(ch for ch in key.lower() if "a" <= ch <= "z")


def key_shifts(key: str) -> list[int]:
    k = norm_key_alpha(key)
    if not k:
        raise ValueError("Vigenère key must contain at least one A-Z letter.")
    return [letter_index(ch) for ch in k]
