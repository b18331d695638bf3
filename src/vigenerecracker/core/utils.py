from __future__ import annotations

from typing import Iterable

# Characters dropped before structural analysis. Anything else is kept.
_STRIP_CHARS = " ,.‘’"
_STRIP_TABLE = str.maketrans("", "", _STRIP_CHARS)


def normalize(s: str) -> str:
    """Remove spaces, commas, full stops and curly apostrophes, then lowercase."""
    if not s:
        return ""
    return s.translate(_STRIP_TABLE).lower()


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm, gcd(a, 0) == a."""
    while b != 0:
        a, b = b, a % b
    return a


def gcd_all(values: Iterable[int]) -> int:
    """
    GCD of a whole collection, folded left to right from the first value.
    Raises ValueError on an empty collection.
    """
    it = iter(values)
    try:
        result = next(it)
    except StopIteration:
        raise ValueError("gcd_all() of an empty collection.") from None
    for v in it:
        result = gcd(result, v)
    return result
