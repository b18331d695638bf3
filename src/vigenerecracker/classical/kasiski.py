from __future__ import annotations

import logging
from collections import defaultdict

from vigenerecracker.core.config import DEFAULT_CONFIG, CrackConfig
from vigenerecracker.core.errors import DegenerateKeyLengthError, EmptyInputError, NoRepeatsFoundError
from vigenerecracker.core.results import KasiskiReport
from vigenerecracker.core.utils import gcd_all, normalize

logger = logging.getLogger(__name__)


def find_repeated_sequences(
    text: str,
    *,
    min_window: int = 3,
    max_window: int = 6,
    min_occurrences: int = 3,
) -> dict[str, list[int]]:
    """
    Repeated sequences of length min_window..max_window in normalized text.

    Returns: sequence -> ascending start indices, for every alphabetic sequence
    seen at least min_occurrences times.
    """
    found: dict[str, list[int]] = {}
    n = len(text)

    for w in range(min_window, max_window + 1):
        if n < w:
            continue

        pos_map: dict[str, list[int]] = defaultdict(list)
        for i in range(0, n - w + 1):
            seq = text[i : i + w]
            if seq.isascii() and seq.isalpha():
                pos_map[seq].append(i)

        kept = 0
        for seq, positions in pos_map.items():
            if len(positions) >= min_occurrences:
                found[seq] = positions
                kept += 1
        logger.debug("window %d: %d repeated sequences", w, kept)

    return found


def find_gaps(sequences: dict[str, list[int]]) -> dict[str, list[int]]:
    """{"abc": [1, 4, 10]} -> {"abc": [3, 6]}"""
    return {seq: [b - a for a, b in zip(positions, positions[1:])] for seq, positions in sequences.items()}


def estimate_key_length(gaps: dict[str, list[int]], text_length: int) -> int:
    """GCD over every gap of every sequence."""
    values = [g for seq_gaps in gaps.values() for g in seq_gaps]
    if not values:
        raise NoRepeatsFoundError("No repeated sequences found; cannot estimate a key length.")

    key_length = gcd_all(values)
    if key_length <= 0 or key_length > text_length:
        raise DegenerateKeyLengthError(key_length, text_length)

    logger.debug("key length %d from %d gaps", key_length, len(values))
    return key_length


def kasiski_examination(text: str, config: CrackConfig = DEFAULT_CONFIG) -> KasiskiReport:
    """Normalize, find repeats, and reduce their gaps to a key length."""
    normalized = normalize(text)
    if len(normalized) < config.min_window:
        raise EmptyInputError(
            f"Need at least {config.min_window} characters after normalization, got {len(normalized)}."
        )

    sequences = find_repeated_sequences(
        normalized,
        min_window=config.min_window,
        max_window=config.max_window,
        min_occurrences=config.min_occurrences,
    )
    gaps = find_gaps(sequences)
    key_length = estimate_key_length(gaps, len(normalized))

    return KasiskiReport(normalized=normalized, sequences=sequences, gaps=gaps, key_length=key_length)
