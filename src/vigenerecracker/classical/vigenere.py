from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from vigenerecracker.core.config import DEFAULT_CONFIG, CrackConfig
from vigenerecracker.core.frequencies import ENGLISH, LanguageModel, frequency_profile
from vigenerecracker.core.results import CrackResult, KasiskiReport
from vigenerecracker.classical.common import ALPHABET, is_az, key_shifts, shift_char
from vigenerecracker.classical.kasiski import kasiski_examination

logger = logging.getLogger(__name__)


def group_into_blocks(text: str, key_length: int) -> list[str]:
    """
    Deal characters into key_length blocks round-robin (not consecutive chunks),
    so block j holds every character enciphered with key letter j.
    """
    if key_length < 1:
        raise ValueError("key_length must be at least 1.")
    return [text[j::key_length] for j in range(key_length)]


def interleave_blocks(blocks: list[str]) -> str:
    """Inverse of group_into_blocks."""
    out = []
    longest = max((len(b) for b in blocks), default=0)
    for i in range(longest):
        for b in blocks:
            if i < len(b):
                out.append(b[i])
    return "".join(out)


def caesar_shift_block(block: str, shift: int) -> str:
    """Decrypt a lowercase block by a single Caesar shift; non-letters unchanged."""
    return "".join(shift_char(ch, -shift) if is_az(ch) else ch for ch in block)


def solve_column(block: str, model: LanguageModel = ENGLISH) -> tuple[int, float]:
    """
    Try all 26 shifts and keep the one whose plaintext profile is closest to the model.
    Only a strictly lower score replaces the incumbent, so ties keep the lowest shift.
    """
    best_shift = 0
    best_score = float("inf")
    for shift in range(26):
        profile = frequency_profile(caesar_shift_block(block, shift))
        score = model.score(profile)
        if score < best_score:
            best_score = score
            best_shift = shift
    return best_shift, best_score


def recover_key(
    normalized: str,
    key_length: int,
    model: LanguageModel = ENGLISH,
    *,
    workers: int = 1,
) -> tuple[str, tuple[float, ...]]:
    """Solve every column independently and join the shifts into a key."""
    blocks = group_into_blocks(normalized, key_length)

    def solve(block: str) -> tuple[int, float]:
        return solve_column(block, model)

    if workers > 1 and len(blocks) > 1:
        # map() yields in submission order, so column order is preserved
        with ThreadPoolExecutor(max_workers=min(workers, len(blocks))) as exe:
            solved = list(exe.map(solve, blocks))
    else:
        solved = [solve(b) for b in blocks]

    for col, (shift, score) in enumerate(solved):
        logger.debug("column %d: shift %d (%s) score %.4f", col, shift, ALPHABET[shift], score)

    key = "".join(ALPHABET[shift] for shift, _ in solved)
    scores = tuple(score for _, score in solved)
    return key, scores


def _vigenere_apply(text: str, key: str, direction: int) -> str:
    shifts = key_shifts(key)

    out = []
    j = 0
    for ch in text:
        low = ch.lower()
        if not ch.isascii() or not is_az(low):
            out.append(ch)
            continue
        # key cursor only moves on letters
        shift = shifts[j % len(shifts)]
        out.append(shift_char(low, direction * shift))
        j += 1
    return "".join(out)


def vigenere_decrypt(text: str, key: str) -> str:
    """
    Decrypt with a known key. Letters come out lowercase; everything else is
    copied through and does not consume key letters.
    """
    return _vigenere_apply(text, key, -1)


def vigenere_encrypt(text: str, key: str) -> str:
    return _vigenere_apply(text, key, 1)


class VigenereCracker:
    def __init__(self, config: Optional[CrackConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def examine(self, ciphertext: str) -> KasiskiReport:
        return kasiski_examination(ciphertext, self.config)

    def crack(self, ciphertext: str) -> CrackResult:
        report = self.examine(ciphertext)
        key, scores = recover_key(
            report.normalized,
            report.key_length,
            self.config.model,
            workers=self.config.workers,
        )
        logger.debug("recovered key %r (length %d)", key, report.key_length)
        return CrackResult(
            plaintext=vigenere_decrypt(ciphertext, key),
            key=key,
            scores=scores,
            report=report,
        )


def crack(ciphertext: str, config: Optional[CrackConfig] = None) -> CrackResult:
    return VigenereCracker(config).crack(ciphertext)


def crack_text(ciphertext: str, config: Optional[CrackConfig] = None) -> str:
    """Recover the plaintext of a repeating-key Vigenère ciphertext."""
    return crack(ciphertext, config).plaintext
