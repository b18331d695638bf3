from __future__ import annotations

from dataclasses import dataclass, field

from .frequencies import ENGLISH, LanguageModel


@dataclass(frozen=True)
class CrackConfig:
    # Window lengths scanned for repeated sequences (inclusive)
    min_window: int = 3
    max_window: int = 6

    # A sequence is kept once it occurs at least this many times
    min_occurrences: int = 3

    model: LanguageModel = field(default=ENGLISH)

    # >1 solves columns on a thread pool
    workers: int = 1

    def __post_init__(self) -> None:
        if self.min_window < 1:
            raise ValueError("min_window must be at least 1.")
        if self.max_window < self.min_window:
            raise ValueError("max_window must be >= min_window.")
        if self.min_occurrences < 2:
            raise ValueError("min_occurrences must be at least 2 (gaps need two positions).")
        if self.workers < 1:
            raise ValueError("workers must be at least 1.")


DEFAULT_CONFIG = CrackConfig()
