from __future__ import annotations

import math
import string
from collections import Counter
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Mapping

LETTERS = string.ascii_lowercase


def frequency_profile(text: str) -> dict[str, float]:
    """
    Relative frequency of each of the 26 letters in text.
    Non-letters are ignored; every letter is present as a key (0.0 if unseen).
    """
    counts = Counter(ch for ch in text.lower() if ch in LETTERS)
    n = sum(counts.values())
    if n == 0:
        return {ch: 0.0 for ch in LETTERS}
    return {ch: counts.get(ch, 0) / n for ch in LETTERS}


@dataclass(frozen=True)
class LanguageModel:
    name: str
    frequencies: Mapping[str, float]

    def __post_init__(self) -> None:
        missing = [ch for ch in LETTERS if ch not in self.frequencies]
        if missing:
            raise ValueError(f"Language model '{self.name}' is missing letters: {''.join(missing)}")
        # Freeze a private copy so callers can't mutate the table afterwards
        object.__setattr__(
            self,
            "frequencies",
            MappingProxyType({ch: float(self.frequencies[ch]) for ch in LETTERS}),
        )

    @classmethod
    def from_text(cls, text: str, name: str = "custom") -> "LanguageModel":
        """
        Parse lines like 'e 0.127' (also 'e=0.127' or 'e,0.127').
        Blank lines and '#' comments are skipped.
        """
        vals: dict[str, float] = {}
        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue

            line = line.replace("=", " ").replace(",", " ")
            parts = line.split()
            if len(parts) < 2:
                raise ValueError(f"Bad frequency line: {raw!r}")

            letter = parts[0].lower()
            if len(letter) != 1 or letter not in LETTERS:
                raise ValueError(f"Bad letter in frequency line: {raw!r}")

            try:
                v = float(parts[1])
            except ValueError as e:
                raise ValueError(f"Bad frequency value in line: {raw!r}") from e
            if not math.isfinite(v) or v < 0.0:
                raise ValueError(f"Frequency must be finite and non-negative: {raw!r}")
            if letter in vals:
                raise ValueError(f"Duplicate letter '{letter}' in line: {raw!r}")

            vals[letter] = v

        if not vals:
            raise ValueError("No frequency lines found. Expected lines like 'e 0.127'.")
        return cls(name=name, frequencies=vals)

    @classmethod
    def from_package_data(
        cls, filename: str = "english_unigrams.txt", name: str | None = None
    ) -> "LanguageModel":
        pkg = "vigenerecracker.data"
        text = resources.files(pkg).joinpath(filename).read_text(encoding="utf-8")
        return cls.from_text(text, name=name or filename.rsplit(".", 1)[0])

    def score(self, profile: Mapping[str, float]) -> float:
        """Sum of absolute differences against the reference. Lower is better."""
        return sum(abs(profile.get(ch, 0.0) - self.frequencies[ch]) for ch in LETTERS)


# Standard published English unigram frequencies (a..z)
ENGLISH = LanguageModel.from_package_data("english_unigrams.txt", name="english")
