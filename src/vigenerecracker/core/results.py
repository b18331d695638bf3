from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class KasiskiReport:
    normalized: str

    # sequence -> ascending start indices in `normalized`
    sequences: dict[str, list[int]]

    # sequence -> consecutive differences of those indices
    gaps: dict[str, list[int]]

    key_length: int

    def all_gaps(self) -> list[int]:
        return [g for seq_gaps in self.gaps.values() for g in seq_gaps]

    def to_dict(self) -> dict[str, Any]:
        return {
            "normalized_length": len(self.normalized),
            "sequences": {k: list(v) for k, v in self.sequences.items()},
            "gaps": {k: list(v) for k, v in self.gaps.items()},
            "key_length": self.key_length,
        }


@dataclass(frozen=True)
class CrackResult:
    plaintext: str
    key: str

    # Winning frequency score per column (lower is better)
    scores: tuple[float, ...] = ()

    report: KasiskiReport | None = field(default=None, repr=False)

    @property
    def key_length(self) -> int:
        return len(self.key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "plaintext": self.plaintext,
            "key": self.key,
            "key_length": self.key_length,
            "scores": list(self.scores),
            "kasiski": self.report.to_dict() if self.report is not None else None,
        }
