from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from periodcrack.core.utils import normalize_az

TABLE_SIZE = 26 ** 4


def tetragram_code(gram: str) -> int:
    a, b, c, d = (ord(ch) - 65 for ch in gram)
    return ((a * 26 + b) * 26 + c) * 26 + d


@dataclass
class TetragramTable:
    """Dense log10 likelihoods for all 26^4 tetragrams, indexed by tetragram_code()."""

    values: list[float]
    floor: float

    def __post_init__(self) -> None:
        if len(self.values) != TABLE_SIZE:
            raise ValueError(f"Tetragram table needs {TABLE_SIZE} entries, got {len(self.values)}.")

    def __getitem__(self, gram: str) -> float:
        return self.values[tetragram_code(gram)]

    @classmethod
    def from_log_probs(cls, logp: dict[str, float], floor: float) -> "TetragramTable":
        values = [floor] * TABLE_SIZE
        for gram, v in logp.items():
            values[tetragram_code(gram)] = v
        return cls(values=values, floor=floor)

    @classmethod
    def from_counts(cls, counts: dict[str, float]) -> "TetragramTable":
        total = sum(counts.values())
        if total <= 0:
            raise ValueError("Tetragram counts sum to <= 0.")
        logp = {g: math.log10(v / total) for g, v in counts.items() if v > 0}
        return cls.from_log_probs(logp, math.log10(0.01 / total))

    @classmethod
    def from_corpus(cls, text: str) -> "TetragramTable":
        """Train on raw text; words run together the way ciphertexts do."""
        s = normalize_az(text)
        if len(s) < 4:
            raise ValueError("Training corpus needs at least one tetragram.")
        counts = Counter(s[i:i + 4] for i in range(len(s) - 3))
        return cls.from_counts(dict(counts))

    @classmethod
    def from_text(cls, text: str) -> "TetragramTable":
        # Collect (gram -> numeric value) from any "GRAM <number>" style line.
        vals: dict[str, float] = {}
        for raw in text.splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            line = line.replace("=", " ").replace(",", " ")
            parts = line.split()
            if len(parts) < 2:
                continue

            gram = parts[0].strip().upper()
            if len(gram) != 4 or not all("A" <= ch <= "Z" for ch in gram):
                continue

            try:
                v = float(parts[1])
            except ValueError:
                continue

            vals[gram] = v

        if not vals:
            raise ValueError("No valid tetragram lines found. Expected lines like 'TION 1234'.")

        values = list(vals.values())

        # Infer what kind of numbers these are:
        #   any value > 1.5        -> counts
        #   all values in 0..1     -> probabilities
        #   mostly negative        -> log10 probabilities
        any_big = any(v > 1.5 for v in values)
        all_prob = all(0.0 <= v <= 1.0 for v in values)
        many_negative = sum(1 for v in values if v < 0.0) > (0.5 * len(values))

        if many_negative and not any_big and not all_prob:
            return cls.from_log_probs(dict(vals), min(values) - 1.0)

        if all_prob and not any_big:
            total = sum(values)
            if total <= 0:
                raise ValueError("Tetragram probabilities sum to <= 0.")
            logp = {g: math.log10(v / total) for g, v in vals.items() if v > 0}
            floor = math.log10((min(v for v in values if v > 0) / total) * 0.01)
            return cls.from_log_probs(logp, floor)

        return cls.from_counts(vals)

    @classmethod
    def from_file(cls, path: str | Path) -> "TetragramTable":
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_package_data(cls, filename: str = "english_corpus.txt") -> "TetragramTable":
        text = resources.files("periodcrack.data").joinpath(filename).read_text(encoding="utf-8")
        return cls.from_corpus(text)
