from __future__ import annotations

from collections import Counter
from importlib import resources

from periodcrack.core.errors import DegenerateSlice, TextTooShort
from periodcrack.core.ngrams import TABLE_SIZE, TetragramTable

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ----------------------------
# Reference data (cached)
# ----------------------------

_TETRAGRAMS: TetragramTable | None = None
_MONOGRAMS: list[float] | None = None


def get_tetragram_table() -> TetragramTable:
    """Load the cached default table, trained on periodcrack.data/english_corpus.txt."""
    global _TETRAGRAMS
    if _TETRAGRAMS is None:
        _TETRAGRAMS = TetragramTable.from_package_data()
    return _TETRAGRAMS


def parse_monograms(text: str) -> list[float]:
    """Parse 'E 12.70' style lines into 26 relative frequencies, A..Z order."""
    freqs: dict[str, float] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) < 2:
            continue
        letter = parts[0].upper()
        if len(letter) != 1 or letter not in ALPHABET:
            continue
        freqs[letter] = float(parts[1])

    missing = [ch for ch in ALPHABET if ch not in freqs]
    if missing:
        raise ValueError(f"Monogram table is missing letters: {''.join(missing)}")
    total = sum(freqs.values())
    if total <= 0:
        raise ValueError("Monogram frequencies sum to <= 0.")
    return [freqs[ch] / total for ch in ALPHABET]


def get_reference_monograms() -> list[float]:
    """English single-letter frequencies from periodcrack.data/english_monograms.txt."""
    global _MONOGRAMS
    if _MONOGRAMS is None:
        raw = resources.files("periodcrack.data").joinpath("english_monograms.txt").read_text(
            encoding="utf-8"
        )
        _MONOGRAMS = parse_monograms(raw)
    return list(_MONOGRAMS)


# ----------------------------
# Statistics
# ----------------------------

def index_of_coincidence(text: str) -> float:
    """
    26 * sum(n_i * (n_i - 1)) / (L * (L - 1)).

    About 1.73 for English, 1.0 for uniform random letters. Needs L >= 2.
    """
    n = len(text)
    if n < 2:
        raise DegenerateSlice(n)
    counts = Counter(text)
    num = sum(c * (c - 1) for c in counts.values())
    return 26.0 * num / (n * (n - 1))


def monogram_frequencies(text: str) -> list[float]:
    """Relative frequency of each letter A..Z."""
    n = len(text)
    if n == 0:
        raise TextTooShort(0, 1)
    counts = Counter(text)
    return [counts.get(ch, 0) / n for ch in ALPHABET]


def tetragram_fitness(text: str, table: TetragramTable | None = None) -> float:
    """Mean log10 likelihood over the L-3 overlapping tetragrams. Higher is better."""
    n = len(text)
    if n < 4:
        raise TextTooShort(n, 4)
    values = (table if table is not None else get_tetragram_table()).values

    idx = [ord(ch) - 65 for ch in text]
    code = (idx[0] * 26 + idx[1]) * 26 + idx[2]
    total = 0.0
    for x in idx[3:]:
        code = (code * 26 + x) % TABLE_SIZE
        total += values[code]
    return total / (n - 3)
