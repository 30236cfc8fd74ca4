from __future__ import annotations

from typing import Optional, Sequence

from periodcrack.classical.common import ALPHABET
from periodcrack.core.scoring import get_reference_monograms, monogram_frequencies


def _argmax(values: list[Optional[float]]) -> int:
    # First maximum in A..Z order; None marks a consumed letter
    best_i = -1
    best_v = float("-inf")
    for i, v in enumerate(values):
        if v is not None and v > best_v:
            best_i = i
            best_v = v
    return best_i


def initial_column(slice_text: str, reference: Optional[Sequence[float]] = None) -> str:
    """
    Rank-match one slice against the reference language: the slice's most
    frequent letter goes to the rank of the language's most frequent letter,
    the second to the second, and so on down to the rarest.
    """
    if reference is None:
        reference = get_reference_monograms()
    if len(reference) != 26:
        raise ValueError(f"Reference table needs 26 frequencies, got {len(reference)}.")

    observed: list[Optional[float]] = list(monogram_frequencies(slice_text))
    expected: list[Optional[float]] = list(reference)
    column: list[Optional[str]] = [None] * 26

    for _ in range(26):
        f = _argmax(observed)
        r = _argmax(expected)
        column[r] = ALPHABET[f]
        observed[f] = None
        expected[r] = None

    return "".join(column)


def initial_key(cipher_slices: Sequence[str], reference: Optional[Sequence[float]] = None) -> list[str]:
    """One rank-matched column per slice, each from its own slice's letter counts."""
    if reference is None:
        reference = get_reference_monograms()
    return [initial_column(s, reference) for s in cipher_slices]
