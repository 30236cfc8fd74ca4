from __future__ import annotations

import re

from periodcrack.core.errors import InvalidKey

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")

_KEY_SPLIT_RE = re.compile(r"[\s|,;:\[\]]+")


def is_permutation(column: str) -> bool:
    """True when column holds each of A-Z exactly once."""
    return len(column) == 26 and set(column) == set(ALPHABET)


def parse_key_alphabets(key: str) -> list[str]:
    """
    Parse key alphabets written like:
      "PGFYSDOMICUJRQBTVNWEKHLAXZ | ESFMDROWBHJKQXZINUPAYGCTLV"
      "[PGFY...XZ] [ESFM...LV]"   (the way results are printed)
    Any of whitespace , ; : | [ ] separate columns. Each column must be a
    26-letter permutation; column i gives the ciphertext letter for plaintext
    letter ALPHABET[i].
    """
    parts = [p for p in _KEY_SPLIT_RE.split(key.strip().upper()) if p]
    if not parts:
        raise InvalidKey("Empty key. Expected one or more 26-letter alphabets.")

    for n, col in enumerate(parts):
        if len(col) != 26:
            raise InvalidKey(f"Key alphabet {n} has {len(col)} letters; expected 26.")
        if not is_permutation(col):
            dupes = sorted({ch for ch in col if col.count(ch) > 1})
            raise InvalidKey(
                f"Key alphabet {n} must be a permutation of A-Z (repeats: {''.join(dupes) or '-'})."
            )
    return parts
