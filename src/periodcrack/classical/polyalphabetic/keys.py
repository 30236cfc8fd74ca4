from __future__ import annotations

import random
from typing import Optional, Sequence

from periodcrack.classical.common import ALPHABET, is_permutation
from periodcrack.core.errors import InvalidCiphertextCharacter, InvalidInputCharacter, InvalidKey

# A key is one 26-letter column per cipher position. column[i] is the
# ciphertext letter that plaintext letter ALPHABET[i] becomes.
Key = list[str]


def validate_key(key: Sequence[str]) -> None:
    if not key:
        raise InvalidKey("Key needs at least one alphabet.")
    for n, col in enumerate(key):
        if not is_permutation(col):
            raise InvalidKey(f"Key alphabet {n} is not a permutation of A-Z: {col!r}")


def randomize(rng: random.Random) -> str:
    """Uniform random column: each letter in turn goes to a random unfilled rank."""
    column: list[Optional[str]] = [None] * 26
    free = list(range(26))
    for ch in ALPHABET:
        column[free.pop(rng.randrange(len(free)))] = ch
    return "".join(column)


def random_swap(column: str, rng: random.Random) -> str:
    """Swap two distinct random positions of a column."""
    i = rng.randrange(26)
    j = rng.randrange(25)
    if j >= i:
        j += 1
    cols = list(column)
    cols[i], cols[j] = cols[j], cols[i]
    return "".join(cols)


def _decrypt_table(column: str) -> dict[int, str]:
    # First occurrence wins if a column is ever malformed
    table: dict[int, str] = {}
    for rank in range(len(column) - 1, -1, -1):
        table[ord(column[rank])] = ALPHABET[rank]
    return table


def _interleave(parts: Sequence[str], length: int) -> str:
    out = [""] * length
    period = len(parts)
    for i, part in enumerate(parts):
        out[i::period] = part
    return "".join(out)


def decrypt_slices(cipher_slices: Sequence[str], key: Sequence[str], length: int) -> str:
    """Decrypt pre-sliced ciphertext (slice i belongs to column i)."""
    period = len(key)
    parts = []
    for j, (ct, column) in enumerate(zip(cipher_slices, key)):
        missing = set(ct).difference(column)
        if missing:
            ch = min(missing)
            raise InvalidCiphertextCharacter(ch, j + period * ct.index(ch), j)
        parts.append(ct.translate(_decrypt_table(column)))
    return _interleave(parts, length)


def decrypt(ciphertext: str, key: Sequence[str]) -> str:
    """plaintext[i] = ALPHABET[key[i % period].index(ciphertext[i])]"""
    period = len(key)
    if period == 0:
        raise InvalidKey("Key needs at least one alphabet.")
    return decrypt_slices([ciphertext[i::period] for i in range(period)], key, len(ciphertext))


def encrypt(plaintext: str, key: Sequence[str]) -> str:
    """Inverse of decrypt: plaintext letter of rank r becomes key[i % period][r]."""
    validate_key(key)
    period = len(key)
    parts = []
    for j, column in enumerate(key):
        pt = plaintext[j::period]
        bad = set(pt) - set(ALPHABET)
        if bad:
            ch = min(bad)
            raise InvalidInputCharacter(ch, j + period * pt.index(ch))
        parts.append(pt.translate(str.maketrans(ALPHABET, column)))
    return _interleave(parts, len(plaintext))
