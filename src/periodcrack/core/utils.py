from __future__ import annotations

import re

from .config import MAX_TEXT_LENGTH
from .errors import InputTooLong, InvalidInputCharacter, TextTooShort

_AZ_ONLY_RE = re.compile(r"[^A-Z]+")
_NOT_AZ_RE = re.compile(r"[^A-Z]")

MIN_TEXT_LENGTH = 4


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if s is None:
        return ""
    s = f"{s}".upper()
    return _AZ_ONLY_RE.sub("", s)


def validate_ciphertext(text: str, *, max_length: int = MAX_TEXT_LENGTH) -> str:
    """
    Check a ciphertext at the input boundary and return it unchanged.

    Raises InvalidInputCharacter for anything outside A-Z, InputTooLong past
    max_length and TextTooShort below one tetragram window.
    """
    bad = _NOT_AZ_RE.search(text)
    if bad is not None:
        raise InvalidInputCharacter(bad.group(), bad.start())
    if len(text) > max_length:
        raise InputTooLong(len(text), max_length)
    if len(text) < MIN_TEXT_LENGTH:
        raise TextTooShort(len(text), MIN_TEXT_LENGTH)
    return text


def slices(text: str, period: int) -> list[str]:
    """Interleaved slices: slice i holds the letters at positions i, i+period, ..."""
    return [text[i::period] for i in range(period)]
