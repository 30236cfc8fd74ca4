from __future__ import annotations


class CrackError(ValueError):
    """Base class for everything the solver raises on bad input or a failed search."""


class InvalidInputCharacter(CrackError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Ciphertext may only contain A-Z; found {char!r} at position {position}.")


class InputTooLong(CrackError):
    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(f"Ciphertext has {length} letters; the configured maximum is {max_length}.")


class TextTooShort(CrackError):
    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(f"Text has {length} letters; at least {minimum} are required.")


class DegenerateSlice(CrackError, ZeroDivisionError):
    """A slice too short for the index of coincidence (fewer than 2 letters)."""

    def __init__(self, length: int, period: int | None = None, index: int | None = None):
        self.length = length
        self.period = period
        self.index = index
        where = "" if period is None else f" (period={period}, slice={index})"
        super().__init__(f"Index of coincidence needs at least 2 letters, got {length}{where}.")


class PeriodNotFound(CrackError):
    def __init__(
        self,
        bound: int,
        threshold: float,
        jump: float,
        scores: list[tuple[int, float]] | None = None,
    ):
        self.bound = bound
        self.threshold = threshold
        self.jump = jump
        self.scores = list(scores or [])
        best = ""
        if self.scores:
            k, v = max(self.scores, key=lambda kv: kv[1])
            best = f" Highest average IoC was {v:.4f} at period {k}."
        super().__init__(
            f"No period up to {bound} has average IoC > {threshold} "
            f"and > {jump} x the previous candidate.{best}"
        )


class InvalidCiphertextCharacter(CrackError):
    """Decryption met a letter its key column does not contain (malformed column)."""

    def __init__(self, char: str, position: int, column: int):
        self.char = char
        self.position = position
        self.column = column
        super().__init__(f"Character {char!r} at position {position} is not in key column {column}.")


class InvalidKey(CrackError):
    pass
