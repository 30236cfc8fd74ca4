from .config import SolverConfig
from .errors import (
    CrackError,
    DegenerateSlice,
    InputTooLong,
    InvalidCiphertextCharacter,
    InvalidInputCharacter,
    InvalidKey,
    PeriodNotFound,
    TextTooShort,
)
from .results import CrackResult, PeriodReport
from .scoring import index_of_coincidence, tetragram_fitness

__all__ = [
    "SolverConfig",
    "CrackError",
    "DegenerateSlice",
    "InputTooLong",
    "InvalidCiphertextCharacter",
    "InvalidInputCharacter",
    "InvalidKey",
    "PeriodNotFound",
    "TextTooShort",
    "CrackResult",
    "PeriodReport",
    "index_of_coincidence",
    "tetragram_fitness",
]
