from .classical.polyalphabetic import HillClimber, crack, decrypt, detect_period, encrypt
from .core import CrackError, CrackResult, SolverConfig

__all__ = [
    "HillClimber",
    "crack",
    "decrypt",
    "detect_period",
    "encrypt",
    "CrackError",
    "CrackResult",
    "SolverConfig",
]
