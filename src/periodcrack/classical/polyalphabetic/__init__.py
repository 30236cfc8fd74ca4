from .hillclimb import HillClimber, crack
from .initial_key import initial_column, initial_key
from .keys import decrypt, encrypt, random_swap, randomize
from .period import average_ioc, detect_period, ioc_scan

__all__ = [
    "HillClimber",
    "crack",
    "initial_column",
    "initial_key",
    "decrypt",
    "encrypt",
    "random_swap",
    "randomize",
    "average_ioc",
    "detect_period",
    "ioc_scan",
]
