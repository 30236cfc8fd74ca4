from __future__ import annotations

from periodcrack.core.config import DEFAULT_CONFIG, SolverConfig
from periodcrack.core.errors import CrackError, DegenerateSlice, PeriodNotFound
from periodcrack.core.results import PeriodReport
from periodcrack.core.scoring import index_of_coincidence
from periodcrack.core.utils import slices

# IoC of uniformly random letters; the jump baseline for period 1
RANDOM_IOC = 1.0


def average_ioc(text: str, period: int) -> float:
    """Mean IoC over the period interleaved slices of text."""
    if period < 1:
        raise ValueError("period must be at least 1.")
    cols = slices(text, period)
    total = 0.0
    for i, col in enumerate(cols):
        if len(col) < 2:
            raise DegenerateSlice(len(col), period=period, index=i)
        total += index_of_coincidence(col)
    return total / period


def period_bound(text: str, config: SolverConfig = DEFAULT_CONFIG) -> int:
    """Largest period worth scanning: every slice keeps at least 2 letters."""
    return min(len(text) // 2, config.max_period)


def ioc_scan(text: str, max_period: int = 20) -> list[tuple[int, float]]:
    """(period, average IoC) for every period up to max_period with usable slices."""
    scores = []
    for k in range(1, min(max_period, len(text) // 2) + 1):
        scores.append((k, average_ioc(text, k)))
    return scores


def detect_period(text: str, config: SolverConfig = DEFAULT_CONFIG) -> PeriodReport:
    """
    Scan periods 1, 2, ... and accept the first whose average IoC clears
    config.ioc_threshold and beats config.ioc_jump times the previous
    candidate's average. A multiple of the true period scores about as high as
    the period itself, so the jump test stops at the first real rise.
    """
    bound = period_bound(text, config)
    scores: list[tuple[int, float]] = []
    previous = RANDOM_IOC

    for period in range(1, bound + 1):
        ioc = average_ioc(text, period)
        scores.append((period, ioc))
        if ioc > config.ioc_threshold and ioc > config.ioc_jump * previous:
            return PeriodReport(period=period, scores=scores, slices=slices(text, period))
        previous = ioc

    raise PeriodNotFound(bound, config.ioc_threshold, config.ioc_jump, scores)


def forced_period(text: str, period: int, config: SolverConfig = DEFAULT_CONFIG) -> PeriodReport:
    """Skip detection but still check the period yields usable slices."""
    if not 1 <= period <= config.max_period:
        raise CrackError(f"Period {period} is outside 1..{config.max_period}.")
    ioc = average_ioc(text, period)
    return PeriodReport(period=period, scores=[(period, ioc)], slices=slices(text, period), forced=True)
