from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

MAX_TEXT_LENGTH = 10000
MAX_PERIOD = 100
IOC_THRESHOLD = 1.65
IOC_JUMP = 1.2
STAGNATION_LIMIT = 1000
BUDGET_COEFFICIENT = 5_000_000


@dataclass(frozen=True)
class SolverConfig:
    max_text_length: int = MAX_TEXT_LENGTH
    max_period: int = MAX_PERIOD

    # Period detection: accept when avg IoC > threshold and > jump * previous avg
    ioc_threshold: float = IOC_THRESHOLD
    ioc_jump: float = IOC_JUMP

    # Hill climbing
    stagnation_limit: int = STAGNATION_LIMIT
    budget_coefficient: int = BUDGET_COEFFICIENT
    max_seconds: Optional[float] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_text_length < 4:
            raise ValueError("max_text_length must be at least 4.")
        if self.max_period < 1:
            raise ValueError("max_period must be at least 1.")
        if self.ioc_jump <= 0:
            raise ValueError("ioc_jump must be positive.")
        if self.stagnation_limit < 1:
            raise ValueError("stagnation_limit must be at least 1.")
        if self.budget_coefficient < 0:
            raise ValueError("budget_coefficient must not be negative.")
        if self.max_seconds is not None and self.max_seconds <= 0:
            raise ValueError("max_seconds must be positive when given.")

    def with_overrides(self, **changes) -> "SolverConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def search_budget(self, period: int, length: int) -> int:
        """Global non-improvement budget: coefficient * period^2 / length (integer)."""
        return self.budget_coefficient * period * period // max(1, length)


DEFAULT_CONFIG = SolverConfig()
