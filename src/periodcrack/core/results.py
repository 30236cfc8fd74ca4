from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class CrackResult:
    # sort_index comes first so dataclass ordering uses it automatically
    sort_index: float = field(init=False, repr=False)

    plaintext: str
    key: tuple[str, ...]
    fitness: float
    period: int

    # Baseline fitness of the frequency-initialised key
    initial_fitness: float = float("-inf")
    iterations: int = 0
    elapsed: float = 0.0

    meta: dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # Higher fitness sorts first
        object.__setattr__(self, "sort_index", -self.fitness)

    def to_dict(self) -> dict[str, Any]:
        return {
            "plaintext": self.plaintext,
            "key": list(self.key),
            "fitness": self.fitness,
            "period": self.period,
            "initial_fitness": self.initial_fitness,
            "iterations": self.iterations,
            "elapsed": self.elapsed,
            "meta": dict(self.meta),
        }


@dataclass(frozen=True)
class PeriodReport:
    period: int
    scores: list[tuple[int, float]]  # (candidate period, average IoC) in scan order
    slices: list[str]  # the accepted period's interleaved slices
    forced: bool = False

    @property
    def ioc(self) -> float:
        for k, v in self.scores:
            if k == self.period:
                return v
        return 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "ioc": self.ioc,
            "scores": [list(kv) for kv in self.scores],
            "forced": self.forced,
        }
