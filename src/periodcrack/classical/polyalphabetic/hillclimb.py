from __future__ import annotations

import random
import sys
import time
from typing import Optional, Sequence

from periodcrack.classical.polyalphabetic.initial_key import initial_key
from periodcrack.classical.polyalphabetic.keys import (
    Key,
    decrypt_slices,
    random_swap,
    randomize,
    validate_key,
)
from periodcrack.classical.polyalphabetic.period import detect_period, forced_period
from periodcrack.core.config import DEFAULT_CONFIG, SolverConfig
from periodcrack.core.ngrams import TetragramTable
from periodcrack.core.results import CrackResult
from periodcrack.core.scoring import get_tetragram_table, tetragram_fitness
from periodcrack.core.utils import slices, validate_ciphertext

# ============================================================
# Periodic substitution: column-wise hill climbing
# Strategy:
#   1) start from the frequency-matched key (baseline best)
#   2) for each column in turn: randomize it, then greedy single swaps
#      inside that column until it stagnates
#   3) keep going while some child beats the best-ever fitness often
#      enough (global non-improvement budget)
# ============================================================


class HillClimber:
    """
    Owns the whole search state for one ciphertext: parent key/fitness,
    best-ever key/plaintext/fitness and the global non-improvement counter.
    """

    def __init__(
        self,
        ciphertext: str,
        key: Sequence[str],
        *,
        table: Optional[TetragramTable] = None,
        config: SolverConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
        log_level: int = 0,
        log_best_min_delta: float = 0.05,
    ):
        validate_key(key)
        self.ciphertext = ciphertext
        self.period = len(key)
        self.config = config
        self.table = table if table is not None else get_tetragram_table()
        self.rng = rng or random.Random(config.seed)
        self.log_level = log_level
        self.log_best_min_delta = log_best_min_delta

        self._slices = slices(ciphertext, self.period)

        self.parent: Key = list(key)
        plaintext, fit = self.evaluate(self.parent)
        self.parent_fitness = fit

        self.best_key: Key = list(key)
        self.best_plaintext = plaintext
        self.best_fitness = fit
        self.initial_fitness = fit
        self.history: list[float] = [fit]

        self.stale = 0
        self.budget = config.search_budget(self.period, len(ciphertext))
        self.iterations = 0
        self.passes = 0
        self.timed_out = False

        self._deadline: Optional[float] = None
        self._last_logged_best = fit

    def _log(self, msg: str, *, level: int = 1) -> None:
        if self.log_level >= level:
            print(msg, file=sys.stderr)

    def evaluate(self, key: Sequence[str]) -> tuple[str, float]:
        plaintext = decrypt_slices(self._slices, key, len(self.ciphertext))
        return plaintext, tetragram_fitness(plaintext, self.table)

    @property
    def exhausted(self) -> bool:
        return self.stale >= self.budget

    def _out_of_time(self) -> bool:
        if self._deadline is not None and time.perf_counter() > self._deadline:
            self.timed_out = True
        return self.timed_out

    def restart_column(self, j: int) -> None:
        """Replace column j of the parent with a random alphabet and re-score it."""
        self.parent[j] = randomize(self.rng)
        _, self.parent_fitness = self.evaluate(self.parent)

    def try_swap(self, j: int) -> bool:
        """
        One child: the parent with a single swap in column j. Returns True if
        the child replaced the parent. Best-ever is tracked separately so a
        child can set a new global best without beating its parent's score.
        """
        child = self.parent[:]
        child[j] = random_swap(child[j], self.rng)
        plaintext, fit = self.evaluate(child)
        self.iterations += 1

        accepted = fit > self.parent_fitness
        if accepted:
            self.parent = child
            self.parent_fitness = fit

        if fit > self.best_fitness:
            self._record_best(child, plaintext, fit)
            self.stale = 0
        else:
            self.stale += 1

        return accepted

    def _record_best(self, key: Key, plaintext: str, fit: float) -> None:
        self.best_key = key[:]
        self.best_plaintext = plaintext
        self.best_fitness = fit
        self.history.append(fit)

        if fit - self._last_logged_best >= self.log_best_min_delta:
            self._log(
                f"[periodcrack p={self.period}] best fitness {fit:.4f} "
                f"(pass {self.passes}, iteration {self.iterations})",
                level=1,
            )
            self._last_logged_best = fit

    def climb_column(self, j: int) -> None:
        """Randomize column j, then swap inside it until stagnation_limit misses in a row."""
        self.restart_column(j)
        misses = 0
        while misses < self.config.stagnation_limit:
            if self._out_of_time():
                return
            if self.try_swap(j):
                misses = 0
            else:
                misses += 1

    def run(self) -> CrackResult:
        start = time.perf_counter()
        if self.config.max_seconds is not None:
            self._deadline = start + self.config.max_seconds

        self._log(
            f"[periodcrack p={self.period}] init fitness={self.initial_fitness:.4f} budget={self.budget}",
            level=1,
        )

        while not self.exhausted and not self.timed_out:
            for j in range(self.period):
                self.climb_column(j)
                if self.timed_out:
                    break
            self.passes += 1
            self._log(
                f"[periodcrack p={self.period}] pass {self.passes} done; "
                f"best={self.best_fitness:.4f} stale={self.stale}/{self.budget}",
                level=2,
            )

        if self.timed_out:
            self._log(f"[periodcrack p={self.period}] stopped after {self.config.max_seconds}s", level=1)

        return CrackResult(
            plaintext=self.best_plaintext,
            key=tuple(self.best_key),
            fitness=self.best_fitness,
            period=self.period,
            initial_fitness=self.initial_fitness,
            iterations=self.iterations,
            elapsed=time.perf_counter() - start,
            meta={"passes": self.passes, "budget": self.budget, "timed_out": self.timed_out},
        )


def crack(
    ciphertext: str,
    *,
    config: SolverConfig = DEFAULT_CONFIG,
    period: Optional[int] = None,
    table: Optional[TetragramTable] = None,
    reference: Optional[Sequence[float]] = None,
    log_level: int = 0,
) -> CrackResult:
    """
    Full ciphertext-only attack: validate, find the period (unless given),
    seed a key by frequency ranks, then hill climb.
    """
    validate_ciphertext(ciphertext, max_length=config.max_text_length)

    if period is None:
        report = detect_period(ciphertext, config)
    else:
        report = forced_period(ciphertext, period, config)

    if log_level >= 1:
        how = "forced" if report.forced else "detected"
        print(f"[periodcrack] {how} period={report.period} avg_ioc={report.ioc:.4f}", file=sys.stderr)

    key = initial_key(report.slices, reference)
    climber = HillClimber(ciphertext, key, table=table, config=config, log_level=log_level)
    result = climber.run()
    result.meta["period_scan"] = report.to_dict()
    return result
