# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time

from monty_hall.game import Outcome, RoundRecord, Strategy


STRATEGIES = (Strategy.STAY, Strategy.SWITCH)
OUTCOMES = (Outcome.LOSE, Outcome.WIN)


@dataclass(frozen=True)
class TrialSpec:
    """
    Parameters for one batch of Monty Hall rounds.
    """
    trials: int
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.trials, bool) or not isinstance(self.trials, int):
            raise ValueError(f"trials must be an int, got {self.trials!r}")
        if self.trials < 0:
            raise ValueError("trials must be >= 0")


@dataclass(frozen=True)
class SummaryTable:
    """
    Strategy x outcome cross-tabulation of a batch.

    Proportions are normalized per strategy and kept unrounded; rounding
    happens only in format_summary_table().
    """
    counts: Dict[Strategy, Dict[Outcome, int]]
    proportions: Dict[Strategy, Dict[Outcome, float]]

    @property
    def empty(self) -> bool:
        return not self.counts

    def win_rate(self, strategy: Strategy) -> Optional[float]:
        row = self.proportions.get(strategy)
        if row is None:
            return None
        return row[Outcome.WIN]


def summarize_batch(records: List[RoundRecord]) -> SummaryTable:
    """
    Group records by (strategy, outcome), count, and normalize per strategy.
    An empty record list gives an empty table.
    """
    counts: Dict[Strategy, Dict[Outcome, int]] = {}
    for r in records:
        row = counts.setdefault(r.strategy, {o: 0 for o in OUTCOMES})
        row[r.outcome] += 1

    proportions: Dict[Strategy, Dict[Outcome, float]] = {}
    for strategy, row in counts.items():
        total = 0
        for c in row.values():
            total += c
        proportions[strategy] = {o: row[o] / total for o in OUTCOMES}

    return SummaryTable(counts=counts, proportions=proportions)


def running_win_rate(records: List[RoundRecord], strategy: Strategy) -> List[float]:
    """
    Cumulative win proportion of one strategy after each round.
    """
    rates: List[float] = []
    wins = 0
    played = 0
    for r in records:
        if r.strategy is not strategy:
            continue
        played += 1
        if r.outcome is Outcome.WIN:
            wins += 1
        rates.append(wins / played)
    return rates


@dataclass
class TrialBatch:
    """
    Common return type for a run of rounds: 2 records per round.
    """
    spec: TrialSpec
    records: List[RoundRecord]

    summary: SummaryTable = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: one record per strategy per round
        expected = len(STRATEGIES) * self.spec.trials
        actual = len(self.records)
        if actual != expected:
            raise ValueError(
                f"record count mismatch: expected {expected}, got {actual}"
            )

        self.summary = summarize_batch(self.records)

    def __len__(self) -> int:
        return len(self.records)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def format_summary_table(table: SummaryTable, precision: int = 2) -> str:
    """
    Render proportions as a small text table, strategies as rows.
    """
    if table.empty:
        return "(no rounds played)"

    width = max(len(o.name) for o in OUTCOMES) + precision + 3
    header = "strategy".ljust(10) + "".join(o.name.rjust(width) for o in OUTCOMES)
    lines = [header]
    for strategy in STRATEGIES:
        row = table.proportions.get(strategy)
        if row is None:
            continue
        cells = "".join(f"{row[o]:.{precision}f}".rjust(width) for o in OUTCOMES)
        lines.append(strategy.name.lower().ljust(10) + cells)
    return "\n".join(lines)


def format_batch_line(b: TrialBatch) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    stay = b.summary.win_rate(Strategy.STAY)
    switch = b.summary.win_rate(Strategy.SWITCH)
    if stay is None or switch is None:
        line = f"trials={b.spec.trials}: no rounds played"
    else:
        line = f"trials={b.spec.trials}: stay={stay:.3f}, switch={switch:.3f}"
    return line + (f", runtime={b.runtime_s:.3f}s" if b.runtime_s is not None else "")
