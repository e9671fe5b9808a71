# simulations/run.py

from __future__ import annotations

import logging
import random
from typing import List, Optional

from monty_hall.game import RoundRecord, play_game

from .common import TrialBatch, TrialSpec, Timer, format_summary_table


logger = logging.getLogger(__name__)


def play_n_games(
    n: int = 100,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    show: bool = True,
) -> TrialBatch:
    """
    Play n rounds back to back and collect both strategies' outcomes.

    Parameters
    ----------
    n:
        Number of rounds. n <= 0 gives an empty batch.
    rng:
        Random source shared by every round.
    seed:
        Used to build a private random.Random. Passing both rng and seed
        raises ValueError. With neither, the process-wide `random` module
        is used.
    show:
        Print the strategy x outcome proportion table (2 decimals).

    Returns
    -------
    TrialBatch with 2 * n records.
    """
    if rng is not None and seed is not None:
        raise ValueError("pass either rng or seed, not both")

    trials = max(n, 0)
    spec = TrialSpec(trials=trials, seed=seed)
    if seed is not None:
        rng = random.Random(seed)

    logger.debug("playing %d rounds (seed=%s)", trials, seed)

    records: List[RoundRecord] = []
    with Timer() as t:
        for i in range(trials):
            stay, switch = play_game(rng, round_index=i)
            records.append(stay)
            records.append(switch)

    batch = TrialBatch(spec=spec, records=records, runtime_s=t.elapsed_s)
    logger.debug("played %d rounds in %.3fs", trials, t.elapsed_s or 0.0)

    if show:
        print(format_summary_table(batch.summary, precision=2))
    return batch


def run_trials(trials: int, seed: int = 42) -> TrialBatch:
    """
    Seeded, silent run; the building block for the compare tool and tests.
    """
    batch = play_n_games(trials, seed=seed, show=False)
    batch.meta["seed"] = seed
    return batch
