# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from monty_hall.game import Outcome

from .common import (
    STRATEGIES,
    TrialBatch,
    format_batch_line,
    format_summary_table,
    running_win_rate,
)
from .run import run_trials


DEFAULT_TRIALS = 100
DEFAULT_SEED = 42


def plot_batch(batch: TrialBatch) -> None:
    """
    Bar chart of win proportions next to the running win rate per strategy.
    """
    names = [s.name.lower() for s in STRATEGIES]
    wins = [batch.summary.proportions[s][Outcome.WIN] for s in STRATEGIES]

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.bar(names, wins)
    plt.axhline(1 / 3, linestyle="--", color="gray")
    plt.axhline(2 / 3, linestyle="--", color="gray")
    plt.title("Win proportion")
    plt.ylabel("P(win)")
    plt.ylim(0, 1)

    plt.subplot(1, 2, 2)
    for s in STRATEGIES:
        plt.plot(running_win_rate(batch.records, s), label=s.name.lower())
    plt.axhline(1 / 3, linestyle="--", color="gray")
    plt.axhline(2 / 3, linestyle="--", color="gray")
    plt.title("Running win rate")
    plt.xlabel("Round")
    plt.ylim(0, 1)
    plt.legend()

    plt.suptitle(f"Monty Hall: stay vs switch  (trials={batch.spec.trials})")
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare the stay and switch strategies of the Monty Hall game via Monte Carlo."
    )
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of rounds")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")
    parser.add_argument("--plot", action="store_true", help="show a matplotlib figure")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    batch = run_trials(args.trials, seed=args.seed)

    print(format_summary_table(batch.summary))
    print(format_batch_line(batch))

    # Nothing to draw for an empty batch
    if args.plot and not batch.summary.empty:
        plot_batch(batch)

    return 0


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
