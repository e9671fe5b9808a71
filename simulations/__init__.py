# simulations/__init__.py
"""
Monte Carlo simulations for the Monty Hall repo.

Run a comparison via:
    python -m simulations.compare --trials ... --seed ... [--plot]
"""

from .run import play_n_games, run_trials

__all__ = ["play_n_games", "run_trials"]
