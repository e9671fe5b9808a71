from __future__ import annotations

import random

import pytest

from monty_hall.game import Outcome, RoundRecord, Strategy

from simulations.common import (TrialBatch, TrialSpec, format_batch_line,
                                format_summary_table, running_win_rate,
                                summarize_batch)
from simulations.compare import main
from simulations.run import play_n_games, run_trials


def _record(strategy, outcome, i=0):
    return RoundRecord(strategy=strategy, outcome=outcome, round=i,
                       pick=1, revealed=2, final=1, prize_door=1)


def test_play_n_games_size(capsys):
    batch = play_n_games(50, rng=random.Random(1))
    assert len(batch) == 100
    assert [r.round for r in batch.records[:4]] == [0, 0, 1, 1]
    assert [r.strategy for r in batch.records[:2]] == [Strategy.STAY, Strategy.SWITCH]

    out = capsys.readouterr().out
    assert "stay" in out and "switch" in out
    assert "WIN" in out and "LOSE" in out


def test_play_n_games_default_is_100():
    assert len(play_n_games(show=False).records) == 200


@pytest.mark.parametrize("n", [0, -3])
def test_play_n_games_empty(n, capsys):
    batch = play_n_games(n)
    assert batch.records == []
    assert batch.spec.trials == 0
    assert batch.summary.empty
    assert batch.summary.win_rate(Strategy.STAY) is None
    assert "no rounds" in capsys.readouterr().out


def test_seed_reproducible():
    a = play_n_games(30, seed=9, show=False)
    b = play_n_games(30, seed=9, show=False)
    assert a.records == b.records


def test_play_n_games_rejects_rng_and_seed():
    with pytest.raises(ValueError):
        play_n_games(5, rng=random.Random(1), seed=1, show=False)
    assert play_n_games(5, rng=random.Random(1), show=False).spec.seed is None
    assert play_n_games(5, seed=1, show=False).spec.seed == 1


def test_convergence():
    batch = run_trials(10_000, seed=42)
    table = batch.summary
    assert abs(table.win_rate(Strategy.SWITCH) - 2 / 3) < 0.03
    assert abs(table.win_rate(Strategy.STAY) - 1 / 3) < 0.03
    for s in (Strategy.STAY, Strategy.SWITCH):
        assert sum(table.proportions[s].values()) == pytest.approx(1.0)
    assert batch.meta["seed"] == 42


def test_summarize_batch_unrounded():
    records = [
        _record(Strategy.STAY, Outcome.WIN),
        _record(Strategy.STAY, Outcome.LOSE),
        _record(Strategy.STAY, Outcome.LOSE),
        _record(Strategy.SWITCH, Outcome.WIN),
        _record(Strategy.SWITCH, Outcome.WIN),
        _record(Strategy.SWITCH, Outcome.LOSE),
    ]
    table = summarize_batch(records)
    assert table.counts[Strategy.STAY] == {Outcome.WIN: 1, Outcome.LOSE: 2}
    assert table.proportions[Strategy.STAY][Outcome.WIN] == 1 / 3
    assert table.proportions[Strategy.SWITCH][Outcome.WIN] == 2 / 3

    text = format_summary_table(table)
    assert "0.33" in text and "0.67" in text


def test_summarize_batch_empty():
    table = summarize_batch([])
    assert table.empty
    assert format_summary_table(table) == "(no rounds played)"


def test_running_win_rate():
    records = [
        _record(Strategy.STAY, Outcome.WIN, 0),
        _record(Strategy.SWITCH, Outcome.LOSE, 0),
        _record(Strategy.STAY, Outcome.LOSE, 1),
        _record(Strategy.SWITCH, Outcome.WIN, 1),
    ]
    assert running_win_rate(records, Strategy.STAY) == [1.0, 0.5]
    assert running_win_rate(records, Strategy.SWITCH) == [0.0, 0.5]


def test_batch_rejects_wrong_record_count():
    with pytest.raises(ValueError):
        TrialBatch(spec=TrialSpec(trials=2), records=[])


def test_trial_spec_validation():
    with pytest.raises(ValueError):
        TrialSpec(trials=-1)
    with pytest.raises(ValueError):
        TrialSpec(trials=1.5)


def test_format_batch_line():
    batch = run_trials(10, seed=1)
    line = format_batch_line(batch)
    assert line.startswith("trials=10: stay=")
    assert "runtime=" in line


def test_main(capsys):
    assert main(["--trials", "200", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "trials=200" in out
    assert "switch" in out


def test_main_zero_trials(capsys):
    assert main(["--trials", "0", "--plot"]) == 0
    assert "no rounds played" in capsys.readouterr().out
