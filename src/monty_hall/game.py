"""
Monty Hall game rules (Reference Implementation)

One round of the puzzle is built from five small rules:

    create_game -> select_door -> open_goat_door -> change_door -> determine_winner

play_game() composes them so that BOTH strategies are scored against the
same game, the same initial pick and the same revealed door. The stay and
switch outcomes of a round are therefore paired samples, not independent
trials.

Every rule that consumes randomness accepts an optional random.Random. When
it is omitted the process-wide `random` module is used, and it is never
reseeded between rounds.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Prize(Enum):
    PRIZE = "prize"
    NON_PRIZE = "non_prize"


class Strategy(Enum):
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"


# Door indices are 1-based
DOORS: Tuple[int, int, int] = (1, 2, 3)

Game = Tuple[Prize, Prize, Prize]


@dataclass(frozen=True)
class RoundRecord:
    """
    One (strategy, outcome) row, plus the round detail that produced it.
    """
    strategy: Strategy
    outcome: Outcome
    round: int
    pick: int
    revealed: int
    final: int
    prize_door: int


# (stay_record, switch_record), always from the same game
RoundResult = Tuple[RoundRecord, RoundRecord]


def _source(rng: Optional[random.Random]):
    return random if rng is None else rng


def _check_door(door: int, name: str = "door") -> None:
    # bools and floats compare equal to ints, so check the type first
    if isinstance(door, bool) or not isinstance(door, int) or door not in DOORS:
        raise ValueError(f"{name} must be one of {DOORS}, got {door!r}")


def prize_door(game: Game) -> int:
    """
    Return the door index holding the prize. Rejects anything that is not
    a 3-door game with exactly one PRIZE.
    """
    if len(game) != len(DOORS):
        raise ValueError(f"game must have {len(DOORS)} doors, got {len(game)}")

    doors = [d for d, value in zip(DOORS, game) if value is Prize.PRIZE]
    if len(doors) != 1:
        raise ValueError(f"game must hold exactly one prize, got {len(doors)}")
    return doors[0]


# ------------------------------------------------------------
# Round rules
# ------------------------------------------------------------

def create_game(rng: Optional[random.Random] = None) -> Game:
    """
    Uniformly random permutation of {PRIZE, NON_PRIZE, NON_PRIZE}.
    """
    doors = [Prize.PRIZE, Prize.NON_PRIZE, Prize.NON_PRIZE]
    _source(rng).shuffle(doors)
    return (doors[0], doors[1], doors[2])


def select_door(rng: Optional[random.Random] = None) -> int:
    """
    The contestant's uninformed first pick, uniform over DOORS.
    """
    return _source(rng).choice(DOORS)


def open_goat_door(game: Game, pick: int, rng: Optional[random.Random] = None) -> int:
    """
    The door the host reveals: never the prize, never the pick.

    If the pick holds the prize the host has two goats to choose from and
    opens one uniformly at random. Otherwise exactly one door is neither the
    pick nor the prize, and the host is forced to open it.
    """
    _check_door(pick, "pick")
    winner = prize_door(game)

    if pick == winner:
        return _source(rng).choice([d for d in DOORS if d != pick])

    # forced reveal
    return sum(DOORS) - pick - winner


def change_door(stay: bool, revealed: int, pick: int) -> int:
    """
    Final door under the stay (stay=True) or switch (stay=False) strategy.
    """
    _check_door(revealed, "revealed")
    _check_door(pick, "pick")
    if revealed == pick:
        raise ValueError(f"revealed door cannot be the pick ({pick})")

    if stay:
        return pick

    # the one door that is neither revealed nor picked
    return sum(DOORS) - revealed - pick


def determine_winner(final_pick: int, game: Game) -> Outcome:
    _check_door(final_pick, "final_pick")
    if game[final_pick - 1] is Prize.PRIZE:
        return Outcome.WIN
    return Outcome.LOSE


# ------------------------------------------------------------
# Round orchestration
# ------------------------------------------------------------

def play_game(rng: Optional[random.Random] = None, round_index: int = 0) -> RoundResult:
    """
    Play one full round and score both strategies against it.

    The game, the pick and the reveal are drawn once; only the final
    decision differs between the two returned records.
    """
    game = create_game(rng)
    pick = select_door(rng)
    revealed = open_goat_door(game, pick, rng)
    winner = prize_door(game)

    records = []
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        final = change_door(strategy is Strategy.STAY, revealed, pick)
        records.append(
            RoundRecord(
                strategy=strategy,
                outcome=determine_winner(final, game),
                round=round_index,
                pick=pick,
                revealed=revealed,
                final=final,
                prize_door=winner,
            )
        )

    return records[0], records[1]
