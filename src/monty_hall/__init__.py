from .game import (
    DOORS,
    Game,
    Outcome,
    Prize,
    RoundRecord,
    RoundResult,
    Strategy,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    play_game,
    prize_door,
    select_door,
)

__all__ = [
    "DOORS",
    "Game",
    "Outcome",
    "Prize",
    "RoundRecord",
    "RoundResult",
    "Strategy",
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "prize_door",
    "select_door",
]
