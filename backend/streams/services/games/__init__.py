"""Game domain services: board normalization, run scoring and standings.

This package contains pure domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""

from .board import BOARD_SIZE, JOKER, BoardContractError, is_board_full, restore_board, validate_board
from .runs import connects
from .scoring import SCORE_TABLE, groups, runs, score
from .standings import final_ranking, is_game_over

__all__ = [
    'BOARD_SIZE',
    'JOKER',
    'SCORE_TABLE',
    'BoardContractError',
    'connects',
    'final_ranking',
    'groups',
    'is_board_full',
    'is_game_over',
    'restore_board',
    'runs',
    'score',
    'validate_board',
]
