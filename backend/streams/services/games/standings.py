from typing import Any, Dict, Iterable, List

from .board import is_board_full, restore_board
from .scoring import score

DEFAULT_TOTAL_ROUNDS = 20


def _players(team: Dict[str, Any]) -> list:
    players = team.get('players')
    return players if isinstance(players, list) else []


def final_ranking(teams: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Rank teams that have players by board score, highest first.

    Ties keep the order the teams were given in.
    """
    entries = []
    for team in teams:
        players = _players(team)
        if not players:
            continue
        entries.append({
            'team_number': team.get('team_number'),
            'score': score(restore_board(team.get('board'))),
            'players': players,
        })
    entries.sort(key=lambda e: e['score'], reverse=True)
    return [dict(rank=rank, **entry) for rank, entry in enumerate(entries, start=1)]


def is_game_over(current_round: int, boards: Iterable[Any], total_rounds: int = DEFAULT_TOTAL_ROUNDS) -> bool:
    """The game ends after the last round or once every active board is full."""
    if current_round >= total_rounds:
        return True
    return all(is_board_full(restore_board(raw)) for raw in boards)
