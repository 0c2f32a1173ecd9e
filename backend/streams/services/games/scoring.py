from typing import Dict, Iterator, List

from .board import Cell
from .runs import connects

# Points by run length; runs longer than the table use the last entry.
SCORE_TABLE = (0, 0, 1, 3, 5, 7, 9, 11, 15, 20, 25, 30, 35, 40, 50, 60, 70, 85, 100, 150, 300)


def runs(board: List[Cell]) -> Iterator[List[int]]:
    """Yield the cell indices of every run on the board, left to right."""
    links = connects(board)
    i = 0
    while i < len(board):
        if board[i] is None:
            i += 1
            continue
        run = [i]
        while i < len(links) and links[i]:
            i += 1
            run.append(i)
        yield run
        i += 1


def score(board: List[Cell]) -> int:
    """Total points for a normalized 20-slot board."""
    last = len(SCORE_TABLE) - 1
    return sum(SCORE_TABLE[min(len(run), last)] for run in runs(board))


def groups(board: List[Cell]) -> Dict[int, int]:
    """Map each cell in a run of two or more to its group id.

    Ids are handed out in discovery order and only serve to alternate colors
    on the board; single cells are left out.
    """
    group_map: Dict[int, int] = {}
    group_id = 0
    for run in runs(board):
        if len(run) < 2:
            continue
        for index in run:
            group_map[index] = group_id
        group_id += 1
    return group_map
