import re
from typing import Any, List, Optional, Union

BOARD_SIZE = 20
JOKER = '★'

_INDEX_KEY = re.compile(r'\s*([+-]?\d+)')

Cell = Optional[Union[int, str]]


class BoardContractError(ValueError):
    """Raised when a board handed to the scoring core is malformed."""


def restore_board(raw: Any) -> List[Cell]:
    """Rebuild a dense 20-slot board from what the storage layer returned.

    Sparse arrays come back either as lists padded with nulls or as objects
    keyed by index (``{"2": 5, "10": 15}``). Missing slots become ``None`` and
    indices outside the strip are dropped.
    """
    board: List[Cell] = [None] * BOARD_SIZE
    if isinstance(raw, (list, tuple)):
        for index, value in enumerate(raw[:BOARD_SIZE]):
            if value is not None:
                board[index] = value
        return board
    if isinstance(raw, dict):
        for key, value in raw.items():
            # leading integer of the key, so "2.5" lands on slot 2
            match = _INDEX_KEY.match(str(key))
            if not match:
                continue
            index = int(match.group(1))
            if 0 <= index < BOARD_SIZE and value is not None:
                board[index] = value
        return board
    return board


def is_joker(cell: Cell) -> bool:
    return cell == JOKER


def is_number(cell: Cell) -> bool:
    return isinstance(cell, int) and not isinstance(cell, bool)


def validate_board(board: Any) -> None:
    if not isinstance(board, (list, tuple)):
        raise BoardContractError(f'board must be a list of {BOARD_SIZE} slots, got {type(board).__name__}')
    if len(board) != BOARD_SIZE:
        raise BoardContractError(f'board must have exactly {BOARD_SIZE} slots, got {len(board)}')
    for index, cell in enumerate(board):
        if cell is None or is_joker(cell) or is_number(cell):
            continue
        raise BoardContractError(f'invalid value {cell!r} at slot {index}')


def is_board_full(board: List[Cell]) -> bool:
    return all(cell is not None for cell in board)
