from typing import List, Optional, Tuple

from .board import Cell, is_joker, is_number, validate_board


def _link(pos: int, step: int) -> int:
    """Index into the connects vector for the pair (pos, pos + step)."""
    return pos if step > 0 else pos - 1


def _descends(board: List[Cell], pos: int, step: int) -> bool:
    left, right = (pos, pos + step) if step > 0 else (pos + step, pos)
    return is_number(board[left]) and is_number(board[right]) and board[left] > board[right]


def _scan(board: List[Cell], links: List[bool], start: int, step: int) -> Tuple[Optional[int], int]:
    """Walk away from the joker at ``start`` in direction ``step``.

    Returns the position of the nearest numeric cell (``None`` if an empty
    cell or the edge comes first) and the length of the run the joker would
    join on that side, counting the joker itself.
    """
    nearest = None
    pos = start
    while 0 <= pos + step < len(board) and board[pos + step] is not None:
        if nearest is None and is_number(board[pos + step]):
            nearest = pos + step
        pos += step

    length = 1
    pos = start
    while 0 <= pos + step < len(board) and board[pos + step] is not None:
        if not links[_link(pos, step)]:
            if _descends(board, pos, step):
                # the cell past a genuine descent still counts toward the side
                length += 1
            break
        length += 1
        pos += step
    return nearest, length


def connects(board: List[Cell]) -> List[bool]:
    """Decide for each adjacent pair of cells whether they share a run.

    Entry ``i`` is True when cell ``i`` and cell ``i + 1`` belong to the same
    ascending run. Numbers connect when non-decreasing; a joker connects to
    both neighbours unless the numbers around it descend, in which case it
    is cut away from the shorter side.
    """
    validate_board(board)
    links = []
    for i in range(len(board) - 1):
        current, following = board[i], board[i + 1]
        if current is None or following is None:
            links.append(False)
        elif is_joker(current) or is_joker(following):
            links.append(True)
        else:
            links.append(current <= following)

    # Jokers resolve in index order; later ones see earlier cuts.
    for i, cell in enumerate(board):
        if not is_joker(cell):
            continue
        before_pos, left_length = _scan(board, links, i, -1)
        after_pos, right_length = _scan(board, links, i, 1)
        if before_pos is None or after_pos is None:
            continue
        if board[before_pos] < board[after_pos]:
            continue
        if left_length >= right_length:
            links[i] = False
        else:
            links[i - 1] = False
    return links
