from streams.services.games import BOARD_SIZE


def make_board(*cells):
    """Pad the given leading cells with empties up to a full strip."""
    return list(cells) + [None] * (BOARD_SIZE - len(cells))
