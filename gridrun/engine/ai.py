from __future__ import annotations

import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..board import Board
    from ..models.primitives import Move


def is_capture(board: Board, move: Move) -> bool:
    return board.get_occupant(move.dst) is not None


def choose_move(
    board: Board,
    moves: Sequence[Move],
    rng: random.Random | None = None,
) -> Move | None:
    """Pick one move: any capture if one exists, otherwise any move.

    Uniformly random within the preferred group. Pass a seeded ``rng`` for
    reproducible games.
    """
    if not moves:
        return None
    rng = rng or random.Random()
    captures = [m for m in moves if is_capture(board, m)]
    return rng.choice(captures or list(moves))
