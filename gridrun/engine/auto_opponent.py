from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .ai import choose_move

if TYPE_CHECKING:
    import random

    from ..models.enums import Side
    from ..models.primitives import Move
    from .orchestrator import TurnOrchestrator

logger = logging.getLogger(__name__)


def opponent_autoplay(
    orch: TurnOrchestrator, side: Side, rng: random.Random | None = None
) -> Move | None:
    """Play one full turn for ``side`` if it is that side's turn.

    Contract:
    - Inputs: orchestrator, the side the computer plays, optional random source.
    - Behavior: no-op once a winner exists or when it is not ``side``'s turn;
      otherwise start_turn, one chosen move, end_turn.
    - Output: the executed move, or None when nothing was played.
    """
    if orch.current_side != side or orch.check_win_condition() is not None:
        return None
    orch.start_turn()
    move = choose_move(orch.board, orch.get_all_moves_for_side(side), rng)
    if move is None:
        logger.info("[%s] %s has no moves", orch.game_id, side.value)
        orch.end_turn()
        return None
    orch.execute_move(move)
    orch.end_turn()
    return move
