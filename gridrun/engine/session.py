from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from .. import config
from ..board import Board
from ..logging_listeners import register_listeners
from ..models.enums import Side
from ..rulesets.chess import ChessModule
from .orchestrator import TurnOrchestrator


@dataclass
class GameSession:
    """One game instance: its own board, orchestrator and bus."""

    orchestrator: TurnOrchestrator
    player_side: Side = Side.WHITE
    opponent: bool = False
    run_id: str | None = None
    node_id: str | None = None
    rng: random.Random = field(default_factory=random.Random)
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def id(self) -> str:
        return self.orchestrator.game_id

    @property
    def board(self) -> Board:
        return self.orchestrator.board


def new_chess_session(
    rows: int = config.BOARD_ROWS,
    cols: int = config.BOARD_COLS,
    *,
    player_side: Side = Side.WHITE,
    opponent: bool = False,
    run_id: str | None = None,
    node_id: str | None = None,
    seed: int | None = None,
) -> GameSession:
    orch = TurnOrchestrator(Board(rows, cols), game_id=uuid4().hex)
    register_listeners(orch.bus)
    orch.register_module(ChessModule())
    return GameSession(
        orchestrator=orch,
        player_side=player_side,
        opponent=opponent,
        run_id=run_id,
        node_id=node_id,
        rng=random.Random(seed),
    )
