from __future__ import annotations

import pytest

from gridrun.board import Board
from gridrun.engine import TurnOrchestrator
from gridrun.events import MoveRecord
from gridrun.rulesets import ChessModule


@pytest.fixture()
def board() -> Board:
    return Board(8, 8)


@pytest.fixture()
def chess() -> ChessModule:
    return ChessModule()


@pytest.fixture()
def chess_board(board: Board, chess: ChessModule) -> Board:
    chess.on_register(board)
    return board


@pytest.fixture()
def game() -> TurnOrchestrator:
    orch = TurnOrchestrator(Board(8, 8), game_id="test")
    orch.register_module(ChessModule())
    return orch


@pytest.fixture()
def records(game: TurnOrchestrator) -> list[MoveRecord]:
    seen: list[MoveRecord] = []
    game.bus.subscribe(MoveRecord, seen.append)
    return seen
