from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...events import GameEvent, piece_captured, piece_moved
from . import rules
from .factory import PieceIds, place_initial_pieces

if TYPE_CHECKING:
    from ...board import Board
    from ...models.enums import Side
    from ...models.primitives import Move, Position

logger = logging.getLogger(__name__)


class ChessModule:
    """Chess pieces: placement, movement, capture, and king-capture victory.

    There is no check, castling, en passant or promotion. A side loses the
    moment its king leaves the board.
    """

    def __init__(self, id: str = "chess") -> None:
        self.id = id
        self._ids = PieceIds(prefix=id)

    def on_register(self, board: Board) -> None:
        placed = place_initial_pieces(board, self._ids)
        logger.debug("%s placed %d pieces on %dx%d board", self.id, len(placed), board.rows, board.cols)

    def get_valid_moves(self, board: Board, pos: Position) -> list[Position]:
        return rules.valid_moves(board, pos)

    def on_move(self, board: Board, move: Move) -> list[GameEvent]:
        piece = rules.chess_piece_at(board, move.src)
        if piece is None:
            return []
        if move.dst not in rules.valid_moves(board, move.src):
            return []

        events: list[GameEvent] = []
        target = board.get_occupant(move.dst)
        if target is not None:
            events.append(piece_captured(target, piece, move.dst))
        board.move_occupant(move.src, move.dst)
        piece.has_moved = True
        events.append(piece_moved(piece, move.src, move.dst))
        return events

    def check_win_condition(self, board: Board) -> Side | None:
        return rules.winner(board)

    def get_all_moves_for_side(self, board: Board, side: Side) -> list[Move]:
        return rules.all_moves_for_side(board, side)
