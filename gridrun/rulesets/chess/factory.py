from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING

from ...models.enums import PieceKind, Side
from ...models.pieces import ChessPiece
from ...models.primitives import Position

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ...board import Board

BACK_RANK = [
    PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
    PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
]
MIN_ROWS = 4


def back_row(board: Board, side: Side) -> int:
    return board.rows - 1 if side == Side.WHITE else 0


def pawn_row(board: Board, side: Side) -> int:
    return board.rows - 2 if side == Side.WHITE else 1


def forward(side: Side) -> int:
    """Row delta of a pawn step: White starts at the bottom and moves up."""
    return -1 if side == Side.WHITE else 1


class PieceIds:
    """Hands out ``chess_<n>`` ids, unique for one module instance."""

    def __init__(self, prefix: str = "chess") -> None:
        self._prefix = prefix
        self._n: Iterator[int] = count()

    def next(self) -> str:
        return f"{self._prefix}_{next(self._n)}"


def place_initial_pieces(board: Board, ids: PieceIds) -> list[ChessPiece]:
    """Set up the standard starting array; Black first, then White."""
    if board.cols < len(BACK_RANK) or board.rows < MIN_ROWS:
        raise ValueError(
            f"chess needs at least {MIN_ROWS}x{len(BACK_RANK)} tiles, "
            f"board is {board.rows}x{board.cols}"
        )
    placed: list[ChessPiece] = []
    for side in (Side.BLACK, Side.WHITE):
        for col, kind in enumerate(BACK_RANK):
            for row, k in ((back_row(board, side), kind), (pawn_row(board, side), PieceKind.PAWN)):
                piece = ChessPiece(id=ids.next(), side=side, piece_kind=k)
                board.set_occupant(Position(row=row, col=col), piece)
                placed.append(piece)
    return placed
