from __future__ import annotations

from gridrun.board import Board
from gridrun.models import ChessPiece, PieceKind, Position, Side


def P(row: int, col: int) -> Position:
    return Position(row=row, col=col)


def clear(board: Board) -> None:
    for _, pos in board.find_occupants(lambda o, p: True):
        board.remove_occupant(pos)


def put(board: Board, row: int, col: int, kind: PieceKind, side: Side, pid: str | None = None) -> ChessPiece:
    piece = ChessPiece(id=pid or f"t_{kind.value}_{side.value}_{row}{col}", side=side, piece_kind=kind)
    board.set_occupant(P(row, col), piece)
    return piece


def ids_on(board: Board) -> set[str]:
    return {o.id for o, _ in board.find_occupants(lambda o, p: True)}
