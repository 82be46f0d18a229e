from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.enums import OccupantCategory, PieceKind, Side
from ...models.primitives import Move, Position
from .factory import forward, pawn_row

if TYPE_CHECKING:
    from ...board import Board
    from ...models.pieces import ChessPiece

DIRS_ROOK = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIRS_BISHOP = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
DIRS_QUEEN = DIRS_ROOK + DIRS_BISHOP
DIRS_KNIGHT = [(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)]
DIRS_KING = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

SLIDERS = {
    PieceKind.ROOK: DIRS_ROOK,
    PieceKind.BISHOP: DIRS_BISHOP,
    PieceKind.QUEEN: DIRS_QUEEN,
}


def is_chess_piece(occ) -> bool:
    return occ is not None and getattr(occ, "category", None) == OccupantCategory.CHESS_PIECE


def chess_piece_at(board: Board, pos: Position) -> ChessPiece | None:
    occ = board.get_occupant(pos)
    return occ if is_chess_piece(occ) else None


def _is_enemy(piece: ChessPiece, occ) -> bool:
    return occ is not None and occ.side != piece.side


def pawn_moves(board: Board, pos: Position, piece: ChessPiece) -> list[Position]:
    out: list[Position] = []
    d = forward(piece.side)
    one = pos.offset(d, 0)
    if board.in_bounds(one) and board.get_occupant(one) is None:
        out.append(one)
        two = pos.offset(2 * d, 0)
        if (
            not piece.has_moved
            and pos.row == pawn_row(board, piece.side)
            and board.in_bounds(two)
            and board.get_occupant(two) is None
        ):
            out.append(two)
    for dc in (-1, 1):
        diag = pos.offset(d, dc)
        if board.in_bounds(diag) and _is_enemy(piece, board.get_occupant(diag)):
            out.append(diag)
    return out


def sliding_moves(
    board: Board, pos: Position, piece: ChessPiece, dirs: list[tuple[int, int]]
) -> list[Position]:
    out: list[Position] = []
    for dr, dc in dirs:
        cur = pos.offset(dr, dc)
        while board.in_bounds(cur):
            occ = board.get_occupant(cur)
            if occ is None:
                out.append(cur)
            else:
                if _is_enemy(piece, occ):
                    out.append(cur)
                break
            cur = cur.offset(dr, dc)
    return out


def step_moves(
    board: Board, pos: Position, piece: ChessPiece, offsets: list[tuple[int, int]]
) -> list[Position]:
    out: list[Position] = []
    for dr, dc in offsets:
        dst = pos.offset(dr, dc)
        if not board.in_bounds(dst):
            continue
        occ = board.get_occupant(dst)
        if occ is None or occ.side != piece.side:
            out.append(dst)
    return out


def valid_moves(board: Board, pos: Position) -> list[Position]:
    piece = chess_piece_at(board, pos)
    if piece is None:
        return []
    kind = piece.piece_kind
    if kind == PieceKind.PAWN:
        return pawn_moves(board, pos, piece)
    if kind in SLIDERS:
        return sliding_moves(board, pos, piece, SLIDERS[kind])
    if kind == PieceKind.KNIGHT:
        return step_moves(board, pos, piece, DIRS_KNIGHT)
    if kind == PieceKind.KING:
        return step_moves(board, pos, piece, DIRS_KING)
    return []


def all_moves_for_side(board: Board, side: Side) -> list[Move]:
    moves: list[Move] = []
    for _, src in board.find_occupants(lambda o, _p: is_chess_piece(o) and o.side == side):
        moves.extend(Move(src=src, dst=dst) for dst in valid_moves(board, src))
    return moves


def winner(board: Board) -> Side | None:
    kings = board.find_occupants(
        lambda o, _p: is_chess_piece(o) and o.piece_kind == PieceKind.KING
    )
    sides = {k.occupant.side for k in kings}
    if Side.WHITE not in sides:
        return Side.BLACK
    if Side.BLACK not in sides:
        return Side.WHITE
    return None
