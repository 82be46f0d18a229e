from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from .enums import OccupantCategory, PieceKind, Side


class ChessPiece(BaseModel):
    category: Literal[OccupantCategory.CHESS_PIECE] = OccupantCategory.CHESS_PIECE
    id: str
    side: Side
    piece_kind: PieceKind
    has_moved: bool = False
