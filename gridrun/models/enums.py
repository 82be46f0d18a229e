from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    WHITE = "white"
    BLACK = "black"


def opposite(side: Side) -> Side:
    return Side.BLACK if side == Side.WHITE else Side.WHITE


class TileCategory(str, Enum):
    NORMAL = "normal"
    MINE = "mine"
    SLOT = "slot"
    WATER = "water"
    BLOCK = "block"


class OccupantCategory(str, Enum):
    CHESS_PIECE = "chess_piece"


class PieceKind(str, Enum):
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"


class EventKind(str, Enum):
    PIECE_MOVED = "piece_moved"
    PIECE_CAPTURED = "piece_captured"


class MoveResult(str, Enum):
    APPLIED = "applied"
    UNCLAIMED = "unclaimed"
    ERROR = "error"


class NodeStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    ACTIVE = "active"
    COMPLETED = "completed"


class NodeType(str, Enum):
    COMBAT = "combat"
    ELITE = "elite"
    BOSS = "boss"
    REWARD = "reward"
    REST = "rest"
    SHOP = "shop"
    MYSTERY = "mystery"
    GAMBLE = "gamble"
