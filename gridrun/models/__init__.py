from .enums import (  # noqa: F401
    EventKind,
    MoveResult,
    NodeStatus,
    NodeType,
    OccupantCategory,
    PieceKind,
    Side,
    TileCategory,
    opposite,
)
from .pieces import ChessPiece  # noqa: F401
from .primitives import IOccupant, Move, Position  # noqa: F401
