"""Turn-based grid game core: board, pluggable rule modules, turn orchestration."""

from .board import Board, Tile  # noqa: F401
from .engine import RuleModule, TurnOrchestrator  # noqa: F401
from .events import GameEvent  # noqa: F401
from .models import ChessPiece, Move, PieceKind, Position, Side  # noqa: F401
from .rulesets import ChessModule  # noqa: F401
