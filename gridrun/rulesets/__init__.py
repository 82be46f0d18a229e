"""Rule modules that plug into a TurnOrchestrator."""

from .chess import ChessModule  # noqa: F401
