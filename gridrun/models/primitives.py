from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """Board coordinate (0-based, row-major)."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> Position:
        return Position(row=self.row + dr, col=self.col + dc)


class Move(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: Position
    dst: Position


class IOccupant(Protocol):
    """Anything that can stand on a tile.

    ``category`` names the entity family and is what rule modules switch on
    before touching an occupant; ``id`` is unique within one game.
    """

    category: str
    side: str
    id: str
