from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..events import GameEvent
from .enums import Side
from .primitives import Move, Position

# ----- Sessions -----


class CreateSessionRequest(BaseModel):
    rows: int = Field(8, ge=4, le=26)
    cols: int = Field(8, ge=8, le=26)
    player_side: Side = Side.WHITE
    opponent: bool = False
    seed: int | None = None


class TileView(BaseModel):
    category: str
    revealed: bool
    occupant: dict[str, Any] | None = None


class SessionView(BaseModel):
    id: str
    rows: int
    cols: int
    current_side: Side
    turn: int
    winner: Side | None = None
    player_side: Side
    opponent: bool
    run_id: str | None = None
    node_id: str | None = None
    board: list[list[TileView]]


class ValidMovesResponse(BaseModel):
    src: Position
    destinations: list[Position]


class MoveRequest(BaseModel):
    move: Move


class MoveResponse(BaseModel):
    events: list[GameEvent]
    opponent_move: Move | None = None
    session: SessionView


class EventLogResponse(BaseModel):
    events: list[GameEvent]
