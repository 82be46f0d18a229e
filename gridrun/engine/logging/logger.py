from __future__ import annotations

from typing import TYPE_CHECKING

from ...events import MoveRecord
from ...models.enums import MoveResult

if TYPE_CHECKING:
    from ...events import EventBus, GameEvent
    from ...models.enums import Side
    from ...models.primitives import Move


def log_move(
    bus: EventBus,
    game_id: str,
    turn: int,
    side: Side,
    move: Move,
    result: MoveResult,
    events: list[GameEvent] | None = None,
    message: str | None = None,
) -> None:
    bus.emit(
        MoveRecord(
            game_id=game_id,
            turn=turn,
            side=side,
            move=move,
            result=result,
            events=tuple(events or ()),
            message=message,
        )
    )


def log_unclaimed(bus: EventBus, game_id: str, turn: int, side: Side, move: Move) -> None:
    log_move(bus, game_id, turn, side, move, MoveResult.UNCLAIMED, message="no module governs this move")


def log_error(
    bus: EventBus,
    game_id: str,
    turn: int,
    side: Side,
    move: Move,
    error: Exception,
    events: list[GameEvent] | None = None,
) -> None:
    log_move(bus, game_id, turn, side, move, MoveResult.ERROR, events, message=str(error))
