from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, cast

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    field_serializer,
    field_validator,
)

from .models.enums import EventKind, MoveResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models.enums import Side
    from .models.primitives import Move, Position


class Snapshot(BaseModel):
    """Read-only copy of a model's fields, taken when an event is emitted."""

    model_config = ConfigDict(frozen=True, extra="allow")


def _freeze(value: Any) -> Any:
    if isinstance(value, BaseModel):
        if value.model_config.get("frozen"):
            return value
        return Snapshot(**value.model_dump())
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any, mode: str) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode=mode)
    if isinstance(value, Mapping):
        return {k: _thaw(v, mode) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v, mode) for v in value]
    return value


class GameEvent(BaseModel):
    """Something that happened during a move. Never mutated after creation.

    The payload is stored read-only: nested mappings become mapping proxies,
    sequences become tuples and mutable models become ``Snapshot`` copies.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    payload: Mapping[str, Any] = Field(default_factory=dict)

    @field_validator("payload", mode="after")
    @classmethod
    def _freeze_payload(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(v)

    @field_serializer("payload")
    def _dump_payload(self, v: Mapping[str, Any], info: SerializationInfo) -> dict[str, Any]:
        return _thaw(v, info.mode)


def piece_captured(captured: Any, captured_by: Any, at: Position) -> GameEvent:
    return GameEvent(
        kind=EventKind.PIECE_CAPTURED,
        payload={"captured": captured, "captured_by": captured_by, "at": at},
    )


def piece_moved(piece: Any, src: Position, dst: Position) -> GameEvent:
    """Move event with payload keys ``piece``, ``src`` and ``dst``.

    ``src``/``dst`` stand for the usual ``from``/``to`` pair; ``from`` is a
    Python keyword.
    """
    return GameEvent(
        kind=EventKind.PIECE_MOVED,
        payload={"piece": piece, "src": src, "dst": dst},
    )


@dataclass
class MoveRecord:
    game_id: str
    turn: int
    side: Side
    move: Move
    result: MoveResult
    events: tuple[GameEvent, ...] = field(default_factory=tuple)
    message: str | None = None


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        lst.append(cast("object", handler))

    def emit(self, event: Any) -> None:
        et = type(event)
        for h in self._subs.get(et, []):
            # Let exceptions propagate; callers decide how to handle them
            cast("Callable[[Any], None]", h)(event)
