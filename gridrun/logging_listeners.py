from __future__ import annotations

import logging

from . import config
from .events import EventBus, MoveRecord
from .models.enums import MoveResult

move_logger = logging.getLogger("gridrun.moves")


def _fmt(ev: MoveRecord) -> str:
    m = ev.move
    kinds = ",".join(e.kind.value for e in ev.events) or "-"
    return (
        f"[{ev.game_id}] turn={ev.turn} side={ev.side.value} "
        f"({m.src.row},{m.src.col})->({m.dst.row},{m.dst.col}) "
        f"result={ev.result.value} events={kinds}"
    )


def _on_move_record(ev: MoveRecord) -> None:
    if ev.result == MoveResult.ERROR:
        move_logger.error("%s error=%s", _fmt(ev), ev.message)
    elif ev.result == MoveResult.UNCLAIMED:
        move_logger.debug("%s (%s)", _fmt(ev), ev.message)
    else:
        move_logger.info("%s", _fmt(ev))


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def register_listeners(bus: EventBus) -> None:
    bus.subscribe(MoveRecord, _on_move_record)
