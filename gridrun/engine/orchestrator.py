from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import uuid4

from ..events import EventBus
from ..models.enums import MoveResult, Side, opposite
from .logging.logger import log_error, log_move, log_unclaimed
from .module import OPTIONAL_HOOKS, hook

if TYPE_CHECKING:
    from ..board import Board
    from ..events import GameEvent
    from ..models.primitives import Move, Position
    from .module import RuleModule

logger = logging.getLogger(__name__)


class TurnOrchestrator:
    """Sequences turns and fans every call out to the registered modules.

    Modules are invoked in registration order. The orchestrator does not judge
    move legality: a move no module governs simply produces no events.
    """

    def __init__(
        self,
        board: Board,
        *,
        game_id: str | None = None,
        bus: EventBus | None = None,
    ):
        self.board = board
        self.game_id = game_id or uuid4().hex
        self.bus = bus or EventBus()
        self.current_side: Side = Side.WHITE
        self.turn = 1
        self._modules: list[RuleModule] = []
        self._log: list[GameEvent] = []

    @property
    def modules(self) -> tuple[RuleModule, ...]:
        return tuple(self._modules)

    def register_module(self, module: RuleModule) -> None:
        self._modules.append(module)
        module.on_register(self.board)
        logger.debug(
            "[%s] registered module %s (hooks: %s)",
            self.game_id,
            module.id,
            ", ".join(n for n in OPTIONAL_HOOKS if hook(module, n)) or "none",
        )

    # ----- turn lifecycle -----

    def start_turn(self) -> None:
        for m in self._modules:
            fn = hook(m, "on_turn_start")
            if fn:
                fn(self.current_side)

    def execute_move(self, move: Move) -> list[GameEvent]:
        produced: list[GameEvent] = []
        for m in self._modules:
            fn = hook(m, "on_move")
            if not fn:
                continue
            try:
                events = fn(self.board, move)
            except Exception as e:
                log_error(self.bus, self.game_id, self.turn, self.current_side, move, e, produced)
                raise
            # the log tracks the board even if a later module raises
            produced.extend(events)
            self._log.extend(events)
        if produced:
            log_move(
                self.bus, self.game_id, self.turn, self.current_side, move,
                MoveResult.APPLIED, produced,
            )
        else:
            log_unclaimed(self.bus, self.game_id, self.turn, self.current_side, move)
        return produced

    def end_turn(self) -> None:
        for m in self._modules:
            fn = hook(m, "on_turn_end")
            if fn:
                fn(self.current_side)
        self.current_side = opposite(self.current_side)
        if self.current_side == Side.WHITE:
            self.turn += 1

    # ----- queries -----

    def get_valid_moves(self, pos: Position) -> list[Position]:
        out: list[Position] = []
        claimants: list[str] = []
        for m in self._modules:
            fn = hook(m, "get_valid_moves")
            if not fn:
                continue
            moves = fn(self.board, pos)
            if moves:
                claimants.append(m.id)
            out.extend(moves)
        if len(claimants) > 1:
            logger.warning(
                "[%s] modules %s all claim the occupant at (%d,%d)",
                self.game_id, ", ".join(claimants), pos.row, pos.col,
            )
        return out

    def get_all_moves_for_side(self, side: Side) -> list[Move]:
        out: list[Move] = []
        for m in self._modules:
            fn = hook(m, "get_all_moves_for_side")
            if fn:
                out.extend(fn(self.board, side))
        return out

    def check_win_condition(self) -> Side | None:
        for m in self._modules:
            fn = hook(m, "check_win_condition")
            if not fn:
                continue
            winner = fn(self.board)
            if winner is not None:
                return winner
        return None

    def get_event_log(self) -> tuple[GameEvent, ...]:
        return tuple(self._log)
