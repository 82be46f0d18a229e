from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..board import Board


class RuleModule(Protocol):
    """A pluggable game mechanic registered with a TurnOrchestrator.

    Only ``id`` and ``on_register`` are required. A module may additionally
    define any of the optional hooks below; a hook that is not defined is
    treated as a no-op by the orchestrator.

    - ``on_turn_start(side) -> None``
    - ``get_valid_moves(board, pos) -> list[Position]``: pure query; empty when
      the module does not govern the occupant at ``pos``.
    - ``on_move(board, move) -> list[GameEvent]``: must return ``[]`` and leave
      the board untouched when the module does not govern ``move.src``.
    - ``on_turn_end(side) -> None``
    - ``check_win_condition(board) -> Side | None``
    - ``get_all_moves_for_side(board, side) -> list[Move]``

    Modules never reference each other. They share the board, and each one
    checks that an occupant belongs to it before acting.
    """

    id: str

    def on_register(self, board: Board) -> None: ...


OPTIONAL_HOOKS = (
    "on_turn_start",
    "get_valid_moves",
    "on_move",
    "on_turn_end",
    "check_win_condition",
    "get_all_moves_for_side",
)


def hook(module: RuleModule, name: str) -> Any:
    """Return the bound hook ``name`` if the module defines it, else None."""
    fn = getattr(module, name, None)
    return fn if callable(fn) else None
