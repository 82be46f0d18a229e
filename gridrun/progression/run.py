from __future__ import annotations

import threading
from uuid import uuid4

from pydantic import BaseModel, Field, PrivateAttr

from .. import config
from ..models.enums import Side
from .nodes import NodeMap


class RunState(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    node_map: NodeMap
    current_node_id: str | None = None
    gold: int = 0
    nodes_completed: int = 0
    gold_per_node: int = config.GOLD_PER_NODE

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    @property
    def lock(self) -> threading.Lock:
        """Serializes changes to this run across requests."""
        return self._lock

    @classmethod
    def new_run(cls) -> RunState:
        return cls(node_map=NodeMap.generate_region1())

    def enter_node(self, node_id: str) -> bool:
        if not self.node_map.enter_node(node_id):
            return False
        self.current_node_id = node_id
        return True

    def complete_current_node(self) -> bool:
        if not self.current_node_id:
            return False
        self.node_map.complete_node(self.current_node_id)
        self.nodes_completed += 1
        self.gold += self.gold_per_node
        self.current_node_id = None
        return True

    def abandon_current_node(self) -> bool:
        if not self.current_node_id:
            return False
        self.node_map.abandon_node(self.current_node_id)
        self.current_node_id = None
        return True

    def resolve_encounter(self, winner: Side | None, player_side: Side) -> bool:
        """Feed a game's win signal into the run.

        The player's win completes the current node, a loss sends it back to
        Available. Returns True when the run changed.
        """
        if winner is None:
            return False
        if winner == player_side:
            return self.complete_current_node()
        return self.abandon_current_node()

    def is_run_complete(self) -> bool:
        return self.node_map.is_boss_defeated()
