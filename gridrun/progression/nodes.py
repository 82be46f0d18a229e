from __future__ import annotations

from pydantic import BaseModel, Field

from ..models.enums import NodeStatus, NodeType


class MapNode(BaseModel):
    id: str
    type: NodeType
    status: NodeStatus = NodeStatus.LOCKED
    label: str
    # normalised 0-1 screen position, mapped to pixels by whoever draws the map
    x: float = 0.5
    y: float = 0.5
    connections: list[str] = Field(default_factory=list)


class NodeMap(BaseModel):
    """Encounter graph for one region."""

    region_name: str
    nodes: list[MapNode]

    def get_node(self, node_id: str) -> MapNode | None:
        return next((n for n in self.nodes if n.id == node_id), None)

    def get_available_nodes(self) -> list[MapNode]:
        return [n for n in self.nodes if n.status == NodeStatus.AVAILABLE]

    def get_completed_nodes(self) -> list[MapNode]:
        return [n for n in self.nodes if n.status == NodeStatus.COMPLETED]

    def enter_node(self, node_id: str) -> bool:
        node = self.get_node(node_id)
        if not node or node.status != NodeStatus.AVAILABLE:
            return False
        node.status = NodeStatus.ACTIVE
        return True

    def abandon_node(self, node_id: str) -> bool:
        node = self.get_node(node_id)
        if not node or node.status != NodeStatus.ACTIVE:
            return False
        node.status = NodeStatus.AVAILABLE
        return True

    def complete_node(self, node_id: str) -> bool:
        """Mark ``node_id`` completed and unlock its direct successors."""
        node = self.get_node(node_id)
        if not node:
            return False
        node.status = NodeStatus.COMPLETED
        for conn_id in node.connections:
            nxt = self.get_node(conn_id)
            if nxt and nxt.status == NodeStatus.LOCKED:
                nxt.status = NodeStatus.AVAILABLE
        return True

    def is_region_complete(self) -> bool:
        return all(n.status == NodeStatus.COMPLETED for n in self.nodes)

    def is_boss_defeated(self) -> bool:
        return any(
            n.type == NodeType.BOSS and n.status == NodeStatus.COMPLETED for n in self.nodes
        )

    @classmethod
    def generate_region1(cls) -> NodeMap:
        """Five linear nodes: three battles, an elite, then the boss."""
        layout = [
            (NodeType.COMBAT, "Battle I"),
            (NodeType.COMBAT, "Battle II"),
            (NodeType.COMBAT, "Battle III"),
            (NodeType.ELITE, "Elite"),
            (NodeType.BOSS, "Grandmaster"),
        ]
        nodes: list[MapNode] = []
        for i, (kind, label) in enumerate(layout):
            nxt = [f"r1_n{i + 2}"] if i + 1 < len(layout) else []
            nodes.append(
                MapNode(
                    id=f"r1_n{i + 1}",
                    type=kind,
                    status=NodeStatus.AVAILABLE if i == 0 else NodeStatus.LOCKED,
                    label=label,
                    x=0.5,
                    y=round(0.85 - 0.18 * i, 2),
                    connections=nxt,
                )
            )
        return cls(region_name="The Chess Kingdom", nodes=nodes)
