from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..models.enums import TileCategory


class Tile(BaseModel):
    """A single cell. ``annotations`` is free-form space for rule modules."""

    category: str = TileCategory.NORMAL
    occupant: Any | None = None
    revealed: bool = True
    annotations: dict[str, Any] = Field(default_factory=dict)

    def is_occupied(self) -> bool:
        return self.occupant is not None

    def is_passable(self) -> bool:
        return self.category not in (TileCategory.WATER, TileCategory.BLOCK)

    def clone(self) -> Tile:
        return self.model_copy(deep=True)
