from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, Field, model_validator

from ..models.primitives import Position
from .tile import Tile

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..models.primitives import IOccupant


class OccupantAt(NamedTuple):
    occupant: Any
    pos: Position


class TileAt(NamedTuple):
    tile: Tile
    pos: Position


class Board(BaseModel):
    """Fixed-size grid of tiles. Knows nothing about any game's rules.

    Out-of-bounds access never raises: readers get ``None``, writers are no-ops.
    """

    rows: int = Field(gt=0, frozen=True)
    cols: int = Field(gt=0, frozen=True)
    tiles: list[list[Tile]] = Field(default_factory=list)  # tiles[row][col]

    def __init__(self, rows: int, cols: int, **data: Any):
        super().__init__(rows=rows, cols=cols, **data)

    @model_validator(mode="after")
    def _fill(self) -> Board:
        if not self.tiles:
            self.tiles = [[Tile() for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.tiles) != self.rows or any(len(r) != self.cols for r in self.tiles):
            raise ValueError(f"tiles do not match a {self.rows}x{self.cols} board")
        return self

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def get_tile(self, pos: Position) -> Tile | None:
        if not self.in_bounds(pos):
            return None
        return self.tiles[pos.row][pos.col]

    def set_category(self, pos: Position, category: str) -> None:
        tile = self.get_tile(pos)
        if tile is not None:
            tile.category = category

    # ----- occupants -----

    def get_occupant(self, pos: Position) -> IOccupant | None:
        tile = self.get_tile(pos)
        return tile.occupant if tile else None

    def set_occupant(self, pos: Position, occupant: IOccupant | None) -> bool:
        tile = self.get_tile(pos)
        if tile is None:
            return False
        tile.occupant = occupant
        return True

    def remove_occupant(self, pos: Position) -> IOccupant | None:
        tile = self.get_tile(pos)
        if tile is None:
            return None
        removed, tile.occupant = tile.occupant, None
        return removed

    def move_occupant(self, src: Position, dst: Position) -> IOccupant | None:
        """Relocate the occupant at ``src`` to ``dst``.

        Returns whatever stood on ``dst`` before (the captured occupant), or
        ``None``. Nothing changes if ``src`` is empty or either square is off
        the board.
        """
        src_tile = self.get_tile(src)
        dst_tile = self.get_tile(dst)
        if src_tile is None or dst_tile is None or src_tile.occupant is None:
            return None
        if src_tile is dst_tile:
            return None
        captured = dst_tile.occupant
        dst_tile.occupant, src_tile.occupant = src_tile.occupant, None
        return captured

    # ----- scans -----

    def find_occupants(
        self, predicate: Callable[[Any, Position], bool]
    ) -> list[OccupantAt]:
        out: list[OccupantAt] = []
        for r, row in enumerate(self.tiles):
            for c, tile in enumerate(row):
                if tile.occupant is None:
                    continue
                pos = Position(row=r, col=c)
                if predicate(tile.occupant, pos):
                    out.append(OccupantAt(tile.occupant, pos))
        return out

    def find_tiles(self, predicate: Callable[[Tile, Position], bool]) -> list[TileAt]:
        out: list[TileAt] = []
        for r, row in enumerate(self.tiles):
            for c, tile in enumerate(row):
                pos = Position(row=r, col=c)
                if predicate(tile, pos):
                    out.append(TileAt(tile, pos))
        return out

    def clone(self) -> Board:
        return self.model_copy(deep=True)
