from .board import Board, OccupantAt, TileAt  # noqa: F401
from .tile import Tile  # noqa: F401
