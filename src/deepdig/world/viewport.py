from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, List

from .cell import Cell
from .grid import GridWorld

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportDelta:
    """Cell ids that scrolled into view, out of view, or stayed visible."""

    entered: FrozenSet[int]
    left: FrozenSet[int]
    kept: FrozenSet[int]


class Viewport:
    """A fixed-size window the renderer scrolls over a GridWorld."""

    def __init__(self, world: GridWorld, width: int, height: int, col: int = 0, row: int = 0) -> None:
        self._world = world
        self._width = width
        self._height = height
        # validates the initial window
        world.query(col, row, width, height)
        self._col = col
        self._row = row

    @property
    def world(self) -> GridWorld:
        return self._world

    @property
    def col(self) -> int:
        return self._col

    @property
    def row(self) -> int:
        return self._row

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def cells(self) -> List[List[Cell]]:
        return self._world.query(self._col, self._row, self._width, self._height)

    def visible_ids(self) -> FrozenSet[int]:
        return frozenset(cell.id for column in self.cells() for cell in column)

    def move_to(self, col: int, row: int) -> ViewportDelta:
        """Move the window origin; raises ViewportOutOfBoundsError if it would not fit."""
        before = self.visible_ids()
        window = self._world.query(col, row, self._width, self._height)
        self._col, self._row = col, row
        after = frozenset(cell.id for column in window for cell in column)
        delta = ViewportDelta(entered=after - before, left=before - after, kept=before & after)
        logger.debug(
            "Viewport -> (%d, %d): %d entered, %d left", col, row, len(delta.entered), len(delta.left)
        )
        return delta

    def scroll(self, dcol: int, drow: int) -> ViewportDelta:
        return self.move_to(self._col + dcol, self._row + drow)

    @classmethod
    def from_config(cls, world: GridWorld, config: "GameConfig") -> "Viewport":
        return cls(world, config.world.view_width, config.world.view_height)
