from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence

from ..exceptions import GridIndexError, ViewportOutOfBoundsError
from .blocks import BlockCatalog, BlockKind, default_block_catalog
from .cell import Cell

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import GameConfig

logger = logging.getLogger(__name__)


class GridWorld:
    """A fixed-size grid of layered cells.

    Cells are stored ``[row][col]`` and built once from a layout table of block
    codes; code 0 is open air, any other code is a single block of that id.
    Ids are handed out in row-major order and stay with their cell for the
    lifetime of the world.
    Initial passability comes from the block catalog entry of each code.

    Viewport queries come back column-major (``[col][row]``), which is the order
    the renderer walks the screen in.
    """

    __slots__ = ("_w", "_h", "_cells", "_blocks")

    def __init__(self, layout: Sequence[Sequence[int]], blocks: Optional[BlockCatalog] = None) -> None:
        if not layout or not layout[0]:
            raise ValueError("layout must have at least one row and one column")
        width = len(layout[0])
        for i, row in enumerate(layout):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")

        self._blocks = blocks if blocks is not None else default_block_catalog()
        self._w = width
        self._h = len(layout)
        self._cells: List[List[Cell]] = []
        next_id = 0
        for row in layout:
            cells_row: List[Cell] = []
            for code in row:
                stack = [] if code == BlockKind.AIR else [code]
                cells_row.append(Cell(next_id, stack, self._blocks))
                next_id += 1
            self._cells.append(cells_row)
        logger.debug("Initialized GridWorld %dx%d (%d cells)", self._w, self._h, next_id)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def blocks(self) -> BlockCatalog:
        return self._blocks

    def is_within(self, row: int, col: int) -> bool:
        """Check if coordinates are within the grid bounds. Never raises."""
        return 0 <= row < self._h and 0 <= col < self._w

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col).

        Raises GridIndexError if out of bounds.
        """
        if not self.is_within(row, col):
            raise GridIndexError(f"Coordinates out of bounds: ({row}, {col}) for grid {self._w}x{self._h}")
        return self._cells[row][col]

    def rows(self) -> Iterator[List[Cell]]:
        for row in self._cells:
            yield list(row)

    def query(self, origin_col: int, origin_row: int, width_cells: int, height_cells: int) -> List[List[Cell]]:
        """Return a window of cells in column-major order.

        ``result[i][j]`` is the cell at row ``origin_row + j``, column
        ``origin_col + i``. The window must lie entirely inside the grid.

        Raises:
            ValueError: if a window dimension is negative.
            ViewportOutOfBoundsError: if the window does not fit.
        """
        if width_cells < 0 or height_cells < 0:
            raise ValueError(f"window size must be non-negative, got {width_cells}x{height_cells}")
        if (
            origin_col < 0
            or origin_row < 0
            or origin_col + width_cells > self._w
            or origin_row + height_cells > self._h
        ):
            raise ViewportOutOfBoundsError(
                f"Window {width_cells}x{height_cells} at col={origin_col}, row={origin_row} "
                f"does not fit grid {self._w}x{self._h}"
            )
        return [
            [self._cells[origin_row + j][origin_col + i] for j in range(height_cells)]
            for i in range(width_cells)
        ]

    def set_block_stack(self, row: int, col: int, new_stack: Iterable[int]) -> Cell:
        """Replace the blocks of the cell at (row, col), keeping its id."""
        cell = self.cell(row, col)
        cell.set_stack(new_stack, self._blocks)
        logger.debug("Cell %d at (%d, %d) now %s", cell.id, row, col, cell.passability.value)
        return cell

    def __len__(self) -> int:
        return self._w * self._h

    @classmethod
    def from_config(cls, config: "GameConfig", blocks: Optional[BlockCatalog] = None) -> "GridWorld":
        blocks = blocks if blocks is not None else BlockCatalog.from_config(config)
        return cls(config.world.block_map, blocks=blocks)

    def to_codes(self) -> List[List[int]]:
        """Top block id per cell, 0 for open air (for debugging/testing)."""
        return [[cell.top if cell.top is not None else 0 for cell in row] for row in self._cells]

    def __repr__(self) -> str:
        return f"GridWorld(width={self._w}, height={self._h})"
