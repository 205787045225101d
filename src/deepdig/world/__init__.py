from .blocks import BlockCatalog, BlockDefinition, BlockKind, Passability, default_block_catalog
from .cell import Cell
from .grid import GridWorld
from .viewport import Viewport, ViewportDelta

__all__ = [
    "BlockCatalog",
    "BlockDefinition",
    "BlockKind",
    "Cell",
    "GridWorld",
    "Passability",
    "Viewport",
    "ViewportDelta",
    "default_block_catalog",
]
