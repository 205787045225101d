"""
deepdig core package.

Headless state for a 2D mining game:
- Item catalog and level-dependent stack capacities
- Player inventory with an active slot and a held (picked-up) item
- Layered grid world answering column-major viewport queries

Rendering, input and animation layers should import and compose these
objects; nothing here draws or waits.
"""
import logging

from .exceptions import (
    CatalogError,
    ConfigError,
    DeepDigError,
    GridIndexError,
    InventoryError,
    SlotIndexError,
    ViewportOutOfBoundsError,
)
from .inventory import NO_SLOT, DropAction, Inventory, InventoryEvent, PlaceResult
from .items import INFINITE, ItemCatalog, ItemDefinition, ItemKind, ItemSlot
from .logging_config import configure_logging
from .world import BlockCatalog, Cell, GridWorld, Passability, Viewport, ViewportDelta

__all__ = [
    "INFINITE",
    "NO_SLOT",
    "BlockCatalog",
    "CatalogError",
    "Cell",
    "ConfigError",
    "DeepDigError",
    "DropAction",
    "GridIndexError",
    "GridWorld",
    "Inventory",
    "InventoryError",
    "InventoryEvent",
    "ItemCatalog",
    "ItemDefinition",
    "ItemKind",
    "ItemSlot",
    "Passability",
    "PlaceResult",
    "SlotIndexError",
    "Viewport",
    "ViewportDelta",
    "ViewportOutOfBoundsError",
    "configure_logging",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

