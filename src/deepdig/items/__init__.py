from .catalog import (
    EMPTY_DEFINITION,
    INFINITE,
    ItemCatalog,
    ItemDefinition,
    ItemKind,
    default_item_catalog,
    effective_capacity,
)
from .slot import ItemSlot

__all__ = [
    "EMPTY_DEFINITION",
    "INFINITE",
    "ItemCatalog",
    "ItemDefinition",
    "ItemKind",
    "ItemSlot",
    "default_item_catalog",
    "effective_capacity",
]
