from .inventory import NO_SLOT, DropAction, DropEntity, Inventory, InventoryEvent, PlaceResult

__all__ = [
    "NO_SLOT",
    "DropAction",
    "DropEntity",
    "Inventory",
    "InventoryEvent",
    "PlaceResult",
]
