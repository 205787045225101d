class DeepDigError(Exception):
    """Base exception for the deepdig core."""


class ConfigError(DeepDigError):
    """Raised when the game configuration cannot be loaded or validated."""


class CatalogError(DeepDigError, KeyError):
    """Raised when an item kind or block id is missing from its catalog."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class InventoryError(DeepDigError):
    """Raised for inventory operations that cannot apply (e.g. nothing held)."""


class SlotIndexError(DeepDigError, IndexError):
    """Raised when a slot index is outside the inventory."""


class GridIndexError(DeepDigError, IndexError):
    """Raised when a (row, col) coordinate is outside the grid."""


class ViewportOutOfBoundsError(DeepDigError, IndexError):
    """Raised when a viewport window does not fit inside the grid."""
