from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .catalog import INFINITE, ItemCatalog, ItemKind


@dataclass
class ItemSlot:
    """One inventory cell: an item kind with a level and a quantity.

    ``count`` is ``INFINITE`` for kinds whose capacity at ``level`` is
    unlimited. An ``EMPTY`` slot always has level 0, count 0 and is inactive.
    """

    kind: ItemKind = ItemKind.EMPTY
    level: int = 0
    count: int = 0
    active: bool = False

    def __post_init__(self) -> None:
        self.kind = ItemKind(self.kind)

    @classmethod
    def empty(cls) -> "ItemSlot":
        return cls()

    @classmethod
    def create(cls, kind: ItemKind, level: int, catalog: ItemCatalog, count: Optional[int] = None) -> "ItemSlot":
        """Build a new stack of ``kind``.

        Without ``count`` the stack is a single unit, which for an unlimited
        kind means ``INFINITE``.
        """
        if count is None:
            count = INFINITE if catalog.capacity(kind, level) == INFINITE else 1
        slot = cls(kind=kind, level=level, count=count)
        slot.clamp(catalog)
        return slot

    @property
    def is_empty(self) -> bool:
        return self.kind is ItemKind.EMPTY

    def matches(self, kind: ItemKind, level: int) -> bool:
        return self.kind is kind and self.level == level

    def capacity(self, catalog: ItemCatalog) -> int:
        return catalog.capacity(self.kind, self.level)

    def is_unlimited(self, catalog: ItemCatalog) -> bool:
        return self.capacity(catalog) == INFINITE

    def clamp(self, catalog: ItemCatalog) -> None:
        """Truncate ``count`` to the capacity at the current level.

        Clamping is silent; it never raises for an over-full stack.
        """
        if self.is_empty:
            self.level = 0
            self.count = 0
            self.active = False
            return
        capacity = self.capacity(catalog)
        if capacity == INFINITE:
            self.count = INFINITE
        elif self.count == INFINITE:
            self.count = capacity
        else:
            self.count = max(0, min(self.count, capacity))

    def clone(self) -> "ItemSlot":
        return replace(self)
