from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Protocol, Tuple

from ..events import EventBus
from ..exceptions import InventoryError, SlotIndexError
from ..items.catalog import INFINITE, ItemCatalog, ItemKind, default_item_catalog
from ..items.slot import ItemSlot

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import GameConfig

logger = logging.getLogger(__name__)

# Returned by add_item when no empty or matching slot exists.
NO_SLOT = -1


class InventoryEvent(str, Enum):
    SLOT_CHANGED = "slot-changed"
    ACTIVE_CHANGED = "active-changed"
    HELD_CHANGED = "held-changed"


class DropEntity(Protocol):
    """A world drop the player has picked up; only its ``slot`` is read."""

    slot: ItemSlot


class DropAction(str, Enum):
    DESTROY = "destroy"
    REHOST = "rehost"


@dataclass(frozen=True)
class PlaceResult:
    """Outcome of placing the held item into a slot.

    ``action`` tells the caller what to do with ``entity``: destroy it, or put
    ``released`` (the slot's previous contents) back into it.
    """

    index: int
    released: ItemSlot
    action: DropAction
    entity: Any


class Inventory:
    """
    Fixed-size ordered slots with an active selector and one held item.

    - Slot order is scan order: ``add_item`` fills the first empty or matching slot.
    - Capacities come from the item catalog and are enforced by silent clamping.
    - Bad slot indices are caller bugs and raise ``SlotIndexError``.

    Changes are announced on ``events`` (see ``InventoryEvent``). Listeners run
    synchronously and must not call back into the inventory.
    """

    def __init__(self, size: int = 4, catalog: Optional[ItemCatalog] = None, active_index: int = -1) -> None:
        if size < 1:
            raise ValueError("Inventory size must be at least 1")
        if not -1 <= active_index < size:
            raise SlotIndexError(f"active index {active_index} outside inventory of size {size}")
        self._catalog = catalog if catalog is not None else default_item_catalog()
        self._slots: List[ItemSlot] = [ItemSlot.empty() for _ in range(size)]
        self._active_index = active_index
        self._held: Optional[DropEntity] = None
        self.events = EventBus()

    # ---------------------------
    # Accessors
    # ---------------------------

    @property
    def catalog(self) -> ItemCatalog:
        return self._catalog

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> Tuple[ItemSlot, ...]:
        return tuple(self._slots)

    def slot(self, index: int) -> ItemSlot:
        self._check_index(index)
        return self._slots[index]

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_slot(self) -> Optional[ItemSlot]:
        if self._active_index == -1:
            return None
        return self._slots[self._active_index]

    @property
    def held(self) -> Optional[DropEntity]:
        return self._held

    @property
    def held_slot(self) -> Optional[ItemSlot]:
        return self._held.slot if self._held is not None else None

    def subscribe(self, event: InventoryEvent, handler: Callable[..., Any]) -> None:
        self.events.subscribe(event, handler)

    def unsubscribe(self, event: InventoryEvent, handler: Callable[..., Any]) -> None:
        self.events.unsubscribe(event, handler)

    # ---------------------------
    # Active slot
    # ---------------------------

    def toggle_active_slot(self, index: int) -> int:
        """Activate ``index``, or deactivate it if it is already active."""
        self._check_index(index)
        new_index = -1 if index == self._active_index else index
        self._select(new_index)
        return new_index

    def change_active_slot(self, index: int) -> int:
        self._check_index(index)
        self._select(index)
        return index

    def _select(self, new_index: int) -> None:
        previous = self._active_index
        self._active_index = new_index
        if previous != -1:
            self._sync_active(previous)
        if new_index != -1:
            self._sync_active(new_index)
        logger.debug("Active slot %d -> %d", previous, new_index)
        self.events.emit(InventoryEvent.ACTIVE_CHANGED, index=new_index)

    def _sync_active(self, index: int) -> None:
        # Only a non-empty slot at the selector carries the active flag.
        slot = self._slots[index]
        slot.active = index == self._active_index and not slot.is_empty

    # ---------------------------
    # Slot contents
    # ---------------------------

    def add_item(self, kind: ItemKind, level: int = 0, count: Optional[int] = None) -> int:
        """
        Add ``count`` units of ``kind`` at ``level`` to the first empty or
        matching slot.

        A matching stack keeps the higher of the two levels. Without ``count``
        an empty slot receives a single unit and a matching stack only gets its
        level raised. Returns the slot index, or ``NO_SLOT`` when every slot
        holds something else.
        """
        kind = ItemKind(kind)
        if kind is ItemKind.EMPTY:
            raise ValueError("Cannot add the EMPTY item kind")
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        if count is not None and count < 1:
            raise ValueError(f"count must be positive, got {count}")

        index = self._find_slot(kind, level)
        if index == NO_SLOT:
            logger.debug("No slot available for %s (level %d)", kind.value, level)
            return NO_SLOT

        slot = self._slots[index]
        if slot.is_empty:
            slot = ItemSlot.create(kind, level, self._catalog, count)
            self._slots[index] = slot
        else:
            slot.level = max(slot.level, level)
            if count is not None and not slot.is_unlimited(self._catalog):
                slot.count += count
            slot.clamp(self._catalog)
        self._sync_active(index)
        logger.debug("Added %s x%s (level %d) to slot %d -> count=%d", kind.value, count, level, index, slot.count)
        self.events.emit(InventoryEvent.SLOT_CHANGED, index=index)
        return index

    def _find_slot(self, kind: ItemKind, level: int) -> int:
        for index, slot in enumerate(self._slots):
            if slot.is_empty or slot.matches(kind, level):
                return index
        return NO_SLOT

    def consume_item(self, index: int) -> None:
        """Use up one unit from slot ``index``; unlimited stacks never run out."""
        self._check_index(index)
        slot = self._slots[index]
        unlimited = slot.is_unlimited(self._catalog)
        if not unlimited:
            slot.count = max(0, slot.count - 1)
            if slot.count == 0:
                self.remove_item(index, silent=True)
        logger.debug("Consumed from slot %d -> %s", index, self._slots[index])
        self.events.emit(InventoryEvent.SLOT_CHANGED, index=index)

    def remove_item(self, index: int, silent: bool = False) -> None:
        self._check_index(index)
        self._slots[index] = ItemSlot.empty()
        logger.debug("Cleared slot %d", index)
        if not silent:
            self.events.emit(InventoryEvent.SLOT_CHANGED, index=index)

    # ---------------------------
    # Held item
    # ---------------------------

    def set_held(self, entity: DropEntity) -> None:
        """Record ``entity`` as the picked-up item, replacing any previous one."""
        # raises ValueError for anything that is not an item kind
        if ItemKind(entity.slot.kind) is ItemKind.EMPTY:
            raise ValueError("Cannot hold an empty item stack")
        if self._held is not None and self._held is not entity:
            logger.debug("Replacing held entity %r", self._held)
        self._held = entity
        self.events.emit(InventoryEvent.HELD_CHANGED)

    def clear_held(self) -> None:
        self._held = None
        self.events.emit(InventoryEvent.HELD_CHANGED)

    def place_or_swap(self, index: int) -> PlaceResult:
        """
        Drop the held item into slot ``index``.

        - Different kind or level: the held stack takes the slot and the
          slot's previous contents are released. The caller destroys the drop
          entity when nothing was released, otherwise re-hosts the released
          stack in it.
        - Same kind and level: counts merge (unlimited stacks stay unlimited)
          and the drop entity is to be destroyed.

        The held reference is cleared in both cases.
        Raises InventoryError when nothing is held.
        """
        self._check_index(index)
        entity = self._held
        if entity is None:
            raise InventoryError("No held item to place")
        # clone() normalises the kind and keeps the entity untouched
        held = entity.slot.clone()
        target = self._slots[index]

        if not target.matches(held.kind, held.level):
            released = target.clone()
            released.active = False
            target = held.clone()
            self._slots[index] = target
            action = DropAction.DESTROY if released.is_empty else DropAction.REHOST
        else:
            released = ItemSlot.empty()
            if not target.is_unlimited(self._catalog) and held.count != INFINITE:
                target.count += held.count
            action = DropAction.DESTROY

        target.clamp(self._catalog)
        self._sync_active(index)
        self._held = None
        logger.debug("Placed held %s into slot %d (%s, released=%s)", held, index, action.value, released)
        self.events.emit(InventoryEvent.SLOT_CHANGED, index=index)
        self.events.emit(InventoryEvent.HELD_CHANGED)
        return PlaceResult(index=index, released=released, action=action, entity=entity)

    # ---------------------------
    # Helpers
    # ---------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise SlotIndexError(f"slot index {index} outside inventory of size {len(self._slots)}")

    @classmethod
    def from_config(cls, config: "GameConfig", catalog: Optional[ItemCatalog] = None) -> "Inventory":
        """Build the player's starting inventory from config."""
        inv_cfg = config.player.inventory
        catalog = catalog if catalog is not None else ItemCatalog.from_config(config)
        inventory = cls(size=inv_cfg.size, catalog=catalog, active_index=inv_cfg.active_slot)
        for index, slot_cfg in enumerate(inv_cfg.slots):
            if slot_cfg.item is ItemKind.EMPTY:
                continue
            inventory._slots[index] = ItemSlot.create(slot_cfg.item, slot_cfg.level, catalog, slot_cfg.item_count)
            inventory._sync_active(index)
        logger.debug("Starting inventory: %s", inventory)
        return inventory

    def __repr__(self) -> str:
        return f"Inventory(size={len(self._slots)}, active={self._active_index}, held={self._held is not None})"
