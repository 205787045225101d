from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from ..exceptions import CatalogError

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import GameConfig

logger = logging.getLogger(__name__)

# Capacity (and count) sentinel for stacks without an upper bound.
INFINITE = -1


class ItemKind(str, Enum):
    EMPTY = "empty"
    PICKAXE = "pickaxe"
    SWORD = "sword"
    DIRT = "dirt"
    STONE = "stone"
    ORE = "ore"
    WOOD = "wood"
    LADDER = "ladder"


@dataclass(frozen=True)
class ItemDefinition:
    """Static description of an item kind.

    ``max_stack_by_level`` is indexed by item level; levels past the end of the
    table use the last entry. Capability data (mining/fight strength, the block
    an item builds) is carried for the gameplay layer and not interpreted here.
    """

    kind: ItemKind
    name: str
    max_stack_by_level: Tuple[int, ...]
    types: Tuple[str, ...] = ()
    mining_strength: Tuple[int, ...] = ()
    fight_strength: Tuple[int, ...] = ()
    builds: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.max_stack_by_level:
            raise ValueError(f"{self.kind.value}: max_stack_by_level must not be empty")
        for capacity in self.max_stack_by_level:
            if capacity < 0 and capacity != INFINITE:
                raise ValueError(f"{self.kind.value}: invalid capacity {capacity}")

    def capacity(self, level: int) -> int:
        return effective_capacity(self, level)

    def is_unlimited(self, level: int) -> bool:
        return self.capacity(level) == INFINITE


def effective_capacity(definition: ItemDefinition, level: int) -> int:
    """Return the stack capacity of ``definition`` at ``level``.

    Levels beyond the table clamp to its last entry. The result may be
    ``INFINITE``.
    """
    if level < 0:
        raise ValueError(f"level must be >= 0, got {level}")
    table = definition.max_stack_by_level
    return table[min(level, len(table) - 1)]


EMPTY_DEFINITION = ItemDefinition(kind=ItemKind.EMPTY, name="Empty", max_stack_by_level=(0,))


class ItemCatalog:
    """Read-only lookup from item kind to its definition.

    ``EMPTY`` is always present so that empty slots resolve like any other.
    """

    __slots__ = ("_defs",)

    def __init__(self, definitions: Iterable[ItemDefinition]) -> None:
        defs: Dict[ItemKind, ItemDefinition] = {}
        for definition in definitions:
            if definition.kind in defs:
                raise ValueError(f"Duplicate item definition: {definition.kind.value}")
            defs[definition.kind] = definition
        defs.setdefault(ItemKind.EMPTY, EMPTY_DEFINITION)
        self._defs: Mapping[ItemKind, ItemDefinition] = MappingProxyType(defs)

    def get(self, kind: ItemKind) -> ItemDefinition:
        try:
            return self._defs[kind]
        except KeyError as exc:
            raise CatalogError(f"Unknown item kind: {kind}") from exc

    def capacity(self, kind: ItemKind, level: int) -> int:
        return effective_capacity(self.get(kind), level)

    def __contains__(self, kind: object) -> bool:
        return kind in self._defs

    def __iter__(self) -> Iterator[ItemKind]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    @classmethod
    def from_config(cls, config: "GameConfig") -> "ItemCatalog":
        definitions = []
        for kind, item in config.items.items():
            definitions.append(
                ItemDefinition(
                    kind=kind,
                    name=item.name,
                    max_stack_by_level=tuple(item.max_stack),
                    types=tuple(item.types),
                    mining_strength=tuple(item.mining.strength) if item.mining else (),
                    fight_strength=tuple(item.fight.strength) if item.fight else (),
                    builds=item.block.builds if item.block else None,
                )
            )
        catalog = cls(definitions)
        logger.debug("Built item catalog with %d kinds", len(catalog))
        return catalog


@lru_cache(maxsize=1)
def default_item_catalog() -> ItemCatalog:
    """Item catalog built from the packaged default config."""
    from ..config.loader import default_config

    return ItemCatalog.from_config(default_config())
