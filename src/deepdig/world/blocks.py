from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, Mapping, Sequence

from ..exceptions import CatalogError

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import GameConfig

logger = logging.getLogger(__name__)


class Passability(str, Enum):
    """Movement classification of a cell, taken from its topmost block."""

    SOLID = "solid"
    PLATFORM = "platform"
    AIR = "air"


class BlockKind(IntEnum):
    """Layout codes of the stock blocks. ``AIR`` (0) means no block at all."""

    AIR = 0
    DIRT = 1
    STONE = 2
    ROCK = 3
    LADDER = 4


@dataclass(frozen=True)
class BlockDefinition:
    id: int
    name: str
    passability: Passability = Passability.SOLID
    # Display data, opaque to the core
    sprite: str = ""
    frame: str = ""


class BlockCatalog:
    """Read-only lookup from block id to its definition."""

    __slots__ = ("_defs",)

    def __init__(self, definitions: Iterable[BlockDefinition]) -> None:
        defs: Dict[int, BlockDefinition] = {}
        for definition in definitions:
            if definition.id == BlockKind.AIR:
                raise ValueError("Block id 0 is reserved for open air")
            if definition.id in defs:
                raise ValueError(f"Duplicate block definition: {definition.id}")
            defs[definition.id] = definition
        self._defs: Mapping[int, BlockDefinition] = MappingProxyType(defs)

    def get(self, block_id: int) -> BlockDefinition:
        try:
            return self._defs[block_id]
        except KeyError as exc:
            raise CatalogError(f"Unknown block id: {block_id}") from exc

    def passability_of(self, stack: Sequence[int]) -> Passability:
        """Passability of a block stack: its top block decides, empty is air."""
        if not stack:
            return Passability.AIR
        return self.get(stack[-1]).passability

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._defs

    def __iter__(self) -> Iterator[int]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    @classmethod
    def from_config(cls, config: "GameConfig") -> "BlockCatalog":
        catalog = cls(
            BlockDefinition(id=block_id, name=block.name, passability=block.type, sprite=block.sprite, frame=block.frame)
            for block_id, block in config.blocks.items()
        )
        logger.debug("Built block catalog with %d blocks", len(catalog))
        return catalog


@lru_cache(maxsize=1)
def default_block_catalog() -> BlockCatalog:
    """Block catalog built from the packaged default config."""
    from ..config.loader import default_config

    return BlockCatalog.from_config(default_config())
