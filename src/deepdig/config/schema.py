from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..items.catalog import INFINITE, ItemKind
from ..world.blocks import Passability


class StrengthConfig(BaseModel):
    """Per-level strength table (mining or fighting)."""

    strength: List[int] = Field(default_factory=list, description="Strength per item level")


class BuildsConfig(BaseModel):
    builds: int = Field(..., ge=1, description="Block id placed by this item")


class ItemDefConfig(BaseModel):
    """Definition of one item kind as written in the config file."""

    name: str
    types: List[str] = Field(default_factory=list)
    max_stack: List[int] = Field(..., min_length=1, description="Stack capacity per level; -1 is unlimited")
    mining: Optional[StrengthConfig] = None
    fight: Optional[StrengthConfig] = None
    block: Optional[BuildsConfig] = None

    @field_validator("max_stack")
    @classmethod
    def check_capacities(cls, v: List[int]) -> List[int]:
        for capacity in v:
            if capacity < 0 and capacity != INFINITE:
                raise ValueError(f"max_stack entries must be >= 0 or {INFINITE}, got {capacity}")
        return v


class BlockDefConfig(BaseModel):
    name: str
    type: Passability = Passability.SOLID
    sprite: str = ""
    frame: str = ""


class SlotConfig(BaseModel):
    item: ItemKind
    level: int = Field(0, ge=0)
    item_count: Optional[int] = Field(default=None, ge=1)


class InventoryConfig(BaseModel):
    size: int = Field(4, ge=1)
    active_slot: int = Field(-1, ge=-1)
    slots: List[SlotConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_layout(self) -> "InventoryConfig":
        if len(self.slots) > self.size:
            raise ValueError(f"{len(self.slots)} starting slots do not fit an inventory of size {self.size}")
        if self.active_slot >= self.size:
            raise ValueError(f"active_slot {self.active_slot} outside inventory of size {self.size}")
        return self


class PlayerConfig(BaseModel):
    hp: int = 10
    inventory: InventoryConfig = Field(default_factory=InventoryConfig)


class WorldConfig(BaseModel):
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    view_width: int = Field(5, ge=1)
    view_height: int = Field(8, ge=1)
    block_map: List[List[int]]

    @model_validator(mode="after")
    def check_block_map(self) -> "WorldConfig":
        if len(self.block_map) != self.height:
            raise ValueError(f"block_map has {len(self.block_map)} rows, expected height {self.height}")
        for i, row in enumerate(self.block_map):
            if len(row) != self.width:
                raise ValueError(f"block_map row {i} has {len(row)} columns, expected width {self.width}")
        if self.view_width > self.width or self.view_height > self.height:
            raise ValueError("view does not fit inside the world")
        return self


class GameConfig(BaseModel):
    """Top-level configuration: world layout, catalogs and player defaults."""

    world: WorldConfig
    blocks: Dict[int, BlockDefConfig] = Field(default_factory=dict)
    items: Dict[ItemKind, ItemDefConfig] = Field(default_factory=dict)
    player: PlayerConfig = Field(default_factory=PlayerConfig)

    @model_validator(mode="after")
    def check_references(self) -> "GameConfig":
        for row in self.world.block_map:
            for code in row:
                if code != 0 and code not in self.blocks:
                    raise ValueError(f"block_map uses unknown block id {code}")
        for kind, item in self.items.items():
            if item.block is not None and item.block.builds not in self.blocks:
                raise ValueError(f"item '{kind.value}' builds unknown block id {item.block.builds}")
        for slot in self.player.inventory.slots:
            if slot.item is not ItemKind.EMPTY and slot.item not in self.items:
                raise ValueError(f"starting inventory uses unknown item '{slot.item.value}'")
        return self
