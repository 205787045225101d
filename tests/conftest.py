import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from deepdig.items.catalog import INFINITE, ItemCatalog, ItemDefinition, ItemKind  # noqa: E402
from deepdig.world.blocks import BlockCatalog, BlockDefinition, Passability  # noqa: E402


@pytest.fixture
def item_catalog() -> ItemCatalog:
    return ItemCatalog(
        [
            ItemDefinition(ItemKind.PICKAXE, "Pickaxe", (INFINITE,), types=("mining",), mining_strength=(1, 2)),
            ItemDefinition(ItemKind.ORE, "Ore", (10,)),
            ItemDefinition(ItemKind.WOOD, "Wood", (10, 20)),
            ItemDefinition(ItemKind.STONE, "Stone", (10, 20), builds=2),
            # level 1 and up stacks without limit
            ItemDefinition(ItemKind.LADDER, "Ladder", (5, INFINITE), builds=4),
        ]
    )


@pytest.fixture
def block_catalog() -> BlockCatalog:
    return BlockCatalog(
        [
            BlockDefinition(1, "Dirt", Passability.SOLID),
            BlockDefinition(2, "Stone", Passability.SOLID),
            BlockDefinition(3, "Rock", Passability.SOLID),
            BlockDefinition(4, "Ladder", Passability.PLATFORM),
        ]
    )
