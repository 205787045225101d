from .loader import default_config, load_config, parse_config
from .schema import (
    BlockDefConfig,
    GameConfig,
    InventoryConfig,
    ItemDefConfig,
    PlayerConfig,
    SlotConfig,
    WorldConfig,
)

__all__ = [
    "BlockDefConfig",
    "GameConfig",
    "InventoryConfig",
    "ItemDefConfig",
    "PlayerConfig",
    "SlotConfig",
    "WorldConfig",
    "default_config",
    "load_config",
    "parse_config",
]
