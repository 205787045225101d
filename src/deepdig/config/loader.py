from __future__ import annotations

import logging
from functools import lru_cache
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from .schema import GameConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_RESOURCE = "default_config.yaml"


def _read_text(path: Optional[Union[str, Path]]) -> str:
    if path is None:
        data = resource_files("deepdig.config").joinpath(DEFAULT_CONFIG_RESOURCE).read_text(encoding="utf-8")
        logger.debug("Loaded embedded config resource")
        return data
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = f.read()
    logger.debug("Loaded config from path: %s", p)
    return data


def parse_config(text: str, source: str = "<string>") -> GameConfig:
    """Parse and validate YAML config text."""
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root in {source} must be a mapping")
    try:
        config = GameConfig.model_validate(raw)
    except ValidationError as exc:
        for err in exc.errors():
            logger.error("Config validation error at %s: %s", list(err["loc"]), err["msg"])
        raise ConfigError(f"Invalid config in {source}: {exc}") from exc
    logger.info(
        "Config %s: world %dx%d, %d blocks, %d items",
        source,
        config.world.width,
        config.world.height,
        len(config.blocks),
        len(config.items),
    )
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Load game configuration from YAML.

    If path is None, loads the embedded default resource at
    deepdig/config/default_config.yaml.
    """
    source = str(path) if path is not None else DEFAULT_CONFIG_RESOURCE
    return parse_config(_read_text(path), source=source)


@lru_cache(maxsize=1)
def default_config() -> GameConfig:
    """Return the packaged default config (parsed once)."""
    return load_config()
