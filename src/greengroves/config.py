"""Configuration loaded from .greengroves.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from greengroves.content.catalog import ContentCatalog
from greengroves.content.ids import ID_STRATEGIES
from greengroves.content.storage import DEFAULT_KEY_PREFIX, JsonFileStore

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".greengroves.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG = Path.home() / ".config" / "greengroves" / "config.toml"


class StorageConfig(BaseModel):
    """[storage] section."""

    directory: str = "./.greengroves"
    key_prefix: str = DEFAULT_KEY_PREFIX


class IdsConfig(BaseModel):
    """[ids] section."""

    strategy: str = "timestamp"

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        if value not in ID_STRATEGIES:
            raise ValueError(f"unknown id strategy {value!r}")
        return value


class LoggingConfig(BaseModel):
    """[logging] section."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


class GreenGrovesConfig(BaseModel):
    """Top-level configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ids: IdsConfig = Field(default_factory=IdsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def open_catalog(self) -> ContentCatalog:
        """Build a file-backed catalog from this configuration."""
        return ContentCatalog(
            JsonFileStore(Path(self.storage.directory).expanduser()),
            id_factory=ID_STRATEGIES[self.ids.strategy],
            key_prefix=self.storage.key_prefix,
        )


def load_config(path: str | Path | None = None) -> GreenGrovesConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .greengroves.toml in CWD
    3. ~/.config/greengroves/config.toml

    Then overlay environment variables.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG.exists():
            data = _load_toml(GLOBAL_CONFIG)
            logger.info("Loaded config from %s", GLOBAL_CONFIG)

    config = GreenGrovesConfig.model_validate(data) if data else GreenGrovesConfig()
    return _apply_env_vars(config)


def merge_cli_overrides(config: GreenGrovesConfig, **cli_kwargs: object) -> GreenGrovesConfig:
    """Overlay explicitly-set CLI flags (those not None) onto the config."""
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "storage_dir": ("storage", "directory"),
        "id_strategy": ("ids", "strategy"),
        "log_level": ("logging", "level"),
    }

    for key, value in cli_kwargs.items():
        if value is None or key not in mapping:
            continue
        section, field = mapping[key]
        data[section][field] = value

    return GreenGrovesConfig.model_validate(data)


def _apply_env_vars(config: GreenGrovesConfig) -> GreenGrovesConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "GREENGROVES_STORAGE_DIR": ("storage", "directory"),
        "GREENGROVES_KEY_PREFIX": ("storage", "key_prefix"),
        "GREENGROVES_ID_STRATEGY": ("ids", "strategy"),
        "GREENGROVES_LOG_LEVEL": ("logging", "level"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    return GreenGrovesConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}
