# Area: Shared
"""
safe_respawn.config - Versioned plugin configuration
====================================================

Pydantic model for the plugin configuration plus the JSON loader that
creates, validates and migrates the on-disk file. JSON keys keep the
human-readable names server owners edit by hand; Python code uses the
snake_case attribute names.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger("safe_respawn.config")

CONFIG_VERSION = "1.2.0"

# Anything older than this is discarded and replaced by defaults
MINIMUM_MIGRATABLE_VERSION = "1.0.0"


class Configuration(BaseModel):
    """Plugin configuration, read-only while the server is running."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: str = Field(default=CONFIG_VERSION, alias="Version")
    duration_seconds: float = Field(
        default=60.0, alias="Protection Duration Seconds"
    )
    only_first_spawn: bool = Field(
        default=True, alias="Enable Protection Only For First Spawn"
    )
    ignore_near_respawn_point: bool = Field(
        default=True, alias="Ignore Sleeping Bag Spawns"
    )
    protect_against_npc: bool = Field(
        default=True, alias="Enable Protection Against NPC"
    )
    protect_against_animals: bool = Field(
        default=True, alias="Enable Protection Against Animals"
    )
    protect_against_special_hostile: bool = Field(
        default=True, alias="Enable Protection Against Patrol Helicopter"
    )
    protected_cannot_harm_others: bool = Field(
        default=False, alias="Protected Players Cannot Damage Others"
    )
    protect_owned_entities: bool = Field(
        default=False, alias="Protect Owned Entities"
    )
    reset_data_on_wipe: bool = Field(default=True, alias="Reset Data On Wipe")

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def default_config() -> Configuration:
    return Configuration()


def version_tuple(version: Any) -> Tuple[int, ...]:
    """Parse "1.2.0" into (1, 2, 0). Unparseable versions sort first."""
    try:
        return tuple(int(part) for part in str(version).split("."))
    except ValueError:
        return (0,)


def migrate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Bring a config dict from an older version up to CONFIG_VERSION.

    Known keys keep their values, missing keys get defaults and unknown
    keys are dropped. Versions older than MINIMUM_MIGRATABLE_VERSION are
    replaced wholesale.
    """
    old_version = raw.get("Version", "0.0.0")
    logger.warning("Config changes detected! Updating...")

    migrated = default_config().to_json_dict()
    if version_tuple(old_version) >= version_tuple(MINIMUM_MIGRATABLE_VERSION):
        for key in migrated:
            if key in raw:
                migrated[key] = raw[key]

    migrated["Version"] = CONFIG_VERSION
    logger.warning(
        "Config update complete! Updated from version %s to %s",
        old_version, CONFIG_VERSION,
    )
    return migrated


def save_config(config: Configuration, path: Union[str, Path]) -> None:
    """Write the config as indented JSON using the human-readable keys."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.to_json_dict(), f, indent=2)
        f.write("\n")


def load_config(path: Union[str, Path]) -> Configuration:
    """
    Load the config file, creating or migrating it as needed.

    Args:
        path: Location of the JSON config file

    Returns:
        The validated Configuration

    Raises:
        ConfigError: If the file is unreadable, not a JSON object, or
            fails validation
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.warning(f"Config file {config_path} not found, writing defaults")
        config = default_config()
        save_config(config, config_path)
        return config

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(config_path), f"invalid JSON: {e}") from e
    except OSError as e:
        raise ConfigError(str(config_path), f"cannot read file: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(str(config_path), "top-level value must be an object")

    migrated = False
    if version_tuple(raw.get("Version", "0.0.0")) < version_tuple(CONFIG_VERSION):
        raw = migrate_config(raw)
        migrated = True

    try:
        config = Configuration.model_validate(raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(str(config_path), "validation failed", errors) from e

    if migrated:
        save_config(config, config_path)

    logger.debug(f"Config loaded from {config_path}")
    return config
