# tabswitch/config.py
# Description: Configuration management for tabswitch.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Constants ---
CONFIG_TOML_CONTENT = """
# Configuration for tabswitch
# Located at: ~/.config/tabswitch/config.toml
[tabs]
# How panels are matched to tabs:
# - "position": the Nth registered tab shows the Nth registered panel (default)
# - "token": a panel is shown when its id equals the active tab's id
panel_matching = "position"

[logging]
level = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
log_file = ""  # Empty disables the file sink
console = true
"""

CONFIG_ENV_VAR = "TABSWITCH_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tabswitch" / "config.toml"

try:
    DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)
except tomllib.TOMLDecodeError as e:
    logger.critical(f"Could not parse built-in CONFIG_TOML_CONTENT: {e}")
    DEFAULT_CONFIG_FROM_TOML = {}

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def get_config_path() -> Path:
    """Path of the user config file, honouring the TABSWITCH_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


# --- Helper for deep merging dictionaries ---
def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(force_reload: bool = False) -> Dict[str, Any]:
    """
    Load settings, merging the user's TOML file over the built-in defaults.

    A missing file is not an error. A file that cannot be read or parsed is
    logged and the built-in defaults are used instead.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Loading config from: {config_path}")
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using defaults.")
    else:
        logger.debug(f"No config file at {config_path}; using defaults")

    _CONFIG_CACHE = loaded_config
    return _CONFIG_CACHE


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_config()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def save_setting(section: str, key: str, value: Any) -> bool:
    """
    Save a single setting to the user's TOML configuration file.

    Nested sections may be given with dots (e.g. "tabs.demo"). The cache is
    invalidated and reloaded on success.

    Returns:
        True if the setting was written, False otherwise.
    """
    global _CONFIG_CACHE
    config_path = get_config_path()
    logger.info(f"Saving setting: [{section}].{key} = {value!r}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {config_path.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {config_path}. Cannot save. Error: {e}")
            return False
        except OSError as e:
            logger.error(f"Could not read {config_path}: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        logger.error(
            f"Could not set '{key}' in section '{section}': part of the path is not a table"
        )
        return False

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except OSError as e:
        logger.error(f"Failed to write config to {config_path}: {e}")
        return False

    _CONFIG_CACHE = None
    load_config(force_reload=True)
    logger.success(f"Saved setting to {config_path}")
    return True


def reset_config_cache() -> None:
    """Drop the cached configuration so the next read hits the file again."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None

#
# End of config.py
#######################################################################################################################
