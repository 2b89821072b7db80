from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last used session settings as JSON in
the user data directory, with default fallback on missing or corrupted
files.
"""

import json
import logging
import os
from typing import Any, Dict

from tree2fs.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_ENCODING,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_DIR,
)
from tree2fs.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Paths are relative to the working directory: the listing is read from
    'tree.txt' and the structure is created under 'output'.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": DEFAULT_INPUT_FILE,
        "output_dir": DEFAULT_OUTPUT_DIR,
        "encoding": DEFAULT_ENCODING,

        # Reporting
        "print_tree": False,
        "dump_tree": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the last session configuration from disk, merged over defaults.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    defaults = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    session = data.get("last_session", {})
    if isinstance(session, dict):
        defaults.update(session)
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the provided config as the 'last_session'.

    Args:
        config: The configuration dictionary to save.
    """
    state = {"version": CURRENT_CONFIG_VERSION, "last_session": config}
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
