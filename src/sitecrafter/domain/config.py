from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory, merging stored values over defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from sitecrafter.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_BACKEND_URL,
    DEFAULT_COMPLETION_POLICY,
    DEFAULT_REQUEST_TIMEOUT,
)
from sitecrafter.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Generation backend
        "backend_url": DEFAULT_BACKEND_URL,
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,

        # Reconciliation
        "completion_policy": DEFAULT_COMPLETION_POLICY,

        # Output
        "output_dir": "",
        "print_tree": True,

        # Diagnostics
        "log_level": "INFO",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk merged over the defaults.

    Missing or corrupted files fall back to the defaults.

    Args:
        path: Optional config file location. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: Effective configuration.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    defaults.update(data)
    return defaults


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist configuration to disk, stamped with the schema version.
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
