"""
Shared utility functions for cosmwallet.

Contains path helpers and settings loading.
"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

APP_DIR_ENV = "COSMWALLET_HOME"

DEFAULT_SETTINGS = {
    "log_level": "WARNING",
    "default_chain": "cosmoshub",
    "log_retention_days": 0,
}


def get_app_dir() -> Path:
    """Get the application data directory ($COSMWALLET_HOME or ~/.cosmwallet)."""
    override = os.environ.get(APP_DIR_ENV)
    if override:
        app_dir = Path(override).expanduser()
    else:
        app_dir = Path.home() / ".cosmwallet"

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


def get_wallet_dir() -> Path:
    """Get the wallet storage directory."""
    return get_app_dir() / "wallets"


def get_settings_path() -> Path:
    """Get path to settings file."""
    return get_app_dir() / "settings.json"


def get_logs_dir() -> Path:
    """Get the logs directory."""
    logs_dir = get_app_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def load_settings() -> dict:
    """
    Load settings.json merged over the defaults.

    Unknown keys are kept; a missing or unreadable file yields the defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = get_settings_path()
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                settings.update(data)
            else:
                logger.warning(f"Ignoring {path}: expected a JSON object")
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load settings: {e}")
    return settings
