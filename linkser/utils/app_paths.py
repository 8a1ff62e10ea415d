"""Utility functions to locate application data and settings."""

import os
import sys
from pathlib import Path

APP_NAME = "Linkser"


def get_app_data_dir() -> Path:
    """Get the directory where Linkser keeps its data.

    The LINKSER_DATA_DIR environment variable overrides the platform
    default. The directory is created if it doesn't exist.

    Returns:
        Path to the application data directory.
    """
    override = os.environ.get("LINKSER_DATA_DIR", "")
    if override:
        data_dir = Path(override)
    elif sys.platform == "win32":
        # Windows paths
        roaming_app_data = os.environ.get("APPDATA", "")
        if roaming_app_data:
            data_dir = Path(roaming_app_data) / APP_NAME
        else:
            data_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif sys.platform == "darwin":
        # macOS paths
        data_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        # Linux paths
        xdg_data_home = os.environ.get("XDG_DATA_HOME", "")
        if xdg_data_home:
            data_dir = Path(xdg_data_home) / APP_NAME.lower()
        else:
            data_dir = Path.home() / ".local" / "share" / APP_NAME.lower()

    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_log_level() -> str:
    """Get the log level name from LINKSER_LOG_LEVEL, default INFO."""
    return os.environ.get("LINKSER_LOG_LEVEL", "").strip().upper() or "INFO"
