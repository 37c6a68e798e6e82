"""Static configuration for chanlist.

All user-editable settings (sidebar markers, theme, snapshot location,
logging) live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from core.config import SidebarConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# A .env file may point CHANLIST_CONFIG at another config file.
load_dotenv()
CONFIG_PATH = os.getenv("CHANLIST_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Sidebar markers and display switches consumed by the core.
SIDEBAR = SidebarConfig.from_mapping(_CONFIG.get("sidebar", {}))

# Attribute name -> Rich style string; missing names fall back to defaults.
THEME = dict(_CONFIG.get("theme", {}))

# Chat-state snapshot rendered by the TUI and the render command.
SNAPSHOT_PATH = _resolve_path(_CONFIG.get("snapshot_path", "sample_snapshot.json"))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
