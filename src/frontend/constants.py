"""Shared constants for the Textual UI."""

from __future__ import annotations

from pathlib import Path

ACCENT_BLUE = "#2AABEE"
PROJECT_ROOT = Path(__file__).resolve().parents[2]
SAMPLE_SNAPSHOT_PATH = PROJECT_ROOT / "sample_snapshot.json"
