from __future__ import annotations

import os
import sys
from pathlib import Path

MAP_FILENAME = "earthquake_map.html"


def app_data_dir(app_name: str = "quakemap") -> Path:
    override = os.environ.get("QUAKEMAP_DATA_DIR")
    if override:
        return Path(override).expanduser().resolve()

    if sys.platform.startswith("win"):
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return Path(base) / app_name
        return Path.home() / app_name

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app_name

    base = os.environ.get("XDG_DATA_HOME")
    if base:
        return Path(base) / app_name

    return Path.home() / ".local" / "share" / app_name


def output_path(filename: str = MAP_FILENAME) -> Path:
    out_dir = app_data_dir()
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir / filename
