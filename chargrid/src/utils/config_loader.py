"""Loads YAML/JSON configuration files and global grid settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package's grid configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


GRID_CONFIG: Dict[str, Any] = load_grid_config()
DEFAULT_FILL: str = str(GRID_CONFIG.get("default_fill", " "))
LOG_LEVEL: str = str(GRID_CONFIG.get("log_level", "INFO")).upper()
LOG_FILE: Optional[str] = GRID_CONFIG.get("log_file")


def set_default_fill(value: str) -> None:
    """Override the fill character used by newly created grids."""
    global DEFAULT_FILL
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Default fill must be a single character, got {value!r}")
    DEFAULT_FILL = value
    GRID_CONFIG["default_fill"] = value


def set_log_level(value: str) -> None:
    """Override the logging level, re-applying it to existing chargrid loggers."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRID_CONFIG["log_level"] = LOG_LEVEL
    for name, existing in list(logging.Logger.manager.loggerDict.items()):
        if name.split(".")[0] == "chargrid" and isinstance(existing, logging.Logger):
            existing.setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "default_fill": repr(DEFAULT_FILL),
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE or "-",
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
