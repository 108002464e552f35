"""
Config loader for the Forest Watch project.

All configuration lives in the configs/ directory as YAML files.
The Streamlit app, the viz helpers and the generator script load their
settings through this module so there's one place to look when a value
needs changing.

Usage:

    from forest_watch.config import load_config

    cfg = load_config("app")
    csv_path = cfg["data"]["csv_path"]

    pipeline_cfg = load_config("pipeline")
    rows = pipeline_cfg["generator"]["rows"]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# Resolve the configs/ directory relative to this file so the package works
# regardless of the working directory the caller uses.
_CONFIGS_DIR = Path(__file__).parent.parent / "configs"
PROJECT_ROOT = _CONFIGS_DIR.parent


def load_config(name: str) -> dict[str, Any]:
    """
    Load a named YAML config file from the configs/ directory.

    Args:
        name: Config file name without the .yaml extension.
              Valid options: "app", "pipeline".

    Returns:
        The parsed YAML contents as a nested dictionary.

    Raises:
        FileNotFoundError: If configs/<name>.yaml does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    path = _CONFIGS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            f"Expected one of: {[p.stem for p in _CONFIGS_DIR.glob('*.yaml')]}"
        )
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f)


def resolve_data_path(relative: str | Path) -> Path:
    """Resolve a config-relative data path against the project root."""
    path = Path(relative)
    return path if path.is_absolute() else PROJECT_ROOT / path
