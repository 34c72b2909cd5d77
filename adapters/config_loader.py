"""Helpers for reading JSON/YAML configuration and data files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

try:
    import yaml  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    yaml = None  # type: ignore

import config as base_config


def read_document(path: str | Path) -> Any:
    """Parse a ``.json``, ``.yaml`` or ``.yml`` file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as fh:
        if path.suffix.lower() in {".yaml", ".yml"}:
            if yaml is None:
                raise RuntimeError("PyYAML is required to read YAML files")
            return yaml.safe_load(fh)
        return json.load(fh)


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Return the default CONFIG, overlaid with the file at ``path`` when given."""
    if path is None:
        return base_config.merged()
    overrides = read_document(path) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return base_config.merged(overrides)
