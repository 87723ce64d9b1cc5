"""Loads YAML/JSON configuration files and the runner defaults."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "runner.yaml"

RUNNER_DEFAULTS: Dict[str, Any] = {
    "inputs_dir": "inputs",
    "benchmark_samples": 2000,
    "log_level": "INFO",
    "log_file": None,
}


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_runner_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Return runner settings from ``path`` layered over :data:`RUNNER_DEFAULTS`.

    Without ``path`` the bundled ``configs/runner.yaml`` is used when present.
    An explicitly given path must exist.
    """
    config = dict(RUNNER_DEFAULTS)
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return config
        path = DEFAULT_CONFIG_PATH
    loaded = load_config(path)
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    config.update(loaded)
    config["benchmark_samples"] = int(config["benchmark_samples"])
    return config


__all__ = ["DEFAULT_CONFIG_PATH", "RUNNER_DEFAULTS", "load_config", "load_runner_config"]
