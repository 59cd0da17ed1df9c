"""Persisted user settings for the headlines app."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


@dataclass
class HeadlinesConfig:
    dark_mode: bool = False
    api_key: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeadlinesConfig":
        return cls(
            dark_mode=bool(data.get("dark_mode", False)),
            api_key=str(data.get("api_key") or ""),
        )


def load_config(path: str) -> HeadlinesConfig:
    """Load settings from YAML; a missing or unreadable file yields defaults."""
    if not os.path.exists(path):
        return HeadlinesConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.exception("Failed to load app state from %s", path)
        return HeadlinesConfig()
    if not isinstance(data, dict):
        logger.warning("Ignoring malformed app state in %s", path)
        return HeadlinesConfig()
    return HeadlinesConfig.from_dict(data)


def store_config(path: str, config: HeadlinesConfig) -> None:
    """Write settings to YAML, creating the parent directory if needed."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(asdict(config), f)
