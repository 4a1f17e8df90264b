"""Read-only loading of game rules from a JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .models import GameConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TIMESTABLES_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.json"


def resolve_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> GameConfig:
    """Return the game rules stored at ``path``.

    A missing or unreadable file yields the defaults. Values that parse but are
    out of range raise :class:`~timestables.errors.InvalidSettings`.
    """

    path = path or resolve_config_path()
    if not path.exists():
        return GameConfig()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return GameConfig()
    if not isinstance(payload, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return GameConfig()
    config = GameConfig.from_dict(payload)
    logger.info("Loaded game config from %s", path)
    return config


__all__ = ["CONFIG_ENV_VAR", "DEFAULT_CONFIG_PATH", "load_config", "resolve_config_path"]
