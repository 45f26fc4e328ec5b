"""CLI configuration helpers: per-user config file and environment overrides."""
from __future__ import annotations

import json
import logging
import os
import secrets
from pathlib import Path
from typing import Dict, Mapping

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "FMG_SEED"
DEBUG_ENV_VAR = "FMG_DEBUG"
_MAX_RANDOM_SEED = 2**31 - 1


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "FantasyMageGame"
        return Path.home() / "FantasyMageGame"
    return Path.home() / ".config" / "fantasy_mage_game"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def load_config(path: Path | None = None) -> Dict[str, int | None]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {"seed": None}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return {"seed": None}
    if not isinstance(raw, dict):
        return {"seed": None}
    return {"seed": _normalize_seed(raw.get("seed"))}


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return True only when FMG_DEBUG is explicitly set to '1'."""
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV_VAR) == "1"


def resolve_seed(
    config: Mapping[str, int | None] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Pick the session seed: environment first, then config file, then random."""
    env = os.environ if environ is None else environ
    raw_value = env.get(SEED_ENV_VAR, "").strip()
    if raw_value:
        try:
            return int(raw_value)
        except ValueError:
            logger.warning("Ignoring invalid %s value %r", SEED_ENV_VAR, raw_value)
    if config is not None and config.get("seed") is not None:
        return int(config["seed"])
    return secrets.randbelow(_MAX_RANDOM_SEED)
