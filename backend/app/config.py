"""Runtime configuration read from the environment (optionally from backend/.env)."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_SHIP_SIZE = 4
DEFAULT_PLACEMENT_ATTEMPTS = 1000  # per ship
DEFAULT_PLACEMENT_RESTARTS = 20    # whole-layout retries
DEFAULT_MAX_CELLS = 1_000_000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class EngineSettings:
    max_ship_size: int = DEFAULT_MAX_SHIP_SIZE
    forbid_adjacent: bool = True
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    placement_restarts: int = DEFAULT_PLACEMENT_RESTARTS
    max_cells: int = DEFAULT_MAX_CELLS


def _positive_int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("[config] %s=%r is not an integer; using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("[config] %s=%r must be positive; using %d", name, raw, default)
        return default
    return value


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logger.warning("[config] %s=%r is not a boolean; using %s", name, raw, default)
    return default


def get_engine_settings() -> EngineSettings:
    """Engine settings from BATTLESHIP_* env vars, with defaults for anything unset or invalid."""
    return EngineSettings(
        max_ship_size=_positive_int_from_env("BATTLESHIP_MAX_SHIP_SIZE", DEFAULT_MAX_SHIP_SIZE),
        forbid_adjacent=_bool_from_env("BATTLESHIP_FORBID_ADJACENT", True),
        placement_attempts=_positive_int_from_env(
            "BATTLESHIP_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS
        ),
        placement_restarts=_positive_int_from_env(
            "BATTLESHIP_PLACEMENT_RESTARTS", DEFAULT_PLACEMENT_RESTARTS
        ),
        max_cells=_positive_int_from_env("BATTLESHIP_MAX_CELLS", DEFAULT_MAX_CELLS),
    )


def get_log_level() -> str:
    """Log level name from LOG_LEVEL or INFO."""
    level = os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def get_server_address() -> tuple[str, int]:
    """(host, port) for the HTTP server from HOST / PORT."""
    host = os.environ.get("HOST", "").strip() or DEFAULT_HOST
    return host, _positive_int_from_env("PORT", DEFAULT_PORT)
