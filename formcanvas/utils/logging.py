from __future__ import annotations

"""Root log level control for the builder's debug-logging preference."""

import logging
import os
from typing import Optional

from ..domain.util import coerce_bool

LEVEL_ENV_VAR = "FORMCANVAS_LOG_LEVEL"
DEBUG_ENV_VAR = "FORMCANVAS_DEBUG"


def _env_level() -> Optional[int]:
    """Level forced by the environment, or None when the preference decides."""
    raw = (os.getenv(LEVEL_ENV_VAR) or "").strip()
    if raw:
        if raw.isdigit():
            return int(raw)
        named = logging.getLevelName(raw.upper())
        return named if isinstance(named, int) else logging.INFO
    if coerce_bool(os.getenv(DEBUG_ENV_VAR) or ""):
        return logging.DEBUG
    return None


def apply_preferences(debug_enabled: bool) -> int:
    """Set the root level from the debug preference; the environment wins.

    Returns the level now in effect.
    """
    level = _env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug() -> bool:
    level = _env_level()
    return level is not None and level <= logging.DEBUG


__all__ = ["DEBUG_ENV_VAR", "LEVEL_ENV_VAR", "apply_preferences", "env_requests_debug"]
