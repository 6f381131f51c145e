from __future__ import annotations

from typing import Any

_TRUTHY = {"1", "true", "yes", "on"}


def coerce_bool(value: Any) -> bool:
    """Interpret flags coming from forms or JSON; ``"false"``/``"0"`` stay False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


__all__ = ["coerce_bool"]
