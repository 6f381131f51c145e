from __future__ import annotations

"""Typed builder configuration consumed by the field collection store."""

from dataclasses import dataclass
from typing import Literal

from .identity import DEFAULT_ID_PREFIX

NameStrategy = Literal["timestamp", "sequence"]
NAME_STRATEGIES: tuple[str, ...] = ("timestamp", "sequence")


@dataclass(frozen=True)
class BuilderConfig:
    """Creation defaults applied when new fields are added.

    ``name_strategy`` picks the suffix of generated names: ``timestamp`` uses
    milliseconds since the epoch, ``sequence`` reuses the numeric part of the
    new field id.
    """

    id_prefix: str = DEFAULT_ID_PREFIX
    name_strategy: NameStrategy = "timestamp"
    seed_options: bool = True
    option_label_template: str = "Option {n}"
    option_value_template: str = "option{n}"


__all__ = ["BuilderConfig", "NAME_STRATEGIES", "NameStrategy"]
