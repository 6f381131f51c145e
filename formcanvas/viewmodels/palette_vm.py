from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..domain.drag import PaletteDrag
from ..domain.field_kinds import FieldKindRegistry, FieldKindRule


@dataclass(frozen=True)
class PaletteEntry:
    """Display item for one draggable field kind."""

    kind: str
    label: str
    description: str
    category: str


class PaletteVM:
    """Holds field palette state: the kind catalog and a text filter."""

    def __init__(self, registry: Optional[FieldKindRegistry] = None) -> None:
        self._registry = registry or FieldKindRegistry.default()
        self.filter_text: str = ""

    def set_filter(self, text: Optional[str]) -> None:
        self.filter_text = (text or "").strip()

    def entries(self) -> List[PaletteEntry]:
        """Return palette entries matching the filter, in palette order."""
        needle = self.filter_text.lower()
        return [
            self._to_entry(rule)
            for rule in self._registry.palette()
            if not needle or self._matches(rule, needle)
        ]

    def grouped(self) -> Dict[str, List[PaletteEntry]]:
        """Group filtered entries by category; empty categories are dropped."""
        grouped: Dict[str, List[PaletteEntry]] = {}
        for entry in self.entries():
            grouped.setdefault(entry.category, []).append(entry)
        return grouped

    def start_drag(self, kind: str) -> PaletteDrag:
        """Build the drag payload for a palette item picked up by the pointer."""
        return PaletteDrag(self._registry.rule_for(kind).kind)

    # ---- Helpers ----
    @staticmethod
    def _matches(rule: FieldKindRule, needle: str) -> bool:
        return (
            needle in rule.kind
            or needle in rule.palette_label.lower()
            or needle in rule.description.lower()
        )

    @staticmethod
    def _to_entry(rule: FieldKindRule) -> PaletteEntry:
        return PaletteEntry(
            kind=rule.kind,
            label=rule.palette_label,
            description=rule.description,
            category=rule.category,
        )


__all__ = ["PaletteEntry", "PaletteVM"]
