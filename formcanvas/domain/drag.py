"""Typed drag payloads, drop zones, and drag state for canvas gestures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Union

from .entities import FieldId, as_field_id
from .field_kinds import FieldKind, coerce_field_kind

DragSource = Literal["from_palette", "reorder_existing"]


@dataclass(frozen=True)
class PaletteDrag:
    """A brand-new field dragged out of the palette."""

    kind: FieldKind
    source: Literal["from_palette"] = field(default="from_palette", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", coerce_field_kind(self.kind))


@dataclass(frozen=True)
class ReorderDrag:
    """An existing field picked up on the canvas at ``index``."""

    field_id: FieldId
    index: int
    source: Literal["reorder_existing"] = field(default="reorder_existing", init=False)

    def __post_init__(self) -> None:
        field_id = as_field_id(self.field_id)
        if field_id is None:
            raise ValueError("ReorderDrag requires a field id.")
        object.__setattr__(self, "field_id", field_id)
        if self.index < 0:
            raise ValueError("ReorderDrag index cannot be negative.")


DragPayload = Union[PaletteDrag, ReorderDrag]


@dataclass(frozen=True)
class DropZone:
    """Insertion target for palette drops: zone ``k`` inserts at index ``k``.

    Zone 0 sits before the first field, zone ``k`` after the k-th field.
    """

    index: int


def drop_zones(field_count: int) -> List[DropZone]:
    """Return the ``n + 1`` drop zones surrounding ``n`` fields."""
    return [DropZone(index) for index in range(max(0, int(field_count)) + 1)]


@dataclass(frozen=True)
class Idle:
    """No reorder drag in flight."""

    is_dragging: bool = field(default=False, init=False)


@dataclass(frozen=True)
class Dragging:
    """Reorder drag in flight; ``current_index`` tracks committed live reorders."""

    origin_id: FieldId
    origin_index: int
    current_index: int
    is_dragging: bool = field(default=True, init=False)

    def moved_to(self, index: int) -> "Dragging":
        return Dragging(
            origin_id=self.origin_id,
            origin_index=self.origin_index,
            current_index=index,
        )


IDLE = Idle()
DragState = Union[Idle, Dragging]


__all__ = [
    "IDLE",
    "DragPayload",
    "DragSource",
    "DragState",
    "Dragging",
    "DropZone",
    "Idle",
    "PaletteDrag",
    "ReorderDrag",
    "drop_zones",
]
