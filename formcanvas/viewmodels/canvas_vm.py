"""Canvas state projection and command surface for the form builder view.

Call context:
    A canvas widget forwards pointer gestures (palette drops, field drags,
    clicks) and editor submissions to this view model, then re-renders from
    ``rows()`` and ``drop_zones()`` whenever ``on_fields_changed`` fires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional

from ..domain.drag import Dragging, DropZone, PaletteDrag, ReorderDrag, drop_zones
from ..domain.entities import (
    FieldCollectionSnapshot,
    FieldDescriptor,
    FieldId,
    FieldIdLike,
)
from ..domain.errors import FormCanvasError
from ..domain.field_collection import FieldCollectionStore
from ..domain.settings import BuilderConfig
from ..usecases.drag_drop_coordinator import DragDropCoordinator, DragHooks


@dataclass
class FieldRow:
    """Display row for one field card; ``id`` is the render key, never the index."""

    id: str
    title: str
    kind: str
    required: bool
    description: str
    order: int
    selected: bool


class CanvasVM:
    """
    View-model for the form canvas.

    Owns the field collection store and the drag-and-drop coordinator and
    exposes plain rows plus commands to the view. Raw values coming from the
    view are validated here; invalid ones are logged and ignored.
    """

    def __init__(
        self,
        store: Optional[FieldCollectionStore] = None,
        *,
        config: Optional[BuilderConfig] = None,
        hooks: Optional[DragHooks] = None,
        on_fields_changed: Optional[Callable[[FieldCollectionSnapshot], None]] = None,
        on_selection_changed: Optional[Callable[[Optional[FieldId]], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.store = store or FieldCollectionStore(config=config)
        self.coordinator = DragDropCoordinator(self.store, hooks=hooks)
        self.on_fields_changed = on_fields_changed
        self.on_selection_changed = on_selection_changed
        self._last = self.store.snapshot()
        self.store.on_change = self._handle_store_change

    # ---- State surfaced to View ----
    @property
    def snapshot(self) -> FieldCollectionSnapshot:
        return self.store.snapshot()

    @property
    def selected_id(self) -> Optional[FieldId]:
        return self.store.selected_id

    @property
    def selected_descriptor(self) -> Optional[FieldDescriptor]:
        return self.store.selected_descriptor()

    def rows(self) -> List[FieldRow]:
        selected = self.store.selected_id
        return [self._to_row(descriptor, descriptor.id == selected) for descriptor in self.store.fields]

    def drop_zones(self) -> List[DropZone]:
        return drop_zones(len(self.store))

    # ---- Palette gestures ----
    def on_palette_drop(self, kind: Any, zone_index: Optional[int] = None) -> Optional[FieldId]:
        """Add a field for a palette item dropped on zone ``zone_index``."""
        zone = None if zone_index is None else DropZone(int(zone_index))
        try:
            payload = PaletteDrag(kind)
        except FormCanvasError as exc:
            self._log.warning("Palette drop ignored: %s", exc)
            return None
        return self.coordinator.drop(payload, zone)

    def on_canvas_drop(self, kind: Any) -> Optional[FieldId]:
        """Palette item released on the canvas outside any zone: append."""
        return self.on_palette_drop(kind, None)

    # ---- In-canvas reorder gestures ----
    def on_drag_start(self, field_id: FieldIdLike) -> bool:
        index = self.store.index_of(field_id)
        if index is None:
            self._log.debug("Drag start ignored, unknown field id %s", field_id)
            return False
        self.coordinator.begin(ReorderDrag(self.store.fields[index].id, index))
        return True

    def on_drag_hover(self, index: int) -> bool:
        return self.coordinator.hover(index)

    def on_drag_end(self) -> None:
        state = self.coordinator.state
        if isinstance(state, Dragging):
            self.coordinator.drop(ReorderDrag(state.origin_id, state.current_index))

    def on_drag_cancel(self) -> None:
        self.coordinator.cancel()

    # ---- Commands surfaced to View ----
    def cmd_select(self, field_id: FieldIdLike) -> None:
        self.store.select(field_id)

    def cmd_clear_selection(self) -> None:
        self.store.clear_selection()

    def cmd_remove(self, field_id: FieldIdLike) -> None:
        self.store.remove(field_id)

    def cmd_edit(self, descriptor: FieldDescriptor) -> None:
        self.store.update(descriptor)

    def cmd_edit_payload(self, payload: Mapping[str, Any]) -> bool:
        """Apply an editor submission given as a presentation payload."""
        try:
            descriptor = FieldDescriptor.from_payload(payload)
        except FormCanvasError as exc:
            self._log.warning("Field edit ignored: %s", exc)
            return False
        if self.store.index_of(descriptor.id) is None:
            return False
        self.store.update(descriptor)
        return True

    def cmd_move_up(self, field_id: FieldIdLike) -> None:
        index = self.store.index_of(field_id)
        if index is not None and index > 0:
            self.store.reorder(index, index - 1)

    def cmd_move_down(self, field_id: FieldIdLike) -> None:
        index = self.store.index_of(field_id)
        if index is not None and index < len(self.store) - 1:
            self.store.reorder(index, index + 1)

    def cmd_clear_all(self) -> None:
        self.coordinator.cancel()
        self.store.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _handle_store_change(self, snapshot: FieldCollectionSnapshot) -> None:
        previous = self._last
        self._last = snapshot
        if snapshot.fields is not previous.fields and self.on_fields_changed:
            self.on_fields_changed(snapshot)
        if snapshot.selected_id != previous.selected_id and self.on_selection_changed:
            self.on_selection_changed(snapshot.selected_id)

    @staticmethod
    def _to_row(descriptor: FieldDescriptor, selected: bool) -> FieldRow:
        return FieldRow(
            id=str(descriptor.id),
            title=descriptor.label or descriptor.name,
            kind=descriptor.kind,
            required=descriptor.required,
            description=descriptor.description or "",
            order=descriptor.order,
            selected=selected,
        )


__all__ = ["CanvasVM", "FieldRow"]
