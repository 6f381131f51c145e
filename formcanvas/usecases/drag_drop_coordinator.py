from __future__ import annotations

"""Coordinator translating canvas drag gestures into store operations."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from formcanvas.domain.drag import (
    IDLE,
    DragPayload,
    DragState,
    Dragging,
    DropZone,
    PaletteDrag,
)
from formcanvas.domain.entities import FieldId
from formcanvas.domain.ordering import clamp_index
from formcanvas.domain.ports import FieldCollectionPort


def _noop(*_: object, **__: object) -> None:
    """Default no-op callback used for hooks."""


@dataclass
class DragHooks:
    """Optional callbacks triggered on significant drag events."""

    on_added: Callable[[FieldId, int], None] = _noop
    on_reordered: Callable[[int, int], None] = _noop
    on_finished: Callable[[DragState], None] = _noop

    def __post_init__(self) -> None:
        self.on_added = self.on_added or _noop
        self.on_reordered = self.on_reordered or _noop
        self.on_finished = self.on_finished or _noop


class DragDropCoordinator:
    """Maps palette drops and in-canvas reorder drags onto the store.

    Reorder drags are a small state machine: ``begin`` enters ``Dragging``,
    each ``hover`` over another field commits a reorder immediately and moves
    ``current_index``, ``drop`` and ``cancel`` return to ``IDLE`` without any
    rollback. Committed hover reorders therefore survive a cancelled drag.
    """

    def __init__(self, store: FieldCollectionPort, hooks: Optional[DragHooks] = None) -> None:
        self._store = store
        self.hooks = hooks or DragHooks()
        self._state: DragState = IDLE
        self._log = logging.getLogger(__name__)

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    def begin(self, payload: DragPayload) -> None:
        """Start a gesture. Palette drags carry no canvas state."""
        if payload.source == "from_palette":
            return
        if payload.source == "reorder_existing":
            if self._state.is_dragging:
                self._log.debug("Restarting reorder drag for %s", payload.field_id)
            self._state = Dragging(
                origin_id=payload.field_id,
                origin_index=payload.index,
                current_index=payload.index,
            )
            return
        raise AssertionError(f"Unhandled drag source: {payload.source!r}")

    def hover(self, target_index: int) -> bool:
        """Handle the pointer entering the field region at ``target_index``.

        Returns True when a live reorder was committed. If the dragged field
        left the collection mid-drag the drag ends; if it was moved by
        something else, the drag continues from its actual position.
        """
        state = self._state
        if not isinstance(state, Dragging):
            return False
        actual = self._store.index_of(state.origin_id)
        if actual is None:
            self._log.debug("Dragged field %s is gone, ending drag", state.origin_id)
            self._finish()
            return False
        if actual != state.current_index:
            state = state.moved_to(actual)
            self._state = state
        count = len(self._store)
        target = clamp_index(target_index, count - 1)
        if target == state.current_index:
            return False
        self._store.reorder(state.current_index, target)
        self._log.debug(
            "Live reorder of %s from %d to %d", state.origin_id, state.current_index, target
        )
        self.hooks.on_reordered(state.current_index, target)
        self._state = state.moved_to(target)
        return True

    def drop(self, payload: DragPayload, zone: Optional[DropZone] = None) -> Optional[FieldId]:
        """Finish a gesture on the canvas.

        A palette drop adds a new field at ``zone.index`` (append when the
        drop landed on the canvas outside any zone) and returns its id.
        A reorder drop only ends the drag; its moves are already applied.
        """
        if payload.source == "from_palette":
            return self._drop_from_palette(payload, zone)
        if payload.source == "reorder_existing":
            self._finish()
            return None
        raise AssertionError(f"Unhandled drag source: {payload.source!r}")

    def cancel(self) -> None:
        """Abandon the gesture; committed reorders stay in place."""
        if self._state.is_dragging:
            self._log.debug("Reorder drag cancelled, keeping committed order")
        self._finish()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _drop_from_palette(self, payload: PaletteDrag, zone: Optional[DropZone]) -> FieldId:
        at_index = None if zone is None else zone.index
        field_id = self._store.add(payload.kind, at_index)
        index = len(self._store) - 1 if at_index is None else clamp_index(at_index, len(self._store) - 1)
        self._log.debug("Palette drop of %s at index %d", payload.kind, index)
        self.hooks.on_added(field_id, index)
        return field_id

    def _finish(self) -> None:
        previous = self._state
        self._state = IDLE
        if previous.is_dragging:
            self.hooks.on_finished(previous)


__all__ = ["DragDropCoordinator", "DragHooks"]
