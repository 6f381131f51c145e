from __future__ import annotations

from typing import List
from unittest.mock import MagicMock

import pytest

from formcanvas.domain.drag import IDLE, Dragging, DropZone, PaletteDrag, ReorderDrag, drop_zones
from formcanvas.domain.errors import UnknownFieldKindError
from formcanvas.domain.field_collection import FieldCollectionStore
from formcanvas.usecases.drag_drop_coordinator import DragDropCoordinator, DragHooks


def _store_with(*kinds: str) -> FieldCollectionStore:
    store = FieldCollectionStore(name_token=lambda: "0")
    for kind in kinds:
        store.add(kind)
    return store


def _kinds(store: FieldCollectionStore) -> List[str]:
    return [descriptor.kind for descriptor in store.fields]


def test_drop_zones_surround_every_field() -> None:
    assert drop_zones(0) == [DropZone(0)]
    assert [zone.index for zone in drop_zones(3)] == [0, 1, 2, 3]


def test_palette_drop_on_zone_inserts_at_zone_index() -> None:
    store = _store_with("text", "email")
    coordinator = DragDropCoordinator(store)

    new_id = coordinator.drop(PaletteDrag("date"), DropZone(1))

    assert _kinds(store) == ["text", "date", "email"]
    assert store.selected_id == new_id
    assert coordinator.state is IDLE


def test_palette_drop_on_empty_canvas_appends() -> None:
    store = _store_with("text")
    coordinator = DragDropCoordinator(store)

    coordinator.drop(PaletteDrag("file"))

    assert _kinds(store) == ["text", "file"]


def test_palette_drop_of_existing_kind_creates_new_identity() -> None:
    store = _store_with("text")
    coordinator = DragDropCoordinator(store)

    first = store.fields[0].id
    new_id = coordinator.drop(PaletteDrag("text"), DropZone(0))

    assert new_id != first
    assert len(store) == 2


def test_palette_drop_fires_added_hook() -> None:
    store = _store_with("text", "email")
    on_added = MagicMock()
    coordinator = DragDropCoordinator(store, hooks=DragHooks(on_added=on_added))

    new_id = coordinator.drop(PaletteDrag("tel"), DropZone(5))

    on_added.assert_called_once_with(new_id, 2)


def test_palette_payload_rejects_unknown_kind() -> None:
    with pytest.raises(UnknownFieldKindError):
        PaletteDrag("signature")


def test_payloads_carry_explicit_source_tags() -> None:
    assert PaletteDrag("text").source == "from_palette"
    assert ReorderDrag("field_1", 0).source == "reorder_existing"


def test_palette_begin_keeps_coordinator_idle() -> None:
    store = _store_with("text")
    coordinator = DragDropCoordinator(store)

    coordinator.begin(PaletteDrag("email"))

    assert coordinator.is_dragging is False
    assert coordinator.hover(0) is False


def test_hover_reorders_live_and_tracks_current_index() -> None:
    store = _store_with("text", "email", "tel", "url")
    a, b, c, d = (descriptor.id for descriptor in store.fields)
    coordinator = DragDropCoordinator(store)

    coordinator.begin(ReorderDrag(a, 0))
    assert coordinator.hover(1) is True
    assert [x.id for x in store.fields] == [b, a, c, d]
    assert coordinator.hover(2) is True
    assert [x.id for x in store.fields] == [b, c, a, d]

    state = coordinator.state
    assert isinstance(state, Dragging)
    assert state.origin_id == a
    assert state.origin_index == 0
    assert state.current_index == 2
    assert [x.order for x in store.fields] == [0, 1, 2, 3]


def test_hover_over_current_position_is_filtered() -> None:
    store = _store_with("text", "email")
    store_reorder = MagicMock(wraps=store.reorder)
    store.reorder = store_reorder  # type: ignore[method-assign]
    coordinator = DragDropCoordinator(store)

    coordinator.begin(ReorderDrag(store.fields[1].id, 1))
    assert coordinator.hover(1) is False

    store_reorder.assert_not_called()


def test_hover_without_drag_is_ignored() -> None:
    store = _store_with("text", "email")
    before = store.snapshot()
    coordinator = DragDropCoordinator(store)

    assert coordinator.hover(0) is False
    assert store.snapshot() == before


def test_hover_clamps_target_to_last_field() -> None:
    store = _store_with("text", "email", "tel")
    a = store.fields[0].id
    coordinator = DragDropCoordinator(store)

    coordinator.begin(ReorderDrag(a, 0))
    coordinator.hover(10)

    assert store.index_of(a) == 2
    state = coordinator.state
    assert isinstance(state, Dragging) and state.current_index == 2


def test_drop_of_reorder_drag_returns_to_idle_without_extra_moves() -> None:
    store = _store_with("text", "email", "tel")
    a = store.fields[0].id
    on_finished = MagicMock()
    coordinator = DragDropCoordinator(store, hooks=DragHooks(on_finished=on_finished))

    coordinator.begin(ReorderDrag(a, 0))
    coordinator.hover(2)
    after_hover = store.snapshot()
    result = coordinator.drop(ReorderDrag(a, 2))

    assert result is None
    assert store.snapshot() == after_hover
    assert coordinator.state is IDLE
    on_finished.assert_called_once()


def test_cancel_keeps_committed_reorders() -> None:
    store = _store_with("text", "email", "tel")
    a, b, c = (descriptor.id for descriptor in store.fields)
    coordinator = DragDropCoordinator(store)

    coordinator.begin(ReorderDrag(a, 0))
    coordinator.hover(1)
    coordinator.cancel()

    assert [x.id for x in store.fields] == [b, a, c]
    assert coordinator.state is IDLE
    assert coordinator.hover(2) is False


def test_reordered_hook_reports_each_step() -> None:
    store = _store_with("text", "email", "tel")
    on_reordered = MagicMock()
    coordinator = DragDropCoordinator(store, hooks=DragHooks(on_reordered=on_reordered))

    coordinator.begin(ReorderDrag(store.fields[2].id, 2))
    coordinator.hover(1)
    coordinator.hover(0)

    assert [call.args for call in on_reordered.call_args_list] == [(2, 1), (1, 0)]


def test_hooks_accept_none_callbacks() -> None:
    hooks = DragHooks(on_added=None, on_reordered=None, on_finished=None)  # type: ignore[arg-type]
    store = _store_with("text")
    coordinator = DragDropCoordinator(store, hooks=hooks)

    coordinator.drop(PaletteDrag("text"))

    assert len(store) == 2


def test_hover_after_dragged_field_removed_ends_drag() -> None:
    store = _store_with("text", "email", "tel")
    a, b, c = (descriptor.id for descriptor in store.fields)
    on_finished = MagicMock()
    on_reordered = MagicMock()
    coordinator = DragDropCoordinator(
        store, hooks=DragHooks(on_reordered=on_reordered, on_finished=on_finished)
    )

    coordinator.begin(ReorderDrag(c, 2))
    store.remove(c)

    assert coordinator.hover(0) is False
    assert [x.id for x in store.fields] == [a, b]
    assert coordinator.state is IDLE
    on_reordered.assert_not_called()
    on_finished.assert_called_once()


def test_hover_follows_field_moved_during_drag() -> None:
    store = _store_with("text", "email", "tel")
    a, b, c = (descriptor.id for descriptor in store.fields)
    coordinator = DragDropCoordinator(store)

    coordinator.begin(ReorderDrag(a, 0))
    store.move(a, 2)

    assert coordinator.hover(2) is False
    assert coordinator.hover(1) is True
    assert [x.id for x in store.fields] == [b, a, c]
    assert coordinator.state == Dragging(origin_id=a, origin_index=0, current_index=1)
