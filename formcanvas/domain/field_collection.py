from __future__ import annotations

"""Ordered field collection with single selection.

The store is the only writer of the descriptor sequence. Every mutation
replaces the internal tuple wholesale, so snapshots handed out earlier stay
valid as historical values but must be treated as stale.
"""

import logging
import re
import time
from typing import Callable, Iterator, Optional, Tuple

from .entities import (
    FieldCollectionSnapshot,
    FieldDescriptor,
    FieldId,
    FieldIdLike,
    SelectOption,
    as_field_id,
)
from .field_kinds import coerce_field_kind, default_label, has_options, seeded_options
from .identity import SequentialIdGenerator
from .ordering import clamp_index, insert_at, move, renumber
from .ports import IdSource, NameTokenSource
from .settings import BuilderConfig

ChangeCallback = Callable[[FieldCollectionSnapshot], None]

_TRAILING_DIGITS = re.compile(r"(\d+)$")


def _timestamp_token() -> str:
    return str(time.time_ns() // 1_000_000)


class FieldCollectionStore:
    """Owns the ordered field descriptors and the current selection.

    Guarantees after every call:
      - ``order`` equals position (``0..n-1``, no gaps, no duplicates)
      - ids are unique and never reissued by this store
      - the selection is ``None`` or the id of a field in the collection

    Invalid input is normalized instead of raised: insertion and reorder
    indices are clamped, unknown ids are ignored.
    """

    def __init__(
        self,
        *,
        id_source: Optional[IdSource] = None,
        name_token: Optional[NameTokenSource] = None,
        config: Optional[BuilderConfig] = None,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.config = config or BuilderConfig()
        self._ids: IdSource = id_source or SequentialIdGenerator(prefix=self.config.id_prefix)
        self._name_token = name_token
        self.on_change = on_change
        self._fields: Tuple[FieldDescriptor, ...] = ()
        self._selected: Optional[FieldId] = None

    # ------------------------------------------------------------------ #
    # Read side
    # ------------------------------------------------------------------ #
    @property
    def fields(self) -> Tuple[FieldDescriptor, ...]:
        return self._fields

    @property
    def selected_id(self) -> Optional[FieldId]:
        return self._selected

    def snapshot(self) -> FieldCollectionSnapshot:
        return FieldCollectionSnapshot(fields=self._fields, selected_id=self._selected)

    def selected_descriptor(self) -> Optional[FieldDescriptor]:
        if self._selected is None:
            return None
        return self.get(self._selected)

    def get(self, field_id: FieldIdLike) -> Optional[FieldDescriptor]:
        index = self.index_of(field_id)
        return None if index is None else self._fields[index]

    def index_of(self, field_id: FieldIdLike) -> Optional[int]:
        target = as_field_id(field_id)
        if target is None:
            return None
        for index, descriptor in enumerate(self._fields):
            if descriptor.id == target:
                return index
        return None

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def add(self, kind: str, at_index: Optional[int] = None) -> FieldId:
        """Create a field of ``kind``, insert it, select it, and return its id.

        ``at_index`` is clamped into ``[0, n]``; ``None`` appends. Values
        outside the closed kind set raise ``UnknownFieldKindError``.
        """
        kind = coerce_field_kind(kind)
        descriptor = self._build_descriptor(kind)
        target = len(self._fields) if at_index is None else clamp_index(at_index, len(self._fields))
        self._fields = insert_at(self._fields, descriptor, target)
        self._selected = descriptor.id
        self._log.debug("Added %s field %s at index %d", kind, descriptor.id, target)
        self._emit()
        return descriptor.id

    def remove(self, field_id: FieldIdLike) -> None:
        index = self.index_of(field_id)
        if index is None:
            self._log.debug("Remove ignored, unknown field id %s", field_id)
            return
        removed = self._fields[index]
        self._fields = renumber(self._fields[:index] + self._fields[index + 1 :])
        if self._selected == removed.id:
            self._selected = None
        self._log.debug("Removed field %s from index %d", removed.id, index)
        self._emit()

    def update(self, descriptor: FieldDescriptor) -> None:
        """Replace the descriptor with the same id, keeping its current rank."""
        index = self.index_of(descriptor.id)
        if index is None:
            self._log.debug("Update ignored, unknown field id %s", descriptor.id)
            return
        if descriptor.order != index:
            descriptor = descriptor.with_changes(order=index)
        items = list(self._fields)
        items[index] = descriptor
        self._fields = tuple(items)
        self._log.debug("Updated field %s", descriptor.id)
        self._emit()

    def reorder(self, from_index: int, to_index: int) -> None:
        """Move the field at ``from_index`` to ``to_index``; indices are clamped."""
        if not self._fields:
            return
        last = len(self._fields) - 1
        source = clamp_index(from_index, last)
        target = clamp_index(to_index, last)
        if (source, target) != (from_index, to_index):
            self._log.debug(
                "Reorder indices clamped from (%s, %s) to (%d, %d)",
                from_index,
                to_index,
                source,
                target,
            )
        if source == target:
            return
        self._fields = move(self._fields, source, target)
        self._log.debug("Reordered field from %d to %d", source, target)
        self._emit()

    def move(self, field_id: FieldIdLike, to_index: int) -> None:
        index = self.index_of(field_id)
        if index is None:
            return
        self.reorder(index, to_index)

    def clear(self) -> None:
        """Remove every field; retired ids are never reissued."""
        if not self._fields and self._selected is None:
            return
        self._fields = ()
        self._selected = None
        self._emit()

    # ---- Selection ----
    def select(self, field_id: FieldIdLike) -> None:
        """Select an existing field. Unknown ids leave the selection unchanged."""
        target = as_field_id(field_id)
        if target is None or self.index_of(target) is None:
            self._log.debug("Select ignored, unknown field id %s", field_id)
            return
        if target == self._selected:
            return
        self._selected = target
        self._emit()

    def clear_selection(self) -> None:
        if self._selected is None:
            return
        self._selected = None
        self._emit()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _build_descriptor(self, kind: str) -> FieldDescriptor:
        field_id = self._ids.next_id()
        options = None
        if has_options(kind):
            pairs = (
                seeded_options(
                    label_template=self.config.option_label_template,
                    value_template=self.config.option_value_template,
                )
                if self.config.seed_options
                else ()
            )
            options = tuple(SelectOption(value=value, label=label) for value, label in pairs)
        return FieldDescriptor(
            id=field_id,
            kind=kind,  # type: ignore[arg-type]
            name=f"{kind}_{self._next_name_token(field_id)}",
            label=default_label(kind),
            required=False,
            order=0,
            options=options,
        )

    def _next_name_token(self, field_id: FieldId) -> str:
        if self._name_token is not None:
            return str(self._name_token())
        if self.config.name_strategy == "sequence":
            match = _TRAILING_DIGITS.search(field_id.value)
            return match.group(1) if match else field_id.value
        return _timestamp_token()

    def _emit(self) -> None:
        if self.on_change:
            self.on_change(self.snapshot())


__all__ = ["ChangeCallback", "FieldCollectionStore"]
