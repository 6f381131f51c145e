from __future__ import annotations

"""Pure helpers keeping the descriptor sequence densely ranked."""

from dataclasses import replace
from typing import List, Sequence, Tuple

from .entities import FieldDescriptor


def clamp_index(index: int, upper: int) -> int:
    """Clamp ``index`` into ``[0, upper]``."""
    if upper < 0:
        return 0
    return max(0, min(int(index), upper))


def renumber(fields: Sequence[FieldDescriptor]) -> Tuple[FieldDescriptor, ...]:
    """Return a tuple whose ``order`` values equal positions ``0..n-1``.

    Descriptors that already carry the right rank are reused as-is.
    """
    return tuple(
        descriptor if descriptor.order == index else replace(descriptor, order=index)
        for index, descriptor in enumerate(fields)
    )


def insert_at(
    fields: Sequence[FieldDescriptor], descriptor: FieldDescriptor, index: int
) -> Tuple[FieldDescriptor, ...]:
    items: List[FieldDescriptor] = list(fields)
    items.insert(clamp_index(index, len(items)), descriptor)
    return renumber(items)


def move(fields: Sequence[FieldDescriptor], from_index: int, to_index: int) -> Tuple[FieldDescriptor, ...]:
    """Remove the item at ``from_index`` and reinsert it at ``to_index``.

    Both indices are clamped into ``[0, n-1]``.
    """
    items: List[FieldDescriptor] = list(fields)
    if not items:
        return ()
    last = len(items) - 1
    source = clamp_index(from_index, last)
    target = clamp_index(to_index, last)
    if source == target:
        return renumber(items)
    moved = items.pop(source)
    items.insert(target, moved)
    return renumber(items)


def is_dense(fields: Sequence[FieldDescriptor]) -> bool:
    return all(descriptor.order == index for index, descriptor in enumerate(fields))


__all__ = ["clamp_index", "insert_at", "is_dense", "move", "renumber"]
