from __future__ import annotations

"""Identity sources for field descriptors."""

import itertools
from typing import Iterator

from .entities import FieldId

DEFAULT_ID_PREFIX = "field_"


class SequentialIdGenerator:
    """Counter-backed id source producing ``<prefix>1``, ``<prefix>2``, ...

    Each store owns its own generator, so independent stores never share
    identity space and tests can rely on deterministic ids.
    """

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX, start: int = 1) -> None:
        if not isinstance(prefix, str):
            raise TypeError("prefix must be a string")
        self._prefix = prefix
        self._next = int(start)
        self._counter: Iterator[int] = itertools.count(self._next)

    @property
    def prefix(self) -> str:
        return self._prefix

    def peek(self) -> int:
        """Return the sequence number the next call to ``next_id`` will use."""
        return self._next

    def next_id(self) -> FieldId:
        seq = next(self._counter)
        self._next = seq + 1
        return FieldId(f"{self._prefix}{seq}")


__all__ = ["DEFAULT_ID_PREFIX", "SequentialIdGenerator"]
