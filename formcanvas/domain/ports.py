from __future__ import annotations
from typing import Optional, Protocol

from .entities import FieldId, FieldIdLike


# ---- Ports (Hexagonal boundaries) ----
class IdSource(Protocol):
    """Issues field identities for a single store.

    Implementations must be strictly monotonic: an id handed out once is
    never returned again, including after the field is removed.
    """

    def next_id(self) -> FieldId: ...


class NameTokenSource(Protocol):
    """Produces the suffix appended to generated field names."""

    def __call__(self) -> str: ...


class FieldCollectionPort(Protocol):
    """Store operations the drag-and-drop coordinator relies on."""

    def add(self, kind: str, at_index: Optional[int] = None) -> FieldId: ...
    def reorder(self, from_index: int, to_index: int) -> None: ...
    def __len__(self) -> int: ...
    def index_of(self, field_id: FieldIdLike) -> Optional[int]: ...
