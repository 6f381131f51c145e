"""Domain package exports for value objects and the field collection store."""

from .drag import (
    IDLE,
    DragPayload,
    DragState,
    Dragging,
    DropZone,
    Idle,
    PaletteDrag,
    ReorderDrag,
    drop_zones,
)
from .entities import (
    FieldCollectionSnapshot,
    FieldDescriptor,
    FieldId,
    FieldValidation,
    SelectOption,
    as_field_id,
)
from .errors import FormCanvasError, InvalidPayloadError, UnknownFieldKindError
from .field_collection import FieldCollectionStore
from .field_kinds import FIELD_KINDS, FieldKind, FieldKindRegistry, coerce_field_kind
from .identity import SequentialIdGenerator
from .settings import BuilderConfig

__all__ = [
    "IDLE",
    "BuilderConfig",
    "DragPayload",
    "DragState",
    "Dragging",
    "DropZone",
    "FIELD_KINDS",
    "FieldCollectionSnapshot",
    "FieldCollectionStore",
    "FieldDescriptor",
    "FieldId",
    "FieldKind",
    "FieldKindRegistry",
    "FieldValidation",
    "FormCanvasError",
    "Idle",
    "InvalidPayloadError",
    "PaletteDrag",
    "ReorderDrag",
    "SelectOption",
    "SequentialIdGenerator",
    "UnknownFieldKindError",
    "as_field_id",
    "coerce_field_kind",
    "drop_zones",
]
