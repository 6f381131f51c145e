from __future__ import annotations

"""Domain value objects shared across the store, use-cases, and view models."""

from dataclasses import dataclass, fields as dataclass_fields, replace
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from .errors import InvalidPayloadError
from .field_kinds import FieldKind, coerce_field_kind
from .util import coerce_bool


@dataclass(frozen=True)
class FieldId:
    """Opaque identity of a field descriptor, unique for the life of a store."""

    value: str
    """Identifier string issued by an id source, e.g. ``field_7``."""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("FieldId must be a non-empty string.")

    def __str__(self) -> str:
        return self.value


FieldIdLike = Union[FieldId, str]


def as_field_id(value: Any) -> Optional[FieldId]:
    """Coerce ``FieldId`` or raw strings into a ``FieldId``; ``None`` when blank."""
    if isinstance(value, FieldId):
        return value
    if isinstance(value, str) and value.strip():
        return FieldId(value.strip())
    return None


@dataclass(frozen=True)
class SelectOption:
    """One ``{value, label}`` choice of a select/multiselect field."""

    value: Union[str, int]
    label: str


@dataclass(frozen=True)
class FieldValidation:
    """Constraint hints attached to a field. Opaque to the engine."""

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    pattern: Optional[str] = None
    custom_message: Optional[str] = None

    _PAYLOAD_KEYS = (
        ("min_length", "minLength"),
        ("max_length", "maxLength"),
        ("minimum", "min"),
        ("maximum", "max"),
        ("pattern", "pattern"),
        ("custom_message", "customMessage"),
    )

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in dataclass_fields(self))

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for attr, key in self._PAYLOAD_KEYS:
            value = getattr(self, attr)
            if value is not None:
                payload[key] = value
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FieldValidation":
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError("Validation payload must be a mapping.")
        kwargs = {}
        for attr, key in cls._PAYLOAD_KEYS:
            if key in payload:
                kwargs[attr] = payload[key]
            elif attr in payload:
                kwargs[attr] = payload[attr]
        return cls(**kwargs)


@dataclass(frozen=True)
class FieldDescriptor:
    """One form field blueprint placed on the canvas."""

    id: FieldId
    kind: FieldKind
    name: str
    label: str
    required: bool = False
    order: int = 0
    """Dense zero-based rank, always equal to the position in the collection."""
    placeholder: Optional[str] = None
    description: Optional[str] = None
    validation: Optional[FieldValidation] = None
    options: Optional[Tuple[SelectOption, ...]] = None
    """Choices for select/multiselect kinds; ``None`` for every other kind."""

    def __post_init__(self) -> None:
        field_id = as_field_id(self.id)
        if field_id is None:
            raise ValueError("FieldDescriptor requires a non-empty id.")
        object.__setattr__(self, "id", field_id)

    def with_changes(self, **changes: Any) -> "FieldDescriptor":
        """Return a full replacement descriptor with ``changes`` applied."""
        if "options" in changes and changes["options"] is not None:
            changes["options"] = tuple(changes["options"])
        return replace(self, **changes)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize into the camelCase shape used by presentation layers."""
        payload: Dict[str, Any] = {
            "id": str(self.id),
            "fieldKind": self.kind,
            "name": self.name,
            "label": self.label,
            "required": self.required,
            "order": self.order,
        }
        if self.placeholder is not None:
            payload["placeholder"] = self.placeholder
        if self.description is not None:
            payload["description"] = self.description
        if self.validation is not None:
            payload["validation"] = self.validation.to_payload()
        if self.options is not None:
            payload["options"] = [
                {"value": option.value, "label": option.label} for option in self.options
            ]
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FieldDescriptor":
        """Build a descriptor from a presentation payload (``type`` aliases ``fieldKind``)."""
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError("Descriptor payload must be a mapping.")
        field_id = as_field_id(payload.get("id"))
        if field_id is None:
            raise InvalidPayloadError("Descriptor payload requires a non-empty 'id'.")
        kind = coerce_field_kind(payload.get("fieldKind", payload.get("type")))

        raw_validation = payload.get("validation")
        validation = (
            FieldValidation.from_payload(raw_validation) if raw_validation is not None else None
        )

        raw_options = payload.get("options")
        options: Optional[Tuple[SelectOption, ...]] = None
        if raw_options is not None:
            if not isinstance(raw_options, Sequence) or isinstance(raw_options, str):
                raise InvalidPayloadError("'options' must be a list of {value, label} items.")
            items = []
            for item in raw_options:
                if not isinstance(item, Mapping) or "value" not in item:
                    raise InvalidPayloadError("Each option requires a 'value'.")
                items.append(SelectOption(value=item["value"], label=str(item.get("label", ""))))
            options = tuple(items)

        try:
            order = int(payload.get("order", 0) or 0)
        except (TypeError, ValueError):
            raise InvalidPayloadError("'order' must be an integer.") from None

        return cls(
            id=field_id,
            kind=kind,
            name=str(payload.get("name") or ""),
            label=str(payload.get("label") or ""),
            required=coerce_bool(payload.get("required", False)),
            order=order,
            placeholder=payload.get("placeholder"),
            description=payload.get("description"),
            validation=validation,
            options=options,
        )


@dataclass(frozen=True)
class FieldCollectionSnapshot:
    """Immutable view of the ordered fields and the current selection."""

    fields: Tuple[FieldDescriptor, ...] = ()
    selected_id: Optional[FieldId] = None

    @property
    def selected_descriptor(self) -> Optional[FieldDescriptor]:
        if self.selected_id is None:
            return None
        for descriptor in self.fields:
            if descriptor.id == self.selected_id:
                return descriptor
        return None

    def ids(self) -> Tuple[FieldId, ...]:
        return tuple(descriptor.id for descriptor in self.fields)

    def index_of(self, field_id: FieldIdLike) -> Optional[int]:
        target = as_field_id(field_id)
        for index, descriptor in enumerate(self.fields):
            if descriptor.id == target:
                return index
        return None

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)


__all__ = [
    "FieldCollectionSnapshot",
    "FieldDescriptor",
    "FieldId",
    "FieldIdLike",
    "FieldValidation",
    "SelectOption",
    "as_field_id",
]
