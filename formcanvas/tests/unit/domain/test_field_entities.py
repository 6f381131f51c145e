from __future__ import annotations

import pytest

from formcanvas.domain.entities import (
    FieldCollectionSnapshot,
    FieldDescriptor,
    FieldId,
    FieldValidation,
    SelectOption,
    as_field_id,
)
from formcanvas.domain.errors import InvalidPayloadError, UnknownFieldKindError


def _select_descriptor() -> FieldDescriptor:
    return FieldDescriptor(
        id=FieldId("field_3"),
        kind="select",
        name="select_1",
        label="Select Field",
        required=True,
        order=2,
        placeholder="Pick one",
        validation=FieldValidation(custom_message="Required"),
        options=(SelectOption("option1", "Option 1"), SelectOption("option2", "Option 2")),
    )


def test_to_payload_uses_camel_case_keys() -> None:
    payload = _select_descriptor().to_payload()

    assert payload == {
        "id": "field_3",
        "fieldKind": "select",
        "name": "select_1",
        "label": "Select Field",
        "required": True,
        "order": 2,
        "placeholder": "Pick one",
        "validation": {"customMessage": "Required"},
        "options": [
            {"value": "option1", "label": "Option 1"},
            {"value": "option2", "label": "Option 2"},
        ],
    }


def test_from_payload_accepts_type_alias_and_validation_keys() -> None:
    descriptor = FieldDescriptor.from_payload(
        {
            "id": "field_9",
            "type": "integer",
            "name": "age",
            "label": "Age",
            "validation": {"min": 0, "max": 130},
        }
    )

    assert descriptor.id == FieldId("field_9")
    assert descriptor.kind == "integer"
    assert descriptor.validation == FieldValidation(minimum=0, maximum=130)
    assert descriptor.options is None
    assert descriptor.required is False


def test_from_payload_rejects_missing_id() -> None:
    with pytest.raises(InvalidPayloadError):
        FieldDescriptor.from_payload({"fieldKind": "text"})


def test_from_payload_rejects_unknown_kind() -> None:
    with pytest.raises(UnknownFieldKindError):
        FieldDescriptor.from_payload({"id": "field_1", "fieldKind": "signature"})


def test_from_payload_rejects_malformed_options() -> None:
    with pytest.raises(InvalidPayloadError):
        FieldDescriptor.from_payload({"id": "field_1", "fieldKind": "select", "options": "a,b"})


def test_with_changes_returns_new_descriptor() -> None:
    original = _select_descriptor()

    edited = original.with_changes(options=[SelectOption("x", "X")])

    assert edited.options == (SelectOption("x", "X"),)
    assert original.options is not None and len(original.options) == 2


def test_validation_is_empty_by_default() -> None:
    assert FieldValidation().is_empty()
    assert not FieldValidation(pattern="^a").is_empty()


def test_snapshot_selected_descriptor_and_lookup() -> None:
    descriptor = _select_descriptor()
    snapshot = FieldCollectionSnapshot(fields=(descriptor,), selected_id=FieldId("field_3"))

    assert snapshot.selected_descriptor == descriptor
    assert snapshot.index_of("field_3") == 0
    assert snapshot.index_of("field_4") is None
    assert snapshot.ids() == (FieldId("field_3"),)
    assert len(snapshot) == 1
    assert list(snapshot) == [descriptor]


def test_empty_snapshot_has_no_selection() -> None:
    snapshot = FieldCollectionSnapshot()

    assert snapshot.selected_descriptor is None
    assert len(snapshot) == 0


def test_as_field_id() -> None:
    assert as_field_id("field_1") == FieldId("field_1")
    assert as_field_id(FieldId("x")) == FieldId("x")
    assert as_field_id("") is None
    assert as_field_id(None) is None


def test_descriptor_coerces_raw_string_id() -> None:
    descriptor = FieldDescriptor(id=" field_9 ", kind="text", name="n", label="L")

    assert descriptor.id == FieldId("field_9")
    with pytest.raises(ValueError):
        FieldDescriptor(id="  ", kind="text", name="n", label="L")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("false", False), ("0", False), ("", False), ("true", True), ("Yes", True), (1, True), (False, False)],
)
def test_from_payload_reads_required_flag_text(raw, expected) -> None:
    descriptor = FieldDescriptor.from_payload({"id": "field_1", "fieldKind": "text", "required": raw})

    assert descriptor.required is expected
