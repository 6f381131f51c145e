"""Central registry for field kinds, palette labels, and default option seeding.

View models call this registry to list palette entries and the store uses it
to derive default labels and seeded options when a field is created.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional, Tuple

from .errors import UnknownFieldKindError

FieldKind = Literal[
    "text",
    "textarea",
    "email",
    "password",
    "number",
    "integer",
    "boolean",
    "select",
    "multiselect",
    "date",
    "time",
    "datetime",
    "url",
    "tel",
    "color",
    "range",
    "file",
]
FieldCategory = Literal["basic", "choice", "date_time", "advanced"]

FIELD_KINDS: Tuple[str, ...] = (
    "text",
    "textarea",
    "email",
    "password",
    "number",
    "integer",
    "boolean",
    "select",
    "multiselect",
    "date",
    "time",
    "datetime",
    "url",
    "tel",
    "color",
    "range",
    "file",
)
OPTION_KINDS: frozenset[str] = frozenset({"select", "multiselect"})
CATEGORIES: Tuple[str, ...] = ("basic", "choice", "date_time", "advanced")

DEFAULT_OPTION_COUNT = 2


def coerce_field_kind(value: Any) -> FieldKind:
    """Normalize a raw kind token (case/whitespace insensitive) into a ``FieldKind``."""
    if not isinstance(value, str):
        raise UnknownFieldKindError(value)
    token = value.strip().lower()
    if token not in FIELD_KINDS:
        raise UnknownFieldKindError(value)
    return token  # type: ignore[return-value]


def has_options(kind: str) -> bool:
    return kind in OPTION_KINDS


def default_label(kind: str) -> str:
    """Return ``"<Kind> Field"`` with the first character uppercased."""
    if not kind:
        return "Field"
    return f"{kind[0].upper()}{kind[1:]} Field"


def seeded_options(
    count: int = DEFAULT_OPTION_COUNT,
    *,
    label_template: str = "Option {n}",
    value_template: str = "option{n}",
) -> Tuple[Tuple[str, str], ...]:
    """Return ``(value, label)`` pairs used to seed choice fields."""
    return tuple(
        (value_template.format(n=n), label_template.format(n=n))
        for n in range(1, max(0, int(count)) + 1)
    )


@dataclass(frozen=True)
class FieldKindRule:
    """Palette and creation metadata for a single field kind."""

    kind: str
    palette_label: str
    description: str
    category: str
    has_options: bool = False


class FieldKindRegistry:
    """Registry of the closed field-kind set, in palette order."""

    def __init__(self, rules: Iterable[FieldKindRule]) -> None:
        self._rules: Dict[str, FieldKindRule] = {}
        for rule in rules:
            kind = coerce_field_kind(rule.kind)
            self._rules[kind] = rule

    @classmethod
    def default(cls) -> "FieldKindRegistry":
        """Build the default registry shown by the field palette."""
        return cls(
            [
                FieldKindRule("text", "Text Input", "Single line text input field", "basic"),
                FieldKindRule("textarea", "Text Area", "Multi-line text input field", "basic"),
                FieldKindRule("email", "Email", "Email address input with validation", "basic"),
                FieldKindRule("password", "Password", "Password input field", "basic"),
                FieldKindRule("number", "Number", "Numeric input field", "basic"),
                FieldKindRule("integer", "Integer", "Integer number input", "basic"),
                FieldKindRule("boolean", "Checkbox", "Boolean checkbox input", "choice"),
                FieldKindRule("select", "Select", "Single select dropdown", "choice", True),
                FieldKindRule(
                    "multiselect", "Multi Select", "Multiple selection dropdown", "choice", True
                ),
                FieldKindRule("date", "Date", "Date picker input", "date_time"),
                FieldKindRule("time", "Time", "Time picker input", "date_time"),
                FieldKindRule("datetime", "Date Time", "Date and time picker", "date_time"),
                FieldKindRule("url", "URL", "URL input with validation", "advanced"),
                FieldKindRule("tel", "Phone", "Phone number input", "advanced"),
                FieldKindRule("color", "Color", "Color picker input", "advanced"),
                FieldKindRule("range", "Range", "Range slider input", "advanced"),
                FieldKindRule("file", "File", "File upload input", "advanced"),
            ]
        )

    def rule_for(self, kind: Any) -> FieldKindRule:
        key = coerce_field_kind(kind)
        rule = self._rules.get(key)
        if rule is None:
            raise UnknownFieldKindError(kind)
        return rule

    def get(self, kind: Any) -> Optional[FieldKindRule]:
        try:
            return self.rule_for(kind)
        except UnknownFieldKindError:
            return None

    def palette(self) -> List[FieldKindRule]:
        """Return all rules in registration (palette) order."""
        return list(self._rules.values())

    def kinds_in(self, category: str) -> List[str]:
        return [rule.kind for rule in self._rules.values() if rule.category == category]

    def by_category(self) -> Mapping[str, List[FieldKindRule]]:
        grouped: Dict[str, List[FieldKindRule]] = {category: [] for category in CATEGORIES}
        for rule in self._rules.values():
            grouped.setdefault(rule.category, []).append(rule)
        return grouped

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, str) and kind.strip().lower() in self._rules

    def __len__(self) -> int:
        return len(self._rules)


__all__ = [
    "CATEGORIES",
    "DEFAULT_OPTION_COUNT",
    "FIELD_KINDS",
    "OPTION_KINDS",
    "FieldCategory",
    "FieldKind",
    "FieldKindRegistry",
    "FieldKindRule",
    "coerce_field_kind",
    "default_label",
    "has_options",
    "seeded_options",
]
