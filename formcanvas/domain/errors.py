"""Domain-level error types shared across layers.

The engine normalizes invalid store input instead of raising. These errors
only guard boundaries where raw presentation values enter the domain.
"""

from __future__ import annotations


class FormCanvasError(Exception):
    """Base class for boundary errors raised by the form canvas engine."""


class UnknownFieldKindError(FormCanvasError, ValueError):
    """Raised when a value is outside the closed set of field kinds."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown field kind: {value!r}")
        self.value = value


class InvalidPayloadError(FormCanvasError, ValueError):
    """Raised when a descriptor or settings payload cannot be interpreted."""


__all__ = ["FormCanvasError", "InvalidPayloadError", "UnknownFieldKindError"]
