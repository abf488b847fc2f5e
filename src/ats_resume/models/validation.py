"""Validation result types returned to callers as data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = [
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
]

_UNSET: Any = object()


class ValidationErrorType(str, Enum):
    """Kinds of problems the validator reports."""

    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    INVALID_TYPE = "INVALID_TYPE"
    STRING_TOO_LONG = "STRING_TOO_LONG"
    ARRAY_TOO_LARGE = "ARRAY_TOO_LARGE"
    INVALID_FORMAT = "INVALID_FORMAT"  # reserved, no rule emits it yet
    UNSAFE_CONTENT = "UNSAFE_CONTENT"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"
    SIZE_EXCEEDED = "SIZE_EXCEEDED"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One offending field.

    Attributes:
        type: Error category.
        field: Dotted/indexed path, e.g. ``experience[2].company``.
        message: Human-readable description.
        value: Offending value or measured size, when useful to the caller.
    """

    type: ValidationErrorType
    field: str
    message: str
    value: Any = _UNSET

    @property
    def has_value(self) -> bool:
        return self.value is not _UNSET

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the public ``{type, field, message, value?}`` shape."""
        data: dict[str, Any] = {
            "type": self.type.value,
            "field": self.field,
            "message": self.message,
        }
        if self.has_value:
            data["value"] = self.value
        return data


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one payload; valid iff ``errors`` is empty."""

    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }
