"""Exceptions raised by the resume pipeline."""

from __future__ import annotations

from collections.abc import Iterable

from ats_resume.models.validation import ValidationError


class ResumeValidationError(ValueError):
    """Raised when a payload is turned into a :class:`Resume` but is invalid.

    Attributes:
        errors: Every problem found, in the order the validator reported them.
    """

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(f"Resume validation failed with {count} {noun}")


class AtsInvariantError(RuntimeError):
    """Raised when document elements would not render in their given order."""
