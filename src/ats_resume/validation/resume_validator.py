"""Top-level resume validation.

Structural problems (wrong root type, oversized payload, excessive nesting or
reserved keys) stop validation with a single error because the payload cannot
be traversed safely. After that, every section is validated independently and
all field errors are returned together.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ats_resume.config import ValidationLimits, get_validation_limits
from ats_resume.models.errors import ResumeValidationError
from ats_resume.models.resume import Resume
from ats_resume.models.validation import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)
from ats_resume.validation.fields import (
    validate_contact_info,
    validate_education,
    validate_professional_summary,
    validate_project,
    validate_skills,
    validate_work_experience,
)
from ats_resume.validation.structure import get_json_size, is_structure_safe

logger = logging.getLogger(__name__)

__all__ = [
    "is_valid_resume",
    "parse_resume",
    "validate_resume",
]

_RESUME_FIELD = "resume"


def _fail(error: ValidationError) -> ValidationResult:
    return ValidationResult(errors=(error,))


def _check_structure(data: Any, limits: ValidationLimits) -> ValidationError | None:
    """Run the short-circuiting checks; return the first failure or None."""
    if data is None:
        return ValidationError(
            ValidationErrorType.REQUIRED_FIELD_MISSING,
            _RESUME_FIELD,
            "Resume data is required",
        )

    if not isinstance(data, dict):
        return ValidationError(
            ValidationErrorType.INVALID_TYPE,
            _RESUME_FIELD,
            "Resume data must be an object",
            data,
        )

    depth_error = ValidationError(
        ValidationErrorType.DEPTH_EXCEEDED,
        _RESUME_FIELD,
        f"Resume data structure is unsafe or exceeds maximum depth of {limits.max_object_depth}",
    )

    try:
        json_size = get_json_size(data)
    except RecursionError:
        return depth_error
    except (TypeError, ValueError):
        return ValidationError(
            ValidationErrorType.INVALID_TYPE,
            _RESUME_FIELD,
            "Resume data must contain only JSON values",
        )

    if json_size > limits.max_json_size:
        return ValidationError(
            ValidationErrorType.SIZE_EXCEEDED,
            _RESUME_FIELD,
            f"Resume data exceeds maximum size of {limits.max_json_size} bytes",
            json_size,
        )

    if not is_structure_safe(data, limits.max_object_depth):
        return depth_error

    return None


def _validate_object_section(
    resume: dict[str, Any],
    key: str,
    label: str,
    validator: Callable[[Any, ValidationLimits], list[ValidationError]],
    limits: ValidationLimits,
    errors: list[ValidationError],
) -> None:
    if key not in resume:
        errors.append(
            ValidationError(
                ValidationErrorType.REQUIRED_FIELD_MISSING,
                key,
                f"{label} is required",
            )
        )
        return
    errors.extend(validator(resume[key], limits))


def _validate_entry_section(
    resume: dict[str, Any],
    key: str,
    label: str,
    max_entries: int,
    validator: Callable[[Any, int, ValidationLimits], list[ValidationError]],
    limits: ValidationLimits,
    errors: list[ValidationError],
) -> None:
    entries = resume.get(key)
    if entries is None:
        errors.append(
            ValidationError(
                ValidationErrorType.REQUIRED_FIELD_MISSING,
                key,
                f"{label} is required",
            )
        )
        return

    if not isinstance(entries, list):
        errors.append(
            ValidationError(
                ValidationErrorType.INVALID_TYPE,
                key,
                f"{label} must be an array",
                entries,
            )
        )
        return

    if len(entries) > max_entries:
        # Rejected wholesale: entries are not inspected individually.
        errors.append(
            ValidationError(
                ValidationErrorType.ARRAY_TOO_LARGE,
                key,
                f"{label} exceeds maximum of {max_entries} entries",
                len(entries),
            )
        )
        return

    for index, entry in enumerate(entries):
        errors.extend(validator(entry, index, limits))


def validate_resume(data: Any, limits: ValidationLimits | None = None) -> ValidationResult:
    """Validate an untrusted resume payload.

    Args:
        data: Parsed JSON value of unknown shape.
        limits: Limits to enforce. Defaults to :func:`get_validation_limits`.

    Returns:
        A :class:`ValidationResult` listing every problem found. Expected
        validation failures are never raised.
    """
    limits = limits or get_validation_limits()

    structural_error = _check_structure(data, limits)
    if structural_error is not None:
        return _fail(structural_error)

    errors: list[ValidationError] = []

    _validate_object_section(
        data, "contact", "Contact information", validate_contact_info, limits, errors
    )
    _validate_object_section(
        data, "summary", "Professional summary", validate_professional_summary, limits, errors
    )
    _validate_entry_section(
        data,
        "experience",
        "Work experience",
        limits.max_experience_entries,
        validate_work_experience,
        limits,
        errors,
    )
    _validate_entry_section(
        data,
        "education",
        "Education",
        limits.max_education_entries,
        validate_education,
        limits,
        errors,
    )
    _validate_object_section(data, "skills", "Skills section", validate_skills, limits, errors)
    _validate_entry_section(
        data,
        "projects",
        "Projects",
        limits.max_project_entries,
        validate_project,
        limits,
        errors,
    )

    combined = data.get("combinedExperienceProjects")
    if combined is not None and not isinstance(combined, bool):
        errors.append(
            ValidationError(
                ValidationErrorType.INVALID_TYPE,
                "combinedExperienceProjects",
                "combinedExperienceProjects must be a boolean",
                combined,
            )
        )

    return ValidationResult(errors=tuple(errors))


def is_valid_resume(data: Any, limits: ValidationLimits | None = None) -> bool:
    """Return True if *data* passes :func:`validate_resume`."""
    return validate_resume(data, limits).is_valid


def parse_resume(data: Any, limits: ValidationLimits | None = None) -> Resume:
    """Validate *data* and build the typed :class:`Resume`.

    Raises:
        ResumeValidationError: If validation reports any error.
    """
    result = validate_resume(data, limits)
    if not result.is_valid:
        logger.warning("Rejected resume payload with %d error(s)", len(result.errors))
        raise ResumeValidationError(result.errors)
    return Resume.model_validate(data)
