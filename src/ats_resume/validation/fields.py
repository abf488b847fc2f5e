"""Per-section validators.

Each public ``validate_*`` function checks one resume section and returns a
list of errors namespaced under that section's path. Field checks never stop
early: every problem in the section is reported.
"""

from __future__ import annotations

from typing import Any

from ats_resume.config import ValidationLimits
from ats_resume.models.validation import ValidationError, ValidationErrorType
from ats_resume.validation.sanitization import is_safe_string

__all__ = [
    "validate_contact_info",
    "validate_education",
    "validate_professional_summary",
    "validate_project",
    "validate_skills",
    "validate_work_experience",
]

# Sentinel for "key not present"; distinct from an explicit JSON null.
_MISSING: Any = object()


# -----------------------------------------------------------------------
# Field-level rules


def _check_required_string(
    value: Any,
    field: str,
    max_length: int,
    errors: list[ValidationError],
) -> bool:
    """Validate a required string field, appending at most one error."""
    if value is _MISSING or value is None:
        errors.append(
            ValidationError(
                ValidationErrorType.REQUIRED_FIELD_MISSING,
                field,
                f"{field} is required",
            )
        )
        return False

    if not isinstance(value, str):
        errors.append(
            ValidationError(
                ValidationErrorType.INVALID_TYPE,
                field,
                f"{field} must be a string",
                value,
            )
        )
        return False

    if value.strip() == "":
        errors.append(
            ValidationError(
                ValidationErrorType.REQUIRED_FIELD_MISSING,
                field,
                f"{field} is required and cannot be empty",
            )
        )
        return False

    if len(value) > max_length:
        errors.append(
            ValidationError(
                ValidationErrorType.STRING_TOO_LONG,
                field,
                f"{field} exceeds maximum length of {max_length} characters",
                len(value),
            )
        )
        return False

    if not is_safe_string(value):
        errors.append(
            ValidationError(
                ValidationErrorType.UNSAFE_CONTENT,
                field,
                f"{field} contains unsafe characters",
            )
        )
        return False

    return True


def _check_optional_string(
    value: Any,
    field: str,
    max_length: int,
    errors: list[ValidationError],
) -> bool:
    if value is _MISSING or value is None or value == "":
        return True
    return _check_required_string(value, field, max_length, errors)


def _check_string_list(
    value: Any,
    field: str,
    max_items: int,
    max_length: int,
    errors: list[ValidationError],
    *,
    required: bool = True,
) -> bool:
    """Validate a list of strings; items are only inspected within the limit."""
    if value is _MISSING or value is None:
        if not required:
            return True
        errors.append(
            ValidationError(
                ValidationErrorType.REQUIRED_FIELD_MISSING,
                field,
                f"{field} is required",
            )
        )
        return False

    if not isinstance(value, list):
        errors.append(
            ValidationError(
                ValidationErrorType.INVALID_TYPE,
                field,
                f"{field} must be an array",
                value,
            )
        )
        return False

    if len(value) > max_items:
        errors.append(
            ValidationError(
                ValidationErrorType.ARRAY_TOO_LARGE,
                field,
                f"{field} exceeds maximum of {max_items} items",
                len(value),
            )
        )
        return False

    results = [
        _check_required_string(item, f"{field}[{index}]", max_length, errors)
        for index, item in enumerate(value)
    ]
    return all(results)


def _check_section_object(
    data: Any,
    field: str,
    label: str,
    errors: list[ValidationError],
) -> bool:
    if isinstance(data, dict):
        return True
    errors.append(
        ValidationError(
            ValidationErrorType.INVALID_TYPE,
            field,
            f"{label} must be an object",
            data,
        )
    )
    return False


# -----------------------------------------------------------------------
# Section validators


def validate_contact_info(data: Any, limits: ValidationLimits) -> list[ValidationError]:
    """Validate the ``contact`` section."""
    errors: list[ValidationError] = []
    if not _check_section_object(data, "contact", "Contact information", errors):
        return errors

    max_len = limits.max_string_length
    for key in ("fullName", "email", "phone", "location"):
        _check_required_string(data.get(key, _MISSING), f"contact.{key}", max_len, errors)
    for key in ("jobTitle", "linkedin", "github", "portfolio", "twitter"):
        _check_optional_string(data.get(key, _MISSING), f"contact.{key}", max_len, errors)

    return errors


def validate_professional_summary(data: Any, limits: ValidationLimits) -> list[ValidationError]:
    """Validate the ``summary`` section (shorter length limit)."""
    errors: list[ValidationError] = []
    if not _check_section_object(data, "summary", "Professional summary", errors):
        return errors

    _check_required_string(
        data.get("summary", _MISSING),
        "summary.summary",
        limits.max_summary_length,
        errors,
    )
    return errors


def validate_work_experience(
    data: Any,
    index: int,
    limits: ValidationLimits,
) -> list[ValidationError]:
    """Validate ``experience[index]``."""
    errors: list[ValidationError] = []
    prefix = f"experience[{index}]"
    if not _check_section_object(data, prefix, "Work experience entry", errors):
        return errors

    max_len = limits.max_string_length
    for key in ("company", "role", "startDate"):
        _check_required_string(data.get(key, _MISSING), f"{prefix}.{key}", max_len, errors)
    for key in ("location", "endDate"):
        _check_optional_string(data.get(key, _MISSING), f"{prefix}.{key}", max_len, errors)

    _check_string_list(
        data.get("description", _MISSING),
        f"{prefix}.description",
        limits.max_description_points,
        max_len,
        errors,
    )
    return errors


def validate_education(
    data: Any,
    index: int,
    limits: ValidationLimits,
) -> list[ValidationError]:
    """Validate ``education[index]``."""
    errors: list[ValidationError] = []
    prefix = f"education[{index}]"
    if not _check_section_object(data, prefix, "Education entry", errors):
        return errors

    max_len = limits.max_string_length
    for key in ("institution", "degree", "startDate"):
        _check_required_string(data.get(key, _MISSING), f"{prefix}.{key}", max_len, errors)
    for key in ("fieldOfStudy", "endDate", "cgpa"):
        _check_optional_string(data.get(key, _MISSING), f"{prefix}.{key}", max_len, errors)

    _check_string_list(
        data.get("relevantCourseWork", _MISSING),
        f"{prefix}.relevantCourseWork",
        limits.max_array_length,
        max_len,
        errors,
        required=False,
    )
    return errors


def validate_skills(data: Any, limits: ValidationLimits) -> list[ValidationError]:
    """Validate the ``skills`` section."""
    errors: list[ValidationError] = []
    if not _check_section_object(data, "skills", "Skills", errors):
        return errors

    _check_string_list(
        data.get("skills", _MISSING),
        "skills.skills",
        limits.max_skills_count,
        limits.max_string_length,
        errors,
    )
    return errors


def validate_project(
    data: Any,
    index: int,
    limits: ValidationLimits,
) -> list[ValidationError]:
    """Validate ``projects[index]``."""
    errors: list[ValidationError] = []
    prefix = f"projects[{index}]"
    if not _check_section_object(data, prefix, "Project entry", errors):
        return errors

    max_len = limits.max_string_length
    _check_required_string(data.get("name", _MISSING), f"{prefix}.name", max_len, errors)
    _check_string_list(
        data.get("description", _MISSING),
        f"{prefix}.description",
        limits.max_description_points,
        max_len,
        errors,
    )
    _check_string_list(
        data.get("techStack", _MISSING),
        f"{prefix}.techStack",
        limits.max_array_length,
        max_len,
        errors,
        required=False,
    )
    _check_optional_string(data.get("link", _MISSING), f"{prefix}.link", max_len, errors)
    return errors
