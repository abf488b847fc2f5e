"""Validation of untrusted resume JSON."""

from ats_resume.validation.fields import (
    validate_contact_info,
    validate_education,
    validate_professional_summary,
    validate_project,
    validate_skills,
    validate_work_experience,
)
from ats_resume.validation.resume_validator import (
    is_valid_resume,
    parse_resume,
    validate_resume,
)
from ats_resume.validation.sanitization import (
    is_safe_string,
    normalize_whitespace,
    sanitize_string,
    sanitize_string_list,
)
from ats_resume.validation.structure import get_object_depth, is_structure_safe

__all__ = [
    "get_object_depth",
    "is_safe_string",
    "is_structure_safe",
    "is_valid_resume",
    "normalize_whitespace",
    "parse_resume",
    "sanitize_string",
    "sanitize_string_list",
    "validate_contact_info",
    "validate_education",
    "validate_professional_summary",
    "validate_project",
    "validate_resume",
    "validate_skills",
    "validate_work_experience",
]
