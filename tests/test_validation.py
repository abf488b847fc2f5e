"""Tests for resume payload validation."""

from __future__ import annotations

from typing import Any

import pytest

from ats_resume.config import ValidationLimits
from ats_resume.models.errors import ResumeValidationError
from ats_resume.models.resume import Resume
from ats_resume.models.validation import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)
from ats_resume.validation import (
    is_valid_resume,
    parse_resume,
    validate_contact_info,
    validate_education,
    validate_project,
    validate_resume,
    validate_work_experience,
)


def _types(result: ValidationResult) -> list[ValidationErrorType]:
    return [error.type for error in result.errors]


def _fields(result: ValidationResult) -> list[str]:
    return [error.field for error in result.errors]


class TestValidResume:
    """A well-formed payload passes."""

    def test_valid_payload(self, resume_payload: dict[str, Any]) -> None:
        result = validate_resume(resume_payload)

        assert result.is_valid
        assert result.errors == ()
        assert is_valid_resume(resume_payload)

    def test_empty_entry_sections_are_valid(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["experience"] = []
        resume_payload["education"] = []
        resume_payload["projects"] = []
        resume_payload["skills"] = {"skills": []}

        assert validate_resume(resume_payload).is_valid

    def test_optional_fields_may_be_null(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["contact"]["jobTitle"] = None
        resume_payload["projects"][0]["link"] = None
        resume_payload["education"][0]["relevantCourseWork"] = None

        assert validate_resume(resume_payload).is_valid


class TestStructuralChecks:
    """Root-level failures stop validation with exactly one error."""

    def test_none_payload(self) -> None:
        result = validate_resume(None)

        assert _types(result) == [ValidationErrorType.REQUIRED_FIELD_MISSING]
        assert _fields(result) == ["resume"]

    @pytest.mark.parametrize("payload", [[], "resume", 42, True])
    def test_non_object_payload(self, payload: Any) -> None:
        result = validate_resume(payload)

        assert _types(result) == [ValidationErrorType.INVALID_TYPE]
        assert result.errors[0].value == payload

    def test_oversized_payload(self, resume_payload: dict[str, Any]) -> None:
        limits = ValidationLimits(max_json_size=100)

        result = validate_resume(resume_payload, limits)

        assert _types(result) == [ValidationErrorType.SIZE_EXCEEDED]
        assert result.errors[0].value > 100

    def test_deep_nesting(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["extra"] = {"a": {"b": {"c": {"d": {"e": {}}}}}}

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.DEPTH_EXCEEDED]

    def test_reserved_key(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["contact"]["__proto__"] = {"isAdmin": True}

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.DEPTH_EXCEEDED]

    def test_non_json_values(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["extra"] = {1, 2, 3}

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.INVALID_TYPE]
        assert _fields(result) == ["resume"]

    def test_size_checked_before_depth(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["extra"] = {"a": {"b": {"c": {"d": {"e": {}}}}}}
        limits = ValidationLimits(max_json_size=10)

        result = validate_resume(resume_payload, limits)

        assert _types(result) == [ValidationErrorType.SIZE_EXCEEDED]


class TestFieldErrors:
    """Field problems accumulate across sections."""

    def test_missing_email_reports_exactly_one_error(
        self, resume_payload: dict[str, Any]
    ) -> None:
        del resume_payload["contact"]["email"]

        result = validate_resume(resume_payload)

        assert len(result.errors) == 1
        assert result.errors[0].type is ValidationErrorType.REQUIRED_FIELD_MISSING
        assert result.errors[0].field == "contact.email"

    def test_blank_required_string(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["contact"]["fullName"] = "   "

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.REQUIRED_FIELD_MISSING]
        assert _fields(result) == ["contact.fullName"]

    def test_wrong_type(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["contact"]["phone"] = 5550100

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.INVALID_TYPE]
        assert result.errors[0].value == 5550100

    def test_summary_too_long(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["summary"]["summary"] = "a" * 501

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.STRING_TOO_LONG]
        assert _fields(result) == ["summary.summary"]
        assert result.errors[0].value == 501

    def test_nul_byte_in_skill_is_unsafe(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["skills"]["skills"] = ["Python", "Go\x00lang"]

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.UNSAFE_CONTENT]
        assert _fields(result) == ["skills.skills[1]"]

    def test_markup_is_unsafe(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["summary"]["summary"] = "<script>alert(1)</script>"

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.UNSAFE_CONTENT]

    def test_every_bad_list_item_is_reported(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["experience"][0]["description"] = ["ok", "", 3]

        result = validate_resume(resume_payload)

        assert _fields(result) == [
            "experience[0].description[1]",
            "experience[0].description[2]",
        ]
        assert _types(result) == [
            ValidationErrorType.REQUIRED_FIELD_MISSING,
            ValidationErrorType.INVALID_TYPE,
        ]

    def test_errors_accumulate_across_sections(self, resume_payload: dict[str, Any]) -> None:
        del resume_payload["contact"]["email"]
        resume_payload["projects"][0]["name"] = ["not", "a", "string"]
        del resume_payload["summary"]

        result = validate_resume(resume_payload)

        assert _fields(result) == ["contact.email", "summary", "projects[0].name"]

    def test_missing_entry_section(self, resume_payload: dict[str, Any]) -> None:
        del resume_payload["education"]

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.REQUIRED_FIELD_MISSING]
        assert _fields(result) == ["education"]

    def test_section_of_wrong_type(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["projects"] = {"name": "Not a list"}
        resume_payload["skills"] = ["Python"]

        result = validate_resume(resume_payload)

        assert _fields(result) == ["skills", "projects"]
        assert set(_types(result)) == {ValidationErrorType.INVALID_TYPE}

    def test_combined_flag_must_be_boolean(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["combinedExperienceProjects"] = "yes"

        result = validate_resume(resume_payload)

        assert _fields(result) == ["combinedExperienceProjects"]


class TestArrayLimits:
    """Over-limit arrays are rejected wholesale."""

    def test_twenty_one_experience_entries(self, resume_payload: dict[str, Any]) -> None:
        # Entries are invalid on purpose: none of them may be inspected.
        resume_payload["experience"] = [{} for _ in range(21)]

        result = validate_resume(resume_payload)

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.type is ValidationErrorType.ARRAY_TOO_LARGE
        assert error.field == "experience"
        assert error.value == 21

    def test_twenty_entries_are_allowed(self, resume_payload: dict[str, Any]) -> None:
        entry = resume_payload["experience"][0]
        resume_payload["experience"] = [dict(entry) for _ in range(20)]

        assert validate_resume(resume_payload).is_valid

    def test_too_many_description_points(self, resume_payload: dict[str, Any]) -> None:
        resume_payload["experience"][0]["description"] = [f"Point {i}" for i in range(11)]

        result = validate_resume(resume_payload)

        assert _types(result) == [ValidationErrorType.ARRAY_TOO_LARGE]
        assert _fields(result) == ["experience[0].description"]

    def test_custom_limits(self, resume_payload: dict[str, Any]) -> None:
        limits = ValidationLimits(max_skills_count=2)

        result = validate_resume(resume_payload, limits)

        assert _fields(result) == ["skills.skills"]


class TestSectionValidators:
    """Section validators can be used on their own."""

    def test_contact_requires_object(self) -> None:
        errors = validate_contact_info("Jane", ValidationLimits())

        assert [error.type for error in errors] == [ValidationErrorType.INVALID_TYPE]

    def test_contact_reports_all_missing_fields(self) -> None:
        errors = validate_contact_info({}, ValidationLimits())

        assert [error.field for error in errors] == [
            "contact.fullName",
            "contact.email",
            "contact.phone",
            "contact.location",
        ]

    def test_work_experience_paths_use_index(self) -> None:
        errors = validate_work_experience({"description": []}, 3, ValidationLimits())

        assert [error.field for error in errors] == [
            "experience[3].company",
            "experience[3].role",
            "experience[3].startDate",
        ]

    def test_education_coursework_is_optional(self) -> None:
        entry = {"institution": "MIT", "degree": "BSc", "startDate": "2018"}

        assert validate_education(entry, 0, ValidationLimits()) == []

    def test_project_tech_stack_must_be_list(self) -> None:
        entry = {"name": "Tool", "description": [], "techStack": "Python"}

        errors = validate_project(entry, 1, ValidationLimits())

        assert [error.field for error in errors] == ["projects[1].techStack"]


class TestErrorSerialization:
    def test_value_omitted_when_unset(self) -> None:
        error = ValidationError(ValidationErrorType.REQUIRED_FIELD_MISSING, "contact.email", "x")

        assert error.to_dict() == {
            "type": "REQUIRED_FIELD_MISSING",
            "field": "contact.email",
            "message": "x",
        }

    def test_value_included_when_set(self) -> None:
        error = ValidationError(ValidationErrorType.ARRAY_TOO_LARGE, "experience", "x", 21)

        assert error.to_dict()["value"] == 21

    def test_none_value_is_kept(self) -> None:
        error = ValidationError(ValidationErrorType.INVALID_TYPE, "skills", "x", None)

        assert "value" in error.to_dict()

    def test_result_to_dict(self) -> None:
        assert ValidationResult().to_dict() == {"isValid": True, "errors": []}


class TestParseResume:
    def test_returns_typed_resume(self, resume_payload: dict[str, Any]) -> None:
        resume = parse_resume(resume_payload)

        assert isinstance(resume, Resume)
        assert resume.contact.full_name == "Jane Doe"
        assert resume.experience[0].end_date is None
        assert resume.education[0].relevant_course_work == ("Algorithms", "Databases")

    def test_raises_with_all_errors(self, resume_payload: dict[str, Any]) -> None:
        del resume_payload["contact"]["email"]
        del resume_payload["contact"]["phone"]

        with pytest.raises(ResumeValidationError) as exc_info:
            parse_resume(resume_payload)

        assert len(exc_info.value.errors) == 2
        assert "2 errors" in str(exc_info.value)
