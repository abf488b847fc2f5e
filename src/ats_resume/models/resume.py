"""Typed resume contract produced once untrusted JSON has been validated.

The payload uses camelCase keys (``fullName``, ``startDate``...). These
models expose snake_case attributes and accept either spelling on input.
Instances are frozen: a resume is never mutated after validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "ContactInfo",
    "Education",
    "ProfessionalSummary",
    "Project",
    "Resume",
    "Skills",
    "WorkExperience",
]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null means "absent" for optional fields; let defaults apply.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ContactInfo(_ResumeModel):
    """Name and contact details shown in the resume header."""

    full_name: str = Field(alias="fullName")
    job_title: str | None = Field(None, alias="jobTitle")
    email: str
    phone: str
    location: str
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None
    twitter: str | None = None


class ProfessionalSummary(_ResumeModel):
    """Two to four sentences of plain text."""

    summary: str


class WorkExperience(_ResumeModel):
    """A single work-experience record."""

    company: str
    role: str
    location: str | None = None
    start_date: str = Field(alias="startDate")
    end_date: str | None = Field(None, alias="endDate")
    description: tuple[str, ...] = ()


class Education(_ResumeModel):
    """A single education record."""

    institution: str
    degree: str
    field_of_study: str | None = Field(None, alias="fieldOfStudy")
    start_date: str = Field(alias="startDate")
    end_date: str | None = Field(None, alias="endDate")
    cgpa: str | None = None
    relevant_course_work: tuple[str, ...] = Field((), alias="relevantCourseWork")


class Skills(_ResumeModel):
    """Flat skill list; grouping happens at transform time."""

    skills: tuple[str, ...] = ()


class Project(_ResumeModel):
    """A single project record."""

    name: str
    description: tuple[str, ...] = ()
    tech_stack: tuple[str, ...] = Field((), alias="techStack")
    link: str | None = None


class Resume(_ResumeModel):
    """Top-level bundle handed from the validator to the transformer."""

    contact: ContactInfo
    summary: ProfessionalSummary
    experience: tuple[WorkExperience, ...] = ()
    education: tuple[Education, ...] = ()
    skills: Skills = Field(default_factory=Skills)
    projects: tuple[Project, ...] = ()
    combined_experience_projects: bool = Field(False, alias="combinedExperienceProjects")
