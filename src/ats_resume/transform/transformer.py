"""Resume → Document transformation.

Turns a validated :class:`Resume` into the flat, ordered element sequence the
renderer consumes. Input is assumed valid; nothing here re-checks it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ats_resume.models.document import (
    Document,
    DocumentElement,
    Heading,
    ListBlock,
    Paragraph,
    SectionBreak,
    TextLine,
)
from ats_resume.models.resume import Education, Project, Resume, WorkExperience
from ats_resume.transform.section_order import SectionKey, normalize_section_order
from ats_resume.transform.skill_categorizer import format_skill_lines

__all__ = [
    "transform_resume",
]

_FIELD_SEPARATOR = " | "
_PRESENT = "Present"

_SPACER = TextLine("")


# -----------------------------------------------------------------------
# Entry builders


def _join_present(parts: Sequence[str | None]) -> str:
    return _FIELD_SEPARATOR.join(part for part in parts if part)


def _date_range(start: str, end: str | None) -> str:
    return f"{start} - {end or _PRESENT}"


def _experience_entry(entry: WorkExperience) -> list[DocumentElement]:
    company_line = f"{entry.company} - {entry.location}" if entry.location else entry.company
    elements: list[DocumentElement] = [
        Heading(3, entry.role),
        TextLine(company_line),
        TextLine(_date_range(entry.start_date, entry.end_date)),
    ]
    if entry.description:
        elements.append(ListBlock(tuple(entry.description)))
    return elements


def _education_entry(entry: Education) -> list[DocumentElement]:
    degree = f"{entry.degree} in {entry.field_of_study}" if entry.field_of_study else entry.degree
    meta = _date_range(entry.start_date, entry.end_date)
    if entry.cgpa:
        meta = f"{meta}{_FIELD_SEPARATOR}CGPA: {entry.cgpa}"

    elements: list[DocumentElement] = [
        Heading(3, degree),
        TextLine(entry.institution),
        TextLine(meta),
    ]
    if entry.relevant_course_work:
        coursework = ", ".join(entry.relevant_course_work)
        elements.append(TextLine(f"Relevant Coursework: {coursework}"))
    return elements


def _project_entry(entry: Project) -> list[DocumentElement]:
    elements: list[DocumentElement] = [Heading(3, entry.name)]
    if entry.tech_stack:
        elements.append(TextLine(", ".join(entry.tech_stack)))
    if entry.link:
        elements.append(TextLine(entry.link))
    if entry.description:
        elements.append(ListBlock(tuple(entry.description)))
    return elements


def _entries_with_spacers(
    title: str,
    entry_groups: Sequence[list[DocumentElement]],
) -> list[DocumentElement]:
    """Section heading followed by entries separated by blank lines."""
    if not entry_groups:
        return []
    elements: list[DocumentElement] = [Heading(2, title)]
    for index, group in enumerate(entry_groups):
        if index > 0:
            elements.append(_SPACER)
        elements.extend(group)
    return elements


# -----------------------------------------------------------------------
# Section builders


def _contact_section(resume: Resume) -> list[DocumentElement]:
    contact = resume.contact
    elements: list[DocumentElement] = [Heading(1, contact.full_name)]

    if contact.job_title:
        elements.append(TextLine(contact.job_title))

    details = _join_present([contact.email, contact.phone, contact.location])
    if details:
        elements.append(TextLine(details))

    links = _join_present([contact.linkedin, contact.github, contact.portfolio, contact.twitter])
    if links:
        elements.append(TextLine(links))

    return elements


def _summary_section(resume: Resume) -> list[DocumentElement]:
    if not resume.summary.summary:
        return []
    return [Heading(2, "Professional Summary"), Paragraph(resume.summary.summary)]


def _experience_section(resume: Resume) -> list[DocumentElement]:
    return _entries_with_spacers(
        "Work Experience",
        [_experience_entry(entry) for entry in resume.experience],
    )


def _education_section(resume: Resume) -> list[DocumentElement]:
    return _entries_with_spacers(
        "Education",
        [_education_entry(entry) for entry in resume.education],
    )


def _skills_section(resume: Resume) -> list[DocumentElement]:
    lines = format_skill_lines(resume.skills.skills)
    if not lines:
        return []
    return [Heading(2, "Skills"), *(TextLine(line) for line in lines)]


def _projects_section(resume: Resume) -> list[DocumentElement]:
    return _entries_with_spacers(
        "Projects",
        [_project_entry(entry) for entry in resume.projects],
    )


def _experience_projects_section(resume: Resume) -> list[DocumentElement]:
    groups = [_experience_entry(entry) for entry in resume.experience]
    groups.extend(_project_entry(entry) for entry in resume.projects)
    return _entries_with_spacers("Experience & Projects", groups)


_SECTION_BUILDERS: dict[SectionKey, Callable[[Resume], list[DocumentElement]]] = {
    SectionKey.CONTACT: _contact_section,
    SectionKey.SUMMARY: _summary_section,
    SectionKey.EXPERIENCE: _experience_section,
    SectionKey.EDUCATION: _education_section,
    SectionKey.SKILLS: _skills_section,
    SectionKey.PROJECTS: _projects_section,
    SectionKey.EXPERIENCE_PROJECTS: _experience_projects_section,
}


# -----------------------------------------------------------------------
# Public API


def transform_resume(
    resume: Resume,
    section_order: Sequence[Any] | None = None,
) -> Document:
    """Build the document for *resume* with sections in *section_order*.

    Sections with no content are skipped. Exactly one :class:`SectionBreak`
    separates consecutive non-empty sections; none trails the last one.

    Args:
        resume: Validated resume.
        section_order: Requested section keys. Normalized with
            :func:`normalize_section_order`; contact always comes first.

    Returns:
        A fresh :class:`Document`.
    """
    order = normalize_section_order(
        section_order,
        combine_experience_projects=resume.combined_experience_projects,
    )

    elements: list[DocumentElement] = []
    for key in order:
        section = _SECTION_BUILDERS[key](resume)
        if not section:
            continue
        if elements:
            elements.append(SectionBreak())
        elements.extend(section)

    return Document(elements=tuple(elements))
