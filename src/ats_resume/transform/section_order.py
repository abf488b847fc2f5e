"""Section ordering for the document transformer."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

__all__ = [
    "DEFAULT_SECTION_ORDER",
    "SectionKey",
    "normalize_section_order",
]


class SectionKey(str, Enum):
    """Sections that can appear in a rendered resume."""

    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    # Virtual section: experience entries followed by project entries.
    EXPERIENCE_PROJECTS = "experienceProjects"


DEFAULT_SECTION_ORDER: tuple[SectionKey, ...] = (
    SectionKey.CONTACT,
    SectionKey.SUMMARY,
    SectionKey.EXPERIENCE,
    SectionKey.EDUCATION,
    SectionKey.SKILLS,
    SectionKey.PROJECTS,
)

_SUBSUMED_BY_COMBINED = frozenset({SectionKey.EXPERIENCE, SectionKey.PROJECTS})
_KEYS_BY_VALUE = {key.value: key for key in SectionKey}


def _parse_keys(section_order: Sequence[Any]) -> list[SectionKey]:
    """Keep known keys in first-seen order; drop unknowns and duplicates."""
    seen: set[SectionKey] = set()
    keys: list[SectionKey] = []
    for raw in section_order:
        key = _KEYS_BY_VALUE.get(raw) if isinstance(raw, str) else None
        if key is None or key in seen:
            continue
        seen.add(key)
        keys.append(key)
    return keys


def _apply_combined(keys: list[SectionKey]) -> list[SectionKey]:
    """Put the combined section where experience or projects first appeared."""
    if SectionKey.EXPERIENCE_PROJECTS in keys:
        return keys
    for position, key in enumerate(keys):
        if key in _SUBSUMED_BY_COMBINED:
            keys = list(keys)
            keys[position] = SectionKey.EXPERIENCE_PROJECTS
            return keys
    return [*keys, SectionKey.EXPERIENCE_PROJECTS]


def normalize_section_order(
    section_order: Sequence[Any] | None = None,
    *,
    combine_experience_projects: bool = False,
) -> list[SectionKey]:
    """Return a complete, de-duplicated section order with contact first.

    Unknown and repeated keys are dropped. Canonical sections missing from
    *section_order* are appended in default order, except experience and
    projects when the combined ``experienceProjects`` section is present,
    since it already renders both.

    Args:
        section_order: Requested order, usually straight from the request.
        combine_experience_projects: Render experience and projects as one
            section even if the order does not name ``experienceProjects``.
    """
    if section_order is None or isinstance(section_order, (str, bytes)):
        keys: list[SectionKey] = []
    elif isinstance(section_order, Sequence):
        keys = _parse_keys(section_order)
    else:
        keys = []

    if not keys:
        keys = list(DEFAULT_SECTION_ORDER)

    if combine_experience_projects:
        keys = _apply_combined(keys)

    combined = SectionKey.EXPERIENCE_PROJECTS in keys
    if combined:
        keys = [key for key in keys if key not in _SUBSUMED_BY_COMBINED]

    final_order = [SectionKey.CONTACT]
    final_order.extend(key for key in keys if key is not SectionKey.CONTACT)

    for key in DEFAULT_SECTION_ORDER:
        if combined and key in _SUBSUMED_BY_COMBINED:
            continue
        if key not in final_order:
            final_order.append(key)

    return final_order
