"""Deterministic grouping of flat skill strings into named categories."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from ats_resume.constants.skill_categories import (
    CATEGORY_ALIASES,
    CATEGORY_ORDER,
    OTHER_CATEGORY,
    SKILL_CATEGORY_KEYWORDS,
)

__all__ = [
    "CategorizedSkill",
    "categorize_by_keyword",
    "format_skill_lines",
    "group_skills",
    "parse_skill",
]

_PREFIX_SEPARATOR = ": "


class CategorizedSkill(NamedTuple):
    category: str
    skill: str


def categorize_by_keyword(skill: str) -> str:
    """Return the first category with a keyword contained in *skill*.

    Matching is a case-insensitive substring test, so "PostgreSQL" hits the
    "postgres" keyword. Falls back to ``Other``.
    """
    normalized = skill.strip().lower()
    for category, keywords in SKILL_CATEGORY_KEYWORDS.items():
        for keyword in keywords:
            if keyword in normalized:
                return category
    return OTHER_CATEGORY


def parse_skill(raw_skill: str) -> CategorizedSkill:
    """Split an optional ``"Category: Skill"`` prefix off *raw_skill*.

    A recognised prefix is mapped to its canonical category name; an
    unrecognised one lands in ``Other``. Without a prefix the skill is
    categorized by keyword.
    """
    trimmed = raw_skill.strip()
    separator_at = trimmed.find(_PREFIX_SEPARATOR)

    if separator_at > 0:
        raw_category = trimmed[:separator_at].strip()
        skill = trimmed[separator_at + len(_PREFIX_SEPARATOR) :].strip()
        if raw_category and skill:
            category = CATEGORY_ALIASES.get(raw_category.lower(), OTHER_CATEGORY)
            return CategorizedSkill(category, skill)

    return CategorizedSkill(categorize_by_keyword(trimmed), trimmed)


def group_skills(raw_skills: Iterable[str]) -> dict[str, list[str]]:
    """Group skills by category in canonical category order.

    Skills keep their input order within a category; empty categories are
    left out.
    """
    buckets: dict[str, list[str]] = {}
    for raw_skill in raw_skills:
        category, skill = parse_skill(raw_skill)
        buckets.setdefault(category, []).append(skill)

    return {category: buckets[category] for category in CATEGORY_ORDER if category in buckets}


def format_skill_lines(raw_skills: Iterable[str]) -> list[str]:
    """Return one ``"Category: a, b"`` line per non-empty category."""
    return [
        f"{category}: {', '.join(skills)}" for category, skills in group_skills(raw_skills).items()
    ]
