"""Resume to document-model transformation."""

from ats_resume.transform.section_order import (
    DEFAULT_SECTION_ORDER,
    SectionKey,
    normalize_section_order,
)
from ats_resume.transform.skill_categorizer import (
    categorize_by_keyword,
    format_skill_lines,
    group_skills,
    parse_skill,
)
from ats_resume.transform.transformer import transform_resume

__all__ = [
    "DEFAULT_SECTION_ORDER",
    "SectionKey",
    "categorize_by_keyword",
    "format_skill_lines",
    "group_skills",
    "normalize_section_order",
    "parse_skill",
    "transform_resume",
]
