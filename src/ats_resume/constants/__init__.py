from __future__ import annotations

from ats_resume.constants.page_layout import (
    BULLET_MARKER,
    CONTENT_WIDTH,
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_TOP,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    line_height,
)
from ats_resume.constants.skill_categories import (
    CATEGORY_ALIASES,
    CATEGORY_ORDER,
    OTHER_CATEGORY,
    SKILL_CATEGORY_KEYWORDS,
)

__all__ = [
    "BULLET_MARKER",
    "CATEGORY_ALIASES",
    "CATEGORY_ORDER",
    "CONTENT_WIDTH",
    "MARGIN_BOTTOM",
    "MARGIN_LEFT",
    "MARGIN_RIGHT",
    "MARGIN_TOP",
    "OTHER_CATEGORY",
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "SKILL_CATEGORY_KEYWORDS",
    "line_height",
]
