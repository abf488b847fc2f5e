"""Fixed page geometry for rendered resumes (US Letter, points)."""

from __future__ import annotations

from typing import Final

PAGE_WIDTH: Final = 612.0
PAGE_HEIGHT: Final = 792.0

# 0.75 inch on every side
MARGIN_TOP: Final = 54.0
MARGIN_BOTTOM: Final = 54.0
MARGIN_LEFT: Final = 54.0
MARGIN_RIGHT: Final = 54.0

CONTENT_WIDTH: Final = PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT

LINE_HEIGHT_FACTOR: Final = 1.15

BULLET_MARKER: Final = "-"


def line_height(font_size: float) -> float:
    """Return the line height used for text set at *font_size*."""
    return font_size * LINE_HEIGHT_FACTOR
