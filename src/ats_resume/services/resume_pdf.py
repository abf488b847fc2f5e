"""Resume PDF generation service.

Runs the whole pipeline for one payload: validate the untrusted JSON, build
the document model, resolve the style and render the PDF.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ats_resume.config import ValidationLimits, get_validation_limits
from ats_resume.rendering.page_writer import PageWriter
from ats_resume.rendering.renderer import RenderResult, render_document
from ats_resume.rendering.styles import get_style_config
from ats_resume.transform.transformer import transform_resume
from ats_resume.validation.resume_validator import parse_resume

logger = logging.getLogger(__name__)

__all__ = ["generate_resume_pdf"]


def generate_resume_pdf(
    payload: Any,
    section_order: Sequence[str] | None = None,
    font_profile: str = "sans",
    density: str = "normal",
    *,
    limits: ValidationLimits | None = None,
    writer: PageWriter | None = None,
) -> RenderResult:
    """Validate *payload* and render it as an ATS-friendly PDF.

    Args:
        payload: Untrusted resume JSON (already decoded).
        section_order: Requested section keys; unknown keys are ignored.
        font_profile: Registered font profile name.
        density: Registered density preset name.
        limits: Validation limits. Read from the environment when omitted.
        writer: Page writer to draw on. A fresh fpdf2 writer when omitted.

    Returns:
        The PDF bytes and the number of pages produced.

    Raises:
        ResumeValidationError: If the payload fails validation.
        ValueError: If the font profile or density is unknown.
        AtsInvariantError: If rendering would break document order.
    """
    resume = parse_resume(payload, limits or get_validation_limits())
    document = transform_resume(resume, section_order)
    style = get_style_config(font_profile, density)

    result = render_document(document, style, writer)
    if result.page_count > 1:
        logger.info("Resume overflows one page: %d pages", result.page_count)
    return result
