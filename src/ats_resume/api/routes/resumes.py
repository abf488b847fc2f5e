"""Resume routes for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from ats_resume.api.schemas.resumes import ResumePdfRequest, ResumeValidationErrorResponse
from ats_resume.models.errors import AtsInvariantError, ResumeValidationError
from ats_resume.services.resume_pdf import generate_resume_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])

PAGE_COUNT_HEADER = "X-PDF-Page-Count"


@router.post(
    "/pdf",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ResumeValidationErrorResponse},
    },
)
def render_resume_pdf(data: ResumePdfRequest) -> Response:
    """Validate a resume and return it as an ATS-friendly PDF.

    The page count is returned in the ``X-PDF-Page-Count`` header so clients
    can warn when the resume runs past one page.
    """
    try:
        result = generate_resume_pdf(
            data.resume,
            data.section_order,
            font_profile=data.font_profile,
            density=data.density_preset,
        )
    except ResumeValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": str(exc),
                "errors": [error.to_dict() for error in exc.errors],
            },
        ) from None
    except AtsInvariantError:
        logger.exception("Resume rendering failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Resume could not be rendered.",
        ) from None

    return Response(
        content=result.pdf,
        media_type="application/pdf",
        headers={
            PAGE_COUNT_HEADER: str(result.page_count),
            "Content-Disposition": 'inline; filename="resume.pdf"',
        },
    )
