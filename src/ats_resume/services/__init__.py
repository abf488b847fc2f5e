"""Service layer for resume PDF generation."""

from ats_resume.services.resume_pdf import generate_resume_pdf

__all__ = ["generate_resume_pdf"]
