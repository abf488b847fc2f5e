"""Data models and type definitions"""

from ats_resume.models.document import (
    Document,
    DocumentElement,
    Heading,
    HeadingLevel,
    ListBlock,
    Paragraph,
    SectionBreak,
    TextLine,
)
from ats_resume.models.errors import AtsInvariantError, ResumeValidationError
from ats_resume.models.resume import (
    ContactInfo,
    Education,
    ProfessionalSummary,
    Project,
    Resume,
    Skills,
    WorkExperience,
)
from ats_resume.models.validation import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)

__all__ = [
    "AtsInvariantError",
    "ContactInfo",
    "Document",
    "DocumentElement",
    "Education",
    "Heading",
    "HeadingLevel",
    "ListBlock",
    "Paragraph",
    "ProfessionalSummary",
    "Project",
    "Resume",
    "ResumeValidationError",
    "SectionBreak",
    "Skills",
    "TextLine",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "WorkExperience",
]
