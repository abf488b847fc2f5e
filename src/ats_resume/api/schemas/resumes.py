"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

FontProfileName = Literal["sans", "serif", "mono"]
DensityPresetName = Literal["normal", "compact", "ultra-compact"]


class ResumePdfRequest(BaseModel):
    """Request schema for rendering a resume as a PDF.

    ``resume`` is deliberately untyped here; the resume validator checks it
    and reports every problem at once.
    """

    model_config = ConfigDict(populate_by_name=True)

    resume: Any = Field(..., description="Resume JSON to validate and render")
    section_order: list[str] | None = Field(
        None,
        alias="sectionOrder",
        description="Section keys in display order; contact always comes first",
    )
    font_profile: FontProfileName = Field(
        "sans", alias="fontProfile", description="Font profile identifier"
    )
    density_preset: DensityPresetName = Field(
        "normal", alias="densityPreset", description="Density preset identifier"
    )


class ValidationErrorItem(BaseModel):
    """One validation problem, as produced by ``ValidationError.to_dict()``."""

    type: str
    field: str
    message: str
    value: Any | None = None


class ResumeValidationDetail(BaseModel):
    """Body of the ``detail`` key on a 400 response."""

    message: str
    errors: list[ValidationErrorItem] = []


class ResumeValidationErrorResponse(BaseModel):
    """Response schema for a rejected resume payload."""

    detail: ResumeValidationDetail
