"""Health check routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ats_resume.rendering.styles import list_density_presets, list_font_profiles

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, Any]:
    """Report that the API is up and which PDF styles it can render."""
    return {
        "status": "healthy",
        "fontProfiles": list_font_profiles(),
        "densityPresets": list_density_presets(),
    }
