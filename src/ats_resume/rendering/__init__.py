"""PDF rendering: styles, page writer and the paginating renderer."""

from ats_resume.rendering.links import LinkMatch, find_links
from ats_resume.rendering.page_writer import FpdfPageWriter, PageWriter
from ats_resume.rendering.renderer import RenderResult, render_document, verify_element_order
from ats_resume.rendering.styles import (
    DensityPreset,
    FontProfile,
    StyleConfig,
    get_style_config,
    list_density_presets,
    list_font_profiles,
)

__all__ = [
    "DensityPreset",
    "FontProfile",
    "FpdfPageWriter",
    "LinkMatch",
    "PageWriter",
    "RenderResult",
    "StyleConfig",
    "find_links",
    "get_style_config",
    "list_density_presets",
    "list_font_profiles",
    "render_document",
    "verify_element_order",
]
