"""Style registry: font profiles and density presets.

A :class:`StyleConfig` pairs one font profile with one density preset. All
records are immutable and built once at import time; the renderer receives
the selected config explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "DensityPreset",
    "FontProfile",
    "FontSizes",
    "Spacing",
    "StyleConfig",
    "get_style_config",
    "list_density_presets",
    "list_font_profiles",
]


@dataclass(frozen=True, slots=True)
class FontProfile:
    """Body and bold faces from the PDF standard fonts."""

    name: str
    body: str
    bold: str


@dataclass(frozen=True, slots=True)
class FontSizes:
    h1: float
    h2: float
    h3: float
    body: float
    contact_info: float

    def for_heading(self, level: int) -> float:
        if level == 1:
            return self.h1
        if level == 2:
            return self.h2
        return self.h3


@dataclass(frozen=True, slots=True)
class Spacing:
    """Vertical spacing in points, plus the list indent and break thresholds."""

    section_break: float
    after_heading: float
    after_name_heading: float
    after_paragraph: float
    after_text_line: float
    after_contact_line: float
    after_list: float
    list_item_indent: float
    between_list_items: float
    # Orphan avoidance: free space required before starting these elements.
    min_space_for_paragraph: float
    min_space_for_list_item: float


@dataclass(frozen=True, slots=True)
class DensityPreset:
    name: str
    font_sizes: FontSizes
    spacing: Spacing


@dataclass(frozen=True, slots=True)
class StyleConfig:
    font_profile: FontProfile
    density: DensityPreset

    @property
    def name(self) -> str:
        return f"{self.font_profile.name}/{self.density.name}"


_FONT_PROFILES: MappingProxyType[str, FontProfile] = MappingProxyType(
    {
        "sans": FontProfile("sans", body="Helvetica", bold="Helvetica-Bold"),
        "serif": FontProfile("serif", body="Times-Roman", bold="Times-Bold"),
        "mono": FontProfile("mono", body="Courier", bold="Courier-Bold"),
    }
)

_DENSITY_PRESETS: MappingProxyType[str, DensityPreset] = MappingProxyType(
    {
        "normal": DensityPreset(
            "normal",
            FontSizes(h1=16, h2=14, h3=12, body=11, contact_info=9.5),
            Spacing(
                section_break=12,
                after_heading=4,
                after_name_heading=2,
                after_paragraph=6,
                after_text_line=2,
                after_contact_line=8,
                after_list=6,
                list_item_indent=15,
                between_list_items=2,
                min_space_for_paragraph=40,
                min_space_for_list_item=30,
            ),
        ),
        "compact": DensityPreset(
            "compact",
            FontSizes(h1=15, h2=13, h3=11, body=10, contact_info=9),
            Spacing(
                section_break=10,
                after_heading=3,
                after_name_heading=1.5,
                after_paragraph=5,
                after_text_line=2,
                after_contact_line=7,
                after_list=5,
                list_item_indent=15,
                between_list_items=1.5,
                min_space_for_paragraph=40,
                min_space_for_list_item=30,
            ),
        ),
        "ultra-compact": DensityPreset(
            "ultra-compact",
            FontSizes(h1=14, h2=12, h3=10, body=9, contact_info=8.5),
            Spacing(
                section_break=8,
                after_heading=2,
                after_name_heading=1,
                after_paragraph=4,
                after_text_line=2,
                after_contact_line=6,
                after_list=4,
                list_item_indent=15,
                between_list_items=1,
                min_space_for_paragraph=40,
                min_space_for_list_item=30,
            ),
        ),
    }
)

_REGISTRY: MappingProxyType[tuple[str, str], StyleConfig] = MappingProxyType(
    {
        (profile_name, density_name): StyleConfig(profile, density)
        for profile_name, profile in _FONT_PROFILES.items()
        for density_name, density in _DENSITY_PRESETS.items()
    }
)


def get_style_config(font_profile: str = "sans", density: str = "normal") -> StyleConfig:
    """Return the style registered for *font_profile* and *density*.

    Raises:
        ValueError: If either name is unknown.
    """
    if font_profile not in _FONT_PROFILES:
        available = ", ".join(list_font_profiles())
        msg = f"Unknown font profile {font_profile!r}. Available: {available}"
        raise ValueError(msg)
    if density not in _DENSITY_PRESETS:
        available = ", ".join(list_density_presets())
        msg = f"Unknown density preset {density!r}. Available: {available}"
        raise ValueError(msg)
    return _REGISTRY[(font_profile, density)]


def list_font_profiles() -> list[str]:
    """Return sorted names of all font profiles."""
    return sorted(_FONT_PROFILES)


def list_density_presets() -> list[str]:
    """Return sorted names of all density presets."""
    return sorted(_DENSITY_PRESETS)
