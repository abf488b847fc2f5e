"""Page-writer collaborator consumed by the renderer.

The renderer only needs a handful of drawing primitives. :class:`PageWriter`
names them; :class:`FpdfPageWriter` implements them on top of fpdf2 using
the PDF standard (core) fonts so the output stays plain, searchable text.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from ats_resume.constants.page_layout import (
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_TOP,
    PAGE_HEIGHT,
    PAGE_WIDTH,
)

__all__ = ["FpdfPageWriter", "PageWriter"]


@runtime_checkable
class PageWriter(Protocol):
    """Minimal drawing surface. Coordinates are points from the top-left."""

    def new_page(self) -> None: ...

    def set_font(self, face: str, size: float) -> None: ...

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        max_width: float,
        *,
        line_height: float,
        wrap: bool = True,
    ) -> float:
        """Draw *text* with its top at *y*; return the y below the last line."""
        ...

    def measure_width(self, text: str) -> float: ...

    def add_link_region(self, x: float, y: float, w: float, h: float, target: str) -> None: ...

    def finish(self) -> tuple[bytes, int]:
        """Finalize the document; return its bytes and page count."""
        ...


# Standard font name -> (fpdf family, style)
_CORE_FACES: dict[str, tuple[str, str]] = {
    "Helvetica": ("Helvetica", ""),
    "Helvetica-Bold": ("Helvetica", "B"),
    "Times-Roman": ("Times", ""),
    "Times-Bold": ("Times", "B"),
    "Courier": ("Courier", ""),
    "Courier-Bold": ("Courier", "B"),
}


def _to_core_font_text(text: str) -> str:
    """Core fonts only cover Latin-1; replace anything outside it."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class FpdfPageWriter:
    """:class:`PageWriter` backed by an in-memory ``FPDF`` document.

    The first page exists as soon as the writer is created. Wrapped text that
    runs past the bottom margin continues on a new page automatically.
    """

    def __init__(self, *, title: str | None = None) -> None:
        pdf = FPDF(orientation="portrait", unit="pt", format=(PAGE_WIDTH, PAGE_HEIGHT))
        pdf.set_margins(MARGIN_LEFT, MARGIN_TOP, MARGIN_RIGHT)
        pdf.set_auto_page_break(auto=True, margin=MARGIN_BOTTOM)
        # Text starts exactly at the requested x so link regions line up.
        pdf.c_margin = 0
        pdf.set_creator("ats-resume")
        if title:
            pdf.set_title(_to_core_font_text(title))
        pdf.add_page()
        self._pdf = pdf

    def new_page(self) -> None:
        self._pdf.add_page()

    def set_font(self, face: str, size: float) -> None:
        try:
            family, style = _CORE_FACES[face]
        except KeyError:
            available = ", ".join(sorted(_CORE_FACES))
            msg = f"Unsupported font face {face!r}. Available: {available}"
            raise ValueError(msg) from None
        self._pdf.set_font(family, style, size)

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        max_width: float,
        *,
        line_height: float,
        wrap: bool = True,
    ) -> float:
        if not text:
            return y + line_height

        pdf = self._pdf
        pdf.set_xy(x, y)
        if wrap:
            pdf.multi_cell(
                max_width,
                line_height,
                _to_core_font_text(text),
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )
            return pdf.get_y()

        single_line = " ".join(text.splitlines())
        pdf.cell(
            max_width,
            line_height,
            _to_core_font_text(single_line),
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        return y + line_height

    def measure_width(self, text: str) -> float:
        return self._pdf.get_string_width(_to_core_font_text(text))

    def add_link_region(self, x: float, y: float, w: float, h: float, target: str) -> None:
        # Annotation only: no border, underline or colour change.
        self._pdf.link(x, y, w, h, target)

    def finish(self) -> tuple[bytes, int]:
        data = bytes(self._pdf.output())
        return data, self._pdf.page
