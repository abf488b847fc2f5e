"""Paginating renderer: Document → PDF bytes.

Elements are drawn strictly in document order, top to bottom, in a single
column. Before each element the renderer checks the space left above the
bottom margin against a per-element threshold and starts a new page when it
is too small.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ats_resume.constants.page_layout import (
    BULLET_MARKER,
    CONTENT_WIDTH,
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_TOP,
    PAGE_HEIGHT,
    line_height,
)
from ats_resume.models.document import (
    Document,
    DocumentElement,
    Heading,
    ListBlock,
    Paragraph,
    SectionBreak,
    TextLine,
)
from ats_resume.models.errors import AtsInvariantError
from ats_resume.rendering.links import find_links
from ats_resume.rendering.page_writer import FpdfPageWriter, PageWriter
from ats_resume.rendering.styles import StyleConfig

logger = logging.getLogger(__name__)

__all__ = [
    "RenderResult",
    "RenderState",
    "render_document",
    "verify_element_order",
]

_PAGE_BOTTOM = PAGE_HEIGHT - MARGIN_BOTTOM


@dataclass(frozen=True, slots=True)
class RenderResult:
    pdf: bytes
    page_count: int


@dataclass(slots=True)
class RenderState:
    """Mutable per-call layout state. Never shared between renders."""

    writer: PageWriter
    style: StyleConfig
    cursor_y: float = MARGIN_TOP
    # The first TextLine of a document is the contact line.
    contact_line_pending: bool = True

    @property
    def body_face(self) -> str:
        return self.style.font_profile.body

    @property
    def bold_face(self) -> str:
        return self.style.font_profile.bold

    @property
    def remaining(self) -> float:
        return _PAGE_BOTTOM - self.cursor_y

    def ensure_space(self, required: float) -> None:
        """Start a new page unless *required* points remain on this one."""
        if self.remaining < required:
            self.writer.new_page()
            self.cursor_y = MARGIN_TOP


def verify_element_order(indexed_elements: Sequence[tuple[int, DocumentElement]]) -> None:
    """Assert the render plan keeps document order.

    Raises:
        AtsInvariantError: If the indices are not strictly increasing.
    """
    previous = -1
    for index, element in indexed_elements:
        if index <= previous:
            msg = (
                f"ATS invariant violated: element {index} ({type(element).__name__}) "
                f"would render after element {previous}"
            )
            raise AtsInvariantError(msg)
        previous = index


# -----------------------------------------------------------------------
# Element renderers


def _render_heading(state: RenderState, heading: Heading) -> None:
    sizes = state.style.density.font_sizes
    spacing = state.style.density.spacing
    size = sizes.for_heading(heading.level)
    height = line_height(size)

    state.ensure_space(height)
    state.writer.set_font(state.bold_face, size)
    # Long titles wrap inside the content width instead of running off the page.
    end_y = state.writer.draw_text(
        MARGIN_LEFT, state.cursor_y, heading.text, CONTENT_WIDTH, line_height=height
    )
    state.writer.set_font(state.body_face, sizes.body)

    after = spacing.after_name_heading if heading.level == 1 else spacing.after_heading
    state.cursor_y = end_y + after


def _render_paragraph(state: RenderState, paragraph: Paragraph) -> None:
    sizes = state.style.density.font_sizes
    spacing = state.style.density.spacing

    state.ensure_space(spacing.min_space_for_paragraph)
    state.writer.set_font(state.body_face, sizes.body)
    end_y = state.writer.draw_text(
        MARGIN_LEFT,
        state.cursor_y,
        paragraph.text,
        CONTENT_WIDTH,
        line_height=line_height(sizes.body),
    )
    state.cursor_y = end_y + spacing.after_paragraph


def _add_link_regions(state: RenderState, text: str, y: float, height: float) -> None:
    for match in find_links(text):
        offset = state.writer.measure_width(text[: match.start])
        width = state.writer.measure_width(match.text)
        state.writer.add_link_region(MARGIN_LEFT + offset, y, width, height, match.target)


def _render_text_line(state: RenderState, line: TextLine) -> None:
    sizes = state.style.density.font_sizes
    spacing = state.style.density.spacing

    if state.contact_line_pending:
        state.contact_line_pending = False
        size, after = sizes.contact_info, spacing.after_contact_line
    else:
        size, after = sizes.body, spacing.after_text_line
    height = line_height(size)

    state.ensure_space(height)
    state.writer.set_font(state.body_face, size)
    y = state.cursor_y
    state.writer.draw_text(MARGIN_LEFT, y, line.text, CONTENT_WIDTH, line_height=height, wrap=False)
    _add_link_regions(state, line.text, y, height)
    state.cursor_y = y + height + after


def _render_list(state: RenderState, block: ListBlock) -> None:
    sizes = state.style.density.font_sizes
    spacing = state.style.density.spacing
    height = line_height(sizes.body)
    indent = spacing.list_item_indent

    state.writer.set_font(state.body_face, sizes.body)
    last = len(block.items) - 1
    for index, item in enumerate(block.items):
        state.ensure_space(spacing.min_space_for_list_item)
        state.writer.draw_text(
            MARGIN_LEFT, state.cursor_y, BULLET_MARKER, indent, line_height=height, wrap=False
        )
        state.cursor_y = state.writer.draw_text(
            MARGIN_LEFT + indent,
            state.cursor_y,
            item,
            CONTENT_WIDTH - indent,
            line_height=height,
        )
        if index < last:
            state.cursor_y += spacing.between_list_items

    state.cursor_y += spacing.after_list


def _render_section_break(state: RenderState, _: SectionBreak) -> None:
    state.cursor_y += state.style.density.spacing.section_break


def _render_element(state: RenderState, element: DocumentElement) -> None:
    if isinstance(element, Heading):
        _render_heading(state, element)
    elif isinstance(element, Paragraph):
        _render_paragraph(state, element)
    elif isinstance(element, TextLine):
        _render_text_line(state, element)
    elif isinstance(element, ListBlock):
        _render_list(state, element)
    elif isinstance(element, SectionBreak):
        _render_section_break(state, element)
    else:
        msg = f"ATS invariant violated: unsupported element {type(element).__name__}"
        raise AtsInvariantError(msg)


# -----------------------------------------------------------------------
# Public API


def render_document(
    document: Document,
    style: StyleConfig,
    writer: PageWriter | None = None,
) -> RenderResult:
    """Lay out *document* with *style* and return the PDF and its page count.

    Args:
        document: Elements to draw, already built from validated data.
        style: Font profile and density to use.
        writer: Drawing surface. A fresh :class:`FpdfPageWriter` by default.

    Raises:
        AtsInvariantError: If elements would be drawn out of document order.
    """
    plan = list(enumerate(document.elements))
    verify_element_order(plan)

    if writer is None:
        title = next(
            (el.text for el in document.elements if isinstance(el, Heading) and el.level == 1),
            None,
        )
        writer = FpdfPageWriter(title=title)

    state = RenderState(writer=writer, style=style)
    state.writer.set_font(state.body_face, style.density.font_sizes.body)
    for _, element in plan:
        _render_element(state, element)

    pdf, page_count = writer.finish()
    logger.info(
        "Rendered %d element(s) on %d page(s) using style %s",
        len(document),
        page_count,
        style.name,
    )
    return RenderResult(pdf=pdf, page_count=page_count)
