"""Rendering of transformed layouts as ASCII text or structured records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import io
from typing import TextIO

from pdf2txt.extraction.models import Page, PageLayout
from pdf2txt.layout.config import RenderConfig

_LINE_END_MARKER = "$"


def _line_prefix(page_number: int) -> str:
    return f"p{page_number:03d}: "


def render_page(layout: PageLayout, config: RenderConfig, out: TextIO) -> None:
    """Write one page as a block of width-padded text rows.

    Elements must already be sorted by (y, x).
    """
    prefix = _line_prefix(layout.number) if config.verbose else ""
    suffix = _LINE_END_MARKER if config.verbose else ""
    blank_row = prefix + " " * config.width + suffix + "\n"

    x, y = 0, 0
    for element in layout.elements:
        if element.y > y:
            if x < config.width:
                out.write(" " * (config.width - x))
            out.write(suffix + "\n")
            if config.vertical_space:
                for _ in range(element.y - y - 1):
                    out.write(blank_row)
            x = 0
        if x == 0 and config.verbose:
            out.write(prefix)
        if element.x > x:
            out.write(" " * (element.x - x))
        out.write(element.text)
        x = element.x + len(element.text)
        y = element.y
    out.write("\n")


def render_pages(layouts: Iterable[PageLayout], config: RenderConfig, out: TextIO) -> None:
    for layout in layouts:
        render_page(layout, config, out)


def render_text(layouts: Iterable[PageLayout], config: RenderConfig) -> str:
    buffer = io.StringIO()
    render_pages(layouts, config, buffer)
    return buffer.getvalue()


def layouts_to_records(layouts: Sequence[PageLayout], config: RenderConfig) -> list[dict[str, object]]:
    """Structured element output: page number, grid bounds and both coordinate pairs."""
    return [layout.to_dict(grid_width=config.width, grid_height=config.height) for layout in layouts]


def pages_to_records(pages: Sequence[Page]) -> list[dict[str, object]]:
    return [page.to_dict() for page in pages]
