"""Page-space to grid-space coordinate mapping."""

from __future__ import annotations

from collections.abc import Iterable
import math

from pdf2txt.extraction.detect import ContentFormat
from pdf2txt.extraction.models import PageLayout, TextElement
from pdf2txt.layout.config import RenderConfig


def grid_position(element: TextElement, *, page_width: float, page_height: float, config: RenderConfig) -> tuple[int, int]:
    """Map an element's page-space origin onto the output grid.

    Page space has its origin bottom-left, the grid top-left, so y is inverted.
    Rows are kept inside ``[0, height)``; text drawn on or outside the page's
    bottom and top edges lands on the last and first rows. Recorded ``y`` values
    therefore differ from the unclamped formula for those elements: anything at
    ``y0 <= 0``, including runs with no placement at (0, 0), records
    ``height - 1`` rather than ``height`` or more.
    """
    x = math.floor(element.x0 / page_width * config.width) + 1
    if config.fit:
        x = min(x, config.width - len(element.text))
    y = math.floor((page_height - element.y0) / page_height * config.height)
    return x, min(max(y, 0), config.height - 1)


def transform_page(layout: PageLayout, config: RenderConfig) -> PageLayout:
    """Fill in grid coordinates and sort elements by (y, x), in place."""
    if layout.content_format is ContentFormat.BYTES:
        return layout

    page = layout.page
    if page.width <= 0 or page.height <= 0:
        raise ValueError(f"page {page.number} has non-positive size {page.width}x{page.height}")

    for element in layout.elements:
        element.x, element.y = grid_position(
            element,
            page_width=page.width,
            page_height=page.height,
            config=config,
        )
    layout.elements.sort(key=TextElement.sort_key)
    return layout


def transform_pages(layouts: Iterable[PageLayout], config: RenderConfig) -> list[PageLayout]:
    return [transform_page(layout, config) for layout in layouts]
