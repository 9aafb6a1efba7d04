"""Parser for content that draws hex strings and ends each line with ``ET``.

Positions come from the order of the stream alone: runs are packed left to
right and every ``ET`` starts a new grid row. The resulting coordinates are
already grid coordinates.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from pdf2txt.extraction.classify import is_end_text, is_hex_show_text
from pdf2txt.extraction.decoding import TextDecodeError, decode_show_text
from pdf2txt.extraction.detect import ContentFormat
from pdf2txt.extraction.models import Page, PageLayout, TextElement

logger = logging.getLogger(__name__)


def parse_bytes_page(page: Page, *, verbose: bool = False) -> PageLayout:
    layout = PageLayout(page=page, content_format=ContentFormat.BYTES)
    x, y = 0, 0

    for line_number, line in enumerate(page.lines):
        if is_end_text(line):
            x = 0
            y += 1
            continue
        if not is_hex_show_text(line):
            continue

        try:
            text = decode_show_text(line)
        except TextDecodeError as exc:
            if verbose:
                logger.warning("page %d line %05d: %s", page.number, line_number, exc)
            continue

        layout.elements.append(TextElement(x0=0.0, y0=0.0, text=text, x=x, y=y, text_line=line))
        x += len(text)

    return layout


def parse_bytes_pages(pages: Iterable[Page], *, verbose: bool = False) -> list[PageLayout]:
    return [parse_bytes_page(page, verbose=verbose) for page in pages]
