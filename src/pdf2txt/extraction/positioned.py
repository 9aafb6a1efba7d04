"""Parser for content that places each text run with its own text matrix.

Expected shape::

    BT
    /F1 12 Tf
    1 0 0 1 72 720 Tm
    (Hello) Tj
    ET

State (current position and the lines that produced it) survives only
placement and font-selection lines; every other line clears it once processed.
A show-text line therefore lands at its placement only when the two are
adjacent, and at (0, 0) otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging

from pdf2txt.extraction.classify import LineKind, PlacementError, classify_line, parse_placement
from pdf2txt.extraction.decoding import TextDecodeError, decode_show_text, strip_escapes
from pdf2txt.extraction.detect import ContentFormat
from pdf2txt.extraction.models import Page, PageLayout, TextElement

logger = logging.getLogger(__name__)

# Positions closer than this are treated as the same spot.
_POSITION_PRECISION = 3


@dataclass(slots=True)
class _Cursor:
    x: float = 0.0
    y: float = 0.0
    xy_line: str = ""
    text_line: str = ""

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.xy_line = ""
        self.text_line = ""


def _position_key(x: float, y: float) -> tuple[float, float]:
    return (round(y, _POSITION_PRECISION), round(x, _POSITION_PRECISION))


def parse_positioned_page(page: Page, *, verbose: bool = False) -> PageLayout:
    """Parse one page into a layout keyed by page-space position."""
    layout = PageLayout(page=page, content_format=ContentFormat.POSITIONED)
    cursor = _Cursor()
    index: dict[tuple[float, float], TextElement] = {}

    for line_number, line in enumerate(page.lines):
        kind = classify_line(line)
        if kind is LineKind.PLACEMENT:
            cursor.xy_line = line
            try:
                x, y = parse_placement(line)
            except PlacementError as exc:
                if verbose:
                    logger.warning("page %d line %05d: %s", page.number, line_number, exc)
            else:
                cursor.x, cursor.y = x, y
                layout.mx = max(layout.mx, x)
                layout.my = max(layout.my, y)
            continue

        if kind is LineKind.SHOW_TEXT:
            cursor.text_line = line
            try:
                text = strip_escapes(decode_show_text(line))
                if not text:
                    raise TextDecodeError(f"text payload is only escapes in {line!r}")
            except TextDecodeError as exc:
                if verbose:
                    logger.warning("page %d line %05d: %s", page.number, line_number, exc)
            else:
                # Last write wins for runs drawn at the same spot.
                index[_position_key(cursor.x, cursor.y)] = TextElement(
                    x0=cursor.x,
                    y0=cursor.y,
                    text=text,
                    xy_line=cursor.xy_line,
                    text_line=cursor.text_line,
                )
        elif kind is LineKind.IGNORABLE:
            if verbose:
                logger.debug("page %d skipping line %05d: %r", page.number, line_number, line)
            continue

        cursor.reset()

    layout.elements = list(index.values())
    return layout


def parse_positioned_pages(pages: Iterable[Page], *, verbose: bool = False) -> list[PageLayout]:
    return [parse_positioned_page(page, verbose=verbose) for page in pages]
