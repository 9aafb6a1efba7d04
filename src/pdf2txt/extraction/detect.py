"""Content dialect detection."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
import logging

from pdf2txt.extraction.classify import is_hex_show_text
from pdf2txt.extraction.models import Page

logger = logging.getLogger(__name__)


class ContentFormat(Enum):
    POSITIONED = "positioned"  # 1 0 0 1 x y Tm ... (text) Tj
    BYTES = "bytes"            # <48656C6C6F> Tj ... ET
    AUTO = "auto"


def detect_format(*pages: Page) -> ContentFormat:
    """Return BYTES if any line of any page is a hex show-text line."""
    for page in pages:
        for line in page.lines:
            if is_hex_show_text(line):
                return ContentFormat.BYTES
    return ContentFormat.POSITIONED


def resolve_format(pages: Iterable[Page], requested: ContentFormat = ContentFormat.AUTO) -> ContentFormat:
    if requested is not ContentFormat.AUTO:
        return requested
    detected = detect_format(*pages)
    logger.debug("Detected %s content format", detected.value)
    return detected
