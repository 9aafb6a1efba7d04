"""Content-stream parsing interfaces."""

from .detect import ContentFormat, detect_format
from .document import DocumentError, extract_pages, extract_raw_text
from .extractor import build_layouts, parse_pages
from .models import Page, PageLayout, TextElement

__all__ = [
    "ContentFormat",
    "DocumentError",
    "Page",
    "PageLayout",
    "TextElement",
    "build_layouts",
    "detect_format",
    "extract_pages",
    "extract_raw_text",
    "parse_pages",
]
