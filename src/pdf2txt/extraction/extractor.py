"""Routing entrypoint from page lines to transformed, sorted layouts."""

from __future__ import annotations

from collections.abc import Sequence

from pdf2txt.extraction.bytes_mode import parse_bytes_pages
from pdf2txt.extraction.detect import ContentFormat, resolve_format
from pdf2txt.extraction.models import Page, PageLayout
from pdf2txt.extraction.positioned import parse_positioned_pages
from pdf2txt.layout.config import RenderConfig
from pdf2txt.layout.transform import transform_pages


def parse_pages(pages: Sequence[Page], content_format: ContentFormat, *, verbose: bool = False) -> list[PageLayout]:
    """Parse every page with the parser for ``content_format``."""
    if content_format is ContentFormat.BYTES:
        return parse_bytes_pages(pages, verbose=verbose)
    if content_format is ContentFormat.POSITIONED:
        return parse_positioned_pages(pages, verbose=verbose)
    raise ValueError(f"Cannot parse pages with unresolved format: {content_format.value}")


def build_layouts(
    pages: Sequence[Page],
    config: RenderConfig,
    *,
    content_format: ContentFormat = ContentFormat.AUTO,
) -> list[PageLayout]:
    """Detect (unless forced), parse and transform pages, preserving page order."""
    resolved = resolve_format(pages, content_format)
    layouts = parse_pages(pages, resolved, verbose=config.verbose)
    return transform_pages(layouts, config)
