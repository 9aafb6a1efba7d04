"""Document engine adapter: page sizes and content-stream lines via PyMuPDF."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import BinaryIO

import pymupdf

from pdf2txt.extraction.models import Page

logger = logging.getLogger(__name__)

STDIN_NAME = "-"

DocumentSource = str | Path | bytes


@dataclass(slots=True)
class DocumentError(Exception):
    """Domain error for documents that cannot be opened or read."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


def _source_name(source: DocumentSource) -> str:
    return STDIN_NAME if isinstance(source, bytes) else str(source)


def open_document(source: DocumentSource) -> pymupdf.Document:
    """Open a PDF from a filesystem path or an in-memory payload."""
    name = _source_name(source)
    try:
        if isinstance(source, bytes):
            doc = pymupdf.open(stream=source, filetype="pdf")
        else:
            doc = pymupdf.open(Path(source), filetype="pdf")
    except (RuntimeError, OSError, ValueError) as exc:
        raise DocumentError(name, f"Failed to open document: {exc}") from exc

    if not doc.is_pdf:
        doc.close()
        raise DocumentError(name, "Source is not a PDF document")
    if doc.page_count == 0:
        doc.close()
        raise DocumentError(name, "Document has no pages")
    return doc


def split_content_lines(data: bytes) -> list[str]:
    """Split a decoded content stream into text lines.

    Lines are separated by ``\\n`` with a trailing ``\\r`` removed; bytes map
    one-to-one onto characters so binary strings survive untouched.
    """
    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line.removesuffix(b"\r").decode("latin-1") for line in lines]


def extract_pages(source: DocumentSource) -> list[Page]:
    """Return every page of the document with its mediabox size and content lines."""
    name = _source_name(source)
    with open_document(source) as doc:
        pages: list[Page] = []
        for page_number, pdf_page in enumerate(doc, start=1):
            try:
                content = pdf_page.read_contents() or b""
            except (RuntimeError, ValueError) as exc:
                raise DocumentError(name, f"Failed to read content of page {page_number}: {exc}") from exc

            mediabox = pdf_page.mediabox
            lines = split_content_lines(content)
            if not lines:
                logger.debug("Page %d of %s has no content stream", page_number, name)
            pages.append(Page(number=page_number, width=mediabox.width, height=mediabox.height, lines=lines))

    return pages


def extract_raw_text(source: DocumentSource, out: BinaryIO) -> int:
    """Copy every page's decoded content stream to ``out``; return the page count."""
    name = _source_name(source)
    with open_document(source) as doc:
        for page_number, pdf_page in enumerate(doc, start=1):
            try:
                content = pdf_page.read_contents()
            except (RuntimeError, ValueError) as exc:
                raise DocumentError(name, f"Failed to read content of page {page_number}: {exc}") from exc
            if content:
                out.write(content)
        return doc.page_count
