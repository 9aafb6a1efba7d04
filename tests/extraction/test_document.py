from __future__ import annotations

import io
from pathlib import Path

import pymupdf
import pytest

from pdf2txt.extraction.document import DocumentError, extract_pages, extract_raw_text, split_content_lines
from pdf2txt.extraction.extractor import build_layouts
from pdf2txt.layout.config import RenderConfig


def _build_pdf(path: Path) -> None:
    doc = pymupdf.open()
    page_one = doc.new_page()
    page_one.insert_text((72, 72), "First line on page one.")
    doc.new_page(width=300, height=400)
    doc.save(str(path))
    doc.close()


def _write_content_pdf(path: Path, content: bytes, *, width: float = 100, height: float = 100) -> None:
    doc = pymupdf.open()
    page = doc.new_page(width=width, height=height)
    xref = doc.get_new_xref()
    doc.update_object(xref, "<<>>")
    doc.update_stream(xref, content)
    doc.xref_set_key(page.xref, "Contents", f"{xref} 0 R")
    doc.save(str(path))
    doc.close()


def test_split_content_lines_handles_crlf_and_trailing_newline() -> None:
    assert split_content_lines(b"BT\r\n1 0 0 1 1 2 Tm\n(Hi) Tj\nET\n") == ["BT", "1 0 0 1 1 2 Tm", "(Hi) Tj", "ET"]
    assert split_content_lines(b"") == []
    assert split_content_lines(b"(\xe9) Tj") == ["(\xe9) Tj"]


def test_extract_pages_reports_numbers_sizes_and_lines(tmp_path: Path) -> None:
    pdf_path = tmp_path / "sample.pdf"
    _build_pdf(pdf_path)

    pages = extract_pages(pdf_path)

    assert [page.number for page in pages] == [1, 2]
    assert pages[0].width == pytest.approx(595, abs=1)
    assert pages[0].height == pytest.approx(842, abs=1)
    assert (pages[1].width, pages[1].height) == (pytest.approx(300), pytest.approx(400))
    assert pages[0].lines
    assert all(isinstance(line, str) for line in pages[0].lines)
    assert pages[1].lines == []


def test_extract_pages_accepts_in_memory_payload(tmp_path: Path) -> None:
    pdf_path = tmp_path / "sample.pdf"
    _build_pdf(pdf_path)

    pages = extract_pages(pdf_path.read_bytes())

    assert len(pages) == 2
    assert pages[0].lines


def test_extracted_content_lines_feed_the_layout_pipeline(tmp_path: Path) -> None:
    pdf_path = tmp_path / "positioned.pdf"
    _write_content_pdf(pdf_path, b"BT\r\n1 0 0 1 10 20 Tm\r\n(Hello) Tj\r\nET\r\n")

    pages = extract_pages(pdf_path)
    (layout,) = build_layouts(pages, RenderConfig(width=160, height=120))

    assert pages[0].lines == ["BT", "1 0 0 1 10 20 Tm", "(Hello) Tj", "ET"]
    assert [(element.text, element.x0, element.y0, element.x) for element in layout.elements] == [
        ("Hello", 10.0, 20.0, 17)
    ]


def test_extract_raw_text_copies_content_streams(tmp_path: Path) -> None:
    pdf_path = tmp_path / "sample.pdf"
    _build_pdf(pdf_path)
    out = io.BytesIO()

    page_count = extract_raw_text(pdf_path, out)

    assert page_count == 2
    assert b"Tj" in out.getvalue() or b"TJ" in out.getvalue()


def test_unreadable_source_raises_document_error(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf at all")

    with pytest.raises(DocumentError) as exc_info:
        extract_pages(broken)

    assert exc_info.value.path == str(broken)
    assert "broken.pdf" in str(exc_info.value)


def test_missing_file_raises_document_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentError):
        extract_pages(tmp_path / "missing.pdf")
