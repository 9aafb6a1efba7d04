from __future__ import annotations

import logging

import pytest

from pdf2txt.extraction.classify import LineKind
from pdf2txt.extraction.detect import ContentFormat
from pdf2txt.extraction.models import Page
from pdf2txt.extraction.positioned import parse_positioned_page, parse_positioned_pages


def _page(lines: list[str], *, number: int = 1) -> Page:
    return Page(number=number, width=100.0, height=200.0, lines=lines)


def _by_text(layout) -> dict[str, tuple[float, float]]:
    return {element.text: (element.x0, element.y0) for element in layout.elements}


def test_placement_followed_by_show_text_sets_element_position() -> None:
    layout = parse_positioned_page(_page(["BT", "1 0 0 1 10 20 Tm", "(Hello) Tj", "ET"]))

    assert layout.content_format is ContentFormat.POSITIONED
    assert len(layout.elements) == 1
    element = layout.elements[0]
    assert (element.x0, element.y0) == (10.0, 20.0)
    assert element.text == "Hello"
    assert element.xy_line == "1 0 0 1 10 20 Tm"
    assert element.text_line == "(Hello) Tj"
    assert (layout.mx, layout.my) == (10.0, 20.0)


def test_font_selection_between_placement_and_text_keeps_position() -> None:
    layout = parse_positioned_page(_page(["1 0 0 1 30 40 Tm", "/F1 12 Tf", "[(Wor)-15(ld)] TJ"]))

    assert _by_text(layout) == {"World": (30.0, 40.0)}


def test_show_text_without_adjacent_placement_lands_at_origin() -> None:
    layout = parse_positioned_page(
        _page(
            [
                "1 0 0 1 10 20 Tm",
                "0 0 0 rg",
                "(Orphan) Tj",
                "1 0 0 1 50 60 Tm",
                "(First) Tj",
                "(Second) Tj",
            ]
        )
    )

    positions = _by_text(layout)
    assert positions["First"] == (50.0, 60.0)
    # "Orphan" and "Second" both resolve to (0, 0); the later one wins.
    assert positions["Second"] == (0.0, 0.0)
    assert "Orphan" not in positions


def test_same_position_keeps_last_parsed_text() -> None:
    layout = parse_positioned_page(
        _page(
            [
                "1 0 0 1 10 20 Tm",
                "(old) Tj",
                "1 0 0 1 10.0001 20 Tm",
                "(new) Tj",
                "1 0 0 1 70 20 Tm",
                "(other) Tj",
            ]
        )
    )

    assert sorted(element.text for element in layout.elements) == ["new", "other"]


def test_maxima_track_every_placement() -> None:
    layout = parse_positioned_page(
        _page(["1 0 0 1 80 5 Tm", "(a) Tj", "1 0 0 1 3 150 Tm", "(b) Tj", "1 0 0 1 1 1 Tm"])
    )

    assert (layout.mx, layout.my) == (80.0, 150.0)


def test_escape_backslashes_are_removed_from_literal_text() -> None:
    layout = parse_positioned_page(_page(["1 0 0 1 1 2 Tm", r"(f\(x\) = 1) Tj"]))

    assert layout.elements[0].text == "f(x) = 1"


def test_non_ascii_text_is_dropped_with_single_verbose_diagnostic(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pdf2txt.extraction.positioned"):
        layout = parse_positioned_page(_page(["(Héllo) Tj"]), verbose=True)

    assert layout.elements == []
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING


def test_line_failures_are_silent_without_verbose(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pdf2txt.extraction.positioned"):
        layout = parse_positioned_page(_page(["1 0 0 1 x y Tm", "(Héllo) Tj", "/F1 9 Tf"]))

    assert layout.elements == []
    assert caplog.records == []


def test_malformed_placement_keeps_previous_position_and_continues() -> None:
    layout = parse_positioned_page(_page(["1 0 0 1 10 20 Tm", "1 0 0 1 oops 5 Tm", "(kept) Tj"]))

    assert _by_text(layout) == {"kept": (10.0, 20.0)}


def test_empty_page_yields_empty_layout() -> None:
    layouts = parse_positioned_pages([_page([], number=1), _page(["BT", "ET"], number=2)])

    assert [layout.number for layout in layouts] == [1, 2]
    assert all(layout.elements == [] for layout in layouts)


def test_dispatch_follows_line_classification(monkeypatch: pytest.MonkeyPatch) -> None:
    import pdf2txt.extraction.positioned as positioned

    original = positioned.classify_line

    def classify_marked_content_as_ignorable(line: str) -> LineKind:
        if line.endswith("BDC"):
            return LineKind.IGNORABLE
        return original(line)

    monkeypatch.setattr(positioned, "classify_line", classify_marked_content_as_ignorable)
    lines = ["1 0 0 1 30 40 Tm", "/Span <</MCID 0>> BDC", "(kept) Tj"]

    layout = parse_positioned_page(_page(lines))

    assert _by_text(layout) == {"kept": (30.0, 40.0)}


def test_end_text_between_placement_and_show_text_resets_position() -> None:
    layout = parse_positioned_page(_page(["1 0 0 1 30 40 Tm", "ET", "(moved) Tj"]))

    assert _by_text(layout) == {"moved": (0.0, 0.0)}
