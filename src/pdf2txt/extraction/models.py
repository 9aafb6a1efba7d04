"""Canonical data structures shared by the parsers, transformer and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdf2txt.extraction.detect import ContentFormat


@dataclass(slots=True)
class Page:
    """One page as reported by the document engine."""

    number: int
    width: float
    height: float
    lines: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "page": self.number,
            "width": self.width,
            "height": self.height,
            "lines": list(self.lines),
        }


@dataclass(slots=True)
class TextElement:
    """A recovered run of visible text.

    ``x0``/``y0`` are page-space coordinates (bottom-left origin) and are only
    meaningful for positioned content. ``x``/``y`` are grid coordinates (top-left
    origin), set directly by the bytes parser or filled in by the transformer.
    """

    x0: float
    y0: float
    text: str
    x: int = 0
    y: int = 0
    xy_line: str = ""
    text_line: str = ""

    def sort_key(self) -> tuple[int, int]:
        return (self.y, self.x)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "x": self.x,
            "y": self.y,
            "x0": self.x0,
            "y0": self.y0,
            "text": self.text,
        }
        if self.xy_line:
            payload["xy_line"] = self.xy_line
        if self.text_line:
            payload["text_line"] = self.text_line
        return payload


@dataclass(slots=True)
class PageLayout:
    """Per-page element collection produced by one parse pass."""

    page: Page
    content_format: ContentFormat
    mx: float = 0.0
    my: float = 0.0
    elements: list[TextElement] = field(default_factory=list)

    @property
    def number(self) -> int:
        return self.page.number

    def to_dict(self, *, grid_width: int, grid_height: int) -> dict[str, object]:
        return {
            "number": self.number,
            "format": self.content_format.value,
            "mx": self.mx,
            "my": self.my,
            "width": grid_width,
            "height": grid_height,
            "elements": [element.to_dict() for element in self.elements],
        }
