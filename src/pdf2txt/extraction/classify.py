"""Operator-role classification for single content-stream lines."""

from __future__ import annotations

from enum import Enum
import re

_PLACEMENT_RE = re.compile(r".*\sTm\s*$")
_SHOW_TEXT_RE = re.compile(r".*T[Jj]\s*$")
_IGNORE_RE = re.compile(r".*\sTf\s*$")
_END_TEXT_RE = re.compile(r"(?:^|\s)ET(?:\s|$)")

# Payload shapes recognised inside show-text lines.
ARRAY_LITERAL_RE = re.compile(r"^\s*\[(\(.+\))\]\s*TJ\s*$")
LITERAL_RE = re.compile(r"^\s*(\(.+\))\s*Tj\s*$")
HEX_RE = re.compile(r"^\s*<([0-9A-Fa-f]+)>\s*Tj\s*$")

_MATRIX_OPERANDS = 6


class LineKind(Enum):
    PLACEMENT = "placement"
    SHOW_TEXT = "show_text"
    END_TEXT = "end_text"
    IGNORABLE = "ignorable"
    UNCLASSIFIED = "unclassified"


class PlacementError(ValueError):
    """Raised when a placement line does not carry a usable text matrix."""


def is_placement(line: str) -> bool:
    return _PLACEMENT_RE.match(line) is not None


def is_show_text(line: str) -> bool:
    return _SHOW_TEXT_RE.match(line) is not None


def is_ignorable(line: str) -> bool:
    return _IGNORE_RE.match(line) is not None


def is_end_text(line: str) -> bool:
    return _END_TEXT_RE.search(line) is not None


def is_hex_show_text(line: str) -> bool:
    return HEX_RE.match(line) is not None


def classify_line(line: str) -> LineKind:
    """Return the operator role of ``line``.

    The checks run in the same order the positioned parser applies them, so a
    line is never reported as more than one kind.
    """
    if is_placement(line):
        return LineKind.PLACEMENT
    if is_show_text(line):
        return LineKind.SHOW_TEXT
    if is_ignorable(line):
        return LineKind.IGNORABLE
    if is_end_text(line):
        return LineKind.END_TEXT
    return LineKind.UNCLASSIFIED


def parse_placement(line: str) -> tuple[float, float]:
    """Return the translation ``(x, y)`` of a ``a b c d e f Tm`` line."""
    parts = line.split()
    if len(parts) < _MATRIX_OPERANDS + 1:
        raise PlacementError(f"placement line has fewer than {_MATRIX_OPERANDS + 1} parts: {line!r}")
    if parts[-1] != "Tm":
        raise PlacementError(f"not a placement line: {line!r}")

    operands = parts[-(_MATRIX_OPERANDS + 1) : -1]
    try:
        x = float(operands[4])
        y = float(operands[5])
    except ValueError as exc:
        raise PlacementError(f"placement operand is not numeric: {line!r}") from exc
    return x, y
