"""Payload decoding for show-text lines."""

from __future__ import annotations

import binascii

from pdf2txt.extraction.classify import ARRAY_LITERAL_RE, HEX_RE, LITERAL_RE

_ASCII_MAX = 127


class TextDecodeError(ValueError):
    """Raised when a show-text line yields no usable text."""


def ascii_only(text: str) -> str:
    """Return ``text`` unchanged, or an empty string if any character is non-ASCII."""
    if any(ord(char) > _ASCII_MAX for char in text):
        return ""
    return text


def unwrap_literal(payload: str) -> str:
    """Concatenate the text found inside unescaped parentheses.

    Anything between literal runs, such as the kerning numbers of a ``TJ``
    array, is dropped.
    """
    parts: list[str] = []
    inside = False
    previous = ""
    for char in payload:
        if char == "(" and previous != "\\":
            inside = True
        elif char == ")" and previous != "\\":
            inside = False
        elif inside:
            parts.append(char)
        previous = char
    return "".join(parts)


def strip_escapes(text: str) -> str:
    return text.replace("\\", "")


def _decode_hex(payload: str) -> str:
    try:
        raw = binascii.unhexlify(payload)
    except (binascii.Error, ValueError) as exc:
        raise TextDecodeError(f"hex decode failed for <{payload}>: {exc}") from exc
    return ascii_only(raw.decode("latin-1"))


def decode_show_text(line: str) -> str:
    """Decode the literal or hex payload of a show-text line.

    Literal payloads are returned with their escape backslashes still in place;
    callers that need display text apply :func:`strip_escapes`.
    """
    match = ARRAY_LITERAL_RE.match(line) or LITERAL_RE.match(line)
    if match is not None:
        literal = ascii_only(match.group(1)).strip()
        text = unwrap_literal(literal) if literal else ""
    else:
        match = HEX_RE.match(line)
        if match is None:
            raise TextDecodeError(f"no text payload in {line!r}")
        text = _decode_hex(match.group(1))

    if not text:
        raise TextDecodeError(f"empty or non-ASCII text payload in {line!r}")
    return text
