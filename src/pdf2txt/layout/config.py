"""Runtime configuration for layout transformation and rendering."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_WIDTH = 160
DEFAULT_HEIGHT = 120

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    value = int(raw_value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_flag(*, name: str, raw_value: str) -> bool:
    lowered = raw_value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw_value!r}")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Output grid size and rendering switches."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fit: bool = False
    vertical_space: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.height < 1:
            raise ValueError("height must be >= 1")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderConfig":
        source: Mapping[str, str] = os.environ if environ is None else environ

        width_raw = source.get("PDF2TXT_WIDTH", str(DEFAULT_WIDTH)).strip()
        height_raw = source.get("PDF2TXT_HEIGHT", str(DEFAULT_HEIGHT)).strip()
        if not width_raw:
            raise ValueError("PDF2TXT_WIDTH cannot be empty")
        if not height_raw:
            raise ValueError("PDF2TXT_HEIGHT cannot be empty")

        return cls(
            width=_parse_positive_int(name="PDF2TXT_WIDTH", raw_value=width_raw),
            height=_parse_positive_int(name="PDF2TXT_HEIGHT", raw_value=height_raw),
            fit=_parse_flag(name="PDF2TXT_FIT", raw_value=source.get("PDF2TXT_FIT", "")),
            vertical_space=_parse_flag(
                name="PDF2TXT_VERTICAL_SPACE",
                raw_value=source.get("PDF2TXT_VERTICAL_SPACE", ""),
            ),
            verbose=_parse_flag(name="PDF2TXT_VERBOSE", raw_value=source.get("PDF2TXT_VERBOSE", "")),
        )
