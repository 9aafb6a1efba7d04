"""CLI entrypoint for rendering PDF pages as positioned plain text."""

from __future__ import annotations

import argparse
import glob
import json
import logging
import sys

from dotenv import load_dotenv

from pdf2txt.extraction.detect import ContentFormat
from pdf2txt.extraction.document import STDIN_NAME, DocumentError, DocumentSource, extract_pages, extract_raw_text
from pdf2txt.extraction.extractor import build_layouts
from pdf2txt.layout.config import RenderConfig
from pdf2txt.layout.render import layouts_to_records, pages_to_records, render_pages


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None, defaults: RenderConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconstruct the text layout of PDF pages")
    parser.add_argument("paths", nargs="*", help="PDF files or glob patterns; '-' or nothing reads stdin")
    parser.add_argument("--raw-text", action="store_true", help="Output raw page content streams")
    parser.add_argument("--raw-lines", action="store_true", help="JSON output of raw content lines per page")
    parser.add_argument("--elements", action="store_true", help="JSON output of parsed, positioned elements")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--positioned",
        action="store_true",
        help="Parse as positioned text, i.e. 1 0 0 1 XPos YPos Tm ... (Text here) Tj",
    )
    mode.add_argument(
        "--bytes",
        action="store_true",
        help="Parse as byte strings, i.e. <48656C6C6F> Tj ... ET, one ET per output line",
    )

    parser.add_argument("-v", "--verbose", action="store_true", default=defaults.verbose, help="Verbose output")
    parser.add_argument("--fit", action="store_true", default=defaults.fit, help="Keep text inside the output width")
    parser.add_argument(
        "--vertical-space",
        action="store_true",
        default=defaults.vertical_space,
        help="Show empty vertical space (i.e. on blank pages)",
    )
    parser.add_argument("-w", "--width", type=int, default=defaults.width, help="Output grid width")
    parser.add_argument("--height", type=int, default=defaults.height, help="Output grid height")
    return parser.parse_args(argv)


def _collect_sources(patterns: list[str]) -> list[str] | None:
    """Expand glob patterns; ``None`` means read a single document from stdin."""
    if not patterns or STDIN_NAME in patterns:
        return None
    sources: list[str] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern))
        if not matches:
            LOGGER.warning("No files match %s", pattern)
        sources.extend(matches)
    return sources


def _requested_format(args: argparse.Namespace) -> ContentFormat:
    if args.bytes:
        return ContentFormat.BYTES
    if args.positioned:
        return ContentFormat.POSITIONED
    return ContentFormat.AUTO


def _write_json(payload: object) -> None:
    print(json.dumps(payload, ensure_ascii=True))


def convert_document(source: DocumentSource, args: argparse.Namespace, config: RenderConfig) -> None:
    """Run one document through the selected output mode, writing to stdout."""
    if args.raw_text:
        sys.stdout.flush()
        extract_raw_text(source, sys.stdout.buffer)
        sys.stdout.buffer.flush()
        return

    pages = extract_pages(source)
    if args.raw_lines:
        _write_json(pages_to_records(pages))
        return

    layouts = build_layouts(pages, config, content_format=_requested_format(args))
    if args.elements:
        _write_json(layouts_to_records(layouts, config))
    else:
        render_pages(layouts, config, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    try:
        defaults = RenderConfig.from_env()
    except ValueError as exc:
        print(f"Invalid environment configuration: {exc}", file=sys.stderr)
        return 2

    args = _parse_args(argv, defaults)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = RenderConfig(
            width=args.width,
            height=args.height,
            fit=args.fit,
            vertical_space=args.vertical_space,
            verbose=args.verbose,
        )
    except ValueError as exc:
        LOGGER.error("Invalid render configuration: %s", exc)
        return 2

    sources = _collect_sources(args.paths)
    if sources is None:
        inputs: list[DocumentSource] = [sys.stdin.buffer.read()]
    elif not sources:
        LOGGER.error("No input files found")
        return 2
    else:
        inputs = list(sources)

    failures = 0
    for source in inputs:
        try:
            convert_document(source, args, config)
        except DocumentError as exc:
            failures += 1
            LOGGER.error("Failed to convert %s: %s", exc.path, exc.message)
        except ValueError as exc:
            failures += 1
            name = STDIN_NAME if isinstance(source, bytes) else source
            LOGGER.error("Failed to convert %s: %s", name, exc)

    return 0 if failures == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
