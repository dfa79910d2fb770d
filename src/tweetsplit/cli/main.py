from __future__ import annotations

import json
import logging
from pathlib import Path
import argparse

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tweetsplit.core.chunking import DEFAULT_MAX_LENGTH, LimitTooSmallError
from tweetsplit.core.schemas import SegmentReport, build_report
from tweetsplit.utils.fs import read_input

console = Console(soft_wrap=True, markup=False, highlight=False, emoji=False)
err_console = Console(stderr=True)

# backslash first so the escapes added below are not escaped again
ESCAPES = (
    ("\\", "\\\\"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ("\x0b", "\\v"),
    ("\x0c", "\\f"),
    ("\x07", "\\a"),
    ("\x08", "\\b"),
    ('"', '\\"'),
    ("'", "\\'"),
)


def escape_chunk(chunk: str) -> str:
    for raw, escaped in ESCAPES:
        chunk = chunk.replace(raw, escaped)
    return chunk


def render_report_console(report: SegmentReport) -> None:
    for chunk in report.chunks:
        console.print(escape_chunk(chunk.text))


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="tweetsplit", description="Split text into length-bounded chunks on whitespace")
    ap.add_argument("string", nargs="?", default=None, help="Text to split (overrides --input-path and stdin)")
    ap.add_argument("-i", "--input-path", type=Path, default=None, help="Location of text to split (default: stdin)")
    ap.add_argument("-l", "--max-length", type=int, default=DEFAULT_MAX_LENGTH, help="Maximum chunk length, in characters")
    ap.add_argument("--out", type=Path, default=None, help="Also write a JSON report to this file")
    ap.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    args = ap.parse_args(argv)

    setup_logging(args.verbose)

    try:
        text = read_input(input_path=args.input_path, string=args.string)
    except OSError as e:
        err_console.print(f"[red]Could not read {escape(str(args.input_path))}: {escape(str(e))}[/red]")
        raise SystemExit(2)

    if args.string is not None:
        source = "<string>"
    elif args.input_path is not None:
        source = str(args.input_path)
    else:
        source = "<stdin>"

    try:
        report = build_report(text, args.max_length, source=source)
    except LimitTooSmallError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(2)

    render_report_console(report)

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(json.dumps(report.model_dump(), indent=2), encoding="utf-8")
        err_console.print(f"[dim]Saved:[/dim] {args.out}")


if __name__ == "__main__":
    main()
