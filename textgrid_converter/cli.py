"""Command-line interface for the TextGrid Converter.

WHY: Users need a simple way to turn TextGrids into tables from the
terminal. The CLI wires together input discovery, batch reading with
per-file failure isolation, pluggable formatter output and file saving
behind a single command.

HOW: Uses argparse to accept input files and/or directories, output
format selection, output directory, encoding override and worker count.
Inputs are read with read_textgrids(). A single input writes
{stem}{suffix}; several inputs write one combined set named
"textgrids{suffix}", where the file column tells sources apart. Status
messages go to stderr.

RULES:
- Positional arguments: one or more TextGrid files or directories
- --formats: comma-separated formatter keys (default: TEXTGRID_DEFAULT_FORMATS)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-rows-2.csv)
- Status output goes to stderr (not stdout)
- Failed files are reported; exit status is 1 if any file failed,
  after the successful files have been written
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from textgrid_converter.config import DEFAULT_FORMATS, LOG_LEVEL, MAX_WORKERS
from textgrid_converter.core.batch import collect_textgrid_paths, read_textgrids
from textgrid_converter.core.ir import TextGridRow
from textgrid_converter.formatters import FORMATTERS
from textgrid_converter.formatters.base import FormatterOutput

# Output stem used when several inputs are combined into one table.
COMBINED_STEM = "textgrids"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the converter multiple times on the same file.
    Overwriting previous output would lose work.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. interview-rows.csv)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. interview-rows-2.csv)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-rows.csv" → ("-rows", ".csv")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)

    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")

    return path


def _parse_formats(formats: str) -> List[str]:
    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    if not format_keys:
        _fail("No output format given")
    return format_keys


def _write_outputs(
    rows: Sequence[TextGridRow],
    format_keys: Sequence[str],
    stem: str,
    output_dir: Path,
) -> List[Path]:
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(rows):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))
    return saved_files


def run(args: argparse.Namespace) -> int:
    """Execute the conversion and return the process exit status."""
    format_keys = _parse_formats(args.formats)

    paths = collect_textgrid_paths(args.inputs)
    if not paths:
        _fail("No TextGrid files found in: {}".format(", ".join(args.inputs)))

    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))
    else:
        output_dir = paths[0].resolve().parent

    _status("Reading {} TextGrid file(s)...".format(len(paths)))
    result = read_textgrids(paths, encoding=args.encoding, max_workers=args.workers)

    for path, message in result.failures.items():
        _status("  Failed: {}: {}".format(path, message))

    saved_files: List[Path] = []
    if result.succeeded:
        _status("  {} row(s) from {} file(s)".format(len(result.rows), len(result.succeeded)))
        stem = paths[0].stem if len(paths) == 1 else COMBINED_STEM
        _status("Formatting output...")
        saved_files = _write_outputs(result.rows, format_keys, stem, output_dir)

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    if result.failures:
        _status("{} file(s) failed".format(len(result.failures)))
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separating parser construction from main() makes the CLI testable:
    tests can inspect the parser without running the conversion.
    """
    parser = argparse.ArgumentParser(
        prog="textgrid_converter",
        description="Convert Praat long-form TextGrid files into tables "
                    "with one row per interval or point.",
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="TextGrid files, or directories containing *.TextGrid files.",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: next to the first input).",
    )

    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the input files (default: detect per file).",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=MAX_WORKERS,
        help="Number of files read in parallel (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
