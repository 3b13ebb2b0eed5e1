"""Read many TextGrid files at once with per-file failure isolation.

WHY: Corpora hold hundreds of TextGrids and a few of them are usually
broken. One malformed file must not abort the whole run, and parsing
files one after another wastes time on large directories.

HOW: Each path is read by read_textgrid() on a ThreadPoolExecutor. The
parse itself shares no state, so no locking is needed. Results are
gathered in input order; exceptions are caught per file, logged and
recorded in BatchResult.failures.

RULES:
- rows: concatenated rows of the successful files, input order
- failures: path -> error message for every failed file
- TextGridError, OSError and the TypeError / IndexError raised by the
  assembler for a token of the wrong kind are isolated per file;
  anything else propagates
- Directories expand to their *.TextGrid files (case-insensitive, sorted)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from textgrid_converter.config import MAX_WORKERS, TEXTGRID_SUFFIXES
from textgrid_converter.core.errors import TextGridError
from textgrid_converter.core.ir import TextGridRow
from textgrid_converter.core.reader import read_textgrid

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of a batch read.

    RULES:
    - paths: every input path, in the order given
    - rows: rows of successful files only
    - failures: message per failed path
    """

    paths: List[Path] = field(default_factory=list)
    rows: List[TextGridRow] = field(default_factory=list)
    failures: Dict[Path, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> List[Path]:
        return [p for p in self.paths if p not in self.failures]

    @property
    def ok(self) -> bool:
        return not self.failures


def collect_textgrid_paths(inputs: Iterable[str | Path]) -> List[Path]:
    """Expand directories into their TextGrid files.

    Files are kept as given, whatever their suffix. Directories are not
    searched recursively.
    """
    paths: List[Path] = []
    for item in inputs:
        item = Path(item)
        if item.is_dir():
            found = sorted(
                p for p in item.iterdir()
                if p.is_file() and p.suffix.lower() in TEXTGRID_SUFFIXES
            )
            logger.info("Found %d TextGrid file(s) in %s", len(found), item)
            paths.extend(found)
        else:
            paths.append(item)
    return paths


def _read_one(
    path: Path,
    encoding: Optional[str],
) -> Tuple[Optional[List[TextGridRow]], Optional[str]]:
    try:
        return read_textgrid(path, encoding=encoding), None
    except (TextGridError, OSError, TypeError, IndexError) as exc:
        logger.warning("Failed to read %s: %s", path, exc)
        return None, str(exc)


def read_textgrids(
    paths: Iterable[str | Path],
    encoding: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> BatchResult:
    """Read several TextGrid files concurrently.

    Args:
        paths: TextGrid files to read.
        encoding: Codec for every file; None detects per file.
        max_workers: Thread pool size (default: config MAX_WORKERS).

    Returns:
        BatchResult with the rows of successful files and per-file errors.
    """
    result = BatchResult(paths=[Path(p) for p in paths])
    if not result.paths:
        return result

    workers = max(1, min(max_workers or MAX_WORKERS, len(result.paths)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(lambda p: _read_one(p, encoding), result.paths))

    for path, (rows, error) in zip(result.paths, outcomes):
        if error is not None:
            result.failures[path] = error
        else:
            result.rows.extend(rows)

    logger.info(
        "Read %d of %d TextGrid file(s), %d row(s)",
        len(result.paths) - len(result.failures), len(result.paths), len(result.rows),
    )
    return result
