"""Read the path list from its configured origin."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from md5state.filelist.models import (
    FileListError,
    FileListSource,
    FileSource,
    InlineSource,
    StdinSource,
)

logger = logging.getLogger(__name__)


def parse_file_list(contents: str) -> list[str]:
    """Split *contents* on newlines and drop empty entries.

    Whitespace-only lines are kept; they are literal (if unlikely) paths.
    """
    return [line for line in contents.split("\n") if line]


def load_file_list(source: FileListSource, stdin: BinaryIO | None = None) -> list[str]:
    """Materialize the full, ordered path list for *source*.

    Raises FileListError if the list file or standard input cannot be read.
    """
    if isinstance(source, InlineSource):
        logger.debug("Using %d path(s) from the command line", len(source.paths))
        return list(source.paths)

    if isinstance(source, FileSource):
        logger.debug("Reading file list from %s", source.path)
        try:
            with open(source.path, "rb") as f:
                raw = f.read()
        except (OSError, ValueError) as e:
            raise FileListError(source.path, e) from e
        return parse_file_list(raw.decode("utf-8", errors="replace"))

    if isinstance(source, StdinSource):
        logger.debug("Reading file list from standard input")
        stream = stdin if stdin is not None else sys.stdin.buffer
        try:
            raw = stream.read()
        except (OSError, ValueError) as e:
            raise FileListError("standard input", e) from e
        return parse_file_list(raw.decode("utf-8", errors="replace"))

    raise TypeError(f"Unknown file list source: {source!r}")
