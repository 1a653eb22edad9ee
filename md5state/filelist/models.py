"""Data models for file list origins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from md5state.errors import Md5StateError


@dataclass(frozen=True)
class InlineSource:
    """Paths given directly on the command line."""

    paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class FileSource:
    """Newline-separated paths read from a file."""

    path: str


@dataclass(frozen=True)
class StdinSource:
    """Newline-separated paths read from standard input."""


FileListSource = Union[InlineSource, FileSource, StdinSource]


class FileListError(Md5StateError):
    """The file list itself could not be read."""

    def __init__(self, origin: str, cause: Exception) -> None:
        self.origin = origin
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Cannot read file list from {origin}: {reason}")
        self.__cause__ = cause
