"""Resolve the list of paths to checksum."""

from md5state.filelist.loader import load_file_list, parse_file_list
from md5state.filelist.models import (
    FileListError,
    FileListSource,
    FileSource,
    InlineSource,
    StdinSource,
)

__all__ = [
    "FileListError",
    "FileListSource",
    "FileSource",
    "InlineSource",
    "StdinSource",
    "load_file_list",
    "parse_file_list",
]
