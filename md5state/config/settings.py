"""Immutable run settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from md5state.filelist import FileListSource, InlineSource
from md5state.policy import Policy


@dataclass(frozen=True)
class Settings:
    """Everything one run needs, fixed before any file is read."""

    algorithm: str = "md5"
    policy: Policy = field(default_factory=Policy)
    source: FileListSource = field(default_factory=InlineSource)
