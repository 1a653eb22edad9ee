"""Data models for failure classes and their dispositions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

NONEXISTENT_PLACEHOLDER = "[nonexistent]"


class FailureClass(str, Enum):
    """A recoverable way in which reading a listed file can fail."""

    NONEXISTENT = "nonexistent"
    DIRECTORY = "directory"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class Substitute:
    """Report the entry with ``text`` in place of its digest."""

    text: str


@dataclass(frozen=True)
class Omit:
    """Leave the entry out of the report."""


@dataclass(frozen=True)
class Abort:
    """Fail the whole run."""


Disposition = Union[Substitute, Omit, Abort]


@dataclass(frozen=True)
class Policy:
    """One disposition per failure class.

    Instances are never mutated; ``with_disposition`` returns a copy, so a
    later directive for the same class simply replaces the earlier one.
    """

    nonexistent: Disposition = Substitute(NONEXISTENT_PLACEHOLDER)
    directory: Disposition = Omit()
    unreadable: Disposition = Abort()

    def disposition_for(self, failure: FailureClass) -> Disposition:
        return getattr(self, failure.value)

    def with_disposition(self, failure: FailureClass, disposition: Disposition) -> Policy:
        return replace(self, **{failure.value: disposition})
