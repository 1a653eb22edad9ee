"""Data models for hashing results."""

from __future__ import annotations

from dataclasses import dataclass

from md5state.errors import Md5StateError
from md5state.policy.models import FailureClass


@dataclass(frozen=True)
class HashRecord:
    """One report line: a path and its digest (or a placeholder)."""

    path: str
    digest: str

    def render(self) -> str:
        return f"{self.digest}  {self.path}"


class HashAbortError(Md5StateError):
    """A listed file failed in a way that ends the run.

    ``failure`` is None when the error could not be classified.
    """

    def __init__(self, path: str, cause: Exception, failure: FailureClass | None = None) -> None:
        self.path = path
        self.failure = failure
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Error when processing {path}: {reason}")
        self.__cause__ = cause
