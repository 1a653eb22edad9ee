"""Map raw I/O failures onto failure classes."""

from __future__ import annotations

from md5state.policy.models import FailureClass


def classify_os_error(error: OSError) -> FailureClass | None:
    """Return the failure class for *error*, or None if it is unclassified.

    Python already maps errno values onto OSError subclasses (ENOENT to
    FileNotFoundError, EISDIR to IsADirectoryError, EACCES/EPERM to
    PermissionError), so platform differences stay inside the interpreter.
    """
    if isinstance(error, FileNotFoundError):
        return FailureClass.NONEXISTENT
    if isinstance(error, IsADirectoryError):
        return FailureClass.DIRECTORY
    if isinstance(error, PermissionError):
        return FailureClass.UNREADABLE
    return None
