"""Recovery policy: what to do when a listed file cannot be read."""

from md5state.policy.classify import classify_os_error
from md5state.policy.models import (
    NONEXISTENT_PLACEHOLDER,
    Abort,
    Disposition,
    FailureClass,
    Omit,
    Policy,
    Substitute,
)

__all__ = [
    "NONEXISTENT_PLACEHOLDER",
    "Abort",
    "Disposition",
    "FailureClass",
    "Omit",
    "Policy",
    "Substitute",
    "classify_os_error",
]
